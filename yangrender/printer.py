"""Statement printers

A statement printer writes nested YANG-like statements.  Callers open a
block, print simple statements in it, and close it again:

    with printer.open_statement('container', 'interfaces'):
        printer.print_simple('config', 'true')

The printer owns indentation and block syntax; callers never write
whitespace themselves.  Opening returns a guard which closes the block when
the `with` statement is left.  close_statement() closes the innermost block
explicitly.
"""

import io

from .error import StatementError

def quote(arg):
    """Return `arg` as a double quoted YANG string"""
    arg = arg.replace('\\', r'\\')
    arg = arg.replace('"', r'\"')
    arg = arg.replace('\t', r'\t')
    return '"' + arg + '"'

class Block(object):
    """Guard returned by open_statement()"""

    def __init__(self, printer, depth):
        self.printer = printer
        self.depth = depth

    def __enter__(self):
        return self.printer

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is not None:
            # unwind whatever is open below us, keep the original exception
            while self.printer.depth() > self.depth:
                self.printer.close_statement()
            return False
        if self.printer.depth() != self.depth + 1:
            raise StatementError(
                "statement %s closed with %d statement(s) still open" %
                (self.printer.describe(self.depth),
                 self.printer.depth() - self.depth - 1))
        self.printer.close_statement()
        return False

class StatementPrinter(object):
    """Abstract base class for statement printers

    Subclasses implement write_open(), write_simple() and write_close().
    """

    def __init__(self):
        self._stack = []

    def depth(self):
        return len(self._stack)

    def describe(self, depth):
        (keyword, arg) = self._stack[depth]
        if arg is None:
            return '"%s"' % keyword
        return '"%s %s"' % (keyword, arg)

    def open_statement(self, keyword, arg=None):
        self.write_open(keyword, arg, len(self._stack))
        self._stack.append((keyword, arg))
        return Block(self, len(self._stack) - 1)

    def print_simple(self, keyword, arg=None, quote=False):
        self.write_simple(keyword, arg, quote, len(self._stack))

    def close_statement(self):
        if len(self._stack) == 0:
            raise StatementError("close_statement() without open statement")
        (keyword, arg) = self._stack.pop()
        self.write_close(keyword, arg, len(self._stack))

    def finish(self):
        """Check that all opened statements have been closed"""
        if len(self._stack) > 0:
            raise StatementError("statement %s is not closed" %
                                 self.describe(len(self._stack) - 1))

    def write_open(self, keyword, arg, level):
        raise NotImplementedError

    def write_simple(self, keyword, arg, quote, level):
        raise NotImplementedError

    def write_close(self, keyword, arg, level):
        raise NotImplementedError

class YangStatementPrinter(StatementPrinter):
    """Prints statements as indented YANG text to `fd`"""

    def __init__(self, fd, indentstep='  ', level=0):
        StatementPrinter.__init__(self)
        self.fd = fd
        self.indentstep = indentstep
        self.level = level

    def _prefix(self, level, keyword, arg, do_quote=False):
        s = self.indentstep * (self.level + level) + keyword
        if arg is not None:
            s += ' ' + (quote(arg) if do_quote else arg)
        return s

    def write_open(self, keyword, arg, level):
        self.fd.write(self._prefix(level, keyword, arg) + ' {\n')

    def write_simple(self, keyword, arg, do_quote, level):
        self.fd.write(self._prefix(level, keyword, arg, do_quote) + ';\n')

    def write_close(self, keyword, arg, level):
        self.fd.write(self.indentstep * (self.level + level) + '}\n')

    def blank_line(self):
        self.fd.write('\n')

class InlineStatementPrinter(StatementPrinter):
    """Prints statements on a single line, e.g. 'type string {length "1..8";}'
    """

    def __init__(self):
        StatementPrinter.__init__(self)
        self._parts = []
        self._opened = False

    def _sep(self):
        if self._parts and not self._parts[-1].endswith('{'):
            self._parts.append(' ')

    def _stmt(self, keyword, arg, do_quote=False):
        if arg is None:
            return keyword
        return keyword + ' ' + (quote(arg) if do_quote else arg)

    def write_open(self, keyword, arg, level):
        self._sep()
        self._opened = True
        self._parts.append(self._stmt(keyword, arg) + ' {')

    def write_simple(self, keyword, arg, do_quote, level):
        self._sep()
        self._parts.append(self._stmt(keyword, arg, do_quote) + ';')

    def write_close(self, keyword, arg, level):
        self._parts.append('}')

    def getvalue(self):
        s = ''.join(self._parts)
        if not self._opened and s.endswith(';'):
            # simple statements only, like "type string"
            s = s[:-1]
        return s

class DictStatementPrinter(StatementPrinter):
    """Collects statements as nested dicts, for JSON output

    Each statement becomes {"keyword": ..., "argument": ...}; blocks get a
    "substatements" list.
    """

    def __init__(self):
        StatementPrinter.__init__(self)
        self.statements = []
        self._lists = [self.statements]

    def _node(self, keyword, arg):
        node = {'keyword': keyword}
        if arg is not None:
            node['argument'] = arg
        return node

    def write_open(self, keyword, arg, level):
        node = self._node(keyword, arg)
        node['substatements'] = []
        self._lists[-1].append(node)
        self._lists.append(node['substatements'])

    def write_simple(self, keyword, arg, quote, level):
        self._lists[-1].append(self._node(keyword, arg))

    def write_close(self, keyword, arg, level):
        self._lists.pop()

def yang_string(stmts, indentstep='  '):
    """Return the YANG text printed by calling `stmts` with a printer"""
    fd = io.StringIO()
    printer = YangStatementPrinter(fd, indentstep)
    stmts(printer)
    printer.finish()
    return fd.getvalue()
