"""YANG output plugin

Prints the effective schema of a module: groupings are expanded, typedefs
are printed with their resolved restrictions.
"""

import optparse
import re

from yangrender import error
from yangrender import plugin
from yangrender import schema
from yangrender import types
from yangrender import util
from yangrender.printer import YangStatementPrinter, quote
from yangrender.typeprinter import TypePrinter

def yangrender_plugin_init():
    plugin.register_plugin(YANGPlugin())

class YANGPlugin(plugin.RenderPlugin):
    def __init__(self):
        plugin.RenderPlugin.__init__(self, 'yang')

    def add_output_format(self, fmts):
        fmts['yang'] = self

    def add_opts(self, optparser):
        optlist = [
            optparse.make_option("--yang-indent",
                                 type="int",
                                 dest="yang_indent",
                                 default=2,
                                 help="Number of spaces per indentation "
                                 "level"),
            ]
        g = optparser.add_option_group("YANG output specific options")
        g.add_options(optlist)

    def setup_fmt(self, ctx):
        ctx.implicit_errors = False

    def emit(self, ctx, modules, fd):
        error.check_no_errors(ctx, modules)
        indent = ctx.opts.yang_indent
        if indent is None:
            indent = 2
        for module in modules:
            emit_yang(ctx, module, fd, ' ' * indent)

def emit_yang(ctx, module, fd, indentstep='  '):
    p = YangStatementPrinter(fd, indentstep)
    YangWriter(ctx, module, p).emit()
    p.finish()

# quoted arguments
_quoted_keywords = ('namespace', 'organization', 'contact', 'description',
                    'reference', 'presence', 'key', 'units', 'default',
                    'must', 'when', 'path', 'pattern', 'range', 'length',
                    'augment', 'unique', 'error-message', 'if-feature')

# arguments with any of these characters are always quoted
_need_quote = re.compile(r'[\s;{}"\'\\]|//|/\*|\*/')

_definition_keywords = ('extension', 'feature', 'identity')

_header_keywords = ('yang-version', 'namespace', 'prefix', 'belongs-to')
_meta_keywords = ('organization', 'contact', 'description', 'reference')

# printed for leafs and leaf-lists before their type
_leaf_keywords = ('units', 'default', 'mandatory', 'min-elements',
                  'max-elements', 'ordered-by')

class YangWriter(object):
    def __init__(self, ctx, module, printer):
        self.ctx = ctx
        self.module = module
        self.p = printer
        self.types = TypePrinter(printer, schema.module_prefix_map(module))

    def emit(self):
        module = self.module
        p = self.p
        with p.open_statement(module.keyword, module.arg):
            self.substmts(module, _header_keywords)
            imports = module.search('import') + module.search('include')
            if len(imports) > 0:
                p.blank_line()
                for i in imports:
                    self.raw(i)
            self.substmts(module, _meta_keywords, blank=True)
            revisions = module.search('revision')
            if len(revisions) > 0:
                p.blank_line()
                for r in revisions:
                    self.raw(r)
            definitions = [s for s in module.substmts
                           if s.keyword in _definition_keywords]
            if len(definitions) > 0:
                p.blank_line()
                for s in definitions:
                    self.raw(s)
            for typedef in module.search('typedef'):
                p.blank_line()
                self.types.print_type_definition(
                    typedef.arg, schema.typedef_definition(typedef))
            chs = [ch for ch in module.i_children
                   if ch.keyword in util.data_definition_keywords]
            for ch in chs:
                p.blank_line()
                self.node(ch)
            for augment in util.external_augments(self.ctx, module):
                p.blank_line()
                with p.open_statement('augment', quote(augment.arg)):
                    for ch in augment.i_children:
                        self.node(ch)
            for ch in module.i_children:
                if ch.keyword in ('rpc', 'notification'):
                    p.blank_line()
                    self.node(ch)

    def substmts(self, stmt, keywords, blank=False):
        """Print the substatements of `stmt` with a keyword in `keywords`"""
        found = [s for s in stmt.substmts if s.keyword in keywords]
        if blank and len(found) > 0:
            self.p.blank_line()
        for s in found:
            self.raw(s)

    def raw(self, stmt):
        """Print `stmt` and its substatements as they were written"""
        keyword = util.keyword_to_str(stmt.keyword)
        arg = stmt.arg
        if arg is not None and (stmt.keyword in _quoted_keywords or
                                arg == '' or _need_quote.search(arg)):
            arg = quote(arg)
        if len(stmt.substmts) == 0:
            self.p.print_simple(keyword, arg)
        else:
            with self.p.open_statement(keyword, arg):
                for s in stmt.substmts:
                    self.raw(s)

    def node(self, s):
        p = self.p
        if s.keyword in ('leaf', 'leaf-list'):
            with p.open_statement(s.keyword, s.arg):
                self.leaf_type(s)
                self.substmts(s, _leaf_keywords)
                self.common(s)
        elif s.keyword in ('anydata', 'anyxml'):
            if self.has_common(s):
                with p.open_statement(s.keyword, s.arg):
                    self.common(s)
            else:
                p.print_simple(s.keyword, s.arg)
        elif s.keyword in ('input', 'output'):
            if len(s.i_children) > 0:
                with p.open_statement(s.keyword):
                    for ch in s.i_children:
                        self.node(ch)
        else:
            with p.open_statement(s.keyword, s.arg):
                self.substmts(s, ('key', 'presence', 'mandatory', 'default',
                                  'min-elements', 'max-elements',
                                  'ordered-by', 'unique'))
                self.common(s)
                for ch in getattr(s, 'i_children', []):
                    self.node(ch)

    def has_common(self, s):
        for ch in s.substmts:
            if ch.keyword in ('config', 'status', 'if-feature', 'when',
                              'must', 'description', 'reference'):
                return True
        return False

    def common(self, s):
        self.substmts(s, ('config', 'status', 'if-feature', 'when', 'must',
                          'description', 'reference'))

    def leaf_type(self, s):
        t = s.search_one('type')
        if t is None:
            return
        type_ = schema.type_definition(t)
        if not is_scoped(t) and not schema.has_restrictions(t):
            self.types.print_type_usage(type_)
        elif type_.category is types.Category.OTHER:
            # leafref, identityref and bits keep their own substatements
            while is_scoped(t):
                t = t.i_typedef.search_one('type')
            self.raw(t)
        else:
            self.types.print_type(type_)

def is_scoped(type_stmt):
    """Return True if `type_stmt` refers to a typedef that is not defined
    at the top of a module, and thus is not printed."""
    typedef = getattr(type_stmt, 'i_typedef', None)
    return (typedef is not None and
            typedef.parent.keyword not in ('module', 'submodule'))
