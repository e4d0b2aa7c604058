"""Exceptions and schema error reporting"""

import sys

from pyang import error as pyang_error

### Exceptions

class StatementError(AssertionError):
    """raised when statement blocks are not opened and closed in pairs

    This is a programming error in the caller of the statement printer,
    never a problem with the input modules.
    """
    pass

class EmitError(Exception):
    """raised by plugins to fail the emit() function"""
    def __init__(self, msg="", exit_code=1):
        Exception.__init__(self, msg)
        self.msg = msg
        self.exit_code = exit_code

### pyang error reporting

def err_module_name(pos):
    """Return the name of the (sub)module an error position belongs to"""
    top = getattr(pos, 'top', None)
    if top is None:
        return None
    return top.arg

def errors_sorted(ctx):
    def key(e):
        (epos, _etag, _eargs) = e
        return (epos.ref, epos.line)
    return sorted(ctx.errors, key=key)

def print_errors(ctx, ignore_warnings=False, fd=None):
    """Write the errors collected in `ctx` to `fd`.

    Returns the number of errors written, warnings not included.
    """
    if fd is None:
        fd = sys.stderr
    nerrors = 0
    for (epos, etag, eargs) in errors_sorted(ctx):
        level = pyang_error.err_level(etag)
        if pyang_error.is_warning(level):
            if ignore_warnings:
                continue
            kind = "warning"
        else:
            kind = "error"
            nerrors += 1
        fd.write("%s: %s: %s\n" %
                 (epos, kind, pyang_error.err_to_str(etag, eargs)))
    return nerrors

def modules_with_errors(ctx, modulenames):
    """Return the names in `modulenames` that have at least one error"""
    failed = []
    for (epos, etag, _eargs) in ctx.errors:
        if not pyang_error.is_error(pyang_error.err_level(etag)):
            continue
        name = err_module_name(epos)
        if name in modulenames and name not in failed:
            failed.append(name)
    return failed

def check_no_errors(ctx, modules):
    """Raise EmitError if any of `modules` has errors"""
    failed = modules_with_errors(ctx, [m.arg for m in modules])
    if len(failed) > 0:
        raise EmitError("%s contains errors" % failed[0])
