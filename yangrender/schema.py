"""Loading YANG modules with pyang, and building TypeDefinitions from them"""

import io
import os

from pyang import context
from pyang import repository

from . import types
from . import util
from .intervals import decimal_domain, decimal_parser
from .prefixes import prefix_map

class Options(object):
    """Attribute access to option dicts; unknown options are None"""

    def __init__(self, *args, **kwargs):
        for entry in args:
            self.__dict__.update(entry)
        self.__dict__.update(kwargs)

    def __getattr__(self, _):
        return None

def create_context(path='', opts=None):
    """Return a pyang Context searching for modules in `path`.

    `path` is a list of directories joined with os.pathsep.
    """
    if opts is None:
        opts = Options()
    repo = repository.FileRepository(
        path, no_path_recurse=bool(opts.no_path_recurse))
    ctx = context.Context(repo)
    ctx.opts = opts
    return ctx

def read_module(ctx, filename):
    """Parse the module in `filename` and add it to `ctx`.

    Returns the module, or None if it could not be parsed; the reason is
    in ctx.errors.  Raises IOError if the file cannot be read.
    """
    with io.open(filename, 'r', encoding='utf-8') as fd:
        text = fd.read()
    if ctx.opts.verbose:
        util.report_file_read(filename)
    return ctx.add_module(filename, text)

def load_modules(ctx, filenames):
    """Add the modules in `filenames` to `ctx` and validate them.

    Returns (modules, failed) where `failed` lists the files that did not
    yield a module.
    """
    modules = []
    failed = []
    for filename in filenames:
        module = read_module(ctx, filename)
        if module is None:
            failed.append(filename)
        elif module not in modules:
            modules.append(module)
    ctx.validate()
    return modules, failed

def module_files(directory):
    """Return the YANG files in `directory`, sorted by name"""
    return [os.path.join(directory, f) for f in sorted(os.listdir(directory))
            if f.endswith('.yang')]

def module_name(stmt):
    """Return the name of the module `stmt` is defined in.

    Statements in a submodule belong to the module it belongs to.
    """
    # pyang leaves `top` unset on the module statement itself
    top = stmt.top if stmt.top is not None else stmt
    name = getattr(top, 'i_modulename', None)
    if name is not None:
        return name
    if top.keyword == 'submodule':
        b = top.search_one('belongs-to')
        if b is not None:
            return b.arg
    return top.arg

def module_prefix_map(module):
    """Return the prefixes to use when rendering `module`.

    Types from the module itself are unprefixed, types from imported
    modules use the import prefix.
    """
    prefixes = {}
    for i in module.search('import'):
        p = i.search_one('prefix')
        if p is not None:
            prefixes[i.arg] = p.arg
    prefixes[module_name(module)] = ''
    return prefix_map(prefixes)

_restriction_keywords = ('range', 'length', 'pattern', 'enum',
                         'fraction-digits', 'type', 'bit', 'path', 'base',
                         'require-instance')

def has_restrictions(stmt):
    """Return True if the `type` statement `stmt` restricts its base type"""
    for s in stmt.substmts:
        if s.keyword in _restriction_keywords:
            return True
    return False

def type_definition(stmt):
    """Return the TypeDefinition of the `type` statement `stmt`"""
    typedef = getattr(stmt, 'i_typedef', None)
    if typedef is not None:
        base = typedef_definition(typedef)
    else:
        base = types.builtin_type(stmt.arg)
    if not has_restrictions(stmt):
        return base
    return restrict(base, stmt)

def typedef_definition(typedef):
    """Return the named TypeDefinition of the `typedef` statement"""
    body = type_definition(typedef.search_one('type'))
    return body.derive(types.QName(typedef.arg, module_name(typedef)))

def leaf_type(stmt):
    """Return the TypeDefinition of a leaf or leaf-list, or None"""
    t = stmt.search_one('type')
    if t is None:
        return None
    return type_definition(t)

def restrict(base, stmt):
    """Return a type derived from `base` with the restrictions in `stmt`"""
    t = base.derive(base.qname)
    if t.category is types.Category.NUMERIC:
        r = stmt.search_one('range')
        if r is not None:
            t.ranges = t.effective_ranges().restrict(r.arg)
    elif t.category is types.Category.DECIMAL:
        fd = stmt.search_one('fraction-digits')
        if fd is not None:
            t.fraction_digits = int(fd.arg)
        r = stmt.search_one('range')
        if r is not None:
            ranges = t.ranges
            if ranges is None:
                ranges = decimal_domain(t.fraction_digits)
            t.ranges = ranges.restrict(r.arg,
                                       decimal_parser(t.fraction_digits))
    elif t.category is types.Category.STRING:
        length = stmt.search_one('length')
        if length is not None:
            base_length = t.length
            if base_length is None:
                base_length = types.length_domain
            t.length = base_length.restrict(length.arg)
        t.patterns = t.patterns + tuple([p.arg for p in
                                         stmt.search('pattern')])
    elif t.category is types.Category.ENUMERATION:
        enums = stmt.search('enum')
        if len(enums) > 0:
            t.members = tuple(enum_members(enums, t.members))
    elif t.category is types.Category.UNION:
        members = stmt.search('type')
        if len(members) > 0:
            t.types = tuple([type_definition(m) for m in members])
    return t

def enum_members(enums, base_members=()):
    """Return EnumMembers for the `enum` statements in `enums`.

    Enums without a "value" keep the value of the base enumeration, or
    get the next value after the highest one assigned so far.  pyang's
    `i_value` is not used since it renumbers the enums of a restricted
    enumeration instead of keeping the base values.
    """
    inherited = dict([(m.name, m) for m in base_members])
    members = []
    next_value = 0
    for e in enums:
        v = e.search_one('value')
        base = inherited.get(e.arg)
        if v is not None:
            value = int(v.arg)
        elif base is not None:
            value = base.value
        else:
            value = next_value
        if value >= next_value:
            next_value = value + 1
        d = e.search_one('description')
        if d is not None:
            description = d.arg
        elif base is not None:
            description = base.description
        else:
            description = None
        members.append(types.EnumMember(e.arg, value, description))
    return members
