import sys

data_definition_keywords = ['container', 'leaf', 'leaf-list', 'list', 'case',
                            'choice', 'anyxml', 'anydata', 'uses']

def report_file_read(filename, fd=None):
    if fd is None:
        fd = sys.stderr
    fd.write("# read %s\n" % filename)

def keyword_to_str(keyword):
    """Return the keyword of a statement as text; extension keywords are
    (prefix, name) tuples"""
    if isinstance(keyword, tuple):
        (prefix, keyword) = keyword
        return prefix + ":" + keyword
    return keyword

def get_latest_revision(module):
    """Return the most recent revision date of `module`, or None"""
    latest = None
    for r in module.search('revision'):
        if latest is None or r.arg > latest:
            latest = r.arg
    return latest

def get_module(ctx, modulename):
    """Return the latest revision of `modulename` in `ctx`, or None.

    Unlike ctx.get_module(), also finds modules without a revision.
    """
    module = ctx.get_module(modulename)
    if module is not None:
        return module
    for ((name, _rev), m) in ctx.modules.items():
        if name == modulename:
            return m
    return None

def node_name(s, module):
    """Return the name of schema node `s` as seen from `module`.

    Nodes augmented in from other modules get their module's prefix.
    """
    if s.i_module.i_modulename == module.i_modulename:
        return s.arg
    return s.i_module.i_prefix + ':' + s.arg

def status(s):
    st = s.search_one('status')
    if st is None:
        return 'current'
    return st.arg

status_symbols = {'current': '+', 'deprecated': 'x', 'obsolete': 'o'}

def flags(s, mode):
    """Return the access flags of schema node `s`.

    `mode` is the kind of tree the node is in: 'data', 'input', 'output',
    'rpc', 'notification' or 'augment'.
    """
    if mode == 'input':
        return '-w'
    elif s.keyword in ('rpc', 'action'):
        return '-x'
    elif s.keyword == 'notification':
        return '-n'
    config = getattr(s, 'i_config', None)
    if config is True:
        return 'rw'
    elif config is False or mode in ('output', 'notification'):
        return 'ro'
    return '--'

def is_optional(s):
    """Return True if leaf, choice, anydata or anyxml `s` is not mandatory"""
    if s.keyword == 'leaf' and getattr(s, 'i_is_key', False):
        return False
    m = s.search_one('mandatory')
    return m is None or m.arg == 'false'

def leafref_path(s):
    """Return the path of a leafref leaf as compact as possible, or None.

    Prefixes are dropped unless the path changes module.
    """
    t = s.search_one('type')
    if t is None or t.arg != 'leafref':
        return None
    p = t.search_one('path')
    if p is None:
        return None
    target = []
    curprefix = s.i_module.i_prefix
    for name in p.arg.split('/'):
        if ':' not in name:
            prefix = curprefix
        else:
            (prefix, name) = name.split(':', 1)
        if prefix == curprefix:
            target.append(name)
        else:
            target.append(prefix + ':' + name)
            curprefix = prefix
    return '/'.join(target)

def data_path(s):
    """Return the schema path of `s` without choice and case nodes"""
    names = []
    while s is not None and s.keyword not in ('module', 'submodule'):
        if s.keyword == 'augment':
            names.append(s.arg.strip('/'))
            break
        elif s.keyword not in ('choice', 'case'):
            names.append(s.arg)
        s = s.parent
    names.reverse()
    return '/' + '/'.join(names)

def external_augments(ctx, module):
    """Return the augments in `module` and its submodules that target
    nodes in other modules"""
    mods = [module]
    for i in module.search('include'):
        subm = get_module(ctx, i.arg)
        if subm is not None:
            mods.append(subm)
    res = []
    for m in mods:
        for augment in m.search('augment'):
            target = getattr(augment, 'i_target_node', None)
            if (target is not None and hasattr(target, 'i_module') and
                target.i_module not in mods):
                res.append(augment)
    return res
