"""Module prefixes for qualified type names"""

from types import MappingProxyType

def prefix_map(prefixes):
    """Return a read-only copy of the module name to prefix dict `prefixes`.

    The map is a snapshot: later changes to `prefixes` are not seen by a
    render that uses the returned map.
    """
    return MappingProxyType(dict(prefixes))

EMPTY_PREFIX_MAP = prefix_map({})

def resolve_name(qname, prefixes):
    """Return the name to print for `qname` in the context of `prefixes`.

    Names of modules without a prefix in the map, or with an empty prefix,
    are printed unprefixed.
    """
    prefix = prefixes.get(qname.module) or ''
    if prefix == '':
        return qname.name
    return prefix + ':' + qname.name
