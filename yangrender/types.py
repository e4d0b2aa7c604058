"""YANG type definitions as seen by the renderer

A TypeDefinition is a read-only description of a resolved type: its
qualified name, the type it is derived from, and the constraints in effect
for its category.  Built-in types have no base and no module.
"""

import collections
import enum

from .intervals import Intervals, LENGTH_MIN, LENGTH_MAX

QName = collections.namedtuple('QName', ['name', 'module'])
"""Qualified name of a type; `module` is None for built-in types"""

EnumMember = collections.namedtuple('EnumMember',
                                    ['name', 'value', 'description'])

class Category(enum.Enum):
    ENUMERATION = 'enumeration'
    UNION = 'union'
    DECIMAL = 'decimal'
    STRING = 'string'
    NUMERIC = 'numeric'
    OTHER = 'other'

class TypeDefinition(object):
    category = Category.OTHER

    def __init__(self, qname, base=None):
        self.qname = qname
        self.base = base

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.qname.name)

    def root(self):
        """Return the built-in type at the end of the derivation chain"""
        t = self
        while t.base is not None:
            t = t.base
        return t

    def derive(self, qname):
        """Return a type named `qname` derived from the receiver with the
        same constraints."""
        t = self.__class__.__new__(self.__class__)
        t.__dict__.update(self.__dict__)
        t.qname = qname
        t.base = self
        return t

class EnumerationType(TypeDefinition):
    category = Category.ENUMERATION

    def __init__(self, qname, base=None, members=()):
        TypeDefinition.__init__(self, qname, base)
        self.members = tuple(members)

class UnionType(TypeDefinition):
    category = Category.UNION

    def __init__(self, qname, base=None, types=()):
        TypeDefinition.__init__(self, qname, base)
        self.types = tuple(types)

class DecimalType(TypeDefinition):
    category = Category.DECIMAL

    def __init__(self, qname, base=None, fraction_digits=None, ranges=None):
        TypeDefinition.__init__(self, qname, base)
        self.fraction_digits = fraction_digits
        self.ranges = ranges

class StringType(TypeDefinition):
    category = Category.STRING

    def __init__(self, qname, base=None, length=None, patterns=()):
        TypeDefinition.__init__(self, qname, base)
        self.length = length
        self.patterns = tuple(patterns)

class NumericType(TypeDefinition):
    """Integral types; `domain` holds the value space of the built-in"""
    category = Category.NUMERIC

    def __init__(self, qname, base=None, domain=None, ranges=None):
        TypeDefinition.__init__(self, qname, base)
        self.domain = domain
        self.ranges = ranges

    def effective_ranges(self):
        if self.ranges is not None:
            return self.ranges
        return self.domain

integer_domains = {
    'int8': (-128, 127),
    'int16': (-32768, 32767),
    'int32': (-2147483648, 2147483647),
    'int64': (-9223372036854775808, 9223372036854775807),
    'uint8': (0, 255),
    'uint16': (0, 65535),
    'uint32': (0, 4294967295),
    'uint64': (0, 18446744073709551615),
    }

length_domain = Intervals.domain(LENGTH_MIN, LENGTH_MAX)

other_type_names = ('binary', 'bits', 'boolean', 'empty', 'identityref',
                    'instance-identifier', 'leafref')

def builtin_type(name):
    """Return the TypeDefinition of the built-in type `name`.

    Raises KeyError if `name` is not a built-in type.
    """
    qname = QName(name, None)
    if name in integer_domains:
        (lo, hi) = integer_domains[name]
        return NumericType(qname, domain=Intervals.domain(lo, hi))
    elif name == 'decimal64':
        return DecimalType(qname)
    elif name == 'string':
        return StringType(qname)
    elif name == 'enumeration':
        return EnumerationType(qname)
    elif name == 'union':
        return UnionType(qname)
    elif name in other_type_names:
        return TypeDefinition(qname)
    raise KeyError(name)
