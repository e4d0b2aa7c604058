"""Type printer

Renders TypeDefinitions through a statement printer, independent of the
output format.
"""

from . import types
from .prefixes import resolve_name, EMPTY_PREFIX_MAP

class TypePrinter(object):
    def __init__(self, printer, prefixes=EMPTY_PREFIX_MAP):
        """`printer` is a StatementPrinter, `prefixes` maps module names to
        the prefixes to use for their types."""
        self.printer = printer
        self.prefixes = prefixes

    def type_name(self, type_):
        return resolve_name(type_.qname, self.prefixes)

    def print_type_definition(self, name, type_):
        with self.printer.open_statement('typedef', name):
            self.print_type(type_)

    def print_type_usage(self, type_):
        self.printer.print_simple('type', self.type_name(type_))

    def print_type(self, type_):
        handler = getattr(self, _handlers[type_.category])
        handler(type_.root().qname.name, type_)

    def _print_enumeration(self, rootname, type_):
        p = self.printer
        with p.open_statement('type', 'enumeration'):
            for member in type_.members:
                with p.open_statement('enum', member.name):
                    p.print_simple('value', str(member.value))
                    if member.description is not None:
                        p.print_simple('description', member.description,
                                       quote=True)

    def _print_union(self, rootname, type_):
        with self.printer.open_statement('type', 'union'):
            for t in type_.types:
                self.print_type_usage(t)

    def _print_decimal(self, rootname, type_):
        p = self.printer
        with p.open_statement('type', rootname):
            p.print_simple('fraction-digits', str(type_.fraction_digits))
            if type_.ranges is not None:
                p.print_simple('range', str(type_.ranges), quote=True)

    def _print_string(self, rootname, type_):
        p = self.printer
        if type_.length is None and len(type_.patterns) == 0:
            p.print_simple('type', rootname)
            return
        with p.open_statement('type', rootname):
            if type_.length is not None and type_.length.is_restricted():
                p.print_simple('length', str(type_.length), quote=True)
            for pattern in type_.patterns:
                p.print_simple('pattern', pattern, quote=True)

    def _print_numeric(self, rootname, type_):
        p = self.printer
        with p.open_statement('type', rootname):
            if type_.ranges is not None:
                p.print_simple('range', str(type_.ranges), quote=True)

    def _print_other(self, rootname, type_):
        self.printer.print_simple('type', rootname)

_handlers = {
    types.Category.ENUMERATION: '_print_enumeration',
    types.Category.UNION: '_print_union',
    types.Category.DECIMAL: '_print_decimal',
    types.Category.STRING: '_print_string',
    types.Category.NUMERIC: '_print_numeric',
    types.Category.OTHER: '_print_other',
    }

assert set(_handlers) == set(types.Category), \
    "no type printer for %s" % (set(types.Category) - set(_handlers))
