"""
tests for building type definitions from pyang statements
"""
import decimal

import pytest

from yangrender import schema
from yangrender import util
from yangrender.printer import yang_string
from yangrender.typeprinter import TypePrinter
from yangrender.types import Category, QName

EXAMPLE = """
module example {
  yang-version 1.1;
  namespace "urn:example";
  prefix ex;

  typedef percent {
    type uint8 {
      range "0..100";
    }
  }
  typedef small-percent {
    type percent {
      range "min..10";
    }
  }
  typedef name {
    type string {
      length "1..max";
      pattern "[a-z]+";
    }
  }
  typedef short-name {
    type name {
      length "1..8";
      pattern "[a-c]+";
    }
  }
  typedef colors {
    type enumeration {
      enum red;
      enum green {
        value 5;
        description "Green";
      }
      enum blue;
    }
  }
  typedef money {
    type decimal64 {
      fraction-digits 2;
      range "0..max";
    }
  }

  container top {
    leaf p {
      type small-percent;
    }
    leaf n {
      type short-name;
    }
    leaf c {
      type colors;
    }
    leaf m {
      type money;
    }
    leaf u {
      type union {
        type percent;
        type string;
      }
    }
    leaf b {
      type boolean;
    }
    leaf s {
      type string {
        length "2..4";
      }
    }
    leaf q {
      type percent {
        range "1 | 50..max";
      }
    }
    leaf e {
      type colors {
        enum blue;
        enum green;
      }
    }
  }
}
"""

USER = """
module user {
  namespace "urn:user";
  prefix u;

  import example {
    prefix x;
  }

  leaf level {
    type x:percent;
  }
}
"""


def leaf(module, name):
    top = module.search_one('container', 'top')
    return top.search_one('leaf', name)


def leaf_type(module, name):
    return schema.leaf_type(leaf(module, name))


@pytest.fixture
def example(load):
    (_ctx, module) = load(EXAMPLE)
    return module


def test_typedef_chain_narrows_range(example):
    t = leaf_type(example, 'p')
    assert t.qname == QName('small-percent', 'example')
    assert t.category is Category.NUMERIC
    assert str(t.ranges) == "0..10"
    assert t.base.qname == QName('percent', 'example')
    assert t.root().qname == QName('uint8', None)


def test_string_length_and_patterns_accumulate(example):
    t = leaf_type(example, 'n')
    assert str(t.length) == "1..8"
    assert t.patterns == ('[a-z]+', '[a-c]+')
    name = schema.typedef_definition(example.search_one('typedef', 'name'))
    assert str(name.length) == "1..2147483647"
    assert name.length.is_restricted()


def test_enum_values_are_numbered(example):
    t = leaf_type(example, 'c')
    assert [(m.name, m.value, m.description) for m in t.members] == [
        ('red', 0, None), ('green', 5, 'Green'), ('blue', 6, None)]


def test_restricted_enumeration_keeps_base_values(example):
    t = leaf_type(example, 'e')
    assert t.qname == QName('colors', 'example')
    assert [(m.name, m.value) for m in t.members] == [
        ('blue', 6), ('green', 5)]


def test_decimal_range_uses_fraction_digits(example):
    t = leaf_type(example, 'm')
    assert t.fraction_digits == 2
    assert t.ranges.lower() == decimal.Decimal('0.00')
    assert str(t.ranges) == "0.00..92233720368547758.07"


def test_union_members(example):
    t = leaf_type(example, 'u')
    assert t.category is Category.UNION
    assert [m.qname for m in t.types] == [QName('percent', 'example'),
                                          QName('string', None)]


def test_inline_restriction_keeps_referenced_name(example):
    s = leaf_type(example, 's')
    assert s.qname == QName('string', None)
    assert str(s.length) == "2..4"
    q = leaf_type(example, 'q')
    assert q.qname == QName('percent', 'example')
    assert str(q.ranges) == "1..1 | 50..100"


def test_builtin_without_restrictions(example):
    t = leaf_type(example, 'b')
    assert t.qname == QName('boolean', None)
    assert t.category is Category.OTHER
    assert not schema.has_restrictions(leaf(example, 'b').search_one('type'))
    assert schema.has_restrictions(leaf(example, 's').search_one('type'))


def test_typedef_definition_renders(example):
    typedef = example.search_one('typedef', 'small-percent')
    t = schema.typedef_definition(typedef)
    out = yang_string(
        lambda p: TypePrinter(p, schema.module_prefix_map(example))
        .print_type_definition(typedef.arg, t))
    assert out == (
        "typedef small-percent {\n"
        "  type uint8 {\n"
        "    range \"0..10\";\n"
        "  }\n"
        "}\n")


def test_module_prefix_map(load):
    (_ctx, user) = load(EXAMPLE, USER)
    prefixes = schema.module_prefix_map(user)
    assert dict(prefixes) == {'user': '', 'example': 'x'}
    t = schema.leaf_type(user.search_one('leaf', 'level'))
    assert TypePrinter(None, prefixes).type_name(t) == 'x:percent'


def test_load_modules_from_files(modpath):
    filename = modpath('example.yang', EXAMPLE)
    ctx = schema.create_context(modpath.path,
                                schema.Options(no_path_recurse=True))
    (modules, failed) = schema.load_modules(ctx, [filename])
    assert [m.arg for m in modules] == ['example']
    assert failed == []


def test_load_modules_reports_unparsable_files(modpath):
    filename = modpath('broken.yang', "module broken {")
    ctx = schema.create_context(modpath.path, schema.Options())
    (modules, failed) = schema.load_modules(ctx, [filename])
    assert modules == []
    assert failed == [filename]
    assert len(ctx.errors) > 0


def test_module_files_lists_yang_files_sorted(modpath):
    modpath('b.yang', USER)
    modpath('a.yang', EXAMPLE)
    modpath('notes.txt', "")
    assert [f[-6:] for f in schema.module_files(modpath.path)] == [
        'a.yang', 'b.yang']


def test_module_name_of_module_statement(example):
    assert schema.module_name(example) == 'example'
    assert schema.module_name(example.search_one('typedef', 'percent')) == \
        'example'


def test_module_name_of_submodule(modpath):
    filename = modpath('parent.yang', """
module parent {
  namespace "urn:parent";
  prefix p;
  include child;
}
""")
    modpath('child.yang', """
submodule child {
  belongs-to parent {
    prefix p;
  }
  typedef code {
    type uint16;
  }
}
""")
    ctx = schema.create_context(modpath.path,
                                schema.Options(no_path_recurse=True))
    (_modules, failed) = schema.load_modules(ctx, [filename])
    assert failed == []
    child = util.get_module(ctx, 'child')
    assert schema.module_name(child) == 'parent'
    assert schema.module_name(child.search_one('typedef')) == 'parent'
