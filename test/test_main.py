"""
tests for the yangrender command line
"""
import sys

import pytest

from yangrender import main

GOOD = """
module good {
  namespace "urn:good";
  prefix g;
  revision 2024-05-01;
  leaf name {
    type string;
  }
}
"""

BAD = """
module bad {
  namespace "urn:bad";
  prefix b;
  leaf x {
    type no-such-type;
  }
}
"""


@pytest.fixture
def yangrender(fresh_plugins, monkeypatch, capsys):
    def run(*args):
        monkeypatch.setattr(sys, 'argv', ['yangrender'] + list(args))
        with pytest.raises(SystemExit) as excinfo:
            main.run()
        (out, err) = capsys.readouterr()
        return excinfo.value.code, out, err
    return run


def test_list_formats(yangrender):
    (code, out, _err) = yangrender('--list-formats')
    assert code == 0
    assert out.split() == ['depend', 'json-tree', 'jstree', 'tree', 'yang']


def test_tree_format(yangrender, modpath):
    filename = modpath('good.yang', GOOD)
    (code, out, _err) = yangrender('-f', 'tree', '-p', modpath.path,
                                   filename)
    assert code == 0
    assert out == "module: good\n  +--rw name?   string\n"


def test_depend_to_output_file(yangrender, modpath, tmp_path):
    filename = modpath('good.yang', GOOD)
    outfile = tmp_path / 'out.txt'
    (code, _out, _err) = yangrender('-f', 'depend', '-o', str(outfile),
                                    filename)
    assert code == 0
    assert outfile.read_text() == \
        "module good@2024-05-01 depends on following modules: \n"


def test_schema_errors_fail(yangrender, modpath):
    filename = modpath('bad.yang', BAD)
    (code, out, err) = yangrender('-f', 'tree', filename)
    assert code == 1
    assert out == ""
    assert "error: " in err
    assert "Failed to parse YANG module bad" in err


def test_unparsable_file_fails(yangrender, modpath):
    filename = modpath('broken@2020-01-01.yang', "module broken {")
    (code, _out, err) = yangrender('-f', 'tree', filename)
    assert code == 1
    assert "Failed to parse YANG module broken" in err


def test_missing_file(yangrender, tmp_path):
    (code, _out, err) = yangrender('-f', 'tree', str(tmp_path / 'none.yang'))
    assert code == 1
    assert "none.yang" in err


def test_no_file_given(yangrender):
    (code, _out, err) = yangrender('-f', 'tree')
    assert code == 1
    assert "no file given" in err


def test_unknown_format(yangrender, modpath):
    filename = modpath('good.yang', GOOD)
    (code, _out, err) = yangrender('-f', 'nope', filename)
    assert code == 1
    assert 'unsupported format "nope"' in err


def test_parse_all(yangrender, modpath):
    modpath('good.yang', GOOD)
    (code, out, _err) = yangrender('-f', 'depend', '-a', modpath.path)
    assert code == 0
    assert out.startswith("module good@2024-05-01 depends")


def test_verbose_reports_files(yangrender, modpath):
    filename = modpath('good.yang', GOOD)
    (code, _out, err) = yangrender('--verbose', filename)
    assert code == 0
    assert "# read %s\n" % filename in err


def test_single_module_format_rejects_many(yangrender, modpath):
    a = modpath('good.yang', GOOD)
    b = modpath('other.yang', GOOD.replace('good', 'other'))
    (code, _out, err) = yangrender('-f', 'yang', a, b)
    assert code == 1
    assert "too many files to convert" in err
