"""
tests for schema error reporting
"""
import io

from yangrender import error

from conftest import create_context

BAD = """
module bad {
  namespace "urn:bad";
  prefix b;
  leaf x {
    type no-such-type;
  }
}
"""


def bad_context():
    ctx = create_context()
    ctx.add_module('bad.yang', BAD)
    ctx.validate()
    return ctx


def test_print_errors_counts_errors():
    fd = io.StringIO()
    nerrors = error.print_errors(bad_context(), fd=fd)
    assert nerrors >= 1
    assert "bad.yang:6: error: " in fd.getvalue()


def test_modules_with_errors():
    ctx = bad_context()
    assert error.modules_with_errors(ctx, ['bad', 'other']) == ['bad']
    assert error.modules_with_errors(ctx, ['other']) == []


def test_emit_error_defaults():
    e = error.EmitError("boom")
    assert e.msg == "boom"
    assert e.exit_code == 1
    assert str(e) == "boom"
