# -*- coding: utf-8 -*-
# pylint: disable=redefined-outer-name
"""
helpers for loading YANG text into a pyang context
"""
import re

import pytest

from pyang import error as pyang_error

from yangrender import plugin
from yangrender import schema

DEFAULT_OPTIONS = {
    'format': None,
    'verbose': False,
    'no_path_recurse': True,
    'path': [],
}
"""Default options for the yangrender command line"""


def create_context(path='', *options, **kwargs):
    """Generates a pyang context

    Arguments:
        path (str): location of YANG modules.
        *options: list of dicts, with options to be passed to context.
        **kwargs: similar to ``options`` but have a higher precedence.
    """
    opts = schema.Options(DEFAULT_OPTIONS, *options, **kwargs)
    return schema.create_context(path, opts)


def module_errors(ctx):
    return [(str(p), t) for (p, t, _a) in ctx.errors
            if pyang_error.is_error(pyang_error.err_level(t))]


@pytest.fixture
def load():
    """Returns a function that parses and validates YANG module texts.

    The last module given is the one returned with the context.
    """
    def load(*texts, **options):
        ctx = create_context('', **options)
        modules = []
        for text in texts:
            name = re.search(r'(?:sub)?module\s+(\S+)', text).group(1)
            module = ctx.add_module(name + '.yang', text)
            assert module is not None, ctx.errors
            modules.append(module)
        ctx.validate()
        assert module_errors(ctx) == []
        return ctx, modules[-1]
    return load


@pytest.fixture
def modpath(tmp_path):
    """Returns a function that writes YANG files to a module directory"""
    def write(filename, text):
        f = tmp_path / filename
        f.write_text(text, encoding='utf-8')
        return str(f)
    write.path = str(tmp_path)
    return write


@pytest.fixture
def fresh_plugins(monkeypatch):
    monkeypatch.setattr(plugin, 'plugins', [])
    monkeypatch.delenv('YANGRENDER_PLUGINPATH', raising=False)
    return plugin.plugins
