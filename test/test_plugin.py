"""
tests for plugin registration
"""
import optparse

from yangrender import plugin

PLUGIN = '''
from yangrender import plugin

class DummyPlugin(plugin.RenderPlugin):
    def add_output_format(self, fmts):
        fmts['dummy'] = self

def yangrender_plugin_init():
    plugin.register_plugin(DummyPlugin('dummy'))
'''


def formats():
    fmts = {}
    for p in plugin.plugins:
        p.add_output_format(fmts)
    return fmts


def test_builtin_formats(fresh_plugins):
    plugin.init()
    assert sorted(formats()) == ['depend', 'json-tree', 'jstree', 'tree',
                                 'yang']
    for name in ('tree', 'yang', 'json-tree', 'jstree', 'depend'):
        assert plugin.is_plugin_registered(name)


def test_plugin_options_are_grouped(fresh_plugins):
    plugin.init()
    optparser = optparse.OptionParser()
    for p in plugin.plugins:
        p.add_opts(optparser)
    for opt in ('--tree-depth', '--yang-indent', '--json-tree-indent',
                '--jstree-no-path', '--depend-recurse'):
        assert optparser.has_option(opt)


def test_plugin_directory(fresh_plugins, tmp_path):
    (tmp_path / 'yangrender_dummy_plugin.py').write_text(PLUGIN)
    plugin.init([str(tmp_path)])
    assert plugin.is_plugin_registered('dummy')
    assert 'dummy' in formats()


def test_plugin_path_from_environment(fresh_plugins, tmp_path, monkeypatch):
    (tmp_path / 'yangrender_env_plugin.py').write_text(
        PLUGIN.replace("'dummy'", "'env-dummy'"))
    monkeypatch.setenv('YANGRENDER_PLUGINPATH', str(tmp_path))
    plugin.init()
    assert plugin.is_plugin_registered('env-dummy')


def test_missing_plugin_directory_is_ignored(fresh_plugins, tmp_path):
    plugin.init([str(tmp_path / 'missing')])
    assert not plugin.is_plugin_registered('dummy')
