"""yangrender plugin handling"""

import os
import sys
from importlib import metadata

plugins = []
"""List of registered RenderPlugin instances"""

def init(plugindirs=None):
    """Initialize the plugin framework"""
    if plugindirs is None:
        plugindirs = []
    else:
        plugindirs = list(plugindirs)

    # initialize the builtin plugins
    from .plugins import tree, yang, jsontree, jstree, depend
    for pluginmod in (tree, yang, jsontree, jstree, depend):
        pluginmod.yangrender_plugin_init()

    # initialize installed plugins
    for ep in metadata.entry_points(group='yangrender.plugin'):
        plugin_init = ep.load()
        plugin_init()

    # add paths from env
    pluginpath = os.getenv('YANGRENDER_PLUGINPATH')
    if pluginpath is not None:
        plugindirs.extend(pluginpath.split(os.pathsep))

    syspath = sys.path
    for plugindir in plugindirs:
        try:
            fnames = os.listdir(plugindir)
        except OSError:
            continue
        sys.path = [plugindir] + syspath
        try:
            for fname in sorted(fnames):
                if (not fname.startswith(".#") and fname.endswith(".py") and
                    fname != '__init__.py'):
                    pluginmod = __import__(fname[:-3])
                    try:
                        plugin_init = pluginmod.yangrender_plugin_init
                    except AttributeError as s:
                        raise AttributeError(pluginmod.__file__ + ': ' +
                                             str(s))
                    plugin_init()
        finally:
            sys.path = syspath

def register_plugin(plugin):
    """Call this to register a yangrender plugin. See class RenderPlugin
    for more info.
    """
    plugins.append(plugin)

def is_plugin_registered(name):
    for plugin in plugins:
        if plugin.name == name:
            return True
    return False

class RenderPlugin(object):
    """Abstract base class for yangrender plugins

    A plugin is a module in the yangrender.plugins package, a module
    exposed through the 'yangrender.plugin' entry point group, or a file
    in one of the plugin directories.

    Such a module must export a function 'yangrender_plugin_init()', which
    may call yangrender.plugin.register_plugin() with an instance of a
    class derived from this class as argument.
    """

    def __init__(self, name=None):
        self.name = name
        self.multiple_modules = False

    def add_output_format(self, fmts):
        """Add an output format to the program.

        `fmts` is a dict which maps the format name string to a plugin
        instance.

        Override this method and update `fmts` with the output format
        name.
        """
        return

    def add_opts(self, optparser):
        """Add command line options to the program.

        Override this method and add the plugin related options as an
        option group.
        """
        return

    def setup_ctx(self, ctx):
        """Modify the Context at setup time.  Called for all plugins."""
        return

    def setup_fmt(self, ctx):
        """Modify the Context at setup time.  Called for the selected
        plugin."""
        return

    def emit(self, ctx, modules, fd):
        """Produce the plugin output.

        Override this method to perform the output conversion.
        `fd` is the file object to write to.

        Raise error.EmitError on failure.
        """
        return
