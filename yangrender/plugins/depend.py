"""Module dependency output plugin

Prints one line per module listing the modules it imports and the
submodules it includes:

    module a@2020-01-01 depends on following modules: b c d@2019-05-01
"""

import optparse

from yangrender import error
from yangrender import plugin
from yangrender import util

def yangrender_plugin_init():
    plugin.register_plugin(DependPlugin())

class DependPlugin(plugin.RenderPlugin):
    def __init__(self):
        plugin.RenderPlugin.__init__(self, 'depend')

    def add_opts(self, optparser):
        optlist = [
            optparse.make_option("--depend-recurse",
                                 dest="depend_recurse",
                                 action="store_true",
                                 help="Also list the modules imported by "
                                 "imported modules"),
            optparse.make_option("--depend-only-imports",
                                 dest="depend_only_imports",
                                 action="store_true",
                                 help="List imported modules only"),
            optparse.make_option("--depend-only-includes",
                                 dest="depend_only_includes",
                                 action="store_true",
                                 help="List included submodules only"),
            optparse.make_option("--depend-exclude-module",
                                 dest="depend_exclude",
                                 default=[],
                                 action="append",
                                 help="(sub)module to leave out of the list. "
                                 "This option can be given multiple times."),
            ]
        g = optparser.add_option_group("Depend output specific options")
        g.add_options(optlist)

    def add_output_format(self, fmts):
        self.multiple_modules = True
        fmts['depend'] = self

    def emit(self, ctx, modules, fd):
        # cannot do this unless everything is ok for our modules
        error.check_no_errors(ctx, modules)
        for module in modules:
            deps = dependencies(ctx, module,
                                imports=not ctx.opts.depend_only_includes,
                                includes=not ctx.opts.depend_only_imports,
                                recurse=bool(ctx.opts.depend_recurse),
                                exclude=ctx.opts.depend_exclude or [])
            fd.write("module %s depends on following modules: " %
                     module_ref(module.arg, util.get_latest_revision(module)))
            for d in deps:
                fd.write(d + ' ')
            fd.write('\n')

def module_ref(name, revision):
    if revision is None:
        return name
    return "%s@%s" % (name, revision)

def dependencies(ctx, module, imports=True, includes=True, recurse=False,
                 exclude=()):
    """Return the dependencies of `module` in the order they are printed.

    Imports come first, as the module name plus the revision date if the
    import names one.  Included submodules follow with their revision,
    then the imports of the submodules.
    """
    res = []
    seen = set([module.arg]) | set(exclude)

    def add(name, ref):
        if name not in seen:
            seen.add(name)
            res.append(ref)

    def add_imports(m):
        for i in m.search('import'):
            rd = i.search_one('revision-date')
            add(i.arg, module_ref(i.arg, rd.arg if rd is not None else None))

    submodules = []
    for i in module.search('include'):
        subm = util.get_module(ctx, i.arg)
        if subm is not None:
            submodules.append(subm)
    if imports:
        add_imports(module)
    if includes:
        for subm in submodules:
            add(subm.arg, module_ref(subm.arg,
                                     util.get_latest_revision(subm)))
    if imports:
        for subm in submodules:
            add_imports(subm)
        if recurse:
            done = set([module.arg])
            todo = [i.arg for m in [module] + submodules
                    for i in m.search('import')]
            while len(todo) > 0:
                name = todo.pop(0)
                if name in done:
                    continue
                done.add(name)
                m = util.get_module(ctx, name)
                if m is None:
                    continue
                add_imports(m)
                todo.extend([i.arg for i in m.search('import')])
    return res
