"""JSON tree output plugin

Produces one JSON document describing the schema trees of the modules:

    {"parsed-models": {"<module>": {..., "children": [...]}}}
"""

import json
import optparse

from yangrender import plugin
from yangrender import schema
from yangrender import util
from yangrender.printer import DictStatementPrinter
from yangrender.typeprinter import TypePrinter

def yangrender_plugin_init():
    plugin.register_plugin(JSONTreePlugin())

class JSONTreePlugin(plugin.RenderPlugin):
    def __init__(self):
        plugin.RenderPlugin.__init__(self, 'json-tree')

    def add_output_format(self, fmts):
        self.multiple_modules = True
        fmts['json-tree'] = self

    def add_opts(self, optparser):
        optlist = [
            optparse.make_option("--json-tree-indent",
                                 type="int",
                                 dest="json_tree_indent",
                                 help="Pretty print with INDENT spaces"),
            ]
        g = optparser.add_option_group("JSON tree output specific options")
        g.add_options(optlist)

    def setup_fmt(self, ctx):
        ctx.implicit_errors = False

    def emit(self, ctx, modules, fd):
        models = {}
        for module in modules:
            models[module.arg] = module_tree(ctx, module)
        json.dump({"parsed-models": models}, fd,
                  indent=ctx.opts.json_tree_indent)
        fd.write('\n')

def module_tree(ctx, module):
    """Return the dict describing `module`"""
    types = TypePrinter(None, schema.module_prefix_map(module))
    res = {
        "name": module.arg,
        "keyword": module.keyword,
        "revision": util.get_latest_revision(module),
        }
    for keyword in ('namespace', 'prefix', 'organization', 'contact',
                    'description'):
        s = module.search_one(keyword)
        if s is not None:
            res[keyword] = s.arg
    b = module.search_one('belongs-to')
    if b is not None:
        res["belongs-to"] = b.arg
    res["typedefs"] = [
        type_statement(types, schema.typedef_definition(t), t.arg)
        for t in module.search('typedef')]
    res["children"] = [
        node_tree(types, module, ch, 'data') for ch in module.i_children
        if ch.keyword in util.data_definition_keywords]
    res["augments"] = [
        {"target": a.arg,
         "children": [node_tree(types, module, ch, 'augment')
                      for ch in a.i_children]}
        for a in util.external_augments(ctx, module)]
    res["rpcs"] = [node_tree(types, module, ch, 'rpc')
                   for ch in module.i_children if ch.keyword == 'rpc']
    res["notifications"] = [
        node_tree(types, module, ch, 'notification')
        for ch in module.i_children if ch.keyword == 'notification']
    return res

def type_statement(types, type_, typedef_name=None):
    """Return `type_` rendered as a statement dict"""
    p = DictStatementPrinter()
    printer = TypePrinter(p, types.prefixes)
    if typedef_name is not None:
        printer.print_type_definition(typedef_name, type_)
    else:
        printer.print_type(type_)
    p.finish()
    return p.statements[0]

def node_tree(types, module, s, mode):
    if s.keyword in ('input', 'output'):
        mode = s.keyword
    res = {
        "name": util.node_name(s, module),
        "keyword": s.keyword,
        "path": util.data_path(s),
        "flags": util.flags(s, mode),
        "status": util.status(s),
        }
    d = s.search_one('description')
    if d is not None:
        res["description"] = d.arg
    type_ = schema.leaf_type(s) if s.keyword in ('leaf', 'leaf-list') else None
    if type_ is not None:
        res["type"] = type_statement(types, type_)
        res["typename"] = types.type_name(type_)
    path = util.leafref_path(s)
    if path is not None:
        res["leafref-path"] = path
    if s.keyword == 'list':
        key = s.search_one('key')
        if key is not None:
            res["key"] = key.arg.split()
    if s.keyword in ('leaf', 'choice', 'anydata', 'anyxml'):
        res["mandatory"] = not util.is_optional(s)
    chs = getattr(s, 'i_children', None)
    if chs is not None:
        res["children"] = [node_tree(types, module, ch, mode) for ch in chs
                           if not (ch.keyword in ('input', 'output') and
                                   len(ch.i_children) == 0)]
    return res
