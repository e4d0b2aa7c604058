"""JS-Tree output plugin

Generates a html/javascript page with a collapsible table of the schema
nodes of the modules.
"""

import html
import optparse

from yangrender import plugin
from yangrender import schema
from yangrender import util
from yangrender.printer import InlineStatementPrinter
from yangrender.typeprinter import TypePrinter

def yangrender_plugin_init():
    plugin.register_plugin(JSTreePlugin())

class JSTreePlugin(plugin.RenderPlugin):
    def __init__(self):
        plugin.RenderPlugin.__init__(self, 'jstree')

    def add_output_format(self, fmts):
        self.multiple_modules = True
        fmts['jstree'] = self

    def add_opts(self, optparser):
        optlist = [
            optparse.make_option("--jstree-no-path",
                                 dest="jstree_no_path",
                                 action="store_true",
                                 help="Do not include paths to make "
                                 "page less wide"),
            optparse.make_option("--jstree-path",
                                 dest="jstree_path",
                                 help="Subtree to print"),
            ]
        g = optparser.add_option_group("JSTree output specific options")
        g.add_options(optlist)

    def setup_fmt(self, ctx):
        ctx.implicit_errors = False

    def emit(self, ctx, modules, fd):
        path = None
        if ctx.opts.jstree_path is not None:
            path = [p for p in ctx.opts.jstree_path.split('/') if p != '']
        with_path = not ctx.opts.jstree_no_path
        fd.write(_page_start % html.escape(' '.join([m.arg for m in modules])))
        for module in modules:
            emit_module_heading(module, fd)
        fd.write(_table_start)
        if with_path:
            fd.write('<th>Path</th>')
        fd.write('</tr>\n')
        rowid = 0
        for module in modules:
            w = RowWriter(module, fd, with_path)
            for (title, keywords) in ((module.arg,
                                       util.data_definition_keywords),
                                      ('rpcs', ['rpc']),
                                      ('notifications', ['notification'])):
                nodes = [n for n in module.i_children
                         if n.keyword in keywords]
                if path is not None and len(path) > 0:
                    nodes = [n for n in nodes if n.arg == path[0]]
                if len(nodes) == 0:
                    continue
                rowid += 1
                w.section(str(rowid), title, module.keyword)
                w.children(nodes, str(rowid), 2, path_tail(path))
        fd.write(_page_end)

def path_tail(path):
    if path is None or len(path) == 0:
        return path
    return path[1:]

def emit_module_heading(module, fd):
    bstr = ""
    b = module.search_one('belongs-to')
    if b is not None:
        bstr = " (belongs-to %s)" % b.arg
    fd.write('<h1>%s: <span class="name">%s%s</span>' %
             (module.keyword.capitalize(), html.escape(module.arg),
              html.escape(bstr)))
    ns = module.search_one('namespace')
    pr = module.search_one('prefix')
    if ns is not None:
        fd.write(', Namespace: <span class="name">%s</span>' %
                 html.escape(ns.arg))
    if pr is not None:
        fd.write(', Prefix: <span class="name">%s</span>' %
                 html.escape(pr.arg))
    fd.write('</h1>\n')

class RowWriter(object):
    def __init__(self, module, fd, with_path=True):
        self.module = module
        self.fd = fd
        self.with_path = with_path
        self.types = TypePrinter(None, schema.module_prefix_map(module))

    def section(self, rowid, title, keyword):
        self.row(rowid, 1, True, '<span class="name">%s</span>' %
                 html.escape(title), [keyword, '', '', '', ''], '')

    def row(self, rowid, level, folder, label, cells, path):
        f = self.fd
        f.write('<tr id="%s">' % rowid)
        if folder:
            anchor = ('<a href="#" class="folder" '
                      'onclick="toggleRows(this);return false;">&nbsp;</a>')
        else:
            anchor = '<span class="leaf">&nbsp;</span>'
        f.write('<td nowrap><div class="tier" style="margin-left: %.1fem">'
                '%s%s</div></td>' % ((level - 1) * 1.5, anchor, label))
        for c in cells:
            f.write('<td>%s</td>' % c)
        if self.with_path:
            f.write('<td>%s</td>' % html.escape(path))
        f.write('</tr>\n')

    def children(self, chs, parentid, level, path):
        n = 0
        for ch in chs:
            if ch.keyword in ('input', 'output') and len(ch.i_children) == 0:
                continue
            n += 1
            self.node(ch, "%s-%d" % (parentid, n), level, path)

    def node(self, s, rowid, level, path):
        name = util.node_name(s, self.module)
        options = ''
        if s.keyword == 'choice':
            name = '(' + name + ')'
            if util.is_optional(s):
                options = '?'
        elif s.keyword == 'case':
            name = ':(' + name + ')'
        elif s.keyword == 'container':
            p = s.search_one('presence')
            if p is not None:
                options = '<abbr title="%s">Presence</abbr>' % \
                    html.escape(p.arg, quote=True)
        elif s.keyword in ('leaf-list', 'list'):
            options = '*'
        elif s.keyword in ('leaf', 'anydata', 'anyxml'):
            if util.is_optional(s):
                options = '?'
        d = s.search_one('description')
        if d is not None:
            descr = d.arg
        else:
            descr = 'No description'
        label = '<abbr title="%s">%s</abbr>' % (html.escape(descr, quote=True),
                                                html.escape(name))
        chs = getattr(s, 'i_children', None)
        folder = chs is not None and len(chs) > 0
        mode = 'data'
        if s.keyword in ('input', 'output'):
            mode = s.keyword
        cells = [s.keyword, self.type_cell(s), util.flags(s, mode), options,
                 util.status(s)]
        self.row(rowid, level, folder, label, cells, util.data_path(s))
        if folder:
            if path is not None and len(path) > 0:
                chs = [ch for ch in chs if ch.arg == path[0]]
            self.children(chs, rowid, level + 1, path_tail(path))

    def type_cell(self, s):
        path = util.leafref_path(s)
        if path is not None:
            return html.escape("-> %s" % path)
        type_ = schema.leaf_type(s)
        if type_ is None:
            return ''
        p = InlineStatementPrinter()
        TypePrinter(p, self.types.prefixes).print_type(type_)
        p.finish()
        return '<abbr title="%s">%s</abbr>' % (
            html.escape(self.types.type_name(type_), quote=True),
            html.escape(p.getvalue()))

_page_start = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>%s</title>
<style type="text/css">
body, td, th, h1 {font-family: Verdana, Helvetica, Arial, sans-serif;
                  font-size: 10pt;}
h1 {font-size: 12pt; margin: 4px 0;}
.name {color: blue;}
table {border-collapse: collapse; width: 100%%;}
th {text-align: left; background: #eee;}
td {padding: 1px 6px; vertical-align: top;}
.tier a, .tier .leaf {display: inline-block; width: 1.2em;
                      text-decoration: none;}
.tier a.folder:before {content: "\\25B8";}
.tier a.open:before {content: "\\25BE";}
.tier .leaf:before {content: "\\00B7";}
</style>
<script type="text/javascript">
function isChild(rowId, parentId, directOnly) {
  if (rowId.indexOf(parentId + "-") != 0)
    return false;
  return !directOnly || rowId.slice(parentId.length + 1).indexOf("-") < 0;
}
function toggleRows(elm) {
  var row = elm.parentNode.parentNode.parentNode;
  var rows = document.getElementsByTagName("tr");
  var expand = elm.className.indexOf("open") < 0;
  elm.className = expand ? "folder open" : "folder";
  for (var i = 0; i < rows.length; i++) {
    var r = rows[i];
    if (!r.id || !isChild(r.id, row.id, expand))
      continue;
    r.style.display = expand ? "table-row" : "none";
    var a = r.getElementsByTagName("a")[0];
    if (a) a.className = "folder";
  }
}
function showAllRows(show) {
  var rows = document.getElementsByTagName("tr");
  for (var i = 0; i < rows.length; i++) {
    var r = rows[i];
    if (r.id.indexOf("-") >= 0)
      r.style.display = show ? "table-row" : "none";
    var a = r.getElementsByTagName("a")[0];
    if (a && r.id) a.className = show ? "folder open" : "folder";
  }
}
</script>
</head>
<body onload="showAllRows(false);">
"""

_table_start = """<table>
<tr><th>Element
 <a href="#" onclick="showAllRows(true);return false;">[+]Expand all</a>
 <a href="#" onclick="showAllRows(false);return false;">[-]Collapse all</a>
</th><th>Schema</th><th>Type</th><th>Flags</th><th>Opts</th><th>Status</th>"""

_page_end = """</table>
</body>
</html>
"""
