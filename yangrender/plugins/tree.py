"""Tree output plugin

Prints the schema tree of each module, one node per line:

    <status>--<flags> <name><opts>   <type>
"""

import optparse
import re

from yangrender import plugin
from yangrender import schema
from yangrender import util
from yangrender.typeprinter import TypePrinter

def yangrender_plugin_init():
    plugin.register_plugin(TreePlugin())

class TreePlugin(plugin.RenderPlugin):
    def __init__(self):
        plugin.RenderPlugin.__init__(self, 'tree')

    def add_output_format(self, fmts):
        self.multiple_modules = True
        fmts['tree'] = self

    def add_opts(self, optparser):
        optlist = [
            optparse.make_option("--tree-depth",
                                 type="int",
                                 dest="tree_depth",
                                 help="Number of levels to print"),
            optparse.make_option("--tree-line-length",
                                 type="int",
                                 dest="tree_line_length",
                                 help="Maximum line length"),
            optparse.make_option("--tree-path",
                                 dest="tree_path",
                                 help="Subtree to print"),
            ]
        g = optparser.add_option_group("Tree output specific options")
        g.add_options(optlist)

    def setup_fmt(self, ctx):
        ctx.implicit_errors = False

    def emit(self, ctx, modules, fd):
        path = None
        if ctx.opts.tree_path is not None:
            path = [p for p in ctx.opts.tree_path.split('/') if p != '']
        for module in modules:
            TreeWriter(ctx, module, fd, ctx.opts.tree_depth,
                       ctx.opts.tree_line_length).emit(path)

class TreeWriter(object):
    def __init__(self, ctx, module, fd, depth=None, llen=None):
        self.ctx = ctx
        self.module = module
        self.fd = fd
        self.depth = depth
        self.llen = llen
        self.types = TypePrinter(None, schema.module_prefix_map(module))
        self._printed_header = False

    def header(self):
        if self._printed_header:
            return
        bstr = ""
        b = self.module.search_one('belongs-to')
        if b is not None:
            bstr = " (belongs-to %s)" % b.arg
        self.fd.write("%s: %s%s\n" % (self.module.keyword, self.module.arg,
                                      bstr))
        self._printed_header = True

    def emit(self, path=None):
        module = self.module
        chs = [ch for ch in module.i_children
               if ch.keyword in util.data_definition_keywords]
        self.section(None, chs, path, 'data')

        for augment in util.external_augments(self.ctx, self.module):
            self.header()
            self.fd.write("\n  augment %s:\n" % augment.arg)
            self.print_children(augment.i_children, '  ', None, 'augment',
                                self.depth)

        rpcs = [ch for ch in module.i_children if ch.keyword == 'rpc']
        self.section("rpcs", rpcs, path, 'rpc')
        notifs = [ch for ch in module.i_children
                  if ch.keyword == 'notification']
        self.section("notifications", notifs, path, 'notification')

    def section(self, title, chs, path, mode):
        if path is not None and len(path) > 0:
            chs = [ch for ch in chs if ch.arg == path[0]]
            path = path[1:]
        if len(chs) == 0:
            return
        self.header()
        prefix = ''
        if title is not None:
            self.fd.write("\n  %s:\n" % title)
            prefix = '  '
        self.print_children(chs, prefix, path, mode, self.depth)

    def print_children(self, chs, prefix, path, mode, depth, width=0):
        chs = [ch for ch in chs
               if not (ch.keyword in ('input', 'output') and
                       len(ch.i_children) == 0)]
        if depth == 0:
            if len(chs) > 0:
                self.fd.write(prefix + '     ...\n')
            return
        if width == 0:
            width = self.name_width(chs)
        for ch in chs:
            if ch is chs[-1]:
                newprefix = prefix + '   '
            else:
                newprefix = prefix + '  |'
            if ch.keyword in ('input', 'output'):
                chmode = ch.keyword
            else:
                chmode = mode
            self.print_node(ch, newprefix, path, chmode, depth, width)

    def name_width(self, chs):
        w = 0
        for ch in chs:
            if ch.keyword in ('choice', 'case'):
                w = max(w, self.name_width(ch.i_children))
            else:
                w = max(w, len(util.node_name(ch, self.module)))
        return w

    def print_node(self, s, prefix, path, mode, depth, width):
        line = "%s%s--" % (prefix[0:-1], util.status_symbols[util.status(s)])
        brcol = len(line) + 4
        name = util.node_name(s, self.module)
        flags = util.flags(s, mode)
        if s.keyword == 'list':
            line += flags + " " + name + '*'
        elif s.keyword == 'container':
            if s.search_one('presence') is not None:
                name += '!'
            line += flags + " " + name
        elif s.keyword == 'choice':
            if util.is_optional(s):
                line += flags + ' (' + name + ')?'
            else:
                line += flags + ' (' + name + ')'
        elif s.keyword == 'case':
            line += ':(' + name + ')'
            brcol += 1
        elif s.keyword in ('input', 'output', 'rpc', 'action',
                           'notification'):
            line += flags + " " + name
        else:
            if s.keyword == 'leaf-list':
                name += '*'
            elif util.is_optional(s):
                name += '?'
            t = self.type_column(s)
            if t == '':
                line += "%s %s" % (flags, name)
            elif (self.llen is not None and
                  len(line) + len(flags) + width + 1 + len(t) > self.llen):
                # no room for the type; continue on the next line
                line += "%s %s" % (flags, name)
                self.fd.write(line + '\n')
                line = prefix + ' ' * (brcol - len(prefix)) + ' ' + t
            else:
                line += "%s %-*s   %s" % (flags, width + 1, name, t)

        key = s.search_one('key') if s.keyword == 'list' else None
        if key is not None:
            line = self.append(line, " [%s]" % re.sub(r'\s+', ' ', key.arg),
                               prefix, brcol)
        featurenames = [f.arg for f in s.search('if-feature')]
        if len(featurenames) > 0:
            line = self.append(line, " {%s}?" % ",".join(featurenames),
                               prefix, brcol)
        self.fd.write(line + '\n')

        chs = getattr(s, 'i_children', None)
        if chs is None:
            return
        if path is not None and len(path) > 0:
            chs = [ch for ch in chs if ch.arg == path[0]]
            path = path[1:]
        if s.keyword in ('choice', 'case'):
            self.print_children(chs, prefix, path, mode, depth, width)
        else:
            if depth is not None:
                depth -= 1
            self.print_children(chs, prefix, path, mode, depth)

    def append(self, line, s, prefix, brcol):
        if self.llen is not None and len(line) + len(s) > self.llen:
            self.fd.write(line + '\n')
            line = prefix + ' ' * (brcol - len(prefix))
        return line + s

    def type_column(self, s):
        if s.keyword == 'anydata':
            return '<anydata>'
        elif s.keyword == 'anyxml':
            return '<anyxml>'
        path = util.leafref_path(s)
        if path is not None:
            return "-> %s" % path
        t = schema.leaf_type(s)
        if t is None:
            return ''
        return self.types.type_name(t)
