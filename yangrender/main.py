"""yangrender command line front end"""

import io
import optparse
import os
import sys

import yangrender
from yangrender import error
from yangrender import plugin
from yangrender import schema

def run():
    usage = """%prog [options] <filename>...

Validates the YANG modules in <filename> with pyang and renders them in
the selected output format."""

    plugindirs = []
    # check for --plugindir
    idx = 1
    while '--plugindir' in sys.argv[idx:]:
        idx = idx + sys.argv[idx:].index('--plugindir')
        plugindirs.append(sys.argv[idx + 1])
        idx = idx + 1
    plugin.init(plugindirs)

    fmts = {}
    for p in plugin.plugins:
        p.add_output_format(fmts)

    optlist = [
        # use capitalized versions of std options help and version
        optparse.make_option("-h", "--help",
                             action="help",
                             help="Show this help message and exit"),
        optparse.make_option("-v", "--version",
                             action="version",
                             help="Show version number and exit"),
        optparse.make_option("-f", "--format",
                             dest="format",
                             help="Convert to FORMAT.  Supported formats "
                             "are: " + ', '.join(sorted(fmts))),
        optparse.make_option("--list-formats",
                             dest="list_formats",
                             action="store_true",
                             help="Print the supported formats and exit"),
        optparse.make_option("-o", "--output",
                             dest="outfile",
                             help="Write the output to OUTFILE instead "
                             "of stdout."),
        optparse.make_option("-p", "--path",
                             dest="path",
                             default=[],
                             action="append",
                             help=os.pathsep + "-separated search path for "
                             "YANG modules. This option can be given "
                             "multiple times."),
        optparse.make_option("--no-path-recurse",
                             dest="no_path_recurse",
                             action="store_true",
                             help="Do not recurse into directories in the "
                             "search path."),
        optparse.make_option("-a", "--parse-all",
                             dest="parse_all",
                             metavar="DIR",
                             help="Load every .yang file in DIR"),
        optparse.make_option("-W", "--ignore-warnings",
                             dest="ignore_warnings",
                             action="store_true",
                             help="Do not print warnings"),
        optparse.make_option("--verbose",
                             dest="verbose",
                             action="store_true",
                             help="Report the files read and the chosen "
                             "format"),
        optparse.make_option("--plugindir",
                             dest="plugindir",
                             help="Load yangrender plugins from PLUGINDIR"),
        ]

    optparser = optparse.OptionParser(usage, add_help_option=False)
    optparser.version = '%prog ' + yangrender.__version__
    optparser.add_options(optlist)

    for p in plugin.plugins:
        p.add_opts(optparser)

    (o, args) = optparser.parse_args()

    if o.list_formats:
        for f in sorted(fmts):
            print(f)
        sys.exit(0)

    if o.format is not None and o.format not in fmts:
        sys.stderr.write("unsupported format \"%s\"\n" % o.format)
        sys.exit(1)
    if o.outfile is not None and o.format is None:
        sys.stderr.write("no format specified\n")
        sys.exit(1)

    filenames = list(args)
    if o.parse_all is not None:
        try:
            filenames.extend(schema.module_files(o.parse_all))
        except OSError as ex:
            sys.stderr.write("%s: %s\n" % (o.parse_all, ex))
            sys.exit(1)
    if len(filenames) == 0:
        sys.stderr.write("no file given\n")
        sys.exit(1)

    path = os.pathsep.join(o.path)
    if path == '':
        path = '.'
    ctx = schema.create_context(path, o)

    emit_obj = None
    if o.format is not None:
        emit_obj = fmts[o.format]
        if o.verbose:
            sys.stderr.write("# format %s\n" % o.format)

    for p in plugin.plugins:
        p.setup_ctx(ctx)
    if emit_obj is not None:
        emit_obj.setup_fmt(ctx)

    try:
        (modules, failed) = schema.load_modules(ctx, filenames)
    except (IOError, UnicodeDecodeError) as ex:
        sys.stderr.write("%s\n" % ex)
        sys.exit(1)

    if (emit_obj is not None and not emit_obj.multiple_modules and
        len(modules) > 1):
        sys.stderr.write("too many files to convert\n")
        sys.exit(1)

    error.print_errors(ctx, o.ignore_warnings)
    failed = [requested_name(f) for f in failed]
    failed.extend(error.modules_with_errors(ctx, [m.arg for m in modules]))
    if len(failed) > 0:
        for name in failed:
            sys.stderr.write("Failed to parse YANG module %s\n" % name)
        sys.exit(1)

    if emit_obj is None:
        sys.exit(0)

    if o.outfile is None:
        fd = sys.stdout
    else:
        fd = io.open(o.outfile, "w", encoding="utf-8")
    try:
        emit_obj.emit(ctx, modules, fd)
    except error.EmitError as e:
        if e.msg != "":
            sys.stderr.write("%s: %s\n" % (optparser.get_prog_name(), e.msg))
        sys.exit(e.exit_code)
    finally:
        if o.outfile is not None:
            fd.close()
    sys.exit(0)

def requested_name(filename):
    """Return the module name a YANG file name stands for"""
    name = os.path.splitext(os.path.basename(filename))[0]
    return name.split('@')[0]

if __name__ == '__main__':
    run()
