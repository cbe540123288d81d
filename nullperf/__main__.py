import argparse
import contextlib
import shutil
import sys
import tempfile

from nullperf._cli import TABLE_FORMATS, catch_broken_pipe_error, display_report
from nullperf._languages import GOTIP_ROOT_ENV, build_registry
from nullperf._registry import UnknownLanguageError
from nullperf._runner import Runner
from nullperf._select import DEFAULT_COUNT, UsageError, resolve
from nullperf._utils import find_program


def create_parser():
    parser = argparse.ArgumentParser(
        description='Benchmark the startup time of language runtimes.',
        epilog='The gotip language is only available if the %s directory '
               '(default: ~/sdk/gotip) contains bin/go.' % GOTIP_ROOT_ENV,
        prog='nullperf')
    parser.add_argument('--count', type=int, default=DEFAULT_COUNT,
                        help='number of calls per language; a negative or '
                             'nul value runs each language during '
                             'abs(COUNT) seconds (default: %s)'
                             % DEFAULT_COUNT)
    parser.add_argument('--langs', metavar='L0,L1,...',
                        help='comma-separated list of languages to benchmark, '
                             'in this order (default: all languages)')
    parser.add_argument('-v', '--verbose', action="store_true",
                        help='enable verbose mode')
    parser.add_argument("--table-format", type=str, default="text",
                        choices=TABLE_FORMATS,
                        help="format of the result table (default: text)")
    parser.add_argument('--list', action="store_true",
                        help='list languages and their program, '
                             'and then exit')
    parser.add_argument('--keep-temp', action="store_true",
                        help="don't remove the scratch directory "
                             "used to compile no-op programs")
    return parser


@contextlib.contextmanager
def scratch_directory(keep=False):
    workdir = tempfile.mkdtemp(prefix='nullperf-')
    try:
        yield workdir
    finally:
        if keep:
            print("Scratch directory kept: %s" % workdir)
        else:
            shutil.rmtree(workdir, ignore_errors=True)


def cmd_list(registry):
    for descriptor in registry:
        program = descriptor.get_program()
        path = find_program(program)
        if not path:
            path = 'not found (%s)' % program
        print("%s: %s" % (descriptor.name, path))


def cmd_bench(parser, args, registry):
    try:
        selection = resolve(args.count, args.langs, registry)
    except UsageError as exc:
        parser.error(str(exc))

    # Check all names before running the first benchmark
    try:
        descriptors = registry.select(selection.names)
    except UnknownLanguageError as exc:
        print("ERROR: %s" % exc, file=sys.stderr)
        print("Known languages: %s" % ', '.join(registry.names()),
              file=sys.stderr)
        sys.exit(1)

    with scratch_directory(args.keep_temp) as workdir:
        runner = Runner(workdir=workdir, verbose=args.verbose)
        results = runner.bench_all(descriptors, selection.count)

    display_report(results, args.table_format)


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    registry = build_registry()

    with catch_broken_pipe_error():
        if args.list:
            cmd_list(registry)
        else:
            cmd_bench(parser, args, registry)


if __name__ == "__main__":
    main()
