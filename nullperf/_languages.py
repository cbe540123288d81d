"""
Languages known by nullperf.

Each run step starts the runtime on an empty program and exits. Compiled
languages write their no-op program into the scratch directory ({workdir})
and compile it once per session.
"""
import os.path

from nullperf._command import Command, CompileStep, SourceFile
from nullperf._registry import Registry
from nullperf._utils import shell_quote


GOTIP_ROOT_ENV = 'NULLPERF_GOTIP_ROOT'
DEFAULT_GOTIP_ROOT = os.path.join('~', 'sdk', 'gotip')

C_SOURCE = SourceFile('null.c', 'int main(void)\n{\n    return 0;\n}\n')
GO_SOURCE = SourceFile('null.go', 'package main\n\nfunc main() {\n}\n')
JAVA_SOURCE = SourceFile('Null.java',
                         'class Null {\n'
                         '    public static void main(String[] args) {\n'
                         '    }\n'
                         '}\n')
RUST_SOURCE = SourceFile('null.rs', 'fn main() {\n}\n')


def _register_interpreters(registry):
    registry.register('bash', 'bash --version | head -n 1',
                      Command(['bash', '-c', ':']))
    registry.register('lua', 'lua -v 2>&1',
                      Command(['lua', '-e', '']))
    registry.register('node', 'node --version',
                      Command(['node', '-e', '']))
    registry.register('perl', """perl -e 'print "$^V\\n"'""",
                      Command(['perl', '-e', '']))
    registry.register('php', 'php --version | head -n 1',
                      Command(['php', '-r', '']))
    registry.register('python2', 'python2 --version 2>&1',
                      Command(['python2', '-c', 'pass']))
    registry.register('python3', 'python3 --version 2>&1',
                      Command(['python3', '-c', 'pass']))
    registry.register('ruby', 'ruby --version',
                      Command(['ruby', '-e', '']))
    # tclsh reads the program from stdin
    registry.register('tcl', "echo 'puts [info patchlevel]' | tclsh",
                      Command(['tclsh'], input=b''))


def _register_compilers(registry):
    registry.register('c', 'cc --version | head -n 1',
                      Command(['{workdir}/null_c']),
                      CompileStep(C_SOURCE,
                                  Command(['cc', '-O2', '-o', '{workdir}/null_c',
                                           '{workdir}/null.c'])))
    registry.register('go', 'go version',
                      Command(['{workdir}/null_go']),
                      CompileStep(GO_SOURCE,
                                  Command(['go', 'build', '-o', '{workdir}/null_go',
                                           '{workdir}/null.go'])))
    registry.register('java', 'java -version 2>&1',
                      Command(['java', '-cp', '{workdir}', 'Null']),
                      CompileStep(JAVA_SOURCE,
                                  Command(['javac', '-d', '{workdir}',
                                           '{workdir}/Null.java'])))
    registry.register('rust', 'rustc --version',
                      Command(['{workdir}/null_rs']),
                      CompileStep(RUST_SOURCE,
                                  Command(['rustc', '-O', '-o', '{workdir}/null_rs',
                                           '{workdir}/null.rs'])))


def get_gotip_root():
    root = os.environ.get(GOTIP_ROOT_ENV)
    if not root:
        root = DEFAULT_GOTIP_ROOT
    return os.path.expanduser(root)


def register_gotip(registry, root):
    """Register the development Go toolchain if it is installed in root.

    Return the descriptor, or None if root/bin/go is not an executable file.
    """
    go = os.path.join(root, 'bin', 'go')
    if not (os.path.isfile(go) and os.access(go, os.X_OK)):
        return None

    return registry.register('gotip', '%s version' % shell_quote(go),
                             Command(['{workdir}/null_gotip']),
                             CompileStep(GO_SOURCE,
                                         Command([go, 'build', '-o',
                                                  '{workdir}/null_gotip',
                                                  '{workdir}/null.go'])))


def build_registry(gotip_root=None):
    if gotip_root is None:
        gotip_root = get_gotip_root()

    registry = Registry()
    _register_interpreters(registry)
    _register_compilers(registry)
    register_gotip(registry, gotip_root)
    return registry.freeze()
