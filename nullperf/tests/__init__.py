import collections
import contextlib
import io
import shutil
import subprocess
import sys
import tempfile

from nullperf._utils import popen_communicate


@contextlib.contextmanager
def _capture_stream(name):
    old_stream = getattr(sys, name)
    try:
        stream = io.StringIO()
        setattr(sys, name, stream)
        yield stream
    finally:
        setattr(sys, name, old_stream)


def capture_stdout():
    return _capture_stream('stdout')


def capture_stderr():
    return _capture_stream('stderr')


@contextlib.contextmanager
def temporary_directory():
    tmpdir = tempfile.mkdtemp()
    try:
        yield tmpdir
    finally:
        shutil.rmtree(tmpdir)


ProcResult = collections.namedtuple('ProcResult', 'returncode stdout stderr')


def get_output(cmd, **kw):
    proc = subprocess.Popen(cmd,
                            stdout=subprocess.PIPE,
                            stderr=subprocess.PIPE,
                            universal_newlines=True,
                            **kw)
    stdout, stderr = popen_communicate(proc)
    return ProcResult(proc.returncode, stdout, stderr)


class FakeLauncher:
    """Launcher which records calls instead of spawning processes."""

    def __init__(self, version_output='fake 1.0\n'):
        self.version_output = version_output
        self.probes = []
        self.compiles = []
        self.calls = []

    def probe(self, shell_command):
        self.probes.append(shell_command)
        sys.stdout.write(self.version_output)
        return 0

    def compile(self, step, workdir):
        self.compiles.append((step, workdir))
        return 0

    def call(self, command):
        self.calls.append(command)
        return 0
