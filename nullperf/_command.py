import os.path
import subprocess
import sys

from nullperf._utils import format_command, popen_communicate, popen_killer


WORKDIR = '{workdir}'


def expand_workdir(arg, workdir):
    return arg.replace(WORKDIR, workdir)


def write_output(data, file=None):
    """Write the raw output of a child process into a text file."""
    if file is None:
        file = sys.stdout
    buffer = getattr(file, 'buffer', None)
    if buffer is not None:
        file.flush()
        buffer.write(data)
        buffer.flush()
    else:
        # io.StringIO has no binary buffer
        file.write(data.decode('utf-8', errors='backslashreplace'))
        file.flush()


class Command:
    """Program arguments, and optional data written into its stdin.

    Arguments can contain the "{workdir}" placeholder which is replaced
    with the scratch directory of the session by expand().
    """

    __slots__ = ('args', 'input')

    def __init__(self, args, input=None):
        args = tuple(args)
        if not args:
            raise ValueError("empty command")
        if input is not None and not isinstance(input, bytes):
            raise TypeError("input must be bytes, got %s"
                            % type(input).__name__)
        self.args = args
        self.input = input

    @property
    def program(self):
        return self.args[0]

    def expand(self, workdir):
        args = [expand_workdir(arg, workdir) for arg in self.args]
        return Command(args, self.input)

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return (self.args, self.input) == (other.args, other.input)

    def __hash__(self):
        return hash((self.args, self.input))

    def __str__(self):
        text = format_command(self.args)
        if self.input is not None:
            text += ' < stdin'
        return text

    def __repr__(self):
        return '<Command %s>' % self


class SourceFile:
    __slots__ = ('filename', 'content')

    def __init__(self, filename, content):
        if os.path.basename(filename) != filename:
            raise ValueError("source filename must not contain a directory: %r"
                             % filename)
        self.filename = filename
        self.content = content

    def write(self, workdir):
        path = os.path.join(workdir, self.filename)
        with open(path, "w", encoding="utf-8") as fp:
            fp.write(self.content)
        return path

    def __repr__(self):
        return '<SourceFile %s>' % self.filename


class CompileStep:
    """Write a no-op program into the scratch directory and compile it."""

    __slots__ = ('source', 'command')

    def __init__(self, source, command):
        self.source = source
        self.command = command

    def __repr__(self):
        return '<CompileStep %s: %s>' % (self.source.filename, self.command)


class ProcessLauncher:
    """Spawn child processes for the runner.

    The exit status of child processes is not checked: only the elapsed time
    matters. A program which cannot be executed at all is reported once
    on stderr.
    """

    def __init__(self, verbose=False):
        self.verbose = verbose
        self._reported = set()

    def _report_error(self, command, exc):
        program = command.program
        if program in self._reported:
            return
        self._reported.add(program)
        print("ERROR: failed to run %s: %s" % (command, exc),
              file=sys.stderr)

    def probe(self, shell_command):
        """Run a shell command and write its output into stdout."""
        proc = subprocess.Popen(shell_command,
                                shell=True,
                                stdin=subprocess.DEVNULL,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.STDOUT)
        output = popen_communicate(proc)[0]
        write_output(output)
        return proc.returncode

    def compile(self, step, workdir):
        step.source.write(workdir)
        command = step.command.expand(workdir)
        if self.verbose:
            print("Compile: %s" % command)

        # flush our buffer, compiler messages are written directly
        # into our stdout and stderr
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            proc = subprocess.Popen(command.args, cwd=workdir,
                                    stdin=subprocess.DEVNULL)
        except OSError as exc:
            self._report_error(command, exc)
            return None

        with popen_killer(proc):
            proc.wait()
        return proc.returncode

    def call(self, command):
        """Run a command until it completes.

        stdout is discarded, stderr is inherited.
        """
        if command.input is not None:
            stdin = subprocess.PIPE
        else:
            stdin = subprocess.DEVNULL
        try:
            proc = subprocess.Popen(command.args,
                                    stdin=stdin,
                                    stdout=subprocess.DEVNULL)
        except OSError as exc:
            self._report_error(command, exc)
            return None

        popen_communicate(proc, command.input)
        return proc.returncode
