import contextlib
import os
from shlex import quote as shell_quote   # noqa
from shutil import which


def comma_separated(values):
    values = [value.strip() for value in values.split(',')]
    return list(filter(None, values))


def unique(items):
    """Drop duplicated items, keep the order of the first occurrences."""
    seen = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def format_command(args):
    return ' '.join(map(shell_quote, args))


def find_program(program):
    if os.path.dirname(program):
        if os.path.isfile(program) and os.access(program, os.X_OK):
            return program
        return None
    return which(program)


@contextlib.contextmanager
def popen_killer(proc):
    try:
        yield
    except:   # noqa: E722
        # Close pipes
        if proc.stdin:
            proc.stdin.close()
        if proc.stdout:
            proc.stdout.close()
        if proc.stderr:
            proc.stderr.close()
        try:
            proc.kill()
        except OSError:
            # process already terminated
            pass
        proc.wait()
        raise


def popen_communicate(proc, input=None):
    with popen_killer(proc):
        return proc.communicate(input)
