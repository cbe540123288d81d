import time

from nullperf._bench import BenchResult
from nullperf._cli import display_title
from nullperf._command import WORKDIR, ProcessLauncher
from nullperf._formatter import format_seconds


class Runner:
    """Benchmark languages one by one.

    count > 0 runs the run step count times. count <= 0 runs the run step
    until abs(count) seconds of measured time are spent: it always runs at
    least once.
    """

    def __init__(self, launcher=None, workdir=None, verbose=False):
        if launcher is None:
            launcher = ProcessLauncher(verbose=verbose)
        self.launcher = launcher
        self.workdir = workdir
        self.verbose = verbose

    def _get_workdir(self, descriptor):
        if self.workdir is None:
            raise ValueError("%s: a scratch directory is required "
                             "to compile and run the no-op program"
                             % descriptor.name)
        return self.workdir

    def _expand(self, command, descriptor):
        if any(WORKDIR in arg for arg in command.args):
            command = command.expand(self._get_workdir(descriptor))
        return command

    def _bench_loops(self, command, count):
        call = self.launcher.call
        range_it = range(count)

        start_time = time.perf_counter()
        for _ in range_it:
            call(command)
        dt = time.perf_counter() - start_time

        return (count, dt)

    def _bench_time_budget(self, command, budget):
        call = self.launcher.call
        iterations = 0
        elapsed = 0.0
        while True:
            start_time = time.perf_counter()
            call(command)
            elapsed += time.perf_counter() - start_time
            iterations += 1
            if elapsed >= budget:
                break
        return (iterations, elapsed)

    def run(self, descriptor, count):
        name = descriptor.name
        display_title(name, level=2)
        self.launcher.probe(descriptor.version)

        if descriptor.compile is not None:
            self.launcher.compile(descriptor.compile,
                                  self._get_workdir(descriptor))

        command = self._expand(descriptor.run, descriptor)
        if count > 0:
            iterations, elapsed = self._bench_loops(command, count)
        else:
            budget = abs(count)
            if self.verbose:
                print("Run %s during %s" % (command, format_seconds(budget)))
            iterations, elapsed = self._bench_time_budget(command, budget)

        result = BenchResult(name, iterations, elapsed)
        if self.verbose:
            print(result.format())
        print()
        return result

    def bench_all(self, descriptors, count):
        results = {}
        for descriptor in descriptors:
            if descriptor.name in results:
                raise ValueError("language %r is benchmarked twice"
                                 % descriptor.name)
            results[descriptor.name] = self.run(descriptor, count)
        return results
