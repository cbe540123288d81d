#!/usr/bin/env python3
"""Compare the startup time of Python with different command line flags."""
import sys
import tempfile

import nullperf


registry = nullperf.Registry()
version = '"%s" --version' % sys.executable
registry.register('python', version, nullperf.Command([sys.executable, '-c', 'pass']))
registry.register('python -S', version, nullperf.Command([sys.executable, '-S', '-c', 'pass']))
registry.register('python -I', version, nullperf.Command([sys.executable, '-I', '-c', 'pass']))
registry.freeze()

count = int(sys.argv[1]) if len(sys.argv) > 1 else 20
with tempfile.TemporaryDirectory(prefix='nullperf-') as workdir:
    runner = nullperf.Runner(workdir=workdir)
    results = runner.bench_all(registry, count)
nullperf.display_report(results)
