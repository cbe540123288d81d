VERSION = (1, 0, 0)
__version__ = '.'.join(map(str, VERSION))

__all__ = []

from nullperf._command import Command, CompileStep, SourceFile, ProcessLauncher  # noqa
__all__.extend(('Command', 'CompileStep', 'SourceFile', 'ProcessLauncher'))

from nullperf._registry import LanguageDescriptor, Registry, UnknownLanguageError  # noqa
__all__.extend(('LanguageDescriptor', 'Registry', 'UnknownLanguageError'))

from nullperf._languages import build_registry  # noqa
__all__.append('build_registry')

from nullperf._select import Selection, UsageError, resolve  # noqa
__all__.extend(('Selection', 'UsageError', 'resolve'))

from nullperf._bench import BenchResult  # noqa
__all__.append('BenchResult')

from nullperf._runner import Runner   # noqa
__all__.append('Runner')

from nullperf._cli import format_report, display_report  # noqa
__all__.extend(('format_report', 'display_report'))
