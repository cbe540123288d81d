import contextlib
import errno
import sys

from nullperf._formatter import format_float


REPORT_HEADERS = ('LANGUAGE', 'CALLS/s', 'NULL(ms)', 'SCORE')
TABLE_FORMATS = ('text', 'rest', 'md')


def empty_line(lines):
    if lines:
        lines.append('')


def format_title(title, level=1, lines=None):
    if lines is None:
        lines = []

    empty_line(lines)

    lines.append(title)
    if level == 1:
        char = '='
    else:
        char = '-'
    lines.append(char * len(title))
    return lines


def display_title(title, level=1):
    for line in format_title(title, level):
        print(line)
    print()


class _Table:
    def __init__(self, headers, rows):
        self.headers = headers
        self.rows = rows
        self.widths = [len(header) for header in self.headers]
        for row in self.rows:
            for column, cell in enumerate(row):
                self.widths[column] = max(self.widths[column], len(cell))

    def _render_cells(self, row):
        # left-align the first column (names), right-align numbers
        cells = []
        for column, (width, cell) in enumerate(zip(self.widths, row)):
            if column:
                cells.append(cell.rjust(width))
            else:
                cells.append(cell.ljust(width))
        return cells


class TextTable(_Table):
    def _render_row(self, row):
        return ' | '.join(self._render_cells(row)).rstrip()

    def render(self, write_line):
        write_line(self._render_row(self.headers))
        for row in self.rows:
            write_line(self._render_row(row))


class ReSTTable(_Table):
    def _render_line(self, char='-'):
        parts = ['']
        for width in self.widths:
            parts.append(char * (width + 2))
        parts.append('')
        return '+'.join(parts)

    def _render_row(self, row):
        parts = ['']
        for cell in self._render_cells(row):
            parts.append(' %s ' % cell)
        parts.append('')
        return '|'.join(parts)

    def render(self, write_line):
        write_line(self._render_line('-'))
        write_line(self._render_row(self.headers))
        write_line(self._render_line('='))
        for row in self.rows:
            write_line(self._render_row(row))
            write_line(self._render_line('-'))


class MarkDownTable(_Table):
    def _render_line(self, char='-'):
        parts = ['']
        for idx, width in enumerate(self.widths):
            if idx == 0:
                parts.append(char * (width + 2))
            else:
                parts.append(f' {char * (width - 1)}: ')
        parts.append('')
        return '|'.join(parts)

    def _render_row(self, row):
        parts = ['']
        for cell in self._render_cells(row):
            parts.append(" %s " % cell)
        parts.append('')
        return '|'.join(parts)

    def render(self, write_line):
        write_line(self._render_row(self.headers))
        write_line(self._render_line('-'))
        for row in self.rows:
            write_line(self._render_row(row))


TABLES = {
    'text': TextTable,
    'rest': ReSTTable,
    'md': MarkDownTable,
}


def compute_score(per_call_ms, fastest_ms):
    if not fastest_ms:
        # the fastest language took no measurable time
        if not per_call_ms:
            return 1.0
        return float('inf')
    return per_call_ms / fastest_ms


def sort_results(results):
    """Sort results from the fastest to the slowest language.

    results is a mapping: language name => BenchResult.
    """
    return sorted(results.values(), key=lambda result: result.per_call_ms())


def format_report_rows(results):
    ranked = sort_results(results)
    if not ranked:
        return []

    # Pre-pass: the score of each row is relative to the fastest language,
    # which is also the first row since rows are sorted by per call time
    fastest_ms = min(result.per_call_ms() for result in ranked)

    rows = []
    for result in ranked:
        per_call_ms = result.per_call_ms()
        rows.append((result.name,
                     format_float(result.calls_per_sec()),
                     format_float(per_call_ms),
                     format_float(compute_score(per_call_ms, fastest_ms))))
    return rows


def format_report(results, table_format='text', lines=None):
    if lines is None:
        lines = []

    rows = format_report_rows(results)
    if not rows:
        return lines

    try:
        table_cls = TABLES[table_format]
    except KeyError:
        raise ValueError("unknown table format: %r" % table_format) from None
    table = table_cls(REPORT_HEADERS, rows)
    table.render(lines.append)
    return lines


def display_report(results, table_format='text'):
    for line in format_report(results, table_format):
        print(line)


@contextlib.contextmanager
def catch_broken_pipe_error(file=None):
    if file is None:
        files = [sys.stdout, sys.stderr]
    else:
        files = [file]

    try:
        for file in files:
            file.flush()

        yield

        # Flush files to be able to catch a broken pipe error if the pipe
        # was closed by the consumer
        for file in files:
            file.flush()
    except IOError as exc:
        if exc.errno != errno.EPIPE:
            raise
        # got a broken pipe error: ignore it

        # explicitly close files to prevent broken pipe error on implicit
        # close at exit which would log the error:
        # "Exception ignored in: ... BrokenPipeError: ..."
        for file in files:
            try:
                file.close()
            except IOError:
                pass
