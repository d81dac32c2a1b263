import sys
from typing import List, TextIO, Tuple

OUTPUT_TITLE = 'Output'
ERROR_TITLE = 'Error'


class ReportSink:
    """Receives the rendered output of a run, or an error message, for a human."""

    def report(self, message: str, title: str = OUTPUT_TITLE) -> None:
        raise NotImplementedError


class ConsoleSink(ReportSink):
    """Writes output to stdout and errors to stderr."""

    def __init__(self, out: TextIO = None, err: TextIO = None):
        self.out = out
        self.err = err

    def report(self, message: str, title: str = OUTPUT_TITLE) -> None:
        if title == ERROR_TITLE:
            print(f"{title}: {message}", file=self.err or sys.stderr)
        else:
            # output already ends with a line terminator per statement
            (self.out or sys.stdout).write(message)


class CollectingSink(ReportSink):
    """Keeps every report it is given, in order."""

    def __init__(self):
        self.reports: List[Tuple[str, str]] = []

    def report(self, message: str, title: str = OUTPUT_TITLE) -> None:
        self.reports.append((title, message))

    @property
    def outputs(self) -> List[str]:
        return [message for title, message in self.reports if title == OUTPUT_TITLE]

    @property
    def errors(self) -> List[str]:
        return [message for title, message in self.reports if title == ERROR_TITLE]
