"""Diagnostic sinks used by the command line tool."""

import abc
import sys

_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


class ChartLog(abc.ABC):
    """Output/warning/error sink. Subclasses decide where messages go."""

    color = False

    @abc.abstractmethod
    def output(self, message):
        ...

    @abc.abstractmethod
    def warning(self, message):
        ...

    @abc.abstractmethod
    def error(self, message):
        ...


class ConsoleLog(ChartLog):
    def __init__(self, color=True, stdout=None, stderr=None):
        self.color = color
        self._stdout = stdout
        self._stderr = stderr

    # looked up per call; sys.stdout may be swapped after construction
    @property
    def stdout(self):
        return self._stdout or sys.stdout

    @property
    def stderr(self):
        return self._stderr or sys.stderr

    def _paint(self, code, message):
        if not self.color:
            return message
        return f"{code}{message}{_RESET}"

    def output(self, message):
        print(message, file=self.stdout)

    def warning(self, message):
        print(f"warning: {self._paint(_YELLOW, message)}", file=self.stderr)

    def error(self, message):
        print(f"error: {self._paint(_RED, message)}", file=self.stderr)


class NullLog(ChartLog):
    def output(self, message):
        pass

    def warning(self, message):
        pass

    def error(self, message):
        pass
