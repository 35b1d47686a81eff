"""Leveled logging to several text streams."""

import sys
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


_LEVEL_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARN: "WARN ",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}


class Logger:
    """Writes messages at or above a minimum level to every attached stream.

    Calling the logger with a level selects the level of the next messages:
    logger(LogLevel.WARN).log("message").
    """

    def __init__(self, min_level):
        self.min_level = min_level
        self.level = min_level
        self._outs = []

    def __call__(self, level):
        self.level = level
        return self

    def contains(self, out):
        return any(stream is out for stream in self._outs)

    def add_stream(self, out):
        """Attach a stream, or each stream of a list or tuple, once."""
        if isinstance(out, (list, tuple)):
            for stream in out:
                self.add_stream(stream)
        elif not self.contains(out):
            self._outs.append(out)
        return self

    def remove_stream(self, out):
        """Detach a stream, or each stream of a list or tuple."""
        if isinstance(out, (list, tuple)):
            for stream in out:
                self.remove_stream(stream)
        else:
            self._outs = [stream for stream in self._outs if stream is not out]
        return self

    def level_name(self):
        return _LEVEL_NAMES.get(self.level, "UNKNW")

    def log(self, message):
        """Write a message to every stream if its level is high enough."""
        if self.level >= self.min_level:
            for stream in self._outs:
                self._print(str(message), stream)
        return self

    def _print(self, message, stream):
        stream.write(f"> [{self.level_name()}] : {message}\n\r")


class FileLogger(Logger):
    """Logs to a file opened for appending and to standard output."""

    def __init__(self, filename, min_level):
        super().__init__(min_level)
        self._file = open(filename, "a", encoding="utf-8")
        self.add_stream(self._file)
        self.add_stream(sys.stdout)

    def close(self):
        self.remove_stream(self._file)
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False