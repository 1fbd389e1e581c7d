"""
Read Properties Logger
Leveled console logging for discovery, parsing and resolution traces.

Everything goes to stderr so stdout stays reserved for workflow commands.
"""
import os
import sys
from typing import Literal, Any

LogLevel = Literal['silent', 'error', 'warn', 'info', 'debug', 'trace']

LOG_LEVELS = {
    'silent': 0,
    'error': 1,
    'warn': 2,
    'info': 3,
    'debug': 4,
    'trace': 5
}


def _initial_level() -> LogLevel:
    env_level = os.getenv('READ_PROPERTIES_LOG_LEVEL', '').lower()
    if env_level in LOG_LEVELS:
        return env_level  # type: ignore
    # Runner step debug logging
    if os.getenv('RUNNER_DEBUG', '') == '1':
        return 'debug'
    return 'info'


_current_level: LogLevel = _initial_level()

PREFIX = os.getenv('READ_PROPERTIES_LOG_PREFIX', '[read-properties]')

def get_log_level() -> LogLevel:
    return _current_level

def set_log_level(level: LogLevel) -> None:
    global _current_level
    if level in LOG_LEVELS:
        _current_level = level


class ReadPropertiesLogger:
    def error(self, message: str, *args: Any) -> None: ...
    def warn(self, message: str, *args: Any) -> None: ...
    def info(self, message: str, *args: Any) -> None: ...
    def debug(self, message: str, *args: Any) -> None: ...
    def trace(self, message: str, *args: Any) -> None: ...


class ConsoleLogger(ReadPropertiesLogger):
    def _log(self, level: LogLevel, message: str, *args: Any) -> None:
        if LOG_LEVELS[level] > LOG_LEVELS[_current_level]:
            return
        print(f"{PREFIX} {message}", *args, file=sys.stderr)

    def error(self, message: str, *args: Any) -> None:
        self._log('error', message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._log('warn', message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._log('info', message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self._log('debug', message, *args)

    def trace(self, message: str, *args: Any) -> None:
        self._log('trace', message, *args)


_logger_instance = ConsoleLogger()

def get_logger() -> ReadPropertiesLogger:
    return _logger_instance
