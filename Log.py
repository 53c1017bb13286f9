# Log.py -- Nested log output through an IndentWriter
#
# Everything logged inside a 'with logging(...)' block comes out one level
# deeper than the line that opened the block:
#
#     with logging('building', name='Foo'):
#         lo('field', 'x')
#
# prints
#
#     building name='Foo'
#         field x

from __future__ import annotations
from typing import Any, Callable, IO
import sys
from contextlib import contextmanager
import functools

from IndentWriter import IndentWriter, IndentStyle, default_style, indent


_logfile = IndentWriter.from_style(sys.stdout, default_style)

def log_to(f: IO, style: IndentStyle=default_style) -> IndentWriter:
    '''Sends all further log output to f, indented according to style.'''
    global _logfile
    _logfile = IndentWriter.from_style(f, style)
    return _logfile

def logfile() -> IndentWriter:
    return _logfile

def lo(*args, **kwargs) -> None:
    '''Prints one log line: args separated by spaces, then key=repr(value)
    for each keyword argument.'''
    pairs = [f'{k}={v!r}' for k, v in kwargs.items()]
    print(*args, *pairs, file=_logfile)

@contextmanager
def logging(*args, **kwargs):
    '''Logs args and kwargs with lo(), then indents the log for the body of
    the 'with' statement.'''
    lo(*args, **kwargs)
    with indent(_logfile) as f:
        yield f

def trace(func: Callable) -> Callable:
    '''Function decorator: logs each call with its arguments, indents
    whatever the call logs, and logs the return value afterward.'''
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        argstrings = [repr(a) for a in args]
        argstrings += [f'{k}={v!r}' for k, v in kwargs.items()]
        with logging(f"{func.__name__}({', '.join(argstrings)})"):
            result = func(*args, **kwargs)
        lo(f'-> {result!r}')
        return result
    return wrapper
