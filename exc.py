# exc.py -- Exceptions raised by indentwriter

from dataclasses import dataclass
from typing import Any


class IndentError(Exception):
    '''Base class for errors in how an IndentWriter is set up or used.
    Errors from the sink are never wrapped in these.'''
    pass

@dataclass
class BadIndentStep(IndentError, ValueError):
    step: Any

    def __str__(self):
        return f'Indent step must be an int from 0 to 255, not {self.step!r}.'

@dataclass
class BadIndentSymbol(IndentError, ValueError):
    symbol: Any

    def __str__(self):
        return f'Indent symbol must be a single character, not {self.symbol!r}.'

@dataclass
class NotAnIndentWriter(IndentError, ValueError):
    obj: Any

    def __str__(self):
        return f'Object must be an instance of IndentWriter: {self.obj!r}'
