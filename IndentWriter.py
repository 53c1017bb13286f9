# IndentWriter.py -- A wrapper for a file object that indents every line
# written through it

from __future__ import annotations
from typing import Union, Iterable, Any, ClassVar, Tuple, IO
from contextlib import AbstractContextManager
from dataclasses import dataclass
from sys import stdout

from exc import BadIndentStep, BadIndentSymbol, NotAnIndentWriter
from util import clip, repr_str


Text = Union[str, bytes, bytearray, memoryview]

max_depth = 255

def check_step(step: Any) -> int:
    if (
        not isinstance(step, int)
        or
        isinstance(step, bool)
        or
        not 0 <= step <= max_depth
    ):
        raise BadIndentStep(step)
    return step

def check_symbol(symbol: Any) -> str:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise BadIndentSymbol(symbol)
    return symbol

@dataclass(frozen=True)
class IndentStyle:
    '''How an IndentWriter indents: 'step' copies of 'symbol' per level.'''
    step: int = 4
    symbol: str = ' '

    def __post_init__(self):
        check_step(self.step)
        check_symbol(self.symbol)

default_style = IndentStyle()

class IndentWriter(AbstractContextManager):
    '''A wrapper for a file object that adds automatic indentation of lines.

    Every non-empty line written through the IndentWriter is preceded by
    .depth copies of .symbol. Lines with no content get no indentation, so
    blank lines stay blank. .increase() and .decrease() change .depth by
    .step, saturating at 0 and .max_depth. The IndentWriter is also a context
    manager: entering a 'with' block increases the depth and leaving it
    decreases the depth.

    The sink is borrowed, not owned. The IndentWriter never closes it and
    holds no buffered text, so it can be dropped at any time. The sink must
    outlive the IndentWriter and nothing else should write to it in between.
    Works with text sinks (write str) and binary sinks (write bytes); the
    indentation is encoded as UTF-8 for binary sinks.

    The IndentWriter has a .wrote_any member, which is True iff at least one
    character has been written to the object since it was created. It's OK
    to reset it to False from the outside.'''

    max_depth: ClassVar[int] = max_depth

    def __init__(self, sink: IO, step: int=4, symbol: str=' '):
        self.sink = sink
        self.step = check_step(step)
        self.symbol = check_symbol(symbol)
        self.depth = 0
        self.at_line_start = True
        self.wrote_any = False

    @classmethod
    def from_writer(cls, sink: IO) -> IndentWriter:
        '''An IndentWriter with the default style: four spaces per level.'''
        return cls(sink, default_style.step, default_style.symbol)

    @classmethod
    def from_style(cls, sink: IO, style: IndentStyle) -> IndentWriter:
        return cls(sink, style.step, style.symbol)

    @property
    def style(self) -> IndentStyle:
        return IndentStyle(self.step, self.symbol)

    def increase(self) -> IndentWriter:
        self.depth = clip(0, self.max_depth, self.depth + self.step)
        return self

    def decrease(self) -> IndentWriter:
        self.depth = clip(0, self.max_depth, self.depth - self.step)
        return self

    def write(self, s: Text) -> int:
        '''Writes s to the sink, indenting each line that has any content.
        Returns the number of characters (or bytes) of s the sink accepted,
        not counting indentation. For sinks whose write() returns None, that
        is taken to be everything passed to it.'''
        newline, s = self.split_args(s)
        if not s:
            return 0
        self.wrote_any = True
        num_written = 0
        for n, line in enumerate(s.split(newline)):
            if n:
                num_written += self.forward(newline)
                self.at_line_start = True
            # Indentation waits for content, so a blank line gets none even
            # at the start of a write.
            if line:
                if self.at_line_start:
                    self.write_indent(newline)
                    self.at_line_start = False
                num_written += self.forward(line)
        return num_written

    def forward(self, piece: Union[str, bytes]) -> int:
        '''Writes piece to the sink and returns how much of it the sink
        says it took.'''
        num_taken = self.sink.write(piece)
        return len(piece) if num_taken is None else num_taken

    def writelines(self, lines: Iterable[Text]) -> None:
        for line in lines:
            self.write(line)

    def write_indent(self, newline: Union[str, bytes]) -> None:
        '''Writes the indentation for the current depth to the sink.'''
        if not self.depth:
            return
        indentation = self.symbol * self.depth
        if isinstance(newline, bytes):
            self.sink.write(indentation.encode('utf-8'))
        else:
            self.sink.write(indentation)

    @classmethod
    def split_args(cls, s: Any) -> Tuple[Union[str, bytes], Any]:
        '''Returns the newline that matches the type of s, and s in a form
        that has a .split() method.'''
        if isinstance(s, str):
            return '\n', s
        elif isinstance(s, (bytes, bytearray)):
            return b'\n', s
        elif isinstance(s, memoryview):
            return b'\n', s.tobytes()
        else:
            raise TypeError(
                f'write() argument must be str or bytes-like, not {type(s).__name__}'
            )

    def flush(self) -> None:
        self.sink.flush()

    def writable(self) -> bool:
        return True

    def __enter__(self) -> IndentWriter:
        return self.increase()

    def __exit__(self, *args, **kwargs) -> None:
        self.decrease()
        return None

    def __repr__(self):
        return repr_str(self.__class__.__name__, [
            ('step', self.step),
            ('symbol', self.symbol),
            ('depth', self.depth)
        ])

def indent(f: IndentWriter) -> IndentWriter:
    '''A function to make 'with' statements more readable: with indent(f): ...

    f must be an IndentWriter object.'''
    if not isinstance(f, IndentWriter):
        raise NotAnIndentWriter(f)
    return f

def run():
    f = IndentWriter.from_writer(stdout)
    print('Blah', file=f)
    with indent(f):
        print('Indented\nGah', file=f)
        with indent(f):
            print('Indented twice', file=f)
        print('Back to once', file=f)
    print('Back to nothing', file=f)


if __name__ == '__main__':
    run()
