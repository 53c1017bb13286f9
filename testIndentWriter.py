# testIndentWriter.py -- Unit tests for IndentWriter.py

import unittest
from io import StringIO, BytesIO

from IndentWriter import IndentWriter, IndentStyle, default_style, indent
from exc import BadIndentStep, BadIndentSymbol, NotAnIndentWriter


class FailingSink:
    '''Records each write, and raises 'exc' once 'ok_writes' writes have
    been made.'''

    def __init__(self, ok_writes: int):
        self.ok_writes = ok_writes
        self.writes = []
        self.exc = OSError('disk full')

    def write(self, s):
        if len(self.writes) >= self.ok_writes:
            raise self.exc
        self.writes.append(s)
        return len(s)

class CountingSink(StringIO):

    def __init__(self):
        super().__init__()
        self.num_flushes = 0

    def flush(self):
        self.num_flushes += 1
        super().flush()

class TestIndentWriter(unittest.TestCase):

    def test_first_line_without_indent(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        w.write('first line')
        self.assertEqual(sio.getvalue(), 'first line')

    def test_first_line_with_one_indent(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        w.increase()
        w.write('first line')
        self.assertEqual(sio.getvalue(), '    first line')

    def test_chained_increase(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        self.assertIs(w.increase().increase().increase(), w)
        w.write('first line')
        self.assertEqual(sio.getvalue(), ' ' * 12 + 'first line')

    def test_multiple_lines(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        w.write('1 first line\n')
        w.increase()
        w.write('second line\n')
        w.increase()
        w.increase()
        w.write('third line\n')
        w.decrease()
        w.write('fourth line\n')
        expect = '''1 first line
    second line
            third line
        fourth line
'''
        self.assertEqual(sio.getvalue(), expect)

    def test_continuing_lines(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        w.increase().increase()
        w.write('fifth line')
        w.write('also fifth line\n')
        w.write('sixth line')
        self.assertEqual(
            sio.getvalue(),
            '        fifth linealso fifth line\n        sixth line'
        )

    def test_fragment_then_fragment(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('a')
        w.write('b')
        self.assertEqual(sio.getvalue(), '    ab')
        self.assertFalse(w.at_line_start)

    def test_newline_then_fragment(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('a\n')
        self.assertTrue(w.at_line_start)
        w.write('b')
        self.assertEqual(sio.getvalue(), '    a\n    b')

    def test_empty_lines(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('first line\n\nsecond line')
        self.assertEqual(sio.getvalue(), '    first line\n\n    second line')

    def test_empty_lines_across_writes(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('a\n')
        w.write('\n')
        w.write('\nb\n\n')
        w.write('c')
        self.assertEqual(sio.getvalue(), '    a\n\n\n    b\n\n    c')

    def test_leading_newline_on_fresh_writer(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('\nfirst line')
        self.assertEqual(sio.getvalue(), '\n    first line')

    def test_lone_newline_then_content(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('\n')
        w.write('x')
        self.assertEqual(sio.getvalue(), '\n    x')

    def test_line_start_cleared_after_content(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.write('a\n\nb')
        w.write('c')
        self.assertEqual(sio.getvalue(), '    a\n\n    bc')

    def test_empty_write(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        self.assertEqual(w.write(''), 0)
        self.assertEqual(sio.getvalue(), '')
        self.assertTrue(w.at_line_start)
        self.assertFalse(w.wrote_any)

    def test_return_value_excludes_indentation(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        self.assertEqual(w.write('a\n\nb'), 4)
        self.assertEqual(w.write('\n'), 1)

    def test_decrease_at_zero(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        self.assertIs(w.decrease(), w)
        self.assertEqual(w.depth, 0)
        w.write('first line\n')
        self.assertEqual(sio.getvalue(), 'first line\n')

    def test_increase_saturates(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        for _ in range(300):
            w.increase()
        self.assertEqual(w.depth, 255)
        w.write('first line\n')
        self.assertEqual(sio.getvalue(), ' ' * 255 + 'first line\n')

    def test_decrease_from_saturated(self):
        w = IndentWriter(StringIO(), 100, ' ')
        w.increase().increase().increase()
        self.assertEqual(w.depth, 255)
        w.decrease()
        self.assertEqual(w.depth, 155)
        w.decrease().decrease()
        self.assertEqual(w.depth, 0)

    def test_custom_indent(self):
        sio = StringIO()
        w = IndentWriter(sio, 2, '.')
        w.increase()
        w.write('first line')
        w.increase()
        w.write('\nsecond line')
        self.assertEqual(sio.getvalue(), '..first line\n....second line')

    def test_one_increase_gives_one_step(self):
        for step in [0, 1, 2, 4, 255]:
            for symbol in [' ', '\t', '-', '·']:
                sio = StringIO()
                w = IndentWriter(sio, step, symbol)
                w.increase()
                w.write('x')
                self.assertEqual(sio.getvalue(), symbol * step + 'x')

    def test_zero_step(self):
        sio = StringIO()
        w = IndentWriter(sio, 0, '#')
        for _ in range(10):
            w.increase()
        w.write('a\nb\n\nc')
        self.assertEqual(sio.getvalue(), 'a\nb\n\nc')
        self.assertEqual(w.depth, 0)

    def test_print(self):
        sio = StringIO()
        f = IndentWriter.from_writer(sio)
        print('Zero', file=f)
        with indent(f):
            print('Indented\nonce', file=f)
            with indent(f):
                print('Indented twice', file=f)
            print('Back to once', file=f)
        print('Back to nothing', file=f)

        expect = '''Zero
    Indented
    once
        Indented twice
    Back to once
Back to nothing
'''
        self.assertEqual(sio.getvalue(), expect)

    def test_with_restores_depth_after_exception(self):
        w = IndentWriter.from_writer(StringIO())
        with self.assertRaises(RuntimeError):
            with w:
                self.assertEqual(w.depth, 4)
                raise RuntimeError('body failed')
        self.assertEqual(w.depth, 0)

    def test_indent_rejects_other_objects(self):
        sio = StringIO()
        with self.assertRaises(NotAnIndentWriter) as cm:
            indent(sio)
        self.assertIs(cm.exception.obj, sio)
        self.assertIsInstance(cm.exception, ValueError)

    def test_writelines(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio).increase()
        w.writelines(['a\n', 'b', '\n', 'c\n'])
        self.assertEqual(sio.getvalue(), '    a\n    b\n    c\n')

    def test_wrote_any(self):
        w = IndentWriter.from_writer(StringIO())
        self.assertFalse(w.wrote_any)
        w.write('x')
        self.assertTrue(w.wrote_any)
        w.wrote_any = False
        w.write('\n')
        self.assertTrue(w.wrote_any)

    def test_flush(self):
        sink = CountingSink()
        w = IndentWriter.from_writer(sink)
        w.write('x')
        w.flush()
        self.assertEqual(sink.num_flushes, 1)

    def test_does_not_close_sink(self):
        sio = StringIO()
        w = IndentWriter.from_writer(sio)
        w.write('x')
        del w
        self.assertFalse(sio.closed)
        self.assertEqual(sio.getvalue(), 'x')

    def test_writable(self):
        self.assertTrue(IndentWriter.from_writer(StringIO()).writable())

    def test_repr(self):
        w = IndentWriter(StringIO(), 2, '.').increase()
        self.assertEqual(
            repr(w), "IndentWriter(step=2, symbol='.', depth=2)"
        )

class TestBinarySink(unittest.TestCase):

    def test_bytes(self):
        bio = BytesIO()
        w = IndentWriter(bio, 2, '.').increase()
        self.assertEqual(w.write(b'a\n\nb'), 4)
        w.write(bytearray(b'c\n'))
        w.write(memoryview(b'd'))
        self.assertEqual(bio.getvalue(), b'..a\n\n..bc\n..d')

    def test_non_ascii_symbol(self):
        bio = BytesIO()
        w = IndentWriter(bio, 2, '·').increase()
        w.write(b'x')
        self.assertEqual(bio.getvalue(), '··x'.encode('utf-8'))

    def test_wrong_type_for_sink(self):
        w = IndentWriter.from_writer(StringIO())
        with self.assertRaises(TypeError):
            w.write(b'x')

    def test_not_text(self):
        w = IndentWriter.from_writer(StringIO())
        with self.assertRaises(TypeError):
            w.write(42)

class ShortWriteSink:
    '''Takes every piece whole, but reports accepting at most 'limit' units
    of each, like a raw file that does partial writes.'''

    def __init__(self, limit: int):
        self.limit = limit
        self.pieces = []

    def write(self, s):
        self.pieces.append(s)
        return min(len(s), self.limit)

class SilentSink:
    '''A sink whose write() returns None.'''

    def __init__(self):
        self.pieces = []

    def write(self, s):
        self.pieces.append(s)

class TestSinkCounts(unittest.TestCase):

    def test_count_is_what_sink_reports(self):
        sink = ShortWriteSink(limit=1)
        w = IndentWriter.from_writer(sink).increase()
        self.assertEqual(w.write('abc\nde'), 3)
        self.assertEqual(sink.pieces, ['    ', 'abc', '\n', '    ', 'de'])

    def test_none_from_sink_counts_whole_piece(self):
        sink = SilentSink()
        w = IndentWriter.from_writer(sink).increase()
        self.assertEqual(w.write('ab\n\ncd'), 6)
        self.assertEqual(''.join(sink.pieces), '    ab\n\n    cd')

class TestSinkFailure(unittest.TestCase):

    def test_error_propagates_unchanged(self):
        sink = FailingSink(ok_writes=2)
        w = IndentWriter.from_writer(sink)
        with self.assertRaises(OSError) as cm:
            w.write('a\nb\nc')
        self.assertIs(cm.exception, sink.exc)
        self.assertEqual(sink.writes, ['a', '\n'])
        self.assertFalse(w.at_line_start)

    def test_error_while_indenting(self):
        sink = FailingSink(ok_writes=0)
        w = IndentWriter.from_writer(sink).increase()
        with self.assertRaises(OSError):
            w.write('a')
        self.assertEqual(sink.writes, [])
        self.assertTrue(w.at_line_start)

class TestConfiguration(unittest.TestCase):

    def test_default_style(self):
        self.assertEqual(default_style, IndentStyle(4, ' '))
        w = IndentWriter.from_writer(StringIO())
        self.assertEqual(w.style, default_style)
        self.assertEqual(w.depth, 0)
        self.assertTrue(w.at_line_start)

    def test_from_style(self):
        sio = StringIO()
        w = IndentWriter.from_style(sio, IndentStyle(step=1, symbol='\t'))
        with w:
            w.write('x\n')
        w.write('y\n')
        self.assertEqual(sio.getvalue(), '\tx\ny\n')

    def test_bad_step(self):
        for step in [-1, 256, 2.0, '4', True, None]:
            with self.assertRaises(BadIndentStep) as cm:
                IndentWriter(StringIO(), step, ' ')
            self.assertIsInstance(cm.exception, ValueError)
            self.assertIs(cm.exception.step, step)

    def test_bad_symbol(self):
        for symbol in ['', '--', 4, None, b' ']:
            with self.assertRaises(BadIndentSymbol):
                IndentWriter(StringIO(), 4, symbol)

    def test_bad_style(self):
        with self.assertRaises(BadIndentStep):
            IndentStyle(step=300)
        with self.assertRaises(BadIndentSymbol):
            IndentStyle(symbol='ab')

    def test_exception_repr(self):
        self.assertEqual(repr(BadIndentStep(300)), 'BadIndentStep(step=300)')
        self.assertEqual(str(BadIndentStep(300)),
            'Indent step must be an int from 0 to 255, not 300.')
