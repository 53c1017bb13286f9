# testLog.py -- Unit tests for Log.py

import unittest
import sys
from io import StringIO

from IndentWriter import IndentStyle
from Log import lo, log_to, logfile, logging, trace


@trace
def add(a, b):
    lo('adding')
    return a + b

class TestLog(unittest.TestCase):

    def setUp(self):
        self.sio = StringIO()
        log_to(self.sio)

    def tearDown(self):
        log_to(sys.stdout)

    def test_lo(self):
        lo('plain')
        lo('with', x=1, name='a')
        self.assertEqual(self.sio.getvalue(), "plain\nwith x=1 name='a'\n")

    def test_nested_logging(self):
        with logging('outer'):
            lo('one')
            with logging('inner', n=2):
                lo('two\nlines')
            lo('back')
        lo('done')
        expect = '''outer
    one
    inner n=2
        two
        lines
    back
done
'''
        self.assertEqual(self.sio.getvalue(), expect)
        self.assertEqual(logfile().depth, 0)

    def test_logging_yields_logfile(self):
        with logging('top') as f:
            self.assertIs(f, logfile())
            print('direct', file=f)
        self.assertEqual(self.sio.getvalue(), 'top\n    direct\n')

    def test_logging_restores_depth_after_exception(self):
        with self.assertRaises(KeyError):
            with logging('failing'):
                raise KeyError('x')
        self.assertEqual(logfile().depth, 0)

    def test_trace(self):
        self.assertEqual(add(2, b=3), 5)
        self.assertEqual(
            self.sio.getvalue(), 'add(2, b=3)\n    adding\n-> 5\n'
        )

    def test_log_to_with_style(self):
        sio = StringIO()
        log_to(sio, IndentStyle(2, '.'))
        with logging('top'):
            lo('child')
        self.assertEqual(sio.getvalue(), 'top\n..child\n')
        self.assertEqual(self.sio.getvalue(), '')
