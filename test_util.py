# test_util.py -- Unit tests for util.py

import unittest

from util import clip, repr_str


class TestUtil(unittest.TestCase):

    def test_clip(self):
        self.assertEqual(clip(0, 255, 300), 255)
        self.assertEqual(clip(0, 255, -4), 0)
        self.assertEqual(clip(0, 255, 8), 8)
        self.assertEqual(clip(None, 10, -50), -50)
        self.assertEqual(clip(0, None, 1000), 1000)

    def test_repr_str(self):
        self.assertEqual(repr_str('Empty', []), 'Empty()')
        self.assertEqual(
            repr_str('Pair', [('x', 1), ('s', 'a')]), "Pair(x=1, s='a')"
        )
