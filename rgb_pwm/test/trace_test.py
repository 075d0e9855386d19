"""Tests for rgb_pwm.test.trace."""

import unittest

from rgb_pwm.test import trace


class RunLengthsTest(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(trace.RunLengths([]), [])

    def test_runs(self):
        self.assertEqual(trace.RunLengths([0, 0, 1, 1, 1, 0]),
                         [(0, 2), (1, 3), (0, 1)])


if __name__ == '__main__':
    unittest.main()
