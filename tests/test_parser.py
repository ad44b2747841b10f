"""
Unit tests for instance reading, solution writing and the solution checker.
"""

import os
import tempfile
import unittest

from wave_lns.algorithms.instance import EMPTY_SOLUTION, Solution
from wave_lns.checker import verify_solution
from wave_lns.main import main
from wave_lns.parser import input as input_module
from wave_lns.parser import output as output_module

INSTANCE_TEXT = """3 2 2
1 0 2
1 1 3
1 0 100
1 0 5
1 1 5
1 100
"""


class TestInput(unittest.TestCase):

    def test_parse(self):
        orders, aisles, n_items, lb, ub = input_module.parse(INSTANCE_TEXT.splitlines())
        self.assertEqual(orders, [{0: 2}, {1: 3}, {0: 100}])
        self.assertEqual(aisles, [{0: 5}, {1: 5}])
        self.assertEqual(n_items, 2)
        self.assertEqual((lb, ub), (1, 100))

    def test_parse_multi_item_lines_and_blank_lines(self):
        text = "1 3 1\n\n2 0 1 2 4\n3 0 5 1 5 2 5\n\n2 9\n"
        orders, aisles, _, lb, ub = input_module.parse(text.splitlines())
        self.assertEqual(orders, [{0: 1, 2: 4}])
        self.assertEqual(aisles, [{0: 5, 1: 5, 2: 5}])
        self.assertEqual((lb, ub), (2, 9))

    def test_parse_rejects_truncated_instance(self):
        with self.assertRaises(ValueError):
            input_module.parse(INSTANCE_TEXT.splitlines()[:4])

    def test_parse_rejects_bad_pair_count(self):
        with self.assertRaises(ValueError):
            input_module.parse(["1 1 1", "2 0 1", "1 0 1", "1 1"])

    def test_read_missing_file(self):
        self.assertIsNone(input_module.read('/nonexistent/instance.txt'))

    def test_read_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'instance.txt')
            with open(path, 'w') as f:
                f.write(INSTANCE_TEXT)
            orders, aisles, n_items, lb, ub = input_module.read(path)
            self.assertEqual(len(orders), 3)
            self.assertEqual(len(aisles), 2)

            empty = os.path.join(tmp, 'empty.txt')
            open(empty, 'w').close()
            self.assertIsNone(input_module.read(empty))


class TestOutput(unittest.TestCase):

    def test_write(self):
        solution = Solution(frozenset({3, 1}), frozenset({2}))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.txt')
            output_module.write(solution, path)
            with open(path) as f:
                self.assertEqual(f.read(), "2\n1\n3\n1\n2\n")

    def test_write_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.txt')
            output_module.write(EMPTY_SOLUTION, path)
            with open(path) as f:
                self.assertEqual(f.read(), "0\n0\n")

    def test_status_logs_summary(self):
        with self.assertLogs('wave_lns.parser.output', level='INFO') as logs:
            output_module.status(Solution(frozenset({0}), frozenset({1})), 2.0, 1.5)
        self.assertTrue(any('Best ratio found: 2.00' in line for line in logs.output))


class TestChecker(unittest.TestCase):

    def setUp(self):
        self.orders = [{0: 2}, {1: 3}, {0: 100}]
        self.aisles = [{0: 5}, {1: 5}]

    def test_valid(self):
        solution = Solution(frozenset({0, 1}), frozenset({0, 1}))
        is_valid, _, stats = verify_solution(solution, self.orders, self.aisles, 1, 100, 2.5)
        self.assertTrue(is_valid)
        self.assertEqual(stats['total_quantity'], 5)
        self.assertAlmostEqual(stats['calculated_ratio'], 2.5)

    def test_capacity_violation(self):
        solution = Solution(frozenset({2}), frozenset({0, 1}))
        is_valid, msg, _ = verify_solution(solution, self.orders, self.aisles, 1, 100)
        self.assertFalse(is_valid)
        self.assertIn('Item 0', msg)

    def test_bounds_and_empty_sets(self):
        solution = Solution(frozenset({0, 1}), frozenset({0, 1}))
        self.assertFalse(verify_solution(solution, self.orders, self.aisles, 6, 100)[0])
        self.assertFalse(verify_solution(solution, self.orders, self.aisles, 1, 4)[0])
        self.assertFalse(verify_solution(EMPTY_SOLUTION, self.orders, self.aisles, 1, 100)[0])

    def test_wrong_ratio_and_bad_index(self):
        solution = Solution(frozenset({0, 1}), frozenset({0, 1}))
        self.assertFalse(verify_solution(solution, self.orders, self.aisles, 1, 100, 3.0)[0])
        bad = Solution(frozenset({7}), frozenset({0}))
        self.assertFalse(verify_solution(bad, self.orders, self.aisles, 1, 100)[0])


class TestMain(unittest.TestCase):

    def test_end_to_end(self):
        with tempfile.TemporaryDirectory() as tmp:
            instance_path = os.path.join(tmp, 'instance.txt')
            output_path = os.path.join(tmp, 'out.txt')
            with open(instance_path, 'w') as f:
                f.write(INSTANCE_TEXT)
            code = main([instance_path, output_path, '--time-limit', '0.5',
                         '--seed', '3', '--max-stagnation', '10', '--quiet'])
            self.assertEqual(code, 0)
            with open(output_path) as f:
                self.assertEqual(f.read(), "2\n0\n1\n2\n0\n1\n")

    def test_missing_instance(self):
        self.assertEqual(main(['/nonexistent/instance.txt', '--quiet']), 1)

    def test_malformed_instance(self):
        with tempfile.TemporaryDirectory() as tmp:
            instance_path = os.path.join(tmp, 'instance.txt')
            with open(instance_path, 'w') as f:
                f.write("1 1 1\n2 0 1\n1 0 1\n1 1\n")
            with self.assertLogs('wave_lns.main', level='ERROR') as logs:
                code = main([instance_path, '--quiet'])
            self.assertEqual(code, 1)
            self.assertTrue(any('Malformed instance file' in line for line in logs.output))


if __name__ == '__main__':
    unittest.main()
