import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordered_tree import OrderedTree
from tree_errors import EmptyTreeError
from tree_settings import TreeSettings


class TestOrderedTree(unittest.TestCase):
    SETTINGS = TreeSettings()

    def make_tree(self, *values):
        tree = OrderedTree(self.SETTINGS)
        for value in values:
            tree.insert(value)
        return tree

    def test_new_tree_is_empty(self):
        tree = self.make_tree()
        self.assertEqual(tree.node_count(), 0)
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.height(), -1)

    def test_find_min_on_empty_raises(self):
        tree = self.make_tree()
        with self.assertRaises(EmptyTreeError):
            tree.find_min()

    def test_find_max_on_empty_raises(self):
        tree = self.make_tree()
        with self.assertRaises(EmptyTreeError):
            tree.find_max()

    def test_empty_tree_error_is_a_value_error(self):
        tree = self.make_tree()
        with self.assertRaises(ValueError):
            tree.find_min()

    def test_insert_single_element(self):
        tree = self.make_tree(42)
        self.assertEqual(tree.node_count(), 1)
        self.assertFalse(tree.is_empty())
        self.assertTrue(tree.contains(42))
        self.assertEqual(tree.height(), 0)

    def test_insert_multiple_elements(self):
        tree = self.make_tree(50, 30, 70)
        self.assertEqual(tree.node_count(), 3)
        self.assertTrue(tree.contains(50))
        self.assertTrue(tree.contains(30))
        self.assertTrue(tree.contains(70))

    def test_insert_duplicate_is_noop(self):
        tree = self.make_tree(50, 30, 70)
        before = tree.in_order_traversal()
        tree.insert(30)
        self.assertEqual(tree.node_count(), 3)
        self.assertEqual(tree.in_order_traversal(), before)

    def test_insert_places_smaller_left_and_larger_right(self):
        tree = self.make_tree(50, 30, 70)
        self.assertEqual(tree.breadth_first_traversal(), [50, 30, 70])

    def test_contains_returns_false_for_nonexistent(self):
        tree = self.make_tree(50)
        self.assertFalse(tree.contains(30))
        self.assertFalse(tree.contains(70))

    def test_contains_on_empty_tree(self):
        self.assertFalse(self.make_tree().contains(1))

    def test_contains_after_remove(self):
        tree = self.make_tree(42)
        tree.remove(42)
        self.assertFalse(tree.contains(42))
        self.assertTrue(tree.is_empty())

    def test_remove_leaf_node(self):
        tree = self.make_tree(50, 30, 70)
        tree.remove(30)
        self.assertFalse(tree.contains(30))
        self.assertEqual(tree.breadth_first_traversal(), [50, 70])

    def test_remove_node_with_left_child(self):
        tree = self.make_tree(50, 30, 20)
        tree.remove(30)
        self.assertEqual(tree.breadth_first_traversal(), [50, 20])

    def test_remove_node_with_right_child(self):
        tree = self.make_tree(50, 30, 40)
        tree.remove(30)
        self.assertEqual(tree.breadth_first_traversal(), [50, 40])

    def test_remove_node_with_two_children_uses_successor(self):
        tree = self.make_tree(50, 30, 70, 20, 40, 35)
        tree.remove(30)
        # 35 is the smallest value right of 30 and takes its place.
        self.assertEqual(tree.breadth_first_traversal(), [50, 35, 70, 20, 40])
        self.assertEqual(tree.node_count(), 5)

    def test_remove_successor_that_is_direct_right_child(self):
        tree = self.make_tree(50, 30, 70, 20, 40, 45)
        tree.remove(30)
        self.assertEqual(tree.breadth_first_traversal(), [50, 40, 70, 20, 45])

    def test_remove_root_with_two_children(self):
        tree = self.make_tree(50, 30, 70, 60, 80)
        tree.remove(50)
        self.assertEqual(tree.breadth_first_traversal(), [60, 30, 70, 80])

    def test_remove_root_with_single_child(self):
        tree = self.make_tree(50, 70, 80)
        tree.remove(50)
        self.assertEqual(tree.breadth_first_traversal(), [70, 80])

    def test_remove_nonexistent_is_noop(self):
        tree = self.make_tree(50)
        tree.remove(100)
        self.assertEqual(tree.node_count(), 1)
        self.assertTrue(tree.contains(50))

    def test_remove_from_empty_is_noop(self):
        tree = self.make_tree()
        tree.remove(1)
        self.assertTrue(tree.is_empty())

    def test_find_min_returns_smallest(self):
        tree = self.make_tree(50, 30, 70, 20)
        self.assertEqual(tree.find_min(), 20)

    def test_find_max_returns_largest(self):
        tree = self.make_tree(50, 30, 70, 80)
        self.assertEqual(tree.find_max(), 80)

    def test_min_max_after_remove(self):
        tree = self.make_tree(50, 30, 70)
        tree.remove(30)
        self.assertEqual(tree.find_min(), 50)
        tree.remove(70)
        self.assertEqual(tree.find_max(), 50)

    def test_make_empty(self):
        tree = self.make_tree(50, 30, 70)
        tree.make_empty()
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.node_count(), 0)
        self.assertEqual(tree.in_order_traversal(), [])

    def test_make_empty_on_empty_is_noop(self):
        tree = self.make_tree()
        tree.make_empty()
        self.assertTrue(tree.is_empty())

    def test_tree_usable_after_make_empty(self):
        tree = self.make_tree(50, 30)
        tree.make_empty()
        tree.insert(10)
        self.assertEqual(tree.in_order_traversal(), [10])

    def test_height_of_chain(self):
        tree = self.make_tree(1, 2, 3, 4)
        self.assertEqual(tree.height(), 3)

    def test_height_of_balanced_tree(self):
        tree = self.make_tree(50, 30, 70, 20, 40, 60, 80)
        self.assertEqual(tree.height(), 2)

    def test_ordering_holds_after_mixed_operations(self):
        tree = self.make_tree(50, 30, 70, 20, 40, 60, 80, 35, 45, 65)
        for value in (30, 70, 50, 99, 20):
            tree.remove(value)
            result = tree.in_order_traversal()
            self.assertEqual(result, sorted(set(result)))
        self.assertEqual(tree.in_order_traversal(), [35, 40, 45, 60, 65, 80])

    def test_remove_all_elements_one_by_one(self):
        tree = self.make_tree(50, 30, 70, 20, 40)
        for value in (20, 40, 30, 70, 50):
            tree.remove(value)
        self.assertTrue(tree.is_empty())

    def test_sorted_insert_degenerates_to_chain(self):
        tree = self.make_tree(*range(1, 11))
        self.assertEqual(tree.node_count(), 10)
        self.assertEqual(tree.height(), 9)
        self.assertEqual(tree.find_min(), 1)
        self.assertEqual(tree.find_max(), 10)

    def test_negative_numbers(self):
        tree = self.make_tree(-10, 0, 10, -20)
        self.assertEqual(tree.find_min(), -20)
        self.assertEqual(tree.find_max(), 10)
        self.assertTrue(tree.contains(-10))

    def test_works_with_strings(self):
        tree = self.make_tree("banana", "apple", "cherry")
        self.assertEqual(tree.find_min(), "apple")
        self.assertEqual(tree.find_max(), "cherry")
        self.assertEqual(tree.in_order_traversal(), ["apple", "banana", "cherry"])

    def test_works_with_floats(self):
        tree = self.make_tree(3.14, 1.41, 2.71)
        self.assertEqual(tree.find_min(), 1.41)
        self.assertEqual(tree.find_max(), 3.14)

    def test_len_dunder(self):
        tree = self.make_tree()
        self.assertEqual(len(tree), 0)
        tree.insert(50)
        tree.insert(30)
        self.assertEqual(len(tree), 2)

    def test_contains_dunder(self):
        tree = self.make_tree(50)
        self.assertTrue(50 in tree)
        self.assertFalse(30 in tree)

    def test_repr_and_str(self):
        tree = self.make_tree(50, 30, 70)
        self.assertEqual(repr(tree), "OrderedTree([30, 50, 70])")
        self.assertEqual(str(tree), "OrderedTree(size=3, height=1)")

    def test_print_tree(self):
        self.assertEqual(self.make_tree().print_tree(), "Empty tree")
        self.assertEqual(self.make_tree(2, 1, 3).print_tree(), "1\n2\n3")

    def test_default_settings(self):
        tree = OrderedTree()
        self.assertFalse(tree.settings.iterative)


class TestOrderedTreeIterative(TestOrderedTree):
    SETTINGS = TreeSettings(iterative=True)

    def test_deep_chain_does_not_hit_recursion_limit(self):
        depth = sys.getrecursionlimit() * 3
        tree = self.make_tree(*range(depth))
        self.assertEqual(tree.node_count(), depth)
        self.assertEqual(tree.height(), depth - 1)
        self.assertTrue(tree.contains(depth - 1))
        self.assertFalse(tree.is_full())
        self.assertTrue(tree.structural_equals(tree.copy()))
        self.assertTrue(tree.is_mirror(tree.mirror()))
        self.assertEqual(tree.in_order_traversal(), list(range(depth)))
        tree.remove(0)
        self.assertEqual(tree.find_min(), 1)


if __name__ == "__main__":
    unittest.main()
