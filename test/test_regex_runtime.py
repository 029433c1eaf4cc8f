import unittest
from retrack import parse
from retrack.runtime import new_runtime, run
from retrack.nodes import Literal, Range, Any, Negate, Lookahead, Repeat
from retrack.nodes import Concat, Or, Capture


a, b, c = Literal("a"), Literal("b"), Literal("c")


class LeafTestCase(unittest.TestCase):
    def test_literal(self):
        runtime = new_runtime("ab")
        self.assertTrue(run(a, runtime))
        self.assertEqual(1, runtime.cursor.position)
        self.assertFalse(run(a, runtime))

    def test_literal_at_end(self):
        self.assertFalse(run(a, new_runtime("")))

    def test_range(self):
        self.assertTrue(run(Range("a", "c"), new_runtime("c")))
        self.assertFalse(run(Range("a", "c"), new_runtime("d")))
        self.assertFalse(run(Range("a", "c"), new_runtime("")))

    def test_any(self):
        self.assertTrue(run(Any(), new_runtime("\n")))
        self.assertFalse(run(Any(), new_runtime("")))


class AssertionTestCase(unittest.TestCase):
    """ Negate and lookahead never consume input """
    def test_negate(self):
        runtime = new_runtime("ab")
        self.assertTrue(run(Negate(b), runtime))
        self.assertEqual(0, runtime.cursor.position)
        self.assertFalse(run(Negate(a), runtime))
        self.assertEqual(0, runtime.cursor.position)

    def test_lookahead(self):
        runtime = new_runtime("ab")
        self.assertTrue(run(Lookahead(Concat([a, b])), runtime))
        self.assertEqual(0, runtime.cursor.position)
        self.assertFalse(run(Lookahead(b), runtime))
        self.assertEqual(0, runtime.cursor.position)

    def test_negated_class(self):
        not_a = Concat([Negate(a), Any()])
        self.assertTrue(run(not_a, new_runtime("b")))
        self.assertFalse(run(not_a, new_runtime("a")))
        self.assertFalse(run(not_a, new_runtime("")))


class RepeatTestCase(unittest.TestCase):
    def test_restore_after_failed_iteration(self):
        runtime = new_runtime("ababa")
        self.assertTrue(run(Repeat(0, None, Concat([a, b])), runtime))
        self.assertEqual(4, runtime.cursor.position)

    def test_max(self):
        runtime = new_runtime("aaa")
        self.assertTrue(run(Repeat(0, 2, a), runtime))
        self.assertEqual(2, runtime.cursor.position)

    def test_min(self):
        self.assertFalse(run(Repeat(3, None, a), new_runtime("aa")))
        self.assertTrue(run(Repeat(2, None, a), new_runtime("aa")))

    def test_no_give_back(self):
        """ A repeat keeps all its iterations even if a sibling fails """
        self.assertFalse(run(Concat([a.kleene(), a]), new_runtime("aaa")))

    def test_empty_iteration_terminates(self):
        runtime = new_runtime("aab")
        self.assertTrue(run(a.kleene().kleene(), runtime))
        self.assertEqual(2, runtime.cursor.position)

        runtime = new_runtime("a")
        self.assertTrue(run(Repeat(2, None, Lookahead(a)), runtime))
        self.assertEqual(0, runtime.cursor.position)


class OrTestCase(unittest.TestCase):
    def test_restore_between_alternatives(self):
        runtime = new_runtime("ac")
        self.assertTrue(run(Or([Concat([a, b]), Concat([a, c])]), runtime))
        self.assertEqual(2, runtime.cursor.position)

    def test_first_match_wins(self):
        runtime = new_runtime("ab")
        self.assertTrue(run(Or([a, Concat([a, b])]), runtime))
        self.assertEqual(1, runtime.cursor.position)

    def test_all_fail(self):
        runtime = new_runtime("c")
        self.assertFalse(run(Or([a, b]), runtime))
        self.assertEqual(0, runtime.cursor.position)

    def test_empty(self):
        self.assertFalse(run(Or([]), new_runtime("a")))
        self.assertTrue(run(Concat([]), new_runtime("a")))


class CaptureTestCase(unittest.TestCase):
    def test_capture(self):
        runtime = new_runtime("aa")
        self.assertTrue(run(Capture(1, a.kleene()), runtime))
        self.assertEqual({1: "aa"}, runtime.captures())
        self.assertEqual({1: (0, 2)}, runtime.spans())

    def test_last_match_wins(self):
        runtime = new_runtime("ab")
        self.assertTrue(run(Capture(1, Or([a, b])).kleene(), runtime))
        self.assertEqual({1: "b"}, runtime.captures())

    def test_failed_branch_is_forgotten(self):
        runtime = new_runtime("ac")
        tree = Or([Concat([Capture(1, a), b]), Concat([a, c])])
        self.assertTrue(run(tree, runtime))
        self.assertEqual({}, runtime.captures())

    def test_failed_iteration_is_forgotten(self):
        runtime = new_runtime("aba")
        tree = Capture(1, Concat([Capture(2, a), b])).kleene()
        self.assertTrue(run(tree, runtime))
        self.assertEqual({1: "ab", 2: "a"}, runtime.captures())
        self.assertEqual({1: (0, 2), 2: (0, 1)}, runtime.spans())

    def test_lookahead_keeps_captures(self):
        runtime = new_runtime("a")
        tree = Concat([Lookahead(Capture(1, a)), Any()])
        self.assertTrue(run(tree, runtime))
        self.assertEqual({1: "a"}, runtime.captures())

    def test_negate_drops_captures(self):
        runtime = new_runtime("ac")
        tree = Concat([Negate(Concat([Capture(1, a), b])), Any(), Any()])
        self.assertTrue(run(tree, runtime))
        self.assertEqual({}, runtime.captures())

    def test_ordered_by_index(self):
        runtime = new_runtime("ab")
        tree = Concat([Lookahead(Concat([a, Capture(2, b)])), Capture(1, a)])
        self.assertTrue(run(tree, runtime))
        self.assertEqual([1, 2], list(runtime.captures()))


class DeepTreeTestCase(unittest.TestCase):
    """ Matching uses no python recursion, so very deep trees work """
    def test_deep_captures(self):
        depth = 5000
        tree = a
        for index in range(depth, 0, -1):
            tree = Capture(index, tree)
        runtime = new_runtime("a")
        self.assertTrue(run(tree, runtime))
        captures = runtime.captures()
        self.assertEqual(depth, len(captures))
        self.assertEqual("a", captures[1])
        self.assertEqual("a", captures[depth])

    def test_deep_alternation(self):
        tree = b
        for _ in range(5000):
            tree = Or([Concat([a, c]), tree])
        self.assertTrue(run(tree, new_runtime("b")))


class SharedTreeTestCase(unittest.TestCase):
    def test_tree_is_not_modified(self):
        tree = parse("(a|b)+(c|d)+")
        before = repr(tree)
        for subject in ["aabadddc", "ab", "", "dc"]:
            run(tree, new_runtime(subject))
        self.assertEqual(before, repr(tree))
        self.assertEqual(parse("(a|b)+(c|d)+"), tree)


if __name__ == "__main__":
    unittest.main()
