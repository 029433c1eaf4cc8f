""" Use hypothesis and lark to generate patterns and test the
parser and the matcher with them.
"""

import unittest
from lark import Lark
from hypothesis import given, settings, HealthCheck, strategies as st
from hypothesis.extra.lark import from_lark
from retrack import parse, compile

grammar_text = r"""
start: alternation

alternation: concat ("|" concat)*

concat: repeat*

repeat: atom QUANTIFIER?

atom: LITERAL
    | ESCAPE
    | ANY
    | group
    | charclass

group: "(" GROUP_KIND? alternation ")"

charclass: "[" CARET? member+ "]"

member: LITERAL
      | CLASS_RANGE

GROUP_KIND: "?:" | "?=" | "?!"
CARET: "^"
ANY: "."
LITERAL: /[a-d]/
ESCAPE: /\\[rnt0d.*+?()\[\]{}|]/
QUANTIFIER: /[*+?]|\{[0-2]?,[2-4]?\}/
CLASS_RANGE: "a-b" | "b-d" | "0-9"
"""

patterns = from_lark(Lark(grammar_text))
subjects = st.text(alphabet="abcd09.\n", max_size=10)
pattern_settings = settings(
    max_examples=200, deadline=None,
    suppress_health_check=[HealthCheck.too_slow])


class PatternPropertiesTestCase(unittest.TestCase):
    @given(patterns)
    @pattern_settings
    def test_compile_is_deterministic(self, pattern):
        self.assertEqual(parse(pattern), parse(pattern))

    @given(patterns)
    @pattern_settings
    def test_render_round_trip(self, pattern):
        tree = parse(pattern)
        self.assertEqual(tree, parse(str(tree)))

    @given(patterns, subjects)
    @pattern_settings
    def test_match_terminates(self, pattern, subject):
        compiled = compile(pattern)
        result = compiled.matches(subject)
        self.assertIsInstance(result, bool)
        self.assertEqual(result, compiled.matches(subject))

    @given(patterns, subjects)
    @pattern_settings
    def test_match_covers_subject(self, pattern, subject):
        m = compile(pattern).match(subject)
        if m is not None:
            self.assertEqual((0, len(subject)), m.span())
            for index, text in m.captures.items():
                start, end = m.span(index)
                self.assertEqual(subject[start:end], text)


if __name__ == '__main__':
    unittest.main()
