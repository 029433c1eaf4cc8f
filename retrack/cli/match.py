""" Match subjects against a pattern.

Each subject is matched as a whole against the pattern:

.. code::

    $ retrack-match '(a|b)+c' abac abc bd
    '(a|b)+c' 'abac': match
      group 1: 'a'
    '(a|b)+c' 'abc': match
      group 1: 'b'
    '(a|b)+c' 'bd': no match

"""

import argparse
from .base import base_parser, pattern_parser, LogSetup, depth_kwargs
from ..pattern import compile


demo_cases = [
    ("abc", "abc"),
    ("abc", "abcd"),
    ("a*", "ab"),
    ("a*", ""),
    ("a*", "a"),
    ("a*", "aa"),
    ("a+", ""),
    ("a+", "a"),
    ("a+", "aa"),
    ("a?", ""),
    ("a?", "a"),
    ("a?", "aa"),
    ("(a|b)+(c|d)+", "aabadddc"),
    ("(a|b)+(c|d)+", "aabcadddc"),
    (".", ""),
    (".", "a"),
    (".", "aa"),
    ("[a-c]", "a"),
    ("[a-c]", "b"),
    ("[a-c]", "c"),
    ("[a-c]", "d"),
]


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, pattern_parser])
parser.add_argument('pattern', nargs='?', help='the pattern to match with')
parser.add_argument('subject', nargs='*', help='text to match')
parser.add_argument(
    '--demo', action='store_true', default=False,
    help='Match a fixed set of examples')


def match(args=None):
    args = parser.parse_args(args)
    if args.demo:
        cases = demo_cases
    elif args.pattern is None:
        parser.error('a pattern is required unless --demo is given')
    else:
        cases = [(args.pattern, subject) for subject in args.subject]

    with LogSetup(args):
        patterns = {}
        for pattern_text, subject in cases:
            if pattern_text not in patterns:
                patterns[pattern_text] = compile(
                    pattern_text, **depth_kwargs(args))
            report(patterns[pattern_text], subject)


def report(pattern, subject):
    """ Print the outcome of a single match """
    m = pattern.match(subject)
    outcome = 'match' if m else 'no match'
    print('{!r} {!r}: {}'.format(pattern.pattern, subject, outcome))
    if m:
        for index, text in m.captures.items():
            print('  group {}: {!r}'.format(index, text))


if __name__ == '__main__':
    match()
