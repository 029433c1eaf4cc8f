""" Show the tree a pattern compiles into.

.. code::

    $ retrack-parse 'a|b*'
    Or()
      Literal('a')
      Repeat(0, None)
        Literal('b')

"""

import argparse
from .base import base_parser, pattern_parser, LogSetup, depth_kwargs
from ..parser import parse as parse_pattern
from ..nodes import print_tree


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, pattern_parser])
parser.add_argument('pattern', help='the pattern to parse')
parser.add_argument(
    '--render', action='store_true', default=False,
    help='Also print the tree rendered back into pattern text')


def parse(args=None):
    args = parser.parse_args(args)
    with LogSetup(args):
        tree = parse_pattern(args.pattern, **depth_kwargs(args))
        print_tree(tree)
        if args.render:
            print(str(tree))


if __name__ == '__main__':
    parse()
