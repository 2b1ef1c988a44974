"""Word Weaver: minimum-cost word ladders.

Finds a path between two fixed-length words in which consecutive words differ at a single
letter position, using A* search over a graph of dictionary words.
"""

import argparse
import sys

from .solver import run


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Word Weaver command line."""
    parser = argparse.ArgumentParser(
        prog="wordweave", description="Find a word ladder between two words."
    )
    parser.add_argument("-s", "--start-word", required=True, help="Word to start from")
    parser.add_argument("-e", "--end-word", required=True, help="Word to end at")
    parser.add_argument(
        "--word-set",
        metavar="FILE",
        help="File with a set of words, separated by newlines/whitespace",
    )
    args = parser.parse_args(argv)

    sys.exit(run(args.start_word, args.end_word, args.word_set))
