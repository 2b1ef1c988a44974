"""Main solver module: ties word loading, graph construction and search together."""

import sys
from collections.abc import Iterable
from os import PathLike
from time import time
from typing import TextIO

from wordweave.codec import InvalidWord, WordCodec, default_codec
from wordweave.graph import GraphCapacityError, connect_words
from wordweave.pathfinder import SearchLimitReached, SearchStats, WordNotInGraph, path_cost, weave
from wordweave.util import int_comma, ladder_str, time_str
from wordweave.wordlist import InvalidWordList, encode_words, load_word_list


def solve(
    start_word: str,
    end_word: str,
    words: Iterable[str],
    *,
    codec: WordCodec | None = None,
    stats: SearchStats | None = None,
    out: TextIO | None = None,
) -> list[str] | None:
    """Find a minimum-cost word ladder from `start_word` to `end_word`.

    The start and end words are always added to the dictionary, so they are nodes of the
    graph even when the dictionary does not contain them.

    Args:
        start_word: The word to start from.
        end_word: The word to end at.
        words: The dictionary of candidate words.
        codec: Codec to encode words with.  Defaults to the configured codec.
        stats: If given, filled in with search statistics.
        out: Optional text stream for progress messages.

    Returns:
        The ladder from `start_word` to `end_word` inclusive, or None if there is none.

    Raises:
        InvalidWord: If the start or end word is malformed.
        InvalidWordList: If any dictionary entry is malformed.
    """
    codec = codec or default_codec

    # Check the endpoints before touching the (possibly large) dictionary
    start = codec.encode(start_word)
    end = codec.encode(end_word)

    encoded = encode_words(words, codec)
    encoded.extend((start, end))

    nodes = connect_words(encoded, codec, out=out)
    path = weave(start, end, nodes, codec, stats=stats, out=out)
    if path is None:
        return None
    return [codec.decode(word) for word in path]


def run(
    start_word: str,
    end_word: str,
    word_list_path: str | PathLike | None = None,
    *,
    out: TextIO | None = None,
) -> int:
    """Solve one word ladder and print the result.

    Args:
        start_word: The word to start from.
        end_word: The word to end at.
        word_list_path: Dictionary file.  If None, uses the configured or bundled word list.
        out: Text stream to print to.  Defaults to standard output.

    Returns:
        A process exit code: 0 if the search ran (with or without a solution), 1 otherwise.
    """
    if out is None:
        out = sys.stdout
    try:
        words = load_word_list(word_list_path)
    except OSError as e:
        print(f"Failed reading word set file: {e}", file=out, flush=True)
        return 1
    print(f"Loaded {int_comma(len(words))} words.", file=out, flush=True)

    stats = SearchStats()
    start_time = time()
    try:
        solution = solve(start_word, end_word, words, stats=stats, out=out)
    except (
        InvalidWord,
        InvalidWordList,
        GraphCapacityError,
        WordNotInGraph,
        SearchLimitReached,
    ) as e:
        print(e, file=out, flush=True)
        return 1

    if solution is None:
        print("No valid solution found.", file=out, flush=True)
    else:
        print("Solution:", file=out, flush=True)
        print(ladder_str(solution), file=out, flush=True)
        cost = path_cost([default_codec.encode(word) for word in solution])
        print(f"Total cost: {cost}", file=out, flush=True)
    print(f"Nodes expanded: {int_comma(stats.nodes_expanded)}", file=out, flush=True)
    print(f"Time taken: {time_str(time() - start_time)}", file=out, flush=True)
    return 0
