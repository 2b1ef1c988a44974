"""Construction of the word connectivity graph.

Nodes are held in a single list sorted by encoded word, and refer to each other only by
their index in that list.  Two words are connected when they differ at exactly one letter
position; each such pair is found from the larger word by lowering the letter at one
position to every smaller value and looking the result up in a dense table.
"""

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

import numpy as np
from sortedcontainers import SortedSet

from wordweave.codec import EncodedWord, WordCodec, default_codec
from wordweave.config import config as weaver_config
from wordweave.util import int_comma

ABSENT = -1
"""Lookup table entry for a word that is not in the dictionary."""


class GraphCapacityError(ValueError):
    """Raised when the lookup table for a codec would exceed the configured size limit."""


@dataclass
class WordNode:
    """A distinct dictionary word and the nodes it is connected to."""

    word: EncodedWord
    """The encoded word."""

    connected: list[int] = field(default_factory=list)
    """Indices of adjacent nodes, in discovery order."""


def connect_words(
    words: Iterable[EncodedWord],
    codec: WordCodec | None = None,
    *,
    out: TextIO | None = None,
) -> list[WordNode]:
    """Build the connectivity graph over a collection of encoded words.

    Duplicate words collapse to one node and nodes are sorted by encoded value.  Every edge
    is recorded on both of its endpoints.  Each unordered pair is discovered exactly once
    (from its larger word), so connection lists contain no duplicates.

    Args:
        words: Encoded words, in any order, possibly with repeats.
        codec: Codec the words were encoded with.  Defaults to the configured codec.
        out: Optional text stream for progress messages.

    Returns:
        The list of nodes; connection indices refer to positions in this list.

    Raises:
        GraphCapacityError: If `codec.size` exceeds `max_table_entries`.
        ValueError: If a word lies outside the codec's range.
    """
    codec = codec or default_codec
    if codec.size > weaver_config.max_table_entries:
        raise GraphCapacityError(
            f"Lookup table for {codec} needs {int_comma(codec.size)} entries "
            f"(limit: {int_comma(weaver_config.max_table_entries)})."
        )

    sorted_words = SortedSet(words)
    if sorted_words and (sorted_words[0] < 0 or sorted_words[-1] >= codec.size):
        raise ValueError(f"Encoded words must lie in [0, {codec.size}).")

    nodes = [WordNode(word) for word in sorted_words]

    # Direct-address table: encoded word -> node index, or ABSENT
    lookup = np.full(codec.size, ABSENT, dtype=np.int64)
    lookup[np.fromiter(sorted_words, dtype=np.int64, count=len(nodes))] = np.arange(len(nodes))

    place_values = [codec.place_value(position) for position in range(codec.length)]
    n_edges = 0
    for idx, node in enumerate(nodes):
        for position, offset in enumerate(place_values):
            letter = codec.letter_at(node.word, position)
            for step in range(1, letter + 1):
                other = int(lookup[node.word - step * offset])
                if other == ABSENT:
                    continue
                nodes[other].connected.append(idx)
                node.connected.append(other)
                n_edges += 1

    if out is not None:
        print(
            f"Built graph with {int_comma(len(nodes))} words and {int_comma(n_edges)} connections.",
            file=out,
            flush=True,
        )
    return nodes


def find_node(nodes: list[WordNode], word: EncodedWord) -> int | None:
    """Return the index of the node holding `word`, or None if there is none.

    Relies on `nodes` being sorted by word, as returned by `connect_words`.
    """
    idx = bisect_left(nodes, word, key=lambda node: node.word)
    if idx < len(nodes) and nodes[idx].word == word:
        return idx
    return None


def count_edges(nodes: list[WordNode]) -> int:
    """Return the number of undirected edges in the graph."""
    return sum(len(node.connected) for node in nodes) // 2
