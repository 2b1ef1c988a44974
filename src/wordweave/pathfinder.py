"""A* search for a minimum-cost word ladder over a graph built by `connect_words`.

The cost of a step is the letter distance between its two words, and the heuristic is the
letter distance to the goal.  Both come from the same codec, so the heuristic never
overestimates and the first time the goal is selected its path is optimal.

All search state lives in arrays owned by a single call; the node list is only read.
"""

import heapq
from array import array
from dataclasses import dataclass, field
from time import time
from typing import TextIO

from bitarray.util import zeros

from wordweave.codec import EncodedWord, WordCodec, default_codec
from wordweave.config import config as weaver_config
from wordweave.graph import WordNode, find_node
from wordweave.util import int_comma, time_str

UNREACHED = 0xFFFFFFFF
"""Score and predecessor value for nodes not reached yet."""


class WordNotInGraph(LookupError):
    """Raised when the start or end word is not a node of the graph."""

    def __init__(self, which: str, word: str) -> None:
        super().__init__(f"{which.capitalize()} word {word!r} is not in the word graph.")
        self.which = which
        """Either "start" or "end"."""
        self.word = word
        """The missing word, decoded, or its raw value if it cannot be decoded."""


class SearchLimitReached(RuntimeError):
    """Raised when a search expands more nodes than allowed."""


@dataclass
class SearchStats:
    """Statistics collected during a search."""

    nodes_expanded: int = 0
    """Number of nodes removed from the frontier and expanded."""

    nodes_discovered: int = 0
    """Number of times a node's best known cost was improved."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""


def weave(
    start: EncodedWord,
    end: EncodedWord,
    nodes: list[WordNode],
    codec: WordCodec | None = None,
    *,
    max_expansions: int | None = None,
    stats: SearchStats | None = None,
    out: TextIO | None = None,
) -> list[EncodedWord] | None:
    """Find a minimum-cost path from `start` to `end`.

    The frontier member with the smallest f-score is expanded next; ties go to the lowest
    node index, so results are reproducible.

    Args:
        start: Encoded start word.
        end: Encoded end word.
        nodes: Graph from `connect_words`.
        codec: Codec the words were encoded with.  Defaults to the configured codec.
        max_expansions: Expansion budget.  Defaults to the configured `max_expansions`.
        stats: If given, filled in with search statistics.
        out: Optional text stream for progress messages (printed when `verbose` is set).

    Returns:
        The words on the path from `start` to `end` inclusive, or None if `end` cannot be
        reached.

    Raises:
        WordNotInGraph: If `start` or `end` is not in `nodes`.
        SearchLimitReached: If the expansion budget runs out before the search finishes.
    """
    codec = codec or default_codec
    if max_expansions is None:
        max_expansions = weaver_config.max_expansions
    if stats is None:
        stats = SearchStats()
    stats.nodes_expanded = 0
    stats.nodes_discovered = 0
    stats.start_time = time()

    start_idx = find_node(nodes, start)
    if start_idx is None:
        raise WordNotInGraph("start", _display(codec, start))
    if find_node(nodes, end) is None:
        raise WordNotInGraph("end", _display(codec, end))

    n_nodes = len(nodes)
    g_score = array("L", [UNREACHED]) * n_nodes
    f_score = array("L", [UNREACHED]) * n_nodes
    came_from = array("L", [UNREACHED]) * n_nodes
    in_frontier = zeros(n_nodes)

    g_score[start_idx] = 0
    f_score[start_idx] = codec.distance(start, end)
    in_frontier[start_idx] = True
    # Entries are (f_score, node_index); stale entries are skipped when popped
    heap = [(f_score[start_idx], start_idx)]

    while heap:
        f, current = heapq.heappop(heap)
        if not in_frontier[current] or f != f_score[current]:
            continue

        node = nodes[current]
        if node.word == end:
            return _reconstruct_path(nodes, came_from, current)

        in_frontier[current] = False
        stats.nodes_expanded += 1
        if max_expansions is not None and stats.nodes_expanded > max_expansions:
            raise SearchLimitReached(
                f"Search gave up after expanding {int_comma(max_expansions)} nodes."
            )
        if (
            out is not None
            and weaver_config.verbose
            and stats.nodes_expanded % weaver_config.report_interval == 0
        ):
            print(
                f"Expanded {int_comma(stats.nodes_expanded)} nodes, "
                f"frontier size {int_comma(in_frontier.count())}, "
                f"elapsed {time_str(time() - stats.start_time)}",
                file=out,
                flush=True,
            )

        for neighbor in node.connected:
            neighbor_word = nodes[neighbor].word
            tentative_g_score = g_score[current] + codec.distance(node.word, neighbor_word)
            if tentative_g_score < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g_score
                f_score[neighbor] = tentative_g_score + codec.distance(neighbor_word, end)
                in_frontier[neighbor] = True
                heapq.heappush(heap, (f_score[neighbor], neighbor))
                stats.nodes_discovered += 1

    return None


def _display(codec: WordCodec, word: EncodedWord) -> str:
    """Decode `word` for an error message, or show the raw value if it is out of range."""
    if 0 <= word < codec.size:
        return codec.decode(word)
    return str(word)


def _reconstruct_path(
    nodes: list[WordNode], came_from: array, goal_idx: int
) -> list[EncodedWord]:
    """Follow predecessor links back from the goal and return the path in start-to-end order."""
    path = [nodes[goal_idx].word]
    idx = goal_idx
    while came_from[idx] != UNREACHED:
        idx = came_from[idx]
        path.append(nodes[idx].word)
    path.reverse()
    return path


def path_cost(path: list[EncodedWord], codec: WordCodec | None = None) -> int:
    """Return the total letter distance between consecutive words of a path."""
    codec = codec or default_codec
    return sum(codec.distance(a, b) for a, b in zip(path, path[1:]))
