import copy
import io
import random

import pytest

from wordweave.codec import WordCodec, decode, encode
from wordweave.config import config as weaver_config
from wordweave.graph import connect_words, find_node
from wordweave.pathfinder import (
    SearchLimitReached,
    SearchStats,
    WordNotInGraph,
    path_cost,
    weave,
)
from wordweave.wordlist import encode_words, load_word_list


def _graph(words):
    return connect_words(encode_words(words))


def _weave_words(start, end, nodes, **kwargs):
    path = weave(encode(start), encode(end), nodes, **kwargs)
    return None if path is None else [decode(w) for w in path]


def _brute_force_cost(codec, nodes, start_idx, end_idx):
    """Minimum cost over every simple path, by exhaustive enumeration."""
    best = None

    def visit(idx, cost, seen):
        nonlocal best
        if best is not None and cost >= best:
            return
        if idx == end_idx:
            best = cost
            return
        for other in nodes[idx].connected:
            if other not in seen:
                seen.add(other)
                visit(other, cost + codec.distance(nodes[idx].word, nodes[other].word), seen)
                seen.remove(other)

    visit(start_idx, 0, {start_idx})
    return best


def test_direct_edge_is_used():
    nodes = _graph(["abcd", "abce", "abcf", "aacd"])
    assert _weave_words("abcd", "abcf", nodes) == ["abcd", "abcf"]


def test_multi_step_path():
    nodes = _graph(["cold", "cord", "card", "ward", "warm", "wall"])
    path = weave(encode("cold"), encode("warm"), nodes)
    assert [decode(w) for w in path] == ["cold", "cord", "card", "ward", "warm"]
    assert path_cost(path) == 4


def test_start_equals_end():
    nodes = _graph(["abcd", "abce"])
    path = weave(encode("abcd"), encode("abcd"), nodes)
    assert path == [encode("abcd")]
    assert path_cost(path) == 0


def test_no_path_returns_none():
    nodes = _graph(["aaaa", "aaab", "bbbb", "bbba"])
    assert _weave_words("aaaa", "bbbb", nodes) is None


def test_missing_start_or_end():
    nodes = _graph(["abcd", "abce"])
    with pytest.raises(WordNotInGraph) as exc_info:
        weave(encode("zzzz"), encode("abcd"), nodes)
    assert exc_info.value.which == "start"
    assert exc_info.value.word == "zzzz"

    with pytest.raises(WordNotInGraph) as exc_info:
        weave(encode("abcd"), encode("qqqq"), nodes)
    assert exc_info.value.which == "end"


def test_ties_go_to_lowest_node_index():
    # aaaa -> bbaa has two equal-cost routes; abaa sorts before baaa
    nodes = _graph(["aaaa", "abaa", "baaa", "bbaa"])
    assert _weave_words("aaaa", "bbaa", nodes) == ["aaaa", "abaa", "bbaa"]


def test_deterministic():
    nodes = _graph(load_word_list())
    first = _weave_words("head", "tail", nodes)
    assert first is not None
    for _ in range(3):
        assert _weave_words("head", "tail", nodes) == first


@pytest.mark.parametrize("seed", range(8))
def test_matches_brute_force(seed):
    codec = WordCodec(3, "abc")
    rng = random.Random(seed)
    words = rng.sample(range(codec.size), 10)
    nodes = connect_words(words, codec)
    for start in words:
        for end in words:
            path = weave(start, end, nodes, codec)
            expected = _brute_force_cost(
                codec, nodes, find_node(nodes, start), find_node(nodes, end)
            )
            if expected is None:
                assert path is None
                continue
            assert path[0] == start
            assert path[-1] == end
            assert len(set(path)) == len(path)
            for a, b in zip(path, path[1:]):
                assert find_node(nodes, b) in nodes[find_node(nodes, a)].connected
            assert path_cost(path, codec) == expected


def test_search_does_not_mutate_graph():
    nodes = _graph(load_word_list())
    before = copy.deepcopy(nodes)
    weave(encode("cold"), encode("warm"), nodes)
    assert nodes == before


def test_expansion_limit():
    nodes = _graph(["cold", "cord", "card", "ward", "warm"])
    with pytest.raises(SearchLimitReached):
        weave(encode("cold"), encode("warm"), nodes, max_expansions=0)
    # Four expansions are enough for a four-step ladder
    assert weave(encode("cold"), encode("warm"), nodes, max_expansions=4) is not None


def test_stats_are_collected():
    nodes = _graph(["cold", "cord", "card", "ward", "warm"])
    stats = SearchStats()
    weave(encode("cold"), encode("warm"), nodes, stats=stats)
    assert stats.nodes_expanded == 4
    assert stats.nodes_discovered == 4


def test_path_cost():
    codec = WordCodec(2, "ab")
    assert path_cost([], codec) == 0
    assert path_cost([0], codec) == 0
    assert path_cost([0, 1, 3], codec) == 2


def test_expansion_limit_applies_per_search():
    nodes = _graph(["cold", "cord", "card", "ward", "warm"])
    stats = SearchStats()
    for _ in range(3):
        path = weave(encode("cold"), encode("warm"), nodes, max_expansions=4, stats=stats)
        assert path is not None
        assert stats.nodes_expanded == 4
        assert stats.nodes_discovered == 4


def test_start_outside_codec_range():
    nodes = _graph(["abcd", "abce"])
    with pytest.raises(WordNotInGraph) as exc_info:
        weave(26**4 + 5, encode("abcd"), nodes)
    assert exc_info.value.which == "start"
    assert exc_info.value.word == str(26**4 + 5)

    with pytest.raises(WordNotInGraph) as exc_info:
        weave(encode("abcd"), -1, nodes)
    assert exc_info.value.word == "-1"


def test_verbose_progress(monkeypatch):
    monkeypatch.setattr(weaver_config, "verbose", True)
    monkeypatch.setattr(weaver_config, "report_interval", 2)
    nodes = _graph(["cold", "cord", "card", "ward", "warm"])
    out = io.StringIO()
    weave(encode("cold"), encode("warm"), nodes, out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Expanded 2 nodes, frontier size ")
    assert lines[1].startswith("Expanded 4 nodes, frontier size ")


def test_progress_is_quiet_unless_verbose(monkeypatch):
    monkeypatch.setattr(weaver_config, "report_interval", 1)
    nodes = _graph(["cold", "cord", "card", "ward", "warm"])
    out = io.StringIO()
    weave(encode("cold"), encode("warm"), nodes, out=out)
    assert out.getvalue() == ""
