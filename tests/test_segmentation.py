import pytest

from passgen.analyzers.segmentation import is_word_combination, split_words

NAMES = frozenset({"mary", "lisa"})


@pytest.mark.parametrize(
    "secret, expected",
    [
        ("marylisa", True),
        ("lisamary", True),
        ("marymary", True),
        ("mary", True),
        ("MaryLisa", True),
        ("marylis", False),
        ("xmarylisa", False),
        ("mary lisa", False),
        ("", True),
    ],
)
def test_is_word_combination(secret, expected):
    assert is_word_combination(secret, NAMES) is expected


def test_needs_backtracking():
    # Greedy longest-prefix would take "abc" and get stuck on "d".
    words = frozenset({"ab", "abc", "cd"})
    assert is_word_combination("abcd", words)
    assert split_words("abcd", words) == ["ab", "cd"]


def test_empty_dictionary():
    assert not is_word_combination("anything", frozenset())
    assert is_word_combination("", frozenset())


def test_words_must_be_lowercase():
    assert not is_word_combination("mary", frozenset({"Mary"}))


class TestSplitWords:
    def test_decomposition(self):
        assert split_words("MaryLisaMary", NAMES) == ["mary", "lisa", "mary"]

    def test_no_decomposition(self):
        assert split_words("marylis", NAMES) is None

    def test_empty(self):
        assert split_words("", NAMES) == []

    def test_pieces_rejoin_to_secret(self):
        words = frozenset({"correct", "horse", "battery", "staple"})
        pieces = split_words("correcthorsebatterystaple", words)
        assert "".join(pieces) == "correcthorsebatterystaple"
        assert len(pieces) == 4

    def test_walks_back_over_untiled_positions(self):
        # "a" is not a word, so position 1 has no tiling.
        words = frozenset({"ab", "abc", "cd"})
        assert split_words("abcd", words) == ["ab", "cd"]

    def test_reached_prefix_with_dead_tail(self):
        words = frozenset({"ab", "abc"})
        assert split_words("abcx", words) is None
