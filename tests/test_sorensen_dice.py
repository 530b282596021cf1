import pytest

from fuzzy_match.scorers.sorensen_dice import bigrams, similarity_bigram


def test_bigrams_of_word():
    assert bigrams("rust") == {"ru": 1, "us": 1, "st": 1}


def test_bigrams_single_char_is_empty():
    assert not bigrams("b")


def test_bigrams_skip_whitespace():
    assert bigrams("ab cd") == {"ab": 1, "cd": 1}


def test_bigrams_count_repeats():
    assert bigrams("aaaa")["aa"] == 3


def test_known_values():
    assert similarity_bigram("rust", "bust") == pytest.approx(2 / 3)
    assert similarity_bigram("rust", "ritz") == 0.0
    assert similarity_bigram("chance", "enhance") == pytest.approx(8 / 11)


def test_repeated_bigrams_use_min_multiplicity():
    # "aaaa" -> aa x3, "aaa" -> aa x2: 2 * 2 / (3 + 2)
    assert similarity_bigram("aaaa", "aaa") == pytest.approx(0.8)


def test_case_insensitive():
    assert similarity_bigram("Rust", "rUST") == 1.0


@pytest.mark.parametrize("text", ["", "a", "rust", "new york", "Ünïcödé"])
def test_identity(text):
    assert similarity_bigram(text, text) == 1.0


def test_no_bigrams_on_either_side():
    assert similarity_bigram("a", "A") == 1.0
    assert similarity_bigram("a", "b") == 0.0
    assert similarity_bigram("", "") == 1.0


def test_no_bigrams_on_one_side():
    assert similarity_bigram("rust", "b") == 0.0
    assert similarity_bigram("string", "") == 0.0


@pytest.mark.parametrize(
    "a, b",
    [("rust", "bust"), ("chance", "enhance"), ("ab", "xab"), ("night", "nacht"), ("a", "")],
)
def test_symmetric_and_in_range(a, b):
    forward = similarity_bigram(a, b)
    assert forward == similarity_bigram(b, a)
    assert 0.0 <= forward <= 1.0


def test_none_is_empty_and_non_text_scores_zero():
    assert similarity_bigram(None, "") == 1.0
    assert similarity_bigram(b"rust", "rust") == 0.0
