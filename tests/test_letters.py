import pytest
from packages.letters import Word, count_letters, is_constructible, filter_constructible

DODGE = {"d": 2, "o": 1, "g": 1, "e": 1}


# --- count_letters ---
@pytest.mark.parametrize("text", [
    "dodge",
    "DODGE",
    "doDGe",
    "dod123ge",
    "\t   dod   ge\t\t\n  ",
    "do,dg!#$%^e",
])
def test_count_letters_ignores_case_and_noise(text):
    assert count_letters(text) == DODGE


@pytest.mark.parametrize("word", ["Mammal", "BACK", "wArTsMrF", "Zebra", "q", "fSuCwCaUmVxVkFvPbKjW"])
@pytest.mark.parametrize("noise", ["1", " ", "\t\n", "!?-'", "9 ,\u00e9\u212a"])
def test_count_letters_noise_between_letters_changes_nothing(word, noise):
    noisy = noise + noise.join(word) + noise
    assert count_letters(noisy) == count_letters(word) == count_letters(word.lower())
    assert sum(count_letters(noisy).values()) == len(word)


def test_count_letters_wrong_count():
    assert count_letters("dodgy") != DODGE


@pytest.mark.parametrize("text", ["", "   ", "1234", "!?#\t\n", "éü"])
def test_count_letters_without_letters_is_empty(text):
    assert count_letters(text) == {}


def test_count_letters_never_stores_zero_and_totals_match():
    text = "Mammal, 42 times!"
    m = count_letters(text)
    assert all(v >= 1 for v in m.values())
    assert sum(m.values()) == sum(1 for ch in text if ch.isascii() and ch.isalpha())
    assert m == count_letters(text.lower())


def test_count_letters_kelvin_sign_is_not_k():
    # U+212A lowercases to ASCII 'k' but is not an ASCII letter
    assert count_letters("\u212a") == {}


# --- is_constructible ---
def test_word_can_be_constructed():
    assert is_constructible(count_letters("dog"), count_letters("dodge")) is True


def test_word_cannot_be_constructed():
    assert is_constructible(count_letters("dodgy"), count_letters("dodge")) is False


def test_empty_pool():
    assert is_constructible(count_letters("something"), count_letters("")) is False


@pytest.mark.parametrize("pool", ["", "list", "abcdefghijklmnopqrstuvwxyz" * 3])
def test_empty_word_is_never_constructible(pool):
    assert is_constructible(count_letters(""), count_letters(pool)) is False
    assert is_constructible({}, count_letters(pool)) is False


def test_counts_matter():
    assert is_constructible(count_letters("bed"), count_letters("bde")) is True
    assert is_constructible(count_letters("deed"), count_letters("bde")) is False


def test_mammal_needs_three_ms():
    word = count_letters("mammal")
    assert is_constructible(word, count_letters("mammal")) is True
    assert is_constructible(word, count_letters("mamal")) is False


# --- Word ---
def test_word_from_text_keeps_value_verbatim():
    w = Word.from_text("  Cat's ")
    assert w.value == "  Cat's "
    assert w.letters == {"c": 1, "a": 1, "t": 1, "s": 1}


def test_word_is_frozen():
    w = Word.from_text("cat")
    with pytest.raises(AttributeError):
        w.value = "dog"


# --- filter_constructible ---
WORDS = [Word.from_text(s) for s in
         ["arm", "", "art", "back", "!!", "camp", "cap", "tar", "cub", "cup", "mammal"]]


def test_filter_empty_input():
    assert filter_constructible([], count_letters("abc")) == []


def test_filter_skips_blank_and_symbol_entries():
    out = filter_constructible(WORDS, count_letters("abcdefghijklmnopqrstuvwxyz"), mode="serial")
    assert "" not in out and "!!" not in out
    assert out == ["arm", "art", "back", "camp", "cap", "tar", "cub", "cup"]


@pytest.mark.parametrize("mode,workers,chunk_size", [
    ("serial", None, 2048),
    ("auto", None, 2048),
    ("thread", 1, 1),
    ("thread", 3, 1),
    ("thread", 4, 3),
    ("process", 2, 2),
])
def test_filter_preserves_order_in_every_mode(mode, workers, chunk_size):
    pool = count_letters("tarbackpu")
    out = filter_constructible(WORDS, pool, mode=mode, workers=workers, chunk_size=chunk_size)
    assert out == ["art", "back", "cap", "tar", "cub", "cup"]


def test_filter_parallel_matches_serial_on_larger_input():
    words = [Word.from_text(s) for s in ["cab", "abc", "zzz", "ba", "cca", "a", ""] * 200]
    pool = count_letters("abcc")
    serial = filter_constructible(words, pool, mode="serial")
    assert filter_constructible(words, pool, mode="thread", workers=4, chunk_size=7) == serial
    assert len(serial) == 5 * 200


def test_filter_does_not_mutate_inputs():
    pool = count_letters("tarm")
    before = dict(pool)
    words = list(WORDS)
    filter_constructible(words, pool, mode="thread", workers=2, chunk_size=2)
    assert pool == before
    assert words == WORDS


@pytest.mark.parametrize("kwargs", [
    {"mode": "gpu"},
    {"workers": 0},
    {"chunk_size": 0},
])
def test_filter_rejects_bad_policy(kwargs):
    with pytest.raises(ValueError):
        filter_constructible(WORDS, count_letters("abc"), **kwargs)
