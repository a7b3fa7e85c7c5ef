import pytest

from wordpodium.text import (
    LINE_BUFFER,
    PodiumEntry,
    TextStats,
    format_counts,
    format_podium,
    generate_podium,
    is_letter,
    is_punctuation,
    is_space,
    process_line,
    process_text,
    read_word,
)


@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "m"])
def test_is_letter_accepts_ascii_letters(char):
    assert is_letter(char) is True


@pytest.mark.parametrize("char", ["1", " ", ".", "é", "_"])
def test_is_letter_rejects_others(char):
    assert is_letter(char) is False


@pytest.mark.parametrize("char", list(".,;:?!()[]{}'\""))
def test_is_punctuation_accepts_marks(char):
    assert is_punctuation(char) is True


@pytest.mark.parametrize("char", ["a", " ", "-", "\n"])
def test_is_punctuation_rejects_others(char):
    assert is_punctuation(char) is False


def test_is_space():
    assert is_space(" ") is True
    assert is_space("\t") is False


def test_read_word_lowercases_and_stops_at_non_letter():
    assert read_word("HeLLo, world", 0) == ("hello", 5)


def test_read_word_at_separator_is_empty():
    assert read_word("a b", 1) == ("", 1)


def test_process_line_counts_words_spaces_and_punctuation():
    counts = {}
    stats = TextStats()
    process_line("Hola, hola mundo!\n", counts, stats)
    assert counts == {"hola": 2, "mundo": 1}
    assert stats == TextStats(words=3, spaces=2, punctuation=2)


def test_process_line_without_trailing_newline():
    counts = {}
    stats = TextStats()
    process_line("end", counts, stats)
    assert counts == {"end": 1}
    assert stats.words == 1


def test_process_text_sums_over_lines():
    counts = {}
    stats = process_text(["uno dos\n", "dos tres.\n"], counts)
    assert counts == {"uno": 1, "dos": 2, "tres": 1}
    assert stats.words == sum(counts.values())
    assert stats.spaces == 2
    assert stats.punctuation == 1


def test_process_text_splits_long_lines_like_a_fixed_buffer():
    size = LINE_BUFFER - 1
    long_word = "a" * (size + 10)
    counts = {}
    stats = process_text([long_word + "\n"], counts)
    assert stats.words == 2
    assert counts == {"a" * size: 1, "a" * 10: 1}


def test_generate_podium_orders_by_count():
    podium = generate_podium({"x": 1, "y": 3, "z": 2}, 5)
    assert [entry.word for entry in podium] == ["y", "z", "x"]
    assert [entry.place for entry in podium] == [1, 2, 3]


def test_generate_podium_ties_share_place_newest_first():
    podium = generate_podium({"a": 2, "b": 2}, 5)
    assert podium == [PodiumEntry("b", 2, 1), PodiumEntry("a", 2, 1)]


def test_generate_podium_carries_ties_forward():
    podium = generate_podium({"a": 5, "b": 5, "c": 3, "d": 2}, 5)
    assert [entry.place for entry in podium] == [1, 1, 3, 5]


def test_generate_podium_cuts_at_steps():
    counts = {word: n for n, word in enumerate("abcdefg", start=1)}
    podium = generate_podium(counts, 3)
    assert len(podium) == 3
    assert all(entry.place <= 3 for entry in podium)


def test_generate_podium_zero_steps_is_empty():
    assert generate_podium({"a": 1}, 0) == []


def test_format_counts():
    assert format_counts({"hola": 2}) == "|Clave: 'hola' Ocurrencias: 2| \n"


def test_format_podium():
    text = format_podium([PodiumEntry("hola", 2, 1)])
    assert text == "[PUESTO 1] Palabra 'hola' Ocurrencias 2\n"