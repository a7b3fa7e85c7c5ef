"""Word counting over text and a podium of the most frequent words."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from operator import itemgetter
from typing import Iterable, MutableMapping

from .ordered import OrderedList

LINE_BUFFER = 100
PUNCTUATION = frozenset(".,;:?!()[]{}'\"")


@dataclass
class TextStats:
    """Running totals gathered while reading a text."""

    words: int = 0
    spaces: int = 0
    punctuation: int = 0


@dataclass(frozen=True)
class PodiumEntry:
    """A word on the podium, with its count and its place."""

    word: str
    occurrences: int
    place: int


def is_letter(char: str) -> bool:
    """True for an ASCII letter."""
    return "A" <= char <= "Z" or "a" <= char <= "z"


def is_punctuation(char: str) -> bool:
    """True for one of the recognised punctuation marks."""
    return char in PUNCTUATION


def is_space(char: str) -> bool:
    """True for a blank space."""
    return char == " "


def read_word(line: str, start: int) -> tuple[str, int]:
    """Read the run of letters at ``start``.

    Returns the run in lower case and the index just past it.
    """
    end = start
    while end < len(line) and is_letter(line[end]):
        end += 1
    return line[start:end].lower(), end


def process_line(
    line: str, counts: MutableMapping[str, int], stats: TextStats
) -> None:
    """Count the words of ``line`` into ``counts`` and update ``stats``."""
    position = 0
    while position < len(line):
        word, end = read_word(line, position)
        if word:
            counts[word] = counts.get(word, 0) + 1
            stats.words += 1
        if end >= len(line):
            break
        separator = line[end]
        if is_space(separator):
            stats.spaces += 1
        elif is_punctuation(separator):
            stats.punctuation += 1
        position = end + 1


def _chunks(lines: Iterable[str]) -> Iterable[str]:
    size = LINE_BUFFER - 1
    for line in lines:
        for start in range(0, max(len(line), 1), size):
            chunk = line[start:start + size]
            if chunk:
                yield chunk


def process_text(
    lines: Iterable[str], counts: MutableMapping[str, int]
) -> TextStats:
    """Count every word of ``lines`` into ``counts``.

    Lines are read in pieces of at most ``LINE_BUFFER - 1`` characters,
    so a word that crosses a piece boundary counts as two words.
    """
    stats = TextStats()
    for chunk in _chunks(lines):
        process_line(chunk, counts, stats)
    return stats


def generate_podium(counts: MutableMapping[str, int], steps: int) -> list[PodiumEntry]:
    """Rank the words by count, keeping those placed within ``steps``.

    Tied words share a place. The number of tied words skipped is carried
    from one step to the next, so every later place moves on by all the
    ties seen so far.
    """
    ordered: OrderedList[tuple[str, int]] = OrderedList(key=itemgetter(1))
    for word, occurrences in counts.items():
        ordered.insert((word, occurrences))

    podium: list[PodiumEntry] = []
    place = 1
    winners = 1
    for occurrences, group in groupby(ordered, key=itemgetter(1)):
        if place > steps:
            break
        tied = [word for word, _ in group]
        podium.extend(PodiumEntry(word, occurrences, place) for word in tied)
        winners += len(tied) - 1
        place += winners
    return podium


def format_counts(counts: MutableMapping[str, int]) -> str:
    """Render the word counts, one entry per line."""
    return "".join(
        f"|Clave: '{word}' Ocurrencias: {occurrences}| \n"
        for word, occurrences in counts.items()
    )


def format_podium(podium: Iterable[PodiumEntry]) -> str:
    """Render the podium, one place per line."""
    return "".join(
        f"[PUESTO {entry.place}] Palabra '{entry.word}' "
        f"Ocurrencias {entry.occurrences}\n"
        for entry in podium
    )