"""Compare writing styles by how often common function words appear."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from pathlib import Path

FEATURES: tuple[str, ...] = (
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "aren't", "as", "at", "be", "because", "been", "before", "being",
    "below", "between", "both", "but", "by", "can't", "cannot", "could", "couldn't",
    "did", "didn't", "do", "does", "doesn't", "doing", "don't", "down", "during",
    "each", "few", "for", "from", "further", "had", "hadn't", "has", "hasn't", "have",
    "haven't", "having", "he", "he'd", "he'll", "he's", "her", "here", "here's", "hers",
    "herself", "him", "himself", "his", "how", "how's", "i", "i'd", "i'll", "i'm",
    "i've", "if", "in", "into", "is", "isn't", "it", "it's", "its", "itself", "let's",
    "me", "more", "most", "mustn't", "my", "myself", "no", "nor", "not", "of", "off",
    "on", "once", "only", "or", "other", "ought", "our", "ours", "ourselves", "out",
    "over", "own", "same", "shan't", "she", "she'd", "she'll", "she's", "should",
    "shouldn't", "so", "some", "such", "than", "that", "that's", "the", "their",
    "theirs", "them", "themselves", "then", "there", "there's", "these", "they",
    "they'd", "they'll", "they're", "they've", "this", "those", "through", "to", "too",
    "under", "until", "up", "very", "was", "wasn't", "we", "we'd", "we'll", "we're",
    "we've", "were", "weren't", "what", "what's", "when", "when's", "where", "where's",
    "which", "while", "who", "who's", "whom", "why", "why's", "with", "won't", "would",
    "wouldn't", "you", "you'd", "you'll", "you're", "you've", "your", "yours",
    "yourself", "yourselves", "!", "\"", "#", "$", "%", "&", "'", "(", ")", "*", "+",
    ",", "-", ".", "/", ":", ";", "<", "=", ">", "?", "@", "[", "\\", "]", "^", "_",
    "`", "{", "|", "}", "~",
)

AUTHORS: tuple[str, ...] = ("hamilton", "jj", "madison")


def text_from_lines(lines: Iterable[str], lowercase: bool = False) -> str:
    """Join lines into one string, each line followed by a single space."""
    parts = []
    for line in lines:
        line = line.rstrip("\n")
        parts.append((line.lower() if lowercase else line) + " ")
    return "".join(parts)


def exclamations_to_questions(text: str) -> str:
    """Turn every exclamation mark into a question mark."""
    return text.replace("!", "?")


def remove_spaces(text: str) -> str:
    """Drop every whitespace character."""
    return "".join(char for char in text if not char.isspace())


def count_occurrences(text: str, feature: str) -> int:
    """Count appearances of feature in text, overlapping ones included."""
    if not feature:
        return len(text)
    count = 0
    start = text.find(feature)
    while start != -1:
        count += 1
        start = text.find(feature, start + 1)
    return count


def count_word(text: str, word: str) -> int:
    """Count appearances of word surrounded by single spaces."""
    return count_occurrences(text, f" {word} ")


def presence_vector(text: str, features: Sequence[str] = FEATURES) -> list[int]:
    """Return 1 for each feature found anywhere in text, 0 otherwise."""
    return [1 if feature in text else 0 for feature in features]


def count_vector(text: str, features: Sequence[str] = FEATURES) -> list[int]:
    """Return how often each feature appears in text as a whole word."""
    return [count_word(text, feature) for feature in features]


def dot_product(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the inner product of two vectors of equal length."""
    return sum(a * b for a, b in zip(v1, v2, strict=True))


def magnitude(v: Sequence[float]) -> float:
    """Return the Euclidean length of v."""
    return math.sqrt(dot_product(v, v))


def similarity(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the cosine of the angle between v1 and v2.

    Raises ZeroDivisionError when either vector is all zeros.
    """
    return dot_product(v1, v2) / (magnitude(v1) * magnitude(v2))


def _read_vector(path: Path) -> list[int]:
    with path.open(encoding="utf-8") as handle:
        return count_vector(text_from_lines(handle, lowercase=True))


def main(argv: Sequence[str] | None = None) -> int:
    """Compare an unknown text with each known author's text."""
    parser = argparse.ArgumentParser(prog="coursekit-stylometry")
    parser.add_argument("--res-dir", default="res", help="directory holding the texts")
    args = parser.parse_args(argv)
    res_dir = Path(args.res_dir)

    unknown = _read_vector(res_dir / "unknown.txt")
    for author in AUTHORS:
        known = _read_vector(res_dir / f"{author}.txt")
        print(f"Similarity - {author} <-> unknown: {similarity(known, unknown):.6g}")
    return 0