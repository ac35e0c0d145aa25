"""
Text cleaning utilities: lower-casing, splitting and stopword removal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Pattern

WORD_SPLIT = re.compile(r"\W+")
PUNCTUATION_SPLIT = re.compile(r"[\s,.?!:;/]+")

SPLIT_PATTERNS = {
    "word": WORD_SPLIT,
    "punctuation": PUNCTUATION_SPLIT,
}

STOPWORDS: FrozenSet[str] = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "also",
    "am", "an", "and", "any", "are", "aren't", "as", "at", "be",
    "because", "been", "before", "being", "below", "between", "both",
    "but", "by", "can", "can't", "cannot", "could", "couldn't", "did",
    "didn't", "do", "does", "doesn't", "doing", "don't", "down",
    "during", "each", "few", "for", "from", "further", "had", "hadn't",
    "has", "hasn't", "have", "haven't", "having", "he", "he'd", "he'll",
    "he's", "her", "here", "here's", "hers", "herself", "him",
    "himself", "his", "how", "how's", "i", "i'd", "i'll", "i'm", "i've",
    "if", "in", "into", "is", "isn't", "it", "it's", "its", "itself",
    "let's", "me", "more", "most", "mustn't", "my", "myself", "no",
    "nor", "not", "of", "off", "on", "once", "only", "or", "other",
    "ought", "our", "ours", "ourselves", "out", "over", "own", "said",
    "same", "shan't", "she", "she'd", "she'll", "she's", "should",
    "shouldn't", "so", "some", "such", "than", "that", "that's", "the",
    "their", "theirs", "them", "themselves", "then", "there", "there's",
    "these", "they", "they'd", "they'll", "they're", "they've", "this",
    "those", "through", "to", "too", "under", "until", "up", "very",
    "was", "wasn't", "we", "we'd", "we'll", "we're", "we've", "were",
    "weren't", "what", "what's", "when", "when's", "where", "where's",
    "which", "while", "who", "who's", "whom", "why", "why's", "will",
    "with", "won't", "would", "wouldn't", "you", "you'd", "you'll",
    "you're", "you've", "your", "yours", "yourself", "yourselves",
})


def split_pattern_for(name: str) -> Pattern[str]:
    """Look up a split pattern by its config name ("word" or "punctuation")."""
    try:
        return SPLIT_PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"unknown tokenizer {name!r}; expected one of {sorted(SPLIT_PATTERNS)}"
        ) from None


@dataclass(frozen=True)
class TextCleaner:
    """Turns raw text into the ordered token sequence fed to the graph."""

    stopwords: FrozenSet[str] = STOPWORDS
    split_pattern: Pattern[str] = WORD_SPLIT

    @classmethod
    def named(cls, tokenizer: str, stopwords: Iterable[str] | None = None) -> "TextCleaner":
        words = STOPWORDS if stopwords is None else frozenset(w.lower() for w in stopwords)
        return cls(stopwords=words, split_pattern=split_pattern_for(tokenizer))

    def iter_tokens(self, text: str) -> Iterable[str]:
        for piece in self.split_pattern.split(text.lower()):
            if not piece or piece.isspace():
                continue
            if piece in self.stopwords:
                continue
            yield piece

    def clean(self, text: str) -> List[str]:
        return list(self.iter_tokens(text))


def iter_tokens(text: str) -> Iterable[str]:
    """Extract tokens with the default cleaner."""
    return TextCleaner().iter_tokens(text)
