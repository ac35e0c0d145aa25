"""
Tests for the keyword extraction pipeline.
"""

from __future__ import annotations

import logging

import pytest

from keyrank.rank import (
    KeywordExtractor,
    KeywordResult,
    TextCleaner,
    TextRankConfig,
    extract_keywords,
)


ENCRYPTION = (
    "Encryption is the process of using an algorithm to convert plaintext into "
    "ciphertext, a form that cannot be easily understood by a human or machine "
    "without knowing how to decrypt it."
)

ENCRYPTION_TOKENS = [
    "encryption", "process", "using", "algorithm", "convert", "plaintext",
    "ciphertext", "form", "easily", "understood", "human", "machine",
    "without", "knowing", "decrypt",
]


def test_cleaned_tokens_for_sample_sentence():
    assert TextCleaner().clean(ENCRYPTION) == ENCRYPTION_TOKENS


def test_extract_returns_length_based_number_of_keywords():
    keywords = KeywordExtractor().extract(ENCRYPTION)

    # 15 tokens -> 15 // 5 = 3, clamped up to the minimum of 5
    assert len(keywords) == 5
    assert set(keywords) <= set(ENCRYPTION_TOKENS)
    # the sentence ends have the fewest neighbours
    assert "encryption" not in keywords
    assert "decrypt" not in keywords


def test_extract_with_scores_is_sorted_and_counted():
    result = KeywordExtractor().extract_with_scores(ENCRYPTION)

    scores = [s for _, s in result.keywords]
    assert scores == sorted(scores, reverse=True)
    assert result.token_count == 15
    assert result.node_count == 15
    assert result.edge_count == 39
    assert result.words == [w for w, _ in result.keywords]


def test_hub_word_ranks_first():
    config = TextRankConfig(window_size=2)
    keywords = KeywordExtractor(config).extract("graph alpha graph beta graph gamma graph delta")

    assert keywords[0] == "graph"


def test_ties_keep_first_occurrence_order():
    config = TextRankConfig(window_size=1)
    keywords = KeywordExtractor(config).extract(ENCRYPTION)

    assert keywords == ENCRYPTION_TOKENS[:5]


def test_rank_tokens_three_cycle_example():
    result = KeywordExtractor(TextRankConfig(window_size=2)).rank_tokens(["a", "b", "c", "a", "b"])

    assert result.words == ["a", "b", "c"]
    for _, s in result.keywords:
        assert s == pytest.approx(1.0)


def test_fixed_top_n_overrides_length_rule():
    keywords = KeywordExtractor(TextRankConfig(top_n=2)).extract(ENCRYPTION)

    assert len(keywords) == 2


def test_zero_iterations_keeps_first_occurrence_order():
    keywords = KeywordExtractor(TextRankConfig(iterations=0, top_n=3)).extract(ENCRYPTION)

    assert keywords == ENCRYPTION_TOKENS[:3]


@pytest.mark.parametrize("text", ["", "   \n", "The and of it is."])
def test_empty_input_gives_empty_result(text: str):
    extractor = KeywordExtractor()

    assert extractor.extract(text) == []
    assert extractor.extract_with_scores(text) == KeywordResult()


def test_extraction_is_deterministic():
    first = KeywordExtractor().extract_with_scores(ENCRYPTION)
    second = KeywordExtractor().extract_with_scores(ENCRYPTION)

    assert first == second


def test_custom_cleaner_is_used():
    cleaner = TextCleaner.named("word", stopwords=["graph"])
    keywords = KeywordExtractor(TextRankConfig(window_size=2), cleaner=cleaner).extract(
        "graph alpha graph beta"
    )

    assert "graph" not in keywords
    assert keywords == ["alpha", "beta"]


@pytest.mark.parametrize(
    "config",
    [
        TextRankConfig(damping_factor=1.2),
        TextRankConfig(window_size=0),
        TextRankConfig(iterations=-5),
        TextRankConfig(top_n=-1),
        TextRankConfig(min_keywords=10, max_keywords=3),
        TextRankConfig(tokenizer="bogus"),
    ],
)
def test_invalid_config_fails_at_construction(config: TextRankConfig):
    with pytest.raises(ValueError):
        KeywordExtractor(config)


def test_debug_logging_reports_graph(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="keyrank.rank.extractor"):
        KeywordExtractor().extract(ENCRYPTION)

    assert "CoOccurrenceGraph(nodes=15" in caplog.text


def test_extract_keywords_helper():
    assert extract_keywords(ENCRYPTION) == KeywordExtractor().extract(ENCRYPTION)
