"""Keyword insights over review comments.

Counts occurrences of a closed vocabulary of positive and negative words.
Words outside the two lexicons are ignored entirely; there is no stemming
and no weighting by rating.
"""

import re
from collections import Counter
from dataclasses import dataclass, field

POSITIVE_LEXICON = (
    "good",
    "great",
    "excellent",
    "amazing",
    "awesome",
    "fast",
    "friendly",
    "helpful",
    "professional",
    "recommend",
)

NEGATIVE_LEXICON = (
    "bad",
    "poor",
    "slow",
    "rude",
    "unprofessional",
    "late",
    "disappoint",
    "problem",
    "issue",
    "worst",
)

_NON_WORD = re.compile(r"\W+", re.ASCII)


@dataclass(frozen=True)
class SentimentSummary:
    positives: list = field(default_factory=list)
    negatives: list = field(default_factory=list)

    @property
    def has_signals(self):
        return bool(self.positives or self.negatives)


def tokenize(comment):
    return [token for token in _NON_WORD.split(comment.lower()) if token]


def _ranked(lexicon, counts):
    # sorted() is stable, so equal counts keep lexicon order
    return sorted((word for word in lexicon if counts[word]), key=lambda word: -counts[word])


def analyze_comments(comments):
    counts = Counter()
    for comment in comments or ():
        if comment:
            counts.update(tokenize(comment))

    return SentimentSummary(
        positives=_ranked(POSITIVE_LEXICON, counts),
        negatives=_ranked(NEGATIVE_LEXICON, counts),
    )


def analyze_reviews(reviews):
    return analyze_comments(getattr(review, "comment", None) for review in reviews or ())
