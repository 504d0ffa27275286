"""
Pairwise disambiguation of overlapping category scores

Three rules run in a fixed order. Each one only fires when both
categories of its pair still score above zero, and each halves the
losing side's score.
"""
from typing import Dict

from ticket_triage.classification.matcher import MatchResult
from ticket_triage.models.schemas import Category

PENALTY_FACTOR = 0.5

BUG_OVER_FEATURE_KEYWORDS = ("defect", "regression")


def _both_positive(scores: Dict[Category, float], first: Category, second: Category) -> bool:
    return scores.get(first, 0.0) > 0 and scores.get(second, 0.0) > 0


def _halve(scores: Dict[Category, float], category: Category) -> None:
    scores[category] = scores[category] * PENALTY_FACTOR


def resolve_bug_vs_technical(scores: Dict[Category, float], match: MatchResult) -> None:
    """Structural signal favours BUG_REPORT, otherwise TECHNICAL_ISSUE wins"""
    if not _both_positive(scores, Category.BUG_REPORT, Category.TECHNICAL_ISSUE):
        return
    if match.has_structural_signal:
        _halve(scores, Category.TECHNICAL_ISSUE)
    else:
        _halve(scores, Category.BUG_REPORT)


def resolve_bug_vs_feature(scores: Dict[Category, float], match: MatchResult) -> None:
    """Explicit defect language demotes FEATURE_REQUEST"""
    if not _both_positive(scores, Category.BUG_REPORT, Category.FEATURE_REQUEST):
        return
    bug_keywords = match.keyword_hits(Category.BUG_REPORT)
    if any(keyword in bug_keywords for keyword in BUG_OVER_FEATURE_KEYWORDS):
        _halve(scores, Category.FEATURE_REQUEST)


def resolve_feature_vs_billing(scores: Dict[Category, float], match: MatchResult) -> None:
    """The side with fewer matched keywords is demoted; a tie changes nothing"""
    if not _both_positive(scores, Category.FEATURE_REQUEST, Category.BILLING_QUESTION):
        return
    feature_hits = len(match.keyword_hits(Category.FEATURE_REQUEST))
    billing_hits = len(match.keyword_hits(Category.BILLING_QUESTION))
    if billing_hits > feature_hits:
        _halve(scores, Category.FEATURE_REQUEST)
    elif feature_hits > billing_hits:
        _halve(scores, Category.BILLING_QUESTION)


RULES = (
    resolve_bug_vs_technical,
    resolve_bug_vs_feature,
    resolve_feature_vs_billing,
)


def disambiguate(match: MatchResult) -> Dict[Category, float]:
    """
    Apply every disambiguation rule to a copy of the raw scores.

    Args:
        match: Raw evidence from the matcher (left untouched)

    Returns:
        Adjusted scores, same key order as match.scores
    """
    scores = dict(match.scores)
    for rule in RULES:
        rule(scores, match)
    return scores
