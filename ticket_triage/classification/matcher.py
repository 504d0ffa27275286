"""
Keyword and structural-pattern matching
"""
from dataclasses import dataclass
from typing import Dict, List

from ticket_triage.classification.lexicon import Lexicon
from ticket_triage.models.schemas import Category


@dataclass
class MatchResult:
    """
    Raw evidence gathered from one piece of text.

    Attributes:
        scores: Category -> summed keyword weight (plus structural bonus for bugs)
        keywords: Category -> matched keywords, lexicon order
        has_structural_signal: True if any structural pattern matched
    """
    scores: Dict[Category, float]
    keywords: Dict[Category, List[str]]
    has_structural_signal: bool = False

    def score(self, category: Category) -> float:
        return self.scores.get(category, 0.0)

    def keyword_hits(self, category: Category) -> List[str]:
        return self.keywords.get(category, [])


def has_structural_signal(text: str, lexicon: Lexicon) -> bool:
    """Check text against the bug-report structural patterns"""
    return any(pattern.search(text) for pattern in lexicon.structural_patterns)


def match_keywords(text: str, lexicon: Lexicon) -> MatchResult:
    """
    Score text against every keyed category.

    A keyword counts once if it occurs anywhere in the text as a
    substring. When a structural pattern matches, BUG_REPORT receives
    the lexicon's structural bonus even without keyword hits.

    Args:
        text: Lower-cased classifier input
        lexicon: Keyword tables to match against

    Returns:
        MatchResult with one entry per keyed category
    """
    scores: Dict[Category, float] = {}
    keywords: Dict[Category, List[str]] = {}

    for category, entries in lexicon.category_keywords.items():
        score = 0.0
        found: List[str] = []
        for entry in entries:
            if entry.word.lower() in text:
                score += entry.weight
                found.append(entry.word)
        scores[category] = score
        keywords[category] = found

    structural = has_structural_signal(text, lexicon)
    if structural:
        scores[Category.BUG_REPORT] = scores.get(Category.BUG_REPORT, 0.0) + lexicon.structural_bonus

    return MatchResult(scores=scores, keywords=keywords, has_structural_signal=structural)
