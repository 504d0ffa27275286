"""
Classification lexicon

Weighted category keywords, ordered priority keywords and the structural
patterns that reinforce bug reports. Built once at import time and
read-only afterwards.
"""
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple, Pattern

from ticket_triage.models.schemas import Category, Priority

LEXICON_VERSION = "1.0"

STRUCTURAL_BONUS = 2.0
CONFIDENCE_THRESHOLD = 0.3


@dataclass(frozen=True)
class KeywordEntry:
    """A category keyword and the score it contributes when present"""
    word: str
    weight: float


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable keyword tables driving classification.

    Attributes:
        category_keywords: Category -> weighted keywords, in declaration order
        priority_keywords: Priority -> keywords, checked in declaration order
        structural_patterns: Patterns that signal a reproducible bug report
        structural_bonus: Score added to BUG_REPORT when a pattern matches
        confidence_threshold: Minimum confidence before falling back to OTHER
        version: Lexicon revision
    """
    category_keywords: Mapping[Category, Tuple[KeywordEntry, ...]]
    priority_keywords: Mapping[Priority, Tuple[str, ...]]
    structural_patterns: Tuple[Pattern, ...]
    structural_bonus: float = STRUCTURAL_BONUS
    confidence_threshold: float = CONFIDENCE_THRESHOLD
    version: str = LEXICON_VERSION

    @property
    def categories(self) -> Tuple[Category, ...]:
        """Keyed categories in declaration order"""
        return tuple(self.category_keywords)

    @property
    def max_keyword_weight(self) -> float:
        weights = [entry.weight for entries in self.category_keywords.values() for entry in entries]
        return max(weights, default=1.0)


def _entries(*pairs: Tuple[str, float]) -> Tuple[KeywordEntry, ...]:
    return tuple(KeywordEntry(word, weight) for word, weight in pairs)


def build_default_lexicon() -> Lexicon:
    """Build the standard support-ticket lexicon"""
    category_keywords = {
        Category.ACCOUNT_ACCESS: _entries(
            ("login", 1.0), ("password", 1.0),
            ("2fa", 1.5), ("locked out", 1.5),
            ("sign in", 1.0), ("authentication", 1.2),
            ("reset password", 1.5), ("can't log in", 1.5),
            ("access denied", 1.2), ("account locked", 1.5),
        ),
        Category.TECHNICAL_ISSUE: _entries(
            ("error", 1.0), ("crash", 1.2),
            ("broken", 1.0), ("not working", 1.2),
            ("exception", 1.0), ("slow", 0.8),
            ("freeze", 1.0), ("unresponsive", 1.0),
            ("500", 1.0), ("timeout", 1.0),
        ),
        Category.BILLING_QUESTION: _entries(
            ("payment", 1.2), ("invoice", 1.2),
            ("refund", 1.5), ("charge", 1.0),
            ("subscription", 1.0), ("billing", 1.5),
            ("receipt", 1.0), ("pricing", 1.0),
            ("plan", 0.5), ("upgrade", 0.8),
        ),
        Category.FEATURE_REQUEST: _entries(
            ("feature", 1.2), ("suggestion", 1.0),
            ("enhance", 1.0), ("would be nice", 1.5),
            ("add support", 1.2), ("request", 0.5),
            ("wish", 0.8), ("improve", 0.8),
            ("could you add", 1.5),
        ),
        Category.BUG_REPORT: _entries(
            ("steps to reproduce", 3.0), ("expected", 1.0),
            ("actual", 1.0), ("reproduce", 2.0),
            ("defect", 2.0), ("regression", 2.5),
            ("str:", 3.0),
        ),
    }

    priority_keywords = {
        Priority.URGENT: (
            "can't access", "critical", "production down", "security",
            "data loss", "outage", "emergency",
        ),
        Priority.HIGH: (
            "important", "blocking", "asap", "need immediately",
        ),
        Priority.LOW: (
            "minor", "cosmetic", "suggestion", "nice to have", "when you get a chance",
        ),
    }

    structural_patterns = (
        # numbered list item: "1. "
        re.compile(r"\d+\.\s", re.MULTILINE),
        re.compile(r"steps\s*to\s*reproduce", re.IGNORECASE),
        re.compile(r"expected\s*(result|behavior|outcome)", re.IGNORECASE),
        re.compile(r"actual\s*(result|behavior|outcome)", re.IGNORECASE),
    )

    return Lexicon(
        category_keywords=MappingProxyType(category_keywords),
        priority_keywords=MappingProxyType(priority_keywords),
        structural_patterns=structural_patterns,
    )


DEFAULT_LEXICON = build_default_lexicon()
