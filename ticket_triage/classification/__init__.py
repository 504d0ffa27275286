"""
Keyword-based ticket classification
"""
from ticket_triage.classification.engine import (
    ClassificationEngine,
    ResultSink,
    TextSource,
    get_engine,
)
from ticket_triage.classification.lexicon import (
    DEFAULT_LEXICON,
    LEXICON_VERSION,
    KeywordEntry,
    Lexicon,
)

__all__ = [
    "ClassificationEngine",
    "ResultSink",
    "TextSource",
    "get_engine",
    "DEFAULT_LEXICON",
    "LEXICON_VERSION",
    "KeywordEntry",
    "Lexicon",
]
