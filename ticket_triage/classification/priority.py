"""
Priority detection
"""
from ticket_triage.classification.lexicon import Lexicon
from ticket_triage.models.schemas import Priority


def detect_priority(text: str, lexicon: Lexicon) -> Priority:
    """
    Return the first priority whose keyword list matches the text.

    Lists are checked in lexicon order (URGENT, HIGH, LOW); MEDIUM is
    returned when nothing matches.
    """
    for priority, keywords in lexicon.priority_keywords.items():
        for keyword in keywords:
            if keyword.lower() in text:
                return priority
    return Priority.MEDIUM
