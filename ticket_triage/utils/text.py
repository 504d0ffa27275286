"""
Text helpers for building classifier input
"""
from typing import Any, Optional


def build_classification_input(subject: Optional[str], description: Optional[str]) -> str:
    """
    Join subject and description into the lower-cased text the classifier scans

    Missing fields are treated as empty strings.

    Args:
        subject: Ticket subject
        description: Ticket description

    Returns:
        "<subject> <description>" in lower case
    """
    return f"{subject or ''} {description or ''}".lower()


def text_from_source(source: Any) -> str:
    """Build classifier input from any object exposing subject/description"""
    return build_classification_input(
        getattr(source, "subject", None),
        getattr(source, "description", None),
    )
