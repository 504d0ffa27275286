"""
Utility functions
"""
from ticket_triage.utils.logger import get_logger
from ticket_triage.utils.text import build_classification_input, text_from_source

__all__ = [
    "get_logger",
    "build_classification_input",
    "text_from_source",
]
