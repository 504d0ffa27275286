"""
Best-category selection and confidence normalization
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from ticket_triage.classification.lexicon import Lexicon
from ticket_triage.models.schemas import Category

CLOSE_RUNNER_UP_RATIO = 0.7
DENOMINATOR_MULTIPLIER = 5


@dataclass(frozen=True)
class Selection:
    """Winner of the score scan and the runner-up score"""
    category: Category
    best_score: float
    second_best_score: float


def select_best(scores: Dict[Category, float]) -> Selection:
    """
    Scan scores in key order for the best and second-best values.

    Ties for the best score keep the first category seen. A later score
    equal to the current best becomes the second-best score.

    Args:
        scores: Disambiguated scores in lexicon declaration order

    Returns:
        Selection (OTHER with zero scores when nothing is positive)
    """
    best_category = Category.OTHER
    best_score = 0.0
    second_best_score = 0.0

    for category, score in scores.items():
        if score > best_score:
            second_best_score = best_score
            best_score = score
            best_category = category
        elif score > second_best_score:
            second_best_score = score

    return Selection(best_category, best_score, second_best_score)


def confidence_denominator(lexicon: Lexicon) -> float:
    """Largest single keyword weight times five"""
    return lexicon.max_keyword_weight * DENOMINATOR_MULTIPLIER


def normalize_confidence(selection: Selection, lexicon: Lexicon) -> Tuple[Category, float]:
    """
    Turn the winning raw score into a confidence in [0, 1].

    A runner-up above 70% of the best score reduces confidence linearly.
    Below the lexicon threshold, or with no evidence at all, the category
    falls back to OTHER; confidence is 0.0 only when there was no evidence.

    Args:
        selection: Output of select_best
        lexicon: Lexicon providing weights and threshold

    Returns:
        (category, confidence)
    """
    best_score = selection.best_score
    second_best_score = selection.second_best_score

    confidence = min(1.0, best_score / confidence_denominator(lexicon))

    if second_best_score > 0 and best_score > 0:
        ratio = second_best_score / best_score
        if ratio > CLOSE_RUNNER_UP_RATIO:
            confidence *= 1.0 - (ratio - CLOSE_RUNNER_UP_RATIO)

    category = selection.category
    if best_score == 0 or confidence < lexicon.confidence_threshold:
        category = Category.OTHER
        confidence = confidence if best_score > 0 else 0.0

    return category, max(0.0, min(1.0, confidence))
