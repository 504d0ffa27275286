"""
Classification Engine

Orchestrates matcher -> disambiguator -> selector -> normalizer, with
priority detection running independently on the same text.

classify() is pure and safe to call from any thread. classify_and_update()
additionally writes the outcome back onto the ticket and hands it to a
caller-supplied ResultSink.
"""
import asyncio
from functools import lru_cache
from typing import Iterable, List, Optional, Protocol, Sequence

from ticket_triage.classification.disambiguator import disambiguate
from ticket_triage.classification.lexicon import DEFAULT_LEXICON, Lexicon
from ticket_triage.classification.matcher import match_keywords
from ticket_triage.classification.priority import detect_priority
from ticket_triage.classification.selection import normalize_confidence, select_best
from ticket_triage.config import get_settings
from ticket_triage.models.schemas import Category, ClassificationResult, Priority
from ticket_triage.utils.logger import get_logger
from ticket_triage.utils.text import text_from_source

logger = get_logger(__name__)


class TextSource(Protocol):
    """Anything carrying a ticket subject and description"""
    subject: Optional[str]
    description: Optional[str]


class ResultSink(Protocol):
    """Persists a classification against the originating ticket"""

    def save(self, category: Category, priority: Priority, confidence: float) -> None:
        ...


def build_reasoning(
    category: Category,
    priority: Priority,
    keywords: Sequence[str],
    structural: bool
) -> str:
    """
    Assemble the explanation string

    Format: "Classified as <category>[ based on keywords: a, b]
    [. Structural patterns detected (reproduction steps).]. Priority set to <priority>."
    """
    parts = [f"Classified as {category.value}"]
    if keywords:
        parts.append(f" based on keywords: {', '.join(keywords)}")
    if structural:
        parts.append(". Structural patterns detected (reproduction steps).")
    parts.append(f". Priority set to {priority.value}.")
    return "".join(parts)


class ClassificationEngine:
    """Deterministic keyword classifier for support tickets"""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def classify_text(self, text: str) -> ClassificationResult:
        """
        Classify already-joined ticket text

        Args:
            text: Subject and description joined by a space (any case)

        Returns:
            ClassificationResult
        """
        text = (text or "").lower()

        match = match_keywords(text, self.lexicon)
        scores = disambiguate(match)
        selection = select_best(scores)
        category, confidence = normalize_confidence(selection, self.lexicon)
        priority = detect_priority(text, self.lexicon)

        # keywords always describe the highest-scoring category, even after a fallback to OTHER
        keywords = tuple(match.keyword_hits(selection.category))

        result = ClassificationResult(
            category=category,
            priority=priority,
            confidence=confidence,
            reasoning=build_reasoning(category, priority, keywords, match.has_structural_signal),
            keywords_found=keywords,
        )
        logger.debug(
            f"Classified as {category.value} (confidence={confidence:.3f}, "
            f"priority={priority.value}, keywords={list(keywords)})"
        )
        return result

    def classify(self, ticket: TextSource) -> ClassificationResult:
        """
        Classify a ticket from its subject and description

        Args:
            ticket: Object exposing subject/description (None treated as empty)

        Returns:
            ClassificationResult
        """
        return self.classify_text(text_from_source(ticket))

    def classify_and_update(self, ticket: TextSource, sink: ResultSink) -> ClassificationResult:
        """
        Classify a ticket, copy the outcome onto it and persist through the sink

        Errors raised by the sink propagate unchanged.

        Args:
            ticket: Mutable ticket object
            sink: Persistence collaborator

        Returns:
            The same ClassificationResult produced by classify()
        """
        result = self.classify(ticket)
        ticket.category = result.category
        ticket.priority = result.priority
        ticket.classification_confidence = result.confidence
        sink.save(result.category, result.priority, result.confidence)
        return result

    async def classify_batch(
        self,
        tickets: Iterable[TextSource],
        max_workers: Optional[int] = None
    ) -> List[ClassificationResult]:
        """
        Classify many tickets concurrently on worker threads

        Args:
            tickets: Tickets to classify
            max_workers: Concurrency limit (default: settings.classification_max_workers)

        Returns:
            Results in input order
        """
        tickets = list(tickets)
        if not tickets:
            return []

        limit = max_workers or get_settings().classification_max_workers
        semaphore = asyncio.Semaphore(max(1, limit))

        async def run_one(ticket: TextSource) -> ClassificationResult:
            async with semaphore:
                return await asyncio.to_thread(self.classify, ticket)

        logger.info(f"Classifying batch of {len(tickets)} tickets (workers={limit})")
        results = await asyncio.gather(*(run_one(ticket) for ticket in tickets))
        return list(results)


@lru_cache()
def get_engine() -> ClassificationEngine:
    """Get shared engine instance built on the default lexicon"""
    return ClassificationEngine()
