"""
Ticket Service - ticket lifecycle with automatic classification
"""
from typing import List, Optional, Tuple
from uuid import UUID

from ticket_triage.classification.engine import ClassificationEngine
from ticket_triage.models.schemas import (
    Category,
    ClassificationResult,
    Priority,
    Ticket,
    TicketCreate,
    TicketStatus,
    TicketUpdate,
)
from ticket_triage.repositories.ticket_repository import TicketRepository, TicketResultSink
from ticket_triage.utils.logger import get_logger

logger = get_logger(__name__)


class TicketService:
    """Creates, reads, updates, deletes and classifies stored tickets"""

    def __init__(self, repository: TicketRepository, engine: ClassificationEngine):
        self.repository = repository
        self.engine = engine

    def create_ticket(
        self,
        payload: TicketCreate,
        auto_classify: bool = False
    ) -> Tuple[Ticket, Optional[ClassificationResult]]:
        """
        Store a new ticket, optionally classifying it right away

        Args:
            payload: Validated ticket fields
            auto_classify: Run the classifier and persist its result

        Returns:
            (ticket, classification or None)
        """
        ticket = self.repository.save(Ticket(**payload.model_dump()))
        logger.info(f"Created ticket {ticket.id} (auto_classify={auto_classify})")

        if not auto_classify:
            return ticket, None

        result = self.engine.classify_and_update(ticket, TicketResultSink(self.repository, ticket.id))
        return ticket, result

    def get_ticket(self, ticket_id: UUID) -> Optional[Ticket]:
        return self.repository.get(ticket_id)

    def list_tickets(
        self,
        limit: int = 10,
        offset: int = 0,
        category: Optional[Category] = None,
        priority: Optional[Priority] = None,
        status: Optional[TicketStatus] = None
    ) -> List[Ticket]:
        return self.repository.list(
            limit=limit,
            offset=offset,
            category=category,
            priority=priority,
            status=status,
        )

    def update_ticket(self, ticket_id: UUID, payload: TicketUpdate) -> Optional[Ticket]:
        """
        Apply the fields set in the payload; fields left null are unchanged

        Returns:
            Updated Ticket, or None if the ticket does not exist
        """
        ticket = self.repository.update(ticket_id, payload.model_dump(exclude_none=True))
        if ticket is None:
            logger.warning(f"Update requested for unknown ticket {ticket_id}")
        return ticket

    def delete_ticket(self, ticket_id: UUID) -> bool:
        deleted = self.repository.delete(ticket_id)
        if not deleted:
            logger.warning(f"Delete requested for unknown ticket {ticket_id}")
        return deleted

    def auto_classify(self, ticket_id: UUID) -> Optional[ClassificationResult]:
        """
        Classify a stored ticket and persist the outcome

        Args:
            ticket_id: Ticket UUID

        Returns:
            ClassificationResult, or None if the ticket does not exist
        """
        ticket = self.repository.get(ticket_id)
        if ticket is None:
            logger.warning(f"Auto-classify requested for unknown ticket {ticket_id}")
            return None

        result = self.engine.classify_and_update(ticket, TicketResultSink(self.repository, ticket.id))
        logger.info(f"Auto-classified ticket {ticket_id} as {result.category.value}")
        return result
