"""
Ticket Repository - in-memory ticket storage

Features:
- Thread-safe CRUD on tickets keyed by UUID
- Classification write-back used by the classifier's ResultSink
- Filtering by category, priority and status
- Pagination support

Reads hand out copies; stored tickets only change under the lock.
"""
import threading
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from ticket_triage.models.schemas import Category, Priority, Ticket, TicketStatus
from ticket_triage.utils.logger import get_logger

logger = get_logger(__name__)


class TicketRepository:
    """Repository for ticket storage operations"""

    def __init__(self):
        self._tickets: Dict[UUID, Ticket] = {}
        self._lock = threading.RLock()
        logger.info("TicketRepository initialized (in-memory)")

    def save(self, ticket: Ticket) -> Ticket:
        """
        Insert or replace a ticket

        Args:
            ticket: Ticket to store

        Returns:
            Copy of the stored Ticket
        """
        stored = ticket.model_copy(update={"updated_at": datetime.utcnow()})
        with self._lock:
            self._tickets[stored.id] = stored
        logger.info(f"Saved ticket: {stored.id}")
        return stored.model_copy()

    def get(self, ticket_id: UUID) -> Optional[Ticket]:
        """
        Get ticket by ID

        Args:
            ticket_id: Ticket UUID

        Returns:
            Copy of the Ticket if found, None otherwise
        """
        with self._lock:
            ticket = self._tickets.get(ticket_id)
            return ticket.model_copy() if ticket is not None else None

    def list(
        self,
        limit: int = 10,
        offset: int = 0,
        category: Optional[Category] = None,
        priority: Optional[Priority] = None,
        status: Optional[TicketStatus] = None
    ) -> List[Ticket]:
        """
        List tickets ordered by creation time, with optional filters

        Args:
            limit: Maximum number of tickets
            offset: Number of tickets to skip
            category: Only tickets with this category
            priority: Only tickets with this priority
            status: Only tickets with this status

        Returns:
            List of Ticket copies
        """
        with self._lock:
            tickets = [
                t.model_copy() for t in self._tickets.values()
                if (category is None or t.category == category)
                and (priority is None or t.priority == priority)
                and (status is None or t.status == status)
            ]
        tickets.sort(key=lambda t: t.created_at)
        return tickets[offset:offset + limit]

    def update(self, ticket_id: UUID, updates: Dict[str, Any]) -> Optional[Ticket]:
        """
        Apply field updates to a stored ticket

        Args:
            ticket_id: Ticket UUID
            updates: Fields to update

        Returns:
            Copy of the updated Ticket, or None if the ticket does not exist
        """
        with self._lock:
            ticket = self._tickets.get(ticket_id)
            if ticket is None:
                return None

            for field, value in updates.items():
                setattr(ticket, field, value)
            ticket.updated_at = datetime.utcnow()
            updated = ticket.model_copy()

        logger.info(f"Updated ticket {ticket_id}: {sorted(updates)}")
        return updated

    def delete(self, ticket_id: UUID) -> bool:
        """
        Delete a ticket

        Args:
            ticket_id: Ticket UUID

        Returns:
            True if a ticket was removed
        """
        with self._lock:
            removed = self._tickets.pop(ticket_id, None)

        if removed is None:
            return False
        logger.info(f"Deleted ticket: {ticket_id}")
        return True

    def save_classification(
        self,
        ticket_id: UUID,
        category: Category,
        priority: Priority,
        confidence: float
    ) -> Ticket:
        """
        Store classification fields on an existing ticket

        Args:
            ticket_id: Ticket UUID
            category: Assigned category
            priority: Assigned priority
            confidence: Classification confidence

        Returns:
            Copy of the updated Ticket

        Raises:
            KeyError: If the ticket does not exist
        """
        with self._lock:
            ticket = self._tickets.get(ticket_id)
            if ticket is None:
                logger.error(f"Failed to save classification: ticket {ticket_id} not found")
                raise KeyError(ticket_id)

            ticket.category = category
            ticket.priority = priority
            ticket.classification_confidence = confidence
            ticket.updated_at = datetime.utcnow()
            updated = ticket.model_copy()

        logger.info(
            f"Saved classification for ticket {ticket_id}: "
            f"{category.value}/{priority.value} ({confidence:.2f})"
        )
        return updated

    def count(self) -> int:
        with self._lock:
            return len(self._tickets)


class TicketResultSink:
    """ResultSink that writes a classification onto one stored ticket"""

    def __init__(self, repository: TicketRepository, ticket_id: UUID):
        self.repository = repository
        self.ticket_id = ticket_id

    def save(self, category: Category, priority: Priority, confidence: float) -> None:
        self.repository.save_classification(self.ticket_id, category, priority, confidence)
