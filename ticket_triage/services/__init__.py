"""
Business Logic Services
"""
from functools import lru_cache

from .ticket_service import TicketService
from ticket_triage.classification.engine import get_engine
from ticket_triage.repositories.ticket_repository import TicketRepository

__all__ = [
    "TicketService",
    "get_ticket_service",
]


@lru_cache()
def get_ticket_service() -> TicketService:
    """Get shared ticket service backed by the in-memory repository"""
    return TicketService(TicketRepository(), get_engine())
