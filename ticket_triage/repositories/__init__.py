"""
Repositories package for ticket storage

Provides:
- TicketRepository (in-memory ticket store)
- TicketResultSink (classification write-back for one ticket)
"""
from ticket_triage.repositories.ticket_repository import TicketRepository, TicketResultSink

__all__ = [
    "TicketRepository",
    "TicketResultSink",
]
