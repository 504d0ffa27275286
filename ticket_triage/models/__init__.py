"""
Pydantic models for Ticket Triage
"""

from ticket_triage.models.schemas import (
    # Enums
    Category,
    Priority,
    TicketStatus,

    # Classification
    ClassificationResult,

    # Tickets
    Ticket,

    # API Models
    TicketCreate,
    TicketUpdate,
    ClassifyRequest,
    BatchClassifyRequest,
    TicketResponse,
)

__all__ = [
    # Enums
    "Category",
    "Priority",
    "TicketStatus",

    # Classification
    "ClassificationResult",

    # Tickets
    "Ticket",

    # API Models
    "TicketCreate",
    "TicketUpdate",
    "ClassifyRequest",
    "BatchClassifyRequest",
    "TicketResponse",
]
