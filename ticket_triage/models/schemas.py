"""
Pydantic models for Ticket Triage

Enums shared by the classifier and the API, the immutable
ClassificationResult returned by the engine, and the ticket
models exchanged with the HTTP layer and the repository.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, ConfigDict


# ============================================================================
# Enums
# ============================================================================

class Category(str, Enum):
    """Ticket categories assigned by the classifier"""
    ACCOUNT_ACCESS = "account_access"
    TECHNICAL_ISSUE = "technical_issue"
    BILLING_QUESTION = "billing_question"
    FEATURE_REQUEST = "feature_request"
    BUG_REPORT = "bug_report"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: str) -> "Category":
        """Case-insensitive lookup by value"""
        for category in cls:
            if category.value == value.lower():
                return category
        raise ValueError(f"Invalid category: {value}")


class Priority(str, Enum):
    """Ticket priorities assigned by the classifier"""
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_value(cls, value: str) -> "Priority":
        """Case-insensitive lookup by value"""
        for priority in cls:
            if priority.value == value.lower():
                return priority
        raise ValueError(f"Invalid priority: {value}")


class TicketStatus(str, Enum):
    """Ticket lifecycle statuses"""
    NEW = "new"
    IN_PROGRESS = "in_progress"
    WAITING_CUSTOMER = "waiting_customer"
    RESOLVED = "resolved"
    CLOSED = "closed"


# ============================================================================
# Classification
# ============================================================================

class ClassificationResult(BaseModel):
    """
    Outcome of classifying one ticket.

    Attributes:
        category: Winning category (OTHER when evidence is too weak)
        priority: Detected priority (MEDIUM when no priority keyword matched)
        confidence: Normalized confidence in [0, 1]
        reasoning: Human-readable explanation of the decision
        keywords_found: Matched keywords of the winning category, lexicon order
    """
    model_config = ConfigDict(frozen=True)

    category: Category
    priority: Priority
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str
    keywords_found: Tuple[str, ...] = ()


# ============================================================================
# Tickets
# ============================================================================

class Ticket(BaseModel):
    """
    Stored support ticket.

    subject/description may be None for tickets built outside the API;
    the classifier treats them as empty text.
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    subject: Optional[str] = Field(None, description="Ticket subject")
    description: Optional[str] = Field(None, description="Ticket description")
    category: Optional[Category] = Field(None, description="Assigned category")
    priority: Priority = Field(Priority.MEDIUM, description="Assigned priority")
    status: TicketStatus = Field(TicketStatus.NEW, description="Lifecycle status")
    classification_confidence: Optional[float] = Field(
        None,
        ge=0.0,
        le=1.0,
        description="Confidence of the last automatic classification"
    )
    created_at: datetime = Field(default_factory=datetime.utcnow, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=datetime.utcnow, description="Last update timestamp")


# ============================================================================
# API Request/Response Models
# ============================================================================

class TicketCreate(BaseModel):
    """Schema for creating a new ticket (without generated fields)"""
    subject: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    category: Optional[Category] = None
    priority: Priority = Priority.MEDIUM


class TicketUpdate(BaseModel):
    """Schema for updating a ticket; only fields that are set are applied"""
    subject: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    status: Optional[TicketStatus] = None


class ClassifyRequest(BaseModel):
    """Free-text classification request"""
    subject: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)


class BatchClassifyRequest(BaseModel):
    """Batch classification request"""
    items: List[ClassifyRequest] = Field(..., max_length=1000)


class TicketResponse(BaseModel):
    """Ticket plus the classification produced while creating it, if any"""
    ticket: Ticket
    classification: Optional[ClassificationResult] = None
