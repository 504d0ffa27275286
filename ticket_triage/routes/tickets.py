"""
Ticket-related API routes
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ticket_triage.models.schemas import (
    Category,
    ClassificationResult,
    Priority,
    Ticket,
    TicketCreate,
    TicketResponse,
    TicketStatus,
    TicketUpdate,
)
from ticket_triage.services import TicketService, get_ticket_service

router = APIRouter(prefix="/api/v1/tickets", tags=["tickets"])


@router.post("", response_model=TicketResponse, status_code=201)
async def create_ticket(
    payload: TicketCreate,
    auto_classify: bool = Query(False, alias="autoClassify"),
    service: TicketService = Depends(get_ticket_service)
):
    """
    Create a ticket, optionally classifying it on the way in
    """
    ticket, classification = service.create_ticket(payload, auto_classify=auto_classify)
    return TicketResponse(ticket=ticket, classification=classification)


@router.get("", response_model=List[Ticket])
async def list_tickets(
    category: Optional[Category] = Query(None),
    priority: Optional[Priority] = Query(None),
    status: Optional[TicketStatus] = Query(None),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: TicketService = Depends(get_ticket_service)
):
    """
    List stored tickets, optionally filtered by category, priority and status
    """
    return service.list_tickets(
        limit=limit,
        offset=offset,
        category=category,
        priority=priority,
        status=status,
    )


@router.get("/{ticket_id}", response_model=Ticket)
async def get_ticket(
    ticket_id: UUID,
    service: TicketService = Depends(get_ticket_service)
):
    """
    Get ticket details
    """
    ticket = service.get_ticket(ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return ticket


@router.put("/{ticket_id}", response_model=Ticket)
async def update_ticket(
    ticket_id: UUID,
    payload: TicketUpdate,
    service: TicketService = Depends(get_ticket_service)
):
    """
    Update ticket fields
    """
    ticket = service.update_ticket(ticket_id, payload)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return ticket


@router.delete("/{ticket_id}", status_code=204)
async def delete_ticket(
    ticket_id: UUID,
    service: TicketService = Depends(get_ticket_service)
):
    """
    Delete a ticket
    """
    if not service.delete_ticket(ticket_id):
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return Response(status_code=204)


@router.post("/{ticket_id}/auto-classify", response_model=ClassificationResult)
async def auto_classify_ticket(
    ticket_id: UUID,
    service: TicketService = Depends(get_ticket_service)
):
    """
    Re-run classification on a stored ticket and persist the result
    """
    result = service.auto_classify(ticket_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Ticket {ticket_id} not found")
    return result
