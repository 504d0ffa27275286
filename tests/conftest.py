"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from ticket_triage.classification.engine import ClassificationEngine
from ticket_triage.classification.lexicon import DEFAULT_LEXICON
from ticket_triage.main import create_app
from ticket_triage.repositories.ticket_repository import TicketRepository
from ticket_triage.services import TicketService, get_ticket_service


@pytest.fixture
def lexicon():
    return DEFAULT_LEXICON


@pytest.fixture
def engine():
    return ClassificationEngine()


@pytest.fixture
def ticket_repository():
    return TicketRepository()


@pytest.fixture
def ticket_service(ticket_repository, engine):
    return TicketService(ticket_repository, engine)


@pytest.fixture
def client(ticket_service):
    """Test client with an isolated ticket service"""
    app = create_app()
    app.dependency_overrides[get_ticket_service] = lambda: ticket_service
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def account_access_ticket():
    return {
        "subject": "Can't log in",
        "description": "locked out of my account, password reset not working, authentication error",
    }


@pytest.fixture
def bug_report_ticket():
    return {
        "subject": "Bug found in checkout",
        "description": (
            "Steps to reproduce: 1. Go to checkout 2. Click pay. "
            "Expected result: payment processes. Actual result: error shown. This is a defect."
        ),
    }
