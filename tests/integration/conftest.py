import random
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock
from httpx import ASGITransport, AsyncClient
from src.adapter.repositories.lead_repository import NullLeadRepository
from src.adapter.repositories.message_repository import NullMessageRepository
from src.adapter.services.lead_source_service import MockLeadSourceService
from src.adapter.services.pdf_service import ReportLabPdfService
from src.depends import ServiceContainer


@pytest.fixture
def notification_service():
    service = MagicMock()
    service.send_invoice = AsyncMock(return_value=True)
    service.send_cold_email = AsyncMock(return_value=True)
    return service


@pytest.fixture
def ai_service():
    service = MagicMock()
    service.generate_cold_message = AsyncMock(return_value="Hi there, quick idea.")
    service.generate_response = AsyncMock(return_value="Thanks for reaching out!")
    return service


@pytest.fixture
def chat_bot():
    bot = MagicMock()
    bot.send_message = AsyncMock(return_value=True)
    bot.set_webhook = AsyncMock(return_value=True)
    return bot


@pytest.fixture
def services(notification_service, ai_service, chat_bot):
    """Real PDF rendering and lead generation; outbound calls are mocked"""
    return ServiceContainer(
        pdf_service=ReportLabPdfService(company_name="Lead Desk"),
        notification_service=notification_service,
        ai_service=ai_service,
        lead_source=MockLeadSourceService(rng=random.Random(0)),
        chat_bot=chat_bot,
        lead_repo=NullLeadRepository(),
        message_repo=NullMessageRepository(),
        app_url="https://leads.example.com",
    )


@pytest_asyncio.fixture
async def client(services):
    """Create test client with injected collaborators"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, services=services)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
