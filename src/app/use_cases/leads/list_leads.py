"""ListLeads Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.lead_repository import LeadRepository
from .dtos import ListLeadsResponseDTO

logger = logging.getLogger(__name__)


class ListLeads:

    def __init__(self, lead_repo: LeadRepository):
        self.lead_repo = lead_repo

    async def execute(self) -> Result[ListLeadsResponseDTO]:
        try:
            leads = await self.lead_repo.get_leads()
            return Return.ok(ListLeadsResponseDTO(leads=leads, total=len(leads)))
        except Exception as e:
            logger.error(f"Fetching leads failed: {e}")
            return Return.err(
                Error(
                    code="LIST_LEADS_FAILED",
                    message="Failed to fetch leads",
                    reason=str(e),
                )
            )
