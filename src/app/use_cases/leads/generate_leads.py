"""GenerateLeads Use Case

Sources new leads and hands them to the lead repository.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.lead_repository import LeadRepository
from src.app.services.lead_source_service import LeadSourceService
from .dtos import GenerateLeadsCommandDTO, GenerateLeadsResponseDTO

logger = logging.getLogger(__name__)


class GenerateLeads:
    """
    Use Case: Generate leads for a platform

    Flow:
    1. Ask the lead source for leads
    2. Save them (the repository may discard them)
    3. Return the generated leads
    """

    def __init__(self, lead_source: LeadSourceService, lead_repo: LeadRepository):
        self.lead_source = lead_source
        self.lead_repo = lead_repo

    async def execute(self, command: GenerateLeadsCommandDTO) -> Result[GenerateLeadsResponseDTO]:
        try:
            leads = await self.lead_source.generate_leads(
                command.platform, command.keywords, command.count
            )
            await self.lead_repo.save_leads(leads)

            logger.info(f"Generated {len(leads)} leads from {command.platform}")
            return Return.ok(
                GenerateLeadsResponseDTO(
                    leads=leads,
                    message=f"Generated {len(leads)} leads from {command.platform}",
                )
            )
        except Exception as e:
            logger.error(f"Lead generation failed: {e}")
            return Return.err(
                Error(
                    code="GENERATE_LEADS_FAILED",
                    message="Failed to generate leads",
                    reason=str(e),
                )
            )
