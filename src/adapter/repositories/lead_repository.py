"""Null Lead Repository Implementation

Stands in for a database: writes are discarded and reads come back empty.
"""

import logging
from typing import List
from src.app.repositories.lead_repository import LeadRepository
from src.domain.lead import Lead

logger = logging.getLogger(__name__)


class NullLeadRepository(LeadRepository):
    """LeadRepository that stores nothing"""

    async def save_leads(self, leads: List[Lead]) -> None:
        logger.debug(f"Discarding {len(leads)} leads (no persistence configured)")

    async def get_leads(self) -> List[Lead]:
        return []
