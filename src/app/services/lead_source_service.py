"""Lead Source Service Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.lead import Lead


class LeadSourceService(ABC):

    @abstractmethod
    async def generate_leads(self, platform: str, keywords: List[str], count: int) -> List[Lead]:
        """
        Produce leads for a platform

        Args:
            platform: Platform name (e.g., LinkedIn)
            keywords: Search keywords
            count: Number of leads wanted

        Returns:
            Newly generated leads
        """
        pass
