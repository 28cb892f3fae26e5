"""Lead Repository Interface

Defines the contract for lead persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.lead import Lead


class LeadRepository(ABC):
    """
    Repository interface for Lead persistence

    Implementations may discard writes; callers treat empty reads as normal.
    """

    @abstractmethod
    async def save_leads(self, leads: List[Lead]) -> None:
        """
        Persist generated leads

        Args:
            leads: Leads to store
        """
        pass

    @abstractmethod
    async def get_leads(self) -> List[Lead]:
        """
        Retrieve stored leads

        Returns:
            List of leads (possibly empty)
        """
        pass
