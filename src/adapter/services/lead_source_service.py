"""Mock Lead Source Implementation

Assembles randomized leads from fixed pools. No platform is contacted.
"""

import random
import time
from datetime import datetime, timezone
from typing import List, Optional
from src.app.services.lead_source_service import LeadSourceService
from src.domain.lead import Lead, LeadStatus

PLATFORMS = ["LinkedIn", "Twitter", "Facebook", "Instagram"]
COMPANIES = ["TechCorp", "InnovateLab", "StartupHub", "DigitalFlow", "CloudTech"]
POSITIONS = ["CEO", "CTO", "Marketing Director", "Sales Manager", "Founder"]
NAMES = ["John Smith", "Sarah Johnson", "Mike Chen", "Emily Davis", "Alex Rodriguez"]


class MockLeadSourceService(LeadSourceService):
    """
    LeadSourceService returning mock leads

    Keywords are accepted for interface compatibility but do not affect the
    output. Pass a seeded random.Random for reproducible results.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_count: int = 50):
        self.rng = rng or random.Random()
        self.max_count = max_count

    async def generate_leads(self, platform: str, keywords: List[str], count: int) -> List[Lead]:
        count = max(1, min(count, self.max_count))
        platform = platform or self.rng.choice(PLATFORMS)
        batch = int(time.time() * 1000)
        now = datetime.now(timezone.utc)

        leads = []
        for i in range(count):
            email_company = self.rng.choice(COMPANIES)
            leads.append(
                Lead(
                    id=f"lead_{batch}_{i}",
                    name=self.rng.choice(NAMES),
                    email=f"contact{i}@{email_company.lower()}.com",
                    platform=platform,
                    profile_url=f"https://{platform.lower()}.com/profile/{i}",
                    company=self.rng.choice(COMPANIES),
                    position=self.rng.choice(POSITIONS),
                    status=LeadStatus.NEW,
                    created_at=now,
                )
            )
        return leads
