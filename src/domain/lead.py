"""Lead Domain Entity

A prospective client surfaced by a lead source.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel


class LeadStatus(str, Enum):
    """Outreach progress of a lead"""
    NEW = "new"
    CONTACTED = "contacted"
    RESPONDED = "responded"
    CONVERTED = "converted"


class Lead(BaseModel):
    """
    Lead - Prospective client

    Domain Rules:
    - Leads start as new
    - A lead becomes contacted once a cold message is delivered
    """

    id: str = Field(description="Lead identifier (e.g., lead_1718000000000_0)")

    name: str = Field(description="Contact name")

    email: str = Field(description="Contact email address")

    platform: str = Field(description="Platform the lead was found on")

    profile_url: str = Field(default="", description="Public profile URL")

    company: Optional[str] = Field(default=None, description="Company name")

    position: Optional[str] = Field(default=None, description="Job title")

    status: LeadStatus = Field(default=LeadStatus.NEW, description="Outreach status")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the lead was generated"
    )

    last_contact: Optional[datetime] = Field(
        default=None,
        description="When the lead was last contacted"
    )
