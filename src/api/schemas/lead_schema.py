"""Lead and message schemas for the HTTP API

Camel-cased on the wire to match the dashboard.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from src.domain.chat_message import ChatMessage
from src.domain.lead import Lead, LeadStatus


class LeadSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str = Field(..., min_length=1)
    name: str
    email: str
    platform: str = ""
    profile_url: str = ""
    company: Optional[str] = None
    position: Optional[str] = None
    status: LeadStatus = LeadStatus.NEW
    created_at: Optional[datetime] = None
    last_contact: Optional[datetime] = None

    def to_domain(self) -> Lead:
        fields = self.model_dump(exclude_none=True)
        return Lead(**fields)


class ChatMessageSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    lead_id: str
    content: str
    type: str
    timestamp: datetime
    platform: str

    @classmethod
    def from_domain(cls, message: ChatMessage) -> "ChatMessageSchema":
        return cls(
            id=message.id,
            lead_id=message.lead_id,
            content=message.content,
            type=message.direction.value,
            timestamp=message.timestamp,
            platform=message.platform,
        )


class GenerateLeadsRequestSchema(BaseModel):
    """
    Request schema for generating leads

    Used for POST /generate-leads endpoint.
    """

    platform: str = Field(
        ...,
        min_length=1,
        description="Platform to source from (required, non-empty)"
    )

    keywords: List[str] = Field(
        ...,
        description="Search keywords"
    )

    count: Optional[int] = Field(
        default=None,
        description="Number of leads (defaults to 10)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "platform": "LinkedIn",
                "keywords": ["tech", "startup"],
                "count": 5
            }
        }


class SendMessageRequestSchema(BaseModel):
    """
    Request schema for sending a message

    Used for POST /send-message endpoint. `type` is cold_message (needs
    lead) or conversation (needs leadId and message).
    """

    model_config = ConfigDict(populate_by_name=True)

    lead_id: Optional[str] = Field(default=None, alias="leadId")
    lead: Optional[LeadSchema] = None
    message: Optional[str] = None
    type: Optional[str] = None
