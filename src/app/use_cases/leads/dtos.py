"""Data Transfer Objects for Lead Use Cases"""

from typing import List
from pydantic import BaseModel, Field
from src.domain.lead import Lead


class GenerateLeadsCommandDTO(BaseModel):
    """
    Command DTO for generating leads

    Used as input to GenerateLeads use case.
    """

    platform: str = Field(
        ...,
        min_length=1,
        description="Platform to source leads from (e.g., LinkedIn)"
    )

    keywords: List[str] = Field(
        ...,
        description="Search keywords"
    )

    count: int = Field(
        default=10,
        ge=1,
        description="Number of leads wanted"
    )


class GenerateLeadsResponseDTO(BaseModel):
    leads: List[Lead]
    message: str


class ListLeadsResponseDTO(BaseModel):
    leads: List[Lead]
    total: int
