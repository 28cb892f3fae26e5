"""Lead use cases"""
from .generate_leads import GenerateLeads
from .list_leads import ListLeads
from .dtos import GenerateLeadsCommandDTO, GenerateLeadsResponseDTO, ListLeadsResponseDTO

__all__ = [
    "GenerateLeads",
    "ListLeads",
    "GenerateLeadsCommandDTO",
    "GenerateLeadsResponseDTO",
    "ListLeadsResponseDTO",
]
