"""Lead API Routes

FastAPI routes for mock lead generation.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.api.schemas.lead_schema import GenerateLeadsRequestSchema, LeadSchema
from src.app.use_cases.leads.dtos import GenerateLeadsCommandDTO
from src.app.use_cases.leads.generate_leads import GenerateLeads
from src.app.use_cases.leads.list_leads import ListLeads
from src.depends import ServiceContainer, get_services

router = APIRouter(prefix="/generate-leads", tags=["Leads"])

DEFAULT_LEAD_COUNT = 10


def serialize_leads(leads) -> list:
    return [
        LeadSchema.model_validate(lead).model_dump(mode="json", by_alias=True)
        for lead in leads
    ]


@router.post("", status_code=status.HTTP_200_OK)
async def generate_leads(
    request: GenerateLeadsRequestSchema,
    services: ServiceContainer = Depends(get_services),
):
    """
    Generate mock leads for a platform.

    **Request body:**
    - `platform` (required): e.g. LinkedIn
    - `keywords` (required): list of keywords
    - `count` (optional): number of leads, default 10

    **Returns:**
    - 200: `{success, leads, message}`
    - 422: Missing platform or keywords
    """
    count = request.count if request.count and request.count > 0 else DEFAULT_LEAD_COUNT
    command = GenerateLeadsCommandDTO(
        platform=request.platform,
        keywords=request.keywords,
        count=count,
    )

    use_case = GenerateLeads(services.lead_source, services.lead_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "success": True,
        "leads": serialize_leads(result.value.leads),
        "message": result.value.message,
    }


@router.get("", status_code=status.HTTP_200_OK)
async def list_leads(services: ServiceContainer = Depends(get_services)):
    """
    List stored leads.

    **Returns:**
    - 200: `{success, leads, total}`
    """
    result = await ListLeads(services.lead_repo).execute()

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "success": True,
        "leads": serialize_leads(result.value.leads),
        "total": result.value.total,
    }
