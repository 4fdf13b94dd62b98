"""Companies Routes — CRUD under /companies.

Invariants:
    - users and userGroups are always [] in responses
"""

from fastapi import APIRouter, Depends, Response, status

from typed_api.api.dependencies import get_company_handlers
from typed_api.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from typed_api.services.handle_companies import CompanyHandlers

router = APIRouter(prefix="/companies", tags=["Companies"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Company not found"}}


@router.get(
    "", response_model=list[CompanyResponse],
    description="Get all companies", response_description="List of companies",
)
async def list_companies(handlers: CompanyHandlers = Depends(get_company_handlers)):
    return handlers.list_all()


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    description="Create a new company", response_description="Company created successfully",
)
async def create_company(
    body: CompanyCreate, handlers: CompanyHandlers = Depends(get_company_handlers),
):
    handlers.create(body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/{company_id}", response_model=CompanyResponse, responses=NOT_FOUND,
    description="Get a company by ID", response_description="Company details",
)
async def get_company(
    company_id: str,
    handlers: CompanyHandlers = Depends(get_company_handlers),
):
    return handlers.get(company_id)


@router.put(
    "/{company_id}", response_class=Response, responses=NOT_FOUND,
    description="Update a company by ID", response_description="Company updated successfully",
)
async def update_company(
    body: CompanyUpdate,
    company_id: str,
    handlers: CompanyHandlers = Depends(get_company_handlers),
):
    handlers.update(company_id, body)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{company_id}", response_class=Response, responses=NOT_FOUND,
    description="Delete a company by ID", response_description="Company deleted successfully",
)
async def delete_company(
    company_id: str,
    handlers: CompanyHandlers = Depends(get_company_handlers),
):
    handlers.delete(company_id)
    return Response(status_code=status.HTTP_200_OK)
