from fastapi import APIRouter, Depends, Request

from src.core import limiter, search_rate_limit
from src.dependencies import get_storage
from src.schemas import CitizenSearchResponse, SearchErrorResponse
from src.serializers import page_to_response
from src.services.search import StoragePort, search_service

router = APIRouter(prefix="/citizens", tags=["citizens"])


@router.get(
    "/search",
    response_model=CitizenSearchResponse,
    responses={400: {"model": SearchErrorResponse}, 500: {"model": SearchErrorResponse}},
)
@limiter.limit(search_rate_limit)
async def search_citizens(
    request: Request,
    storage: StoragePort = Depends(get_storage),
):
    """
    Multi-criteria citizen search. All query parameters are optional:
    nameAr, nameEn, nationalId, passportNumber, familyMemberId, relationship,
    birthDateFrom, birthDateTo, registrationDateFrom, registrationDateTo,
    gender, maritalStatus, isAlive, page, pageSize.
    """
    page = await search_service.search(request.query_params, storage)
    return page_to_response(page)
