from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.schemas.service_response import ServiceResponse

router = APIRouter()


@router.get("", response_model=None, summary="Liveness probe")
async def health_check() -> JSONResponse:
    return ServiceResponse.ok("Service is healthy").to_response()
