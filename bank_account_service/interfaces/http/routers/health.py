"""Liveness endpoint."""
from fastapi import APIRouter

from bank_account_service import __version__
from bank_account_service.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(version=__version__)
