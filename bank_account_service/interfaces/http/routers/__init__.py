from fastapi import APIRouter

from bank_account_service.interfaces.http.routers import accounts, data_rest, health


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, prefix="/bankAccounts", tags=["bank accounts"])
    router.include_router(data_rest.router, prefix="/data", tags=["data repository"])
    return router


__all__ = [
    "create_api_router",
    "health",
]
