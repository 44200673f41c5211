"""Repository style endpoints with HAL-like envelopes and named projections.

Resources are exposed the way a data repository publishes them: collections
wrapped in ``_embedded`` and every item carrying ``_links``. The ``p1``
projection narrows an account to ``id``, ``type`` and ``balance``.
"""
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.interfaces.http.deps import (
    get_bank_account_service,
    get_customer_service,
    get_db_session,
)
from bank_account_service.modules.accounts import (
    AccountProjection,
    AccountType,
    BankAccountNotFoundError,
    BankAccountResponse,
    BankAccountValidationError,
)
from bank_account_service.modules.accounts.service import BankAccountService
from bank_account_service.modules.customers import Customer, CustomerNotFoundError
from bank_account_service.modules.customers.service import CustomerService
from bank_account_service.schemas import (
    AccountProjectionDTO,
    BankAccountRequestDTO,
    BankAccountResponseDTO,
    BankAccountUpdateDTO,
    CustomerResponse,
)

router = APIRouter()

ACCOUNT_PROJECTIONS = {"p1"}

AccountView = Union[BankAccountResponse, AccountProjection]


def _href(request: Request, *parts: Any) -> str:
    base = str(request.base_url).rstrip("/")
    prefix = request.app.state.container.settings.data_rest_prefix
    return "/".join([base + prefix, *(str(part) for part in parts)])


def _check_projection(projection: Optional[str]) -> Optional[str]:
    if projection is not None and projection not in ACCOUNT_PROJECTIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown projection '{projection}', expected one of {sorted(ACCOUNT_PROJECTIONS)}",
        )
    return projection


def _account_resource(request: Request, account: AccountView) -> dict:
    projected = isinstance(account, AccountProjection)
    if projected:
        body = AccountProjectionDTO.model_validate(account).model_dump(mode="json", by_alias=True)
    else:
        body = BankAccountResponseDTO.model_validate(account).model_dump(
            mode="json", by_alias=True, exclude={"customer"}
        )

    self_href = _href(request, "bankAccounts", account.id)
    links = {
        "self": {"href": self_href},
        "bankAccount": {"href": self_href + "{?projection}", "templated": True},
    }
    if not projected:
        links["customer"] = {"href": self_href + "/customer"}
    body["_links"] = links
    return body


def _account_collection(
    request: Request,
    accounts: list[AccountView],
    self_href: str,
) -> dict:
    return {
        "_embedded": {
            "bankAccounts": [_account_resource(request, account) for account in accounts],
        },
        "_links": {
            "self": {"href": self_href},
            "search": {"href": _href(request, "bankAccounts", "search")},
        },
    }


def _customer_resource(request: Request, customer: Customer) -> dict:
    body = CustomerResponse.model_validate(customer).model_dump(mode="json", by_alias=True)
    self_href = _href(request, "customers", customer.id)
    body["_links"] = {
        "self": {"href": self_href},
        "bankAccounts": {"href": self_href + "/bankAccounts"},
    }
    return body


@router.get("/bankAccounts")
async def list_accounts(
    request: Request,
    projection: Optional[str] = None,
    service: BankAccountService = Depends(get_bank_account_service),
):
    if _check_projection(projection):
        accounts = await service.list_projections()
    else:
        accounts = await service.list_accounts()
    return _account_collection(request, accounts, _href(request, "bankAccounts"))


@router.get("/bankAccounts/search")
async def list_searches(request: Request):
    return {
        "_links": {
            "byType": {"href": _href(request, "bankAccounts", "search", "byType") + "{?t,projection}", "templated": True},
            "self": {"href": _href(request, "bankAccounts", "search")},
        }
    }


@router.get("/bankAccounts/search/byType")
async def search_by_type(
    request: Request,
    account_type: AccountType = Query(..., alias="t"),
    projection: Optional[str] = None,
    service: BankAccountService = Depends(get_bank_account_service),
):
    if _check_projection(projection):
        accounts = await service.list_projections(account_type)
    else:
        accounts = await service.find_by_type(account_type)
    self_href = _href(request, "bankAccounts", "search", "byType") + f"?t={account_type.value}"
    return _account_collection(request, accounts, self_href)


@router.get("/bankAccounts/{account_id}")
async def get_account(
    request: Request,
    account_id: str,
    projection: Optional[str] = None,
    service: BankAccountService = Depends(get_bank_account_service),
):
    projected = _check_projection(projection)
    try:
        if projected:
            account = await service.get_projection(account_id)
        else:
            account = await service.get_account(account_id)
    except BankAccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _account_resource(request, account)


@router.get("/bankAccounts/{account_id}/customer")
async def get_account_customer(
    request: Request,
    account_id: str,
    service: BankAccountService = Depends(get_bank_account_service),
):
    try:
        account = await service.get_account(account_id)
    except BankAccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if account.customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Bank account {account_id} has no customer")
    return _customer_resource(request, account.customer)


@router.post("/bankAccounts", status_code=status.HTTP_201_CREATED)
async def create_account(
    request: Request,
    payload: BankAccountRequestDTO,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        account = await service.add_account(payload.to_domain())
    except BankAccountValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    await db.commit()
    return _account_resource(request, account)


@router.api_route("/bankAccounts/{account_id}", methods=["PUT", "PATCH"])
async def update_account(
    request: Request,
    account_id: str,
    payload: BankAccountUpdateDTO,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        account = await service.update_account(account_id, payload.to_domain())
    except BankAccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except BankAccountValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    await db.commit()
    return _account_resource(request, account)


@router.delete("/bankAccounts/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: str,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        await service.delete_account(account_id)
    except BankAccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/customers")
async def list_customers(
    request: Request,
    service: CustomerService = Depends(get_customer_service),
):
    customers = await service.list_customers()
    return {
        "_embedded": {"customers": [_customer_resource(request, customer) for customer in customers]},
        "_links": {"self": {"href": _href(request, "customers")}},
    }


@router.get("/customers/{customer_id}")
async def get_customer(
    request: Request,
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        customer = await service.get_customer(customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _customer_resource(request, customer)


@router.get("/customers/{customer_id}/bankAccounts")
async def list_customer_accounts(
    request: Request,
    customer_id: int,
    projection: Optional[str] = None,
    customers: CustomerService = Depends(get_customer_service),
    accounts: BankAccountService = Depends(get_bank_account_service),
):
    projected = _check_projection(projection)
    try:
        await customers.get_customer(customer_id)
    except CustomerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if projected:
        owned = await accounts.list_projections(customer_id=customer_id)
    else:
        owned = await accounts.list_customer_accounts(customer_id)
    return _account_collection(request, owned, _href(request, "customers", customer_id, "bankAccounts"))
