"""GraphQL schema over the bank account and customer services."""
import asyncio
from datetime import datetime
from typing import Any, Awaitable, Optional, TypeVar

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.dataloader import DataLoader
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from bank_account_service.core.config import GraphQLSettings
from bank_account_service.interfaces.http.deps import get_db_session
from bank_account_service.modules.accounts import (
    AccountType,
    BankAccountNotFoundError,
    BankAccountRequest,
    BankAccountResponse,
    BankAccountUpdate,
    BankAccountValidationError,
)
from bank_account_service.modules.accounts.service import BankAccountService
from bank_account_service.modules.customers import Customer, CustomerNotFoundError
from bank_account_service.modules.customers.service import CustomerService

strawberry.enum(AccountType, name="AccountType")

T = TypeVar("T")


async def _serialized(info: Info, call: Awaitable[T]) -> T:
    # sibling fields resolve concurrently but share one AsyncSession
    async with info.context["lock"]:
        return await call


def _not_found(exc: Exception) -> GraphQLError:
    return GraphQLError(str(exc), extensions={"code": "NOT_FOUND"})


def _bad_input(exc: Exception) -> GraphQLError:
    return GraphQLError(str(exc), extensions={"code": "BAD_USER_INPUT"})


@strawberry.type(name="Customer")
class CustomerType:
    id: int
    name: str

    @strawberry.field
    async def bank_accounts(self, info: Info) -> list["BankAccountType"]:
        accounts = await info.context["customer_accounts"].load(self.id)
        return [BankAccountType.from_domain(account) for account in accounts]

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerType":
        return cls(id=customer.id, name=customer.name)


@strawberry.type(name="BankAccount")
class BankAccountType:
    id: str
    created_at: Optional[datetime]
    balance: Optional[float]
    currency: Optional[str]
    type: Optional[AccountType]
    customer: Optional[CustomerType]

    @classmethod
    def from_domain(cls, account: BankAccountResponse) -> "BankAccountType":
        return cls(
            id=account.id,
            created_at=account.created_at,
            balance=account.balance,
            currency=account.currency,
            type=account.type,
            customer=CustomerType.from_domain(account.customer) if account.customer else None,
        )


@strawberry.input(name="BankAccountRequestDTO")
class BankAccountInput:
    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None
    customer_id: Optional[int] = None

    def to_request(self) -> BankAccountRequest:
        return BankAccountRequest(
            balance=self.balance,
            currency=self.currency,
            type=self.type,
            customer_id=self.customer_id,
        )

    def to_update(self) -> BankAccountUpdate:
        return BankAccountUpdate(balance=self.balance, currency=self.currency, type=self.type)


@strawberry.type
class Query:
    @strawberry.field
    async def accounts_list(self, info: Info) -> list[BankAccountType]:
        service: BankAccountService = info.context["accounts"]
        accounts = await _serialized(info, service.list_accounts())
        return [BankAccountType.from_domain(account) for account in accounts]

    @strawberry.field
    async def bank_account_by_id(self, info: Info, id: str) -> BankAccountType:
        service: BankAccountService = info.context["accounts"]
        try:
            account = await _serialized(info, service.get_account(id))
        except BankAccountNotFoundError as exc:
            raise _not_found(exc) from exc
        return BankAccountType.from_domain(account)

    @strawberry.field
    async def accounts_by_type(self, info: Info, type: AccountType) -> list[BankAccountType]:
        service: BankAccountService = info.context["accounts"]
        accounts = await _serialized(info, service.find_by_type(type))
        return [BankAccountType.from_domain(account) for account in accounts]

    @strawberry.field
    async def customers(self, info: Info) -> list[CustomerType]:
        service: CustomerService = info.context["customers"]
        customers = await _serialized(info, service.list_customers())
        return [CustomerType.from_domain(customer) for customer in customers]

    @strawberry.field
    async def customer_by_id(self, info: Info, id: int) -> CustomerType:
        service: CustomerService = info.context["customers"]
        try:
            customer = await _serialized(info, service.get_customer(id))
        except CustomerNotFoundError as exc:
            raise _not_found(exc) from exc
        return CustomerType.from_domain(customer)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_account(self, info: Info, bank_account: BankAccountInput) -> BankAccountType:
        service: BankAccountService = info.context["accounts"]
        try:
            account = await _serialized(info, service.add_account(bank_account.to_request()))
        except BankAccountValidationError as exc:
            raise _bad_input(exc) from exc
        await _serialized(info, info.context["session"].commit())
        return BankAccountType.from_domain(account)

    @strawberry.mutation
    async def update_account(self, info: Info, id: str, bank_account: BankAccountInput) -> BankAccountType:
        service: BankAccountService = info.context["accounts"]
        try:
            account = await _serialized(info, service.update_account(id, bank_account.to_update()))
        except BankAccountNotFoundError as exc:
            raise _not_found(exc) from exc
        except BankAccountValidationError as exc:
            raise _bad_input(exc) from exc
        await _serialized(info, info.context["session"].commit())
        return BankAccountType.from_domain(account)

    @strawberry.mutation
    async def delete_account(self, info: Info, id: str) -> bool:
        service: BankAccountService = info.context["accounts"]
        try:
            await _serialized(info, service.delete_account(id))
        except BankAccountNotFoundError as exc:
            raise _not_found(exc) from exc
        await _serialized(info, info.context["session"].commit())
        return True


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_graphql_context(db: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    accounts = BankAccountService.with_session(db)
    lock = asyncio.Lock()

    async def load_customer_accounts(customer_ids: list[int]) -> list[list[BankAccountResponse]]:
        async with lock:
            return [await accounts.list_customer_accounts(customer_id) for customer_id in customer_ids]

    return {
        "session": db,
        "lock": lock,
        "accounts": accounts,
        "customers": CustomerService.with_session(db),
        "customer_accounts": DataLoader(load_fn=load_customer_accounts),
    }


def create_graphql_router(settings: GraphQLSettings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
