"""Shared fixtures: fake collaborators and an HTTP client wired to them."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from insurance_management.api import deps
from insurance_management.main import app
from tests.fakes import (
    FakePasswordHasher,
    FakePurchaseRepository,
    FakeRepository,
    FakeTokenIssuer,
    FakeUploader,
    FakeUserRepository,
)


@pytest.fixture
def feedback_repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def insurance_repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def payment_repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def purchase_repo() -> FakePurchaseRepository:
    return FakePurchaseRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
async def client(
    feedback_repo,
    insurance_repo,
    payment_repo,
    purchase_repo,
    user_repo,
    password_hasher,
    token_issuer,
    uploader,
):
    """AsyncClient against the real app with every collaborator faked."""
    app.dependency_overrides.update(
        {
            deps.get_feedback_repository: lambda: feedback_repo,
            deps.get_insurance_repository: lambda: insurance_repo,
            deps.get_payment_repository: lambda: payment_repo,
            deps.get_purchase_repository: lambda: purchase_repo,
            deps.get_user_repository: lambda: user_repo,
            deps.get_password_hasher: lambda: password_hasher,
            deps.get_token_issuer: lambda: token_issuer,
            deps.get_uploader: lambda: uploader,
        }
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
