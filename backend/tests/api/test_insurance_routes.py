import uuid
from decimal import Decimal

import pytest

from insurance_management.api import deps
from insurance_management.core.constants import Messages
from insurance_management.db.models import Insurance
from insurance_management.main import app
from tests.fakes import FailingUploader

BASE = "/api/v1/insurance"


@pytest.fixture
def stored(insurance_repo) -> Insurance:
    insurance = Insurance(
        id=uuid.uuid4(),
        name="Health Basic",
        description="Inpatient cover",
        price=Decimal("1500000"),
        duration_months=12,
        image="https://storage.test/old.jpg",
    )
    insurance_repo._stamp(insurance)
    insurance_repo.items[insurance.id] = insurance
    return insurance


async def test_create_insurance(client, insurance_repo):
    response = await client.post(BASE, json={"name": "Motorbike", "price": 66000, "durationMonths": 12})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(insurance_repo.created[0].id)
    assert body["durationMonths"] == 12


async def test_create_insurance_rejects_negative_price_and_missing_name(client):
    response = await client.post(BASE, json={"price": -1})

    assert response.status_code == 400
    assert set(response.json()) == {"name", "price"}


async def test_update_with_image_substitutes_uploaded_url(client, stored, uploader):
    response = await client.put(
        f"{BASE}/{stored.id}",
        data={"name": "Health Plus"},
        files={"image": ("testImage.jpg", b"\xff\xd8\xff", "image/jpeg")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == str(stored.id)
    assert body["name"] == "Health Plus"
    assert body["image"] == uploader.url
    assert len(uploader.uploads) == 1
    assert uploader.uploads[0].filename == "testImage.jpg"
    assert uploader.uploads[0].content == b"\xff\xd8\xff"
    assert body["description"] == "Inpatient cover"


@pytest.mark.parametrize("field", ["durationMonths", "duration_months"])
async def test_update_duration_accepts_either_field_name(client, stored, field):
    response = await client.put(f"{BASE}/{stored.id}", data={field: "24"})

    assert response.status_code == 200
    assert response.json()["durationMonths"] == 24
    assert stored.duration_months == 24


async def test_update_without_image_keeps_existing_url(client, stored, uploader):
    response = await client.put(f"{BASE}/{stored.id}", data={"price": "2000000"})

    assert response.status_code == 200
    assert response.json()["price"] == 2000000.0
    assert response.json()["image"] == "https://storage.test/old.jpg"
    assert uploader.uploads == []


async def test_update_unknown_insurance_is_404_and_uploads_nothing(client, uploader):
    response = await client.put(
        f"{BASE}/{uuid.uuid4()}",
        files={"image": ("testImage.jpg", b"data", "image/jpeg")},
    )

    assert response.status_code == 404
    assert response.content == b""
    assert uploader.uploads == []


async def test_update_with_blank_name_is_rejected(client, stored):
    response = await client.put(f"{BASE}/{stored.id}", data={"name": "   "})

    assert response.status_code == 400
    assert response.json() == {"name": [Messages.REQUIRED]}


async def test_failed_upload_returns_502_and_keeps_entity(client, stored, insurance_repo):
    app.dependency_overrides[deps.get_uploader] = lambda: FailingUploader()

    response = await client.put(
        f"{BASE}/{stored.id}",
        data={"name": "Should not stick"},
        files={"image": ("testImage.jpg", b"data", "image/jpeg")},
    )

    assert response.status_code == 502
    assert response.json() == {"detail": Messages.STORAGE_UNAVAILABLE}
    assert insurance_repo.updated == []
    assert stored.name == "Health Basic"


async def test_delete_unknown_insurance_never_deletes(client, insurance_repo):
    response = await client.delete(f"{BASE}/{uuid.uuid4()}")

    assert response.status_code == 404
    assert insurance_repo.delete_calls == []


async def test_delete_existing_insurance(client, stored, insurance_repo):
    response = await client.delete(f"{BASE}/{stored.id}")

    assert response.status_code == 200
    assert insurance_repo.delete_calls == [stored.id]
