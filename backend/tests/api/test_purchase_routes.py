import uuid
from datetime import datetime, timezone
from decimal import Decimal

from insurance_management.core.constants import Messages
from insurance_management.db.models import Insurance, User
from insurance_management.repositories.purchases import PurchaseDetailsRow

BASE = "/api/v1/purchase"


def add_buyer_and_policy(user_repo, insurance_repo) -> tuple[uuid.UUID, uuid.UUID]:
    user = User(id=uuid.uuid4(), email="buyer@example.com", password="x", name="Buyer", role="CUSTOMER")
    policy = Insurance(id=uuid.uuid4(), name="Health", price=Decimal("100"))
    for repo, entity in ((user_repo, user), (insurance_repo, policy)):
        repo._stamp(entity)
        repo.items[entity.id] = entity
    return user.id, policy.id


async def test_purchase_details(client, purchase_repo):
    purchase_repo.details = [
        PurchaseDetailsRow(
            id=uuid.uuid4(),
            user_id=uuid.uuid4(),
            insurance_id=uuid.uuid4(),
            email="test@example.com",
            name="John Doe",
            phone="1234567890",
            insurance_name="Insurance 1",
            insurance_price=Decimal("100.0"),
            status="Pending",
            purchase_date=datetime.now(timezone.utc),
        )
    ]

    response = await client.get(f"{BASE}/details")

    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["insuranceName"] == "Insurance 1"
    assert rows[0]["insurancePrice"] == 100.0
    assert rows[0]["email"] == "test@example.com"


async def test_create_get_and_update_purchase(client, user_repo, insurance_repo):
    user_id, insurance_id = add_buyer_and_policy(user_repo, insurance_repo)
    created = await client.post(BASE, json={"userId": str(user_id), "insuranceId": str(insurance_id)})
    assert created.status_code == 200
    assert created.json()["status"] == "Pending"

    fetched = await client.get(f"{BASE}/{insurance_id}/{user_id}")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == created.json()["id"]

    updated = await client.put(f"{BASE}/{insurance_id}/{user_id}")
    assert updated.status_code == 200
    assert updated.json()["message"] == Messages.PURCHASE_STATUS_UPDATED
    assert updated.json()["data"]["status"] == "Confirmed"

    cancelled = await client.put(f"{BASE}/{insurance_id}/{user_id}", json={"status": "Cancelled"})
    assert cancelled.json()["data"]["status"] == "Cancelled"


async def test_update_unknown_purchase(client, purchase_repo):
    response = await client.put(f"{BASE}/{uuid.uuid4()}/{uuid.uuid4()}")

    assert response.status_code == 404
    assert purchase_repo.updated == []


async def test_create_purchase_requires_both_ids(client):
    response = await client.post(BASE, json={})

    assert response.status_code == 400
    assert response.json() == {"userId": [Messages.REQUIRED], "insuranceId": [Messages.REQUIRED]}


async def test_create_purchase_for_unknown_references(client, purchase_repo):
    response = await client.post(BASE, json={"userId": str(uuid.uuid4()), "insuranceId": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json() == {
        "userId": [Messages.USER_NOT_FOUND],
        "insuranceId": [Messages.INSURANCE_NOT_FOUND],
    }
    assert purchase_repo.created == []


async def test_create_purchase_twice_for_same_pair(client, user_repo, insurance_repo, purchase_repo):
    user_id, insurance_id = add_buyer_and_policy(user_repo, insurance_repo)
    body = {"userId": str(user_id), "insuranceId": str(insurance_id)}

    first = await client.post(BASE, json=body)
    second = await client.post(BASE, json=body)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {"insuranceId": [Messages.PURCHASE_EXISTS]}
    fetched = await client.get(f"{BASE}/{insurance_id}/{user_id}")
    assert fetched.json()["id"] == first.json()["id"]
    assert len(purchase_repo.created) == 1
