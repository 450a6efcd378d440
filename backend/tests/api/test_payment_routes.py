import uuid

from insurance_management.core.constants import Messages

BASE = "/api/v1/payment"


async def test_list_payments_on_empty_store(client):
    response = await client.get(BASE)
    assert response.status_code == 200
    assert response.json() == []


async def test_create_then_update_payment_scenario(client, payment_repo):
    created = await client.post(BASE, json={"name": "Payment 1"})
    assert created.status_code == 200
    body = created.json()
    assert body["id"] == str(next(iter(payment_repo.items)))
    assert body["status"] == "Pending"

    updated = await client.put(f"{BASE}/{body['id']}", json={"status": "Paid", "reason": "Completed"})

    assert updated.status_code == 200
    assert updated.json()["status"] == "Paid"
    assert updated.json()["reason"] == "Completed"
    assert updated.json()["name"] == "Payment 1"

    fetched = await client.get(f"{BASE}/{body['id']}")
    assert fetched.json()["status"] == "Paid"


async def test_create_with_invalid_fields_lists_every_violation(client, payment_repo):
    response = await client.post(
        BASE,
        json={"name": "Payment 1", "email": "not-an-email", "phone": "123", "bankAccount": "12ab"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "email": [Messages.INVALID_EMAIL],
        "phone": [Messages.INVALID_PHONE],
        "bankAccount": [Messages.INVALID_BANK_ACCOUNT],
    }
    assert payment_repo.created == []


async def test_create_without_name_reports_required(client):
    response = await client.post(BASE, json={"bankAccount": "12345678901234"})

    assert response.status_code == 400
    assert response.json() == {"name": [Messages.REQUIRED]}


async def test_bank_account_length_bounds(client):
    too_long = await client.post(BASE, json={"name": "P", "bankAccount": "1" * 15})
    shortest = await client.post(BASE, json={"name": "P", "bankAccount": "1" * 9})

    assert too_long.status_code == 400
    assert shortest.status_code == 200
    assert shortest.json()["bankAccount"] == "1" * 9


async def test_unknown_payment_is_404_with_empty_body(client, payment_repo):
    missing = uuid.uuid4()

    get = await client.get(f"{BASE}/{missing}")
    put = await client.put(f"{BASE}/{missing}", json={"status": "Paid"})
    delete = await client.delete(f"{BASE}/{missing}")

    for response in (get, put, delete):
        assert response.status_code == 404
        assert response.content == b""
    assert payment_repo.delete_calls == []
    assert payment_repo.items == {}


async def test_delete_payment(client, payment_repo):
    created = (await client.post(BASE, json={"name": "Payment 1"})).json()

    response = await client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": Messages.DELETED}
    assert payment_repo.items == {}
