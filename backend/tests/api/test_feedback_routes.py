import uuid

from insurance_management.core.constants import Messages

BASE = "/api/v1/feedback"


async def test_create_and_fetch_feedback(client):
    created = await client.post(
        BASE, json={"name": "An", "email": "an@example.com", "phone": "0912345678", "content": "Tư vấn"}
    )
    assert created.status_code == 200
    body = created.json()
    assert body["isPurchased"] is False

    fetched = await client.get(f"{BASE}/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


async def test_create_with_invalid_email(client, feedback_repo):
    response = await client.post(BASE, json={"email": "bad", "content": "Hi"})

    assert response.status_code == 400
    assert response.json() == {"email": [Messages.INVALID_EMAIL]}
    assert feedback_repo.created == []


async def test_update_purchase_marks_feedback(client):
    created = (await client.post(BASE, json={"content": "Hi"})).json()

    response = await client.put(f"{BASE}/{created['id']}/purchase")

    assert response.status_code == 200
    assert response.json()["isPurchased"] is True
    assert response.json()["content"] == "Hi"


async def test_update_purchase_unknown_id(client):
    response = await client.put(f"{BASE}/{uuid.uuid4()}/purchase")
    assert response.status_code == 404
    assert response.content == b""


async def test_malformed_id_is_400(client):
    response = await client.get(f"{BASE}/not-a-uuid")
    assert response.status_code == 400
    assert list(response.json()) == ["feedback_id"]
