from fastapi import status

from app import models
from app.auth import get_password_hash


ADDRESS = {
    "street": "Jalan Merdeka 1",
    "city": "Jakarta",
    "province": "DKI Jakarta",
    "country": "Indonesia",
    "postal_code": "10110",
}


def create_user(db_session, username):
    user = models.User(
        username=username, password=get_password_hash("secret123"), name=username
    )
    db_session.add(user)
    db_session.commit()
    return user


def login(client, username):
    response = client.post(
        "/api/users/login", json={"username": username, "password": "secret123"}
    )
    assert response.status_code == status.HTTP_200_OK
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


def create_contact(client, headers):
    response = client.post("/api/contacts", json={"first_name": "Ann"}, headers=headers)
    assert response.status_code == status.HTTP_200_OK
    return response.json()["data"]["id"]


def test_address_crud(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    contact_id = create_contact(client, headers)
    base = f"/api/contacts/{contact_id}/addresses"

    created = client.post(base, json=ADDRESS, headers=headers)
    assert created.status_code == status.HTTP_200_OK
    address = created.json()["data"]
    assert address["city"] == "Jakarta"
    address_id = address["id"]

    fetched = client.get(f"{base}/{address_id}", headers=headers)
    assert fetched.json() == {"data": address}

    listed = client.get(base, headers=headers)
    assert listed.json() == {"data": [address]}

    updated = client.put(
        f"{base}/{address_id}",
        json={"country": "Malaysia", "postal_code": "50000", "city": "Kuala Lumpur"},
        headers=headers,
    )
    assert updated.status_code == status.HTTP_200_OK
    data = updated.json()["data"]
    assert data["country"] == "Malaysia"
    assert data["street"] == "Jalan Merdeka 1"

    removed = client.delete(f"{base}/{address_id}", headers=headers)
    assert removed.status_code == status.HTTP_200_OK
    assert removed.json()["data"]["id"] == address_id

    missing = client.get(f"{base}/{address_id}", headers=headers)
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"errors": "address not found"}


def test_address_requires_country_and_postal_code(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    contact_id = create_contact(client, headers)
    response = client.post(
        f"/api/contacts/{contact_id}/addresses",
        json={"street": "Somewhere"},
        headers=headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    errors = response.json()["errors"]
    assert "country" in errors
    assert "postal_code" in errors


def test_address_of_missing_contact(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    response = client.post(
        "/api/contacts/9999/addresses", json=ADDRESS, headers=headers
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"errors": "contact not found"}


def test_addresses_are_scoped_to_contact_owner(client, db_session):
    create_user(db_session, "bob")
    create_user(db_session, "carol")
    bob = login(client, "bob")
    carol = login(client, "carol")
    contact_id = create_contact(client, bob)
    base = f"/api/contacts/{contact_id}/addresses"
    address_id = client.post(base, json=ADDRESS, headers=bob).json()["data"]["id"]

    assert client.get(base, headers=carol).status_code == status.HTTP_404_NOT_FOUND
    assert (
        client.get(f"{base}/{address_id}", headers=carol).status_code
        == status.HTTP_404_NOT_FOUND
    )
    assert (
        client.delete(f"{base}/{address_id}", headers=carol).status_code
        == status.HTTP_404_NOT_FOUND
    )


def test_address_lookup_is_scoped_to_parent_contact(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    first = create_contact(client, headers)
    second = create_contact(client, headers)
    address_id = client.post(
        f"/api/contacts/{first}/addresses", json=ADDRESS, headers=headers
    ).json()["data"]["id"]

    response = client.get(
        f"/api/contacts/{second}/addresses/{address_id}", headers=headers
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"errors": "address not found"}


def test_non_numeric_address_id_is_not_routed(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    contact_id = create_contact(client, headers)
    response = client.get(
        f"/api/contacts/{contact_id}/addresses/abc", headers=headers
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_address_id_beyond_integer_range(client, db_session):
    create_user(db_session, "bob")
    headers = login(client, "bob")
    contact_id = create_contact(client, headers)

    response = client.get(
        f"/api/contacts/{contact_id}/addresses/99999999999999999999", headers=headers
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"errors": "address not found"}

    parent = client.get(
        "/api/contacts/99999999999999999999/addresses", headers=headers
    )
    assert parent.status_code == status.HTTP_404_NOT_FOUND
    assert parent.json() == {"errors": "contact not found"}
