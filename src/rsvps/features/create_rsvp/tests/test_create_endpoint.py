"""Tests for the create RSVP endpoint."""

import pytest

from src.rsvps.repository.tests.inmemory_models import create_test_rsvp
from src.rsvps.urls import RSVP_URL


@pytest.mark.asyncio
async def test_create_rsvp_attending(client_factory, rsvp_overrides, rsvp_store):
    """Test submitting an attending RSVP returns the record and its update link."""
    rsvp_data = {
        "name": "Jane Doe",
        "email": "Jane@Example.com",
        "attending": True,
        "numOfGuests": 2,
        "numOfChildren": 1,
    }

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "RSVP submitted successfully! Save your update link."
    assert data["rsvp"]["email"] == "jane@example.com"
    assert data["rsvp"]["numOfGuests"] == 2
    assert data["rsvp"]["numOfChildren"] == 1
    token = data["rsvp"]["updateToken"]
    assert data["updateLink"] == f"http://test/rsvp/token/{token}"
    assert len(rsvp_store.rsvps) == 1


@pytest.mark.asyncio
async def test_create_rsvp_not_attending_without_counts(client_factory, rsvp_overrides):
    """Test a declined RSVP needs no guest or children counts."""
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": False}

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 201
    data = response.json()
    assert data["rsvp"]["attending"] is False
    assert data["rsvp"]["numOfGuests"] is None
    assert data["rsvp"]["numOfChildren"] is None


@pytest.mark.asyncio
async def test_create_rsvp_attending_without_counts(client_factory, rsvp_overrides, rsvp_store):
    """Test an attending RSVP must say how many guests and children are coming."""
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": True}

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 400
    data = response.json()
    assert data["fieldErrors"] == {
        "numOfGuests": "numOfGuests is required when attending",
        "numOfChildren": "numOfChildren is required when attending",
    }
    assert rsvp_store.rsvps == {}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "counts, field, message",
    [
        ({"numOfGuests": 0, "numOfChildren": 0}, "numOfGuests", "Number of guests must be at least 1 if attending"),
        ({"numOfGuests": 1, "numOfChildren": -1}, "numOfChildren", "Number of children cannot be negative"),
    ],
)
async def test_create_rsvp_attending_with_bad_counts(
    client_factory, rsvp_overrides, counts, field, message
):
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": True, **counts}

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 400
    assert response.json()["fieldErrors"] == {field: message}


@pytest.mark.asyncio
async def test_create_rsvp_reports_every_invalid_field(client_factory, rsvp_overrides):
    """Test all failing fields are reported in one response."""
    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json={"name": "  ", "email": "not-an-email"})

    assert response.status_code == 400
    data = response.json()
    assert data["errors"] == [
        "name is required",
        "valid email required",
        "attending is required",
    ]
    assert data["message"] == "We found some issues with your RSVP information:"


@pytest.mark.asyncio
async def test_create_rsvp_duplicate_email(client_factory, rsvp_overrides, rsvp_store):
    """Test a second RSVP for the same email points back at the first one."""
    existing = rsvp_store.add(create_test_rsvp(email="jane@example.com", name="Jane Doe"))
    rsvp_data = {"name": "Someone Else", "email": "JANE@example.com", "attending": False}

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 409
    data = response.json()
    assert data["existingRsvp"] == {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "attending": True,
    }
    assert data["updateLink"] == f"http://test/rsvp/token/{existing.update_token}"
    assert "numOfGuests" not in data["existingRsvp"]
    assert len(rsvp_store.rsvps) == 1


@pytest.mark.asyncio
async def test_create_rsvp_twice_one_succeeds(client_factory, rsvp_overrides):
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": False}

    async with client_factory(rsvp_overrides) as client:
        first = await client.post(RSVP_URL, json=rsvp_data)
        second = await client.post(RSVP_URL, json={**rsvp_data, "email": "Jane@Example.COM"})

    assert first.status_code == 201
    assert second.status_code == 409
    token = first.json()["rsvp"]["updateToken"]
    assert second.json()["updateLink"].endswith(f"/rsvp/token/{token}")


@pytest.mark.asyncio
async def test_create_rsvp_after_deadline(client_factory, after_deadline_overrides, rsvp_store):
    """Test new RSVPs are refused once the deadline has passed."""
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": False}

    async with client_factory(after_deadline_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 403
    data = response.json()
    assert data["message"] == (
        "RSVP deadline has passed for Test Party. New RSVPs are no longer accepted."
    )
    assert data["eventName"] == "Test Party"
    assert data["deadline"].startswith("2026-07-15T23:59:00")
    assert data["eventDate"].startswith("2026-08-15T16:00:00")
    assert rsvp_store.rsvps == {}


@pytest.mark.asyncio
async def test_create_rsvp_ignores_client_token(client_factory, rsvp_overrides):
    rsvp_data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "attending": False,
        "updateToken": "chosen-by-client",
    }

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 201
    assert response.json()["rsvp"]["updateToken"] != "chosen-by-client"


@pytest.mark.asyncio
async def test_create_rsvp_store_unavailable(client_factory, rsvp_overrides, rsvp_store):
    rsvp_store.unavailable = True
    rsvp_data = {"name": "Jane Doe", "email": "jane@example.com", "attending": False}

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 500
    assert response.json() == {
        "message": "Unable to process RSVPs right now. Please try again later."
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [["x"], "just a string", 42])
async def test_create_rsvp_body_not_an_object(client_factory, rsvp_overrides, rsvp_store, body):
    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["errors"] == ["RSVP data must be a JSON object"]
    assert data["fieldErrors"] == {"body": "RSVP data must be a JSON object"}
    assert "help" in data
    assert rsvp_store.rsvps == {}


@pytest.mark.asyncio
async def test_create_rsvp_invalid_json(client_factory, rsvp_overrides, rsvp_store):
    async with client_factory(rsvp_overrides) as client:
        response = await client.post(
            RSVP_URL,
            content=b'{"name": "Jane",',
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 400
    assert response.json()["errors"] == ["RSVP data must be a JSON object"]
    assert rsvp_store.rsvps == {}


@pytest.mark.asyncio
async def test_create_rsvp_count_out_of_range(client_factory, rsvp_overrides, rsvp_store):
    rsvp_data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "attending": True,
        "numOfGuests": 10**30,
        "numOfChildren": 0,
    }

    async with client_factory(rsvp_overrides) as client:
        response = await client.post(RSVP_URL, json=rsvp_data)

    assert response.status_code == 400
    assert response.json()["fieldErrors"] == {"numOfGuests": "numOfGuests is out of range"}
    assert rsvp_store.rsvps == {}
