"""Tests for the RSVP list endpoints."""

import pytest

from src.rsvps.repository.tests.inmemory_models import create_test_rsvp
from src.rsvps.urls import RSVP_ATTENDING_URL, RSVP_NOT_ATTENDING_URL, RSVP_URL


@pytest.fixture
def populated_store(rsvp_store):
    rsvp_store.add(create_test_rsvp(email="a@example.com", num_of_guests=2, num_of_children=1))
    rsvp_store.add(create_test_rsvp(email="b@example.com", num_of_guests=3, num_of_children=0))
    rsvp_store.add(create_test_rsvp(email="c@example.com", attending=False))
    return rsvp_store


@pytest.mark.asyncio
async def test_list_all_rsvps(client_factory, rsvp_overrides, populated_store):
    async with client_factory(rsvp_overrides) as client:
        response = await client.get(RSVP_URL)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "RSVPs retrieved successfully"
    assert data["count"] == 3
    assert {rsvp["email"] for rsvp in data["rsvps"]} == {
        "a@example.com",
        "b@example.com",
        "c@example.com",
    }


@pytest.mark.asyncio
async def test_list_all_rsvps_empty(client_factory, rsvp_overrides):
    async with client_factory(rsvp_overrides) as client:
        response = await client.get(RSVP_URL)

    assert response.status_code == 200
    assert response.json()["count"] == 0
    assert response.json()["rsvps"] == []


@pytest.mark.asyncio
async def test_list_attending_rsvps_with_totals(client_factory, rsvp_overrides, populated_store):
    """Test attending list includes guest and children totals."""
    async with client_factory(rsvp_overrides) as client:
        response = await client.get(RSVP_ATTENDING_URL)

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["totalGuests"] == 5
    assert data["totalChildren"] == 1
    assert all(rsvp["attending"] for rsvp in data["rsvps"])


@pytest.mark.asyncio
async def test_list_not_attending_rsvps(client_factory, rsvp_overrides, populated_store):
    async with client_factory(rsvp_overrides) as client:
        response = await client.get(RSVP_NOT_ATTENDING_URL)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Not attending RSVPs retrieved successfully"
    assert data["count"] == 1
    assert data["rsvps"][0]["email"] == "c@example.com"
    assert data["totalGuests"] == 0
    assert data["totalChildren"] == 0


@pytest.mark.asyncio
async def test_list_rsvps_store_unavailable(client_factory, rsvp_overrides, rsvp_store):
    rsvp_store.unavailable = True

    async with client_factory(rsvp_overrides) as client:
        response = await client.get(RSVP_URL)

    assert response.status_code == 500
