"""Tests for greeting, randomness and unit conversion endpoints."""

import random
import re

import pytest
from fastapi.testclient import TestClient

from arun_api.config import get_settings
from arun_api.main import app
from arun_api.random_tools import flip_a_coin, random_colour, random_number
from arun_api.units import CONVERSIONS, EMPTY_CATEGORIES

from tests.helpers import override_settings


def test_root_greeting():
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello, World!"


def test_coin_flip():
    client = TestClient(app)
    response = client.get("/coin")
    assert response.status_code == 200
    assert response.text in {"heads", "tails"}


def test_random_number_respects_maximum():
    app.dependency_overrides[get_settings] = override_settings(random_number_max=3)
    client = TestClient(app)
    for _ in range(20):
        response = client.get("/random_number")
        assert response.status_code == 200
        assert 0 <= int(response.text) <= 3


def test_random_colour_shape():
    client = TestClient(app)
    payload = client.get("/random_colour").json()
    assert re.fullmatch(r"#[0-9a-f]{6}", payload["hex"])
    assert len(payload["rgb"]) == 3
    assert payload["hex"] == "#" + "".join(f"{value:02x}" for value in payload["rgb"])


def test_unit_conversion_groups():
    client = TestClient(app)
    response = client.get("/unit/100")
    assert response.status_code == 200
    payload = response.json()

    assert payload["temperature"]["celsius_to_farenheit"] == pytest.approx(212.0)
    assert payload["temperature"]["farenheit_to_celsius"] == pytest.approx(37.7777, rel=1e-4)
    assert payload["length"]["miles_to_km"] == pytest.approx(160.9344)
    assert payload["length"]["feet_to_meters"] == pytest.approx(30.48)
    assert payload["volume"]["liters_to_gallons"] == pytest.approx(26.417205, rel=1e-6)
    assert payload["mass"]["lbs_to_kg"] == pytest.approx(45.359237)
    for category in EMPTY_CATEGORIES:
        assert payload[category] == {}


def test_unit_conversion_accepts_decimals():
    client = TestClient(app)
    payload = client.get("/unit/-40.0").json()
    assert payload["temperature"]["celsius_to_farenheit"] == pytest.approx(-40.0)
    assert payload["temperature"]["farenheit_to_celsius"] == pytest.approx(-40.0)


@pytest.mark.parametrize("value", ["abc", "nan", "inf"])
def test_unit_conversion_rejects_non_numbers(value):
    client = TestClient(app)
    response = client.get(f"/unit/{value}")
    assert response.status_code == 422


def test_conversions_are_inverse_pairs():
    volume = CONVERSIONS["volume"]
    for forward, backward in [
        ("gallons_to_liters", "liters_to_gallons"),
        ("cups_to_milliliters", "milliliters_to_cups"),
        ("tablespoons_to_milliliters", "milliliters_to_tablespoons"),
        ("teaspoons_to_milliliters", "milliliters_to_teaspoons"),
        ("fluid_ounces_to_milliliters", "milliliters_to_fluid_ounces"),
    ]:
        assert volume[backward](volume[forward](12.5)) == pytest.approx(12.5)


def test_random_helpers_with_seeded_rng():
    rng = random.Random(7)
    assert flip_a_coin(rng) in {"heads", "tails"}
    assert 0 <= random_number(10, rng) <= 10
    colour = random_colour(random.Random(0))
    assert colour == random_colour(random.Random(0))
