"""Greeting, randomness and unit conversion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse

from ..config import Settings, get_settings
from ..random_tools import flip_a_coin, random_colour, random_number
from ..units import convert_all


router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
def root() -> str:
    return "Hello, World!"


@router.get("/coin", response_class=PlainTextResponse, summary="Flip a coin")
def coin() -> str:
    return flip_a_coin()


@router.get("/random_number", response_class=PlainTextResponse, summary="Random integer")
def get_random_number(settings: Settings = Depends(get_settings)) -> str:
    return str(random_number(settings.random_number_max))


@router.get("/random_colour", summary="Random RGB colour")
def get_random_colour() -> dict:
    return random_colour()


@router.get("/unit/{n}", summary="Convert a value between common units")
def unit_conversion(n: float = Path(..., allow_inf_nan=False)) -> dict[str, dict[str, float]]:
    return convert_all(n)
