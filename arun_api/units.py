"""Unit conversion helpers (US customary volumes)."""

from __future__ import annotations

from typing import Callable


FEET_PER_METER = 1 / 0.3048
KM_PER_MILE = 1.609344
CM_PER_INCH = 2.54
METERS_PER_YARD = 0.9144

LITERS_PER_GALLON = 3.785411784
LITERS_PER_PINT = 0.473176473
LITERS_PER_QUART = 0.946352946
ML_PER_CUP = 236.5882365
ML_PER_TABLESPOON = 14.78676478125
ML_PER_TEASPOON = 4.92892159375
ML_PER_FLUID_OUNCE = 29.5735295625

KG_PER_POUND = 0.45359237
GRAMS_PER_OUNCE = 28.349523125


def farenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


def celsius_to_farenheit(value: float) -> float:
    return value * 9 / 5 + 32


def meters_to_feet(value: float) -> float:
    return value * FEET_PER_METER


def feet_to_meters(value: float) -> float:
    return value / FEET_PER_METER


def miles_to_km(value: float) -> float:
    return value * KM_PER_MILE


def km_to_miles(value: float) -> float:
    return value / KM_PER_MILE


def inches_to_cm(value: float) -> float:
    return value * CM_PER_INCH


def cm_to_inches(value: float) -> float:
    return value / CM_PER_INCH


def yards_to_meters(value: float) -> float:
    return value * METERS_PER_YARD


def meters_to_yards(value: float) -> float:
    return value / METERS_PER_YARD


def gallons_to_liters(value: float) -> float:
    return value * LITERS_PER_GALLON


def liters_to_gallons(value: float) -> float:
    return value / LITERS_PER_GALLON


def pints_to_liters(value: float) -> float:
    return value * LITERS_PER_PINT


def liters_to_pints(value: float) -> float:
    return value / LITERS_PER_PINT


def quarts_to_liters(value: float) -> float:
    return value * LITERS_PER_QUART


def liters_to_quarts(value: float) -> float:
    return value / LITERS_PER_QUART


def cups_to_milliliters(value: float) -> float:
    return value * ML_PER_CUP


def milliliters_to_cups(value: float) -> float:
    return value / ML_PER_CUP


def tablespoons_to_milliliters(value: float) -> float:
    return value * ML_PER_TABLESPOON


def milliliters_to_tablespoons(value: float) -> float:
    return value / ML_PER_TABLESPOON


def teaspoons_to_milliliters(value: float) -> float:
    return value * ML_PER_TEASPOON


def milliliters_to_teaspoons(value: float) -> float:
    return value / ML_PER_TEASPOON


def fluid_ounces_to_milliliters(value: float) -> float:
    return value * ML_PER_FLUID_OUNCE


def milliliters_to_fluid_ounces(value: float) -> float:
    return value / ML_PER_FLUID_OUNCE


def pounds_to_kg(value: float) -> float:
    return value * KG_PER_POUND


def kg_to_pounds(value: float) -> float:
    return value / KG_PER_POUND


def ounces_to_grams(value: float) -> float:
    return value * GRAMS_PER_OUNCE


def grams_to_ounces(value: float) -> float:
    return value / GRAMS_PER_OUNCE


CONVERSIONS: dict[str, dict[str, Callable[[float], float]]] = {
    "temperature": {
        "farenheit_to_celsius": farenheit_to_celsius,
        "celsius_to_farenheit": celsius_to_farenheit,
    },
    "length": {
        "meters_to_feet": meters_to_feet,
        "feet_to_meters": feet_to_meters,
        "miles_to_km": miles_to_km,
        "km_to_miles": km_to_miles,
        "inches_to_cm": inches_to_cm,
        "cm_to_inches": cm_to_inches,
        "yards_to_meters": yards_to_meters,
        "meters_to_yards": meters_to_yards,
    },
    "volume": {
        "gallons_to_liters": gallons_to_liters,
        "liters_to_gallons": liters_to_gallons,
        "pints_to_liters": pints_to_liters,
        "liters_to_pints": liters_to_pints,
        "liters_to_quarts": liters_to_quarts,
        "quarts_to_liters": quarts_to_liters,
        "cups_to_milliliters": cups_to_milliliters,
        "milliliters_to_cups": milliliters_to_cups,
        "tablespoons_to_milliliters": tablespoons_to_milliliters,
        "milliliters_to_tablespoons": milliliters_to_tablespoons,
        "teaspoons_to_milliliters": teaspoons_to_milliliters,
        "milliliters_to_teaspoons": milliliters_to_teaspoons,
        "milliliters_to_fluid_ounces": milliliters_to_fluid_ounces,
        "fluid_ounces_to_milliliters": fluid_ounces_to_milliliters,
    },
    "mass": {
        "lbs_to_kg": pounds_to_kg,
        "kg_to_lbs": kg_to_pounds,
        "oz_to_g": ounces_to_grams,
        "g_to_oz": grams_to_ounces,
    },
}

# Categories reserved in the response shape with no conversions yet.
EMPTY_CATEGORIES = (
    "time",
    "area",
    "speed",
    "force",
    "pressure",
    "energy",
    "power",
    "voltage",
    "current",
    "resistance",
    "capacitance",
    "inductance",
)


def convert_all(value: float) -> dict[str, dict[str, float]]:
    """Apply every known conversion to ``value``, grouped by category."""

    table: dict[str, dict[str, float]] = {
        category: {name: func(value) for name, func in funcs.items()}
        for category, funcs in CONVERSIONS.items()
    }
    for category in EMPTY_CATEGORIES:
        table[category] = {}
    return table
