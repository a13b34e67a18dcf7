from datetime import date

import pytest
from pydantic import ValidationError

from stylist.services.llm.types import WeatherObservation
from stylist.services.weather import TEMPERATURE_BANDS_F, season_for_date, temperature_category


@pytest.mark.parametrize(
    "temp,label",
    [
        (97, "Extreme Heat"),
        (40, "Cold"),
        (120, "Extreme Heat"),
        (-40, "Freezing"),
        (0, "Freezing"),
        (70, "Warm"),
    ],
)
def test_temperature_category_examples(temp, label):
    assert temperature_category(temp) == label


@pytest.mark.parametrize("lower,label", TEMPERATURE_BANDS_F)
def test_temperature_category_boundaries(lower, label):
    assert temperature_category(lower) == label
    assert temperature_category(lower + 1) == label
    assert temperature_category(lower - 1) != label


def test_temperature_category_below_last_band_is_freezing():
    assert temperature_category(34) == "Freezing"
    assert temperature_category(35) == "Cold"


def test_temperature_category_rounds_before_bucketing():
    assert temperature_category(94.4) == "Very Hot"
    assert temperature_category(94.5) == "Extreme Heat"


def test_temperature_category_is_monotonic():
    order = [label for _, label in TEMPERATURE_BANDS_F] + ["Freezing"]
    seen = [temperature_category(t) for t in range(130, -60, -1)]
    ranks = [order.index(label) for label in seen]
    assert ranks == sorted(ranks)
    assert set(seen) == set(order)


@pytest.mark.parametrize(
    "d,season",
    [
        (date(2025, 1, 15), "Winter"),
        (date(2025, 7, 4), "Summer"),
        (date(2025, 2, 28), "Winter"),
        (date(2025, 3, 1), "Spring"),
        (date(2025, 5, 31), "Spring"),
        (date(2025, 6, 1), "Summer"),
        (date(2025, 8, 31), "Summer"),
        (date(2025, 9, 1), "Fall"),
        (date(2025, 11, 30), "Fall"),
        (date(2025, 12, 1), "Winter"),
        (date(2024, 2, 29), "Winter"),
    ],
)
def test_season_for_date(d, season):
    assert season_for_date(d) == season


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_weather_observation_rejects_non_finite_temperature(bad):
    with pytest.raises(ValidationError):
        WeatherObservation(location="Oslo", date=date(2025, 1, 15), temperatureF=bad)
