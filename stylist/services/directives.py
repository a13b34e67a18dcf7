"""Turn a classified outfit context into the generation directive.

Every inspiration category owns exactly one entry in ``CATEGORY_SPECS``: the
fields the classifier may fill for it and the template that phrases the
directive. A weather observation, when supplied, always takes precedence over
the category template.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Mapping, Optional, Tuple

from stylist.services.llm.types import (
    FALLBACK_CATEGORY,
    OutfitContext,
    WeatherObservation,
)
from stylist.services.weather import round_temperature, season_for_date, temperature_category

Template = Callable[[Mapping[str, str], int], str]


@dataclass(frozen=True)
class CategorySpec:
    fields: Tuple[str, ...]
    template: Template
    hint: str = ""


def format_day(value: date) -> str:
    return f"{value:%b} {value.day}, {value.year}"


def _field(fields: Mapping[str, str], key: str, default: str = "") -> str:
    value = fields.get(key)
    return value.strip() if value and value.strip() else default


def _travel(fields: Mapping[str, str], n: int) -> str:
    destination = _field(fields, "destination", "a getaway")
    raw_date = _field(fields, "date")
    day = "an upcoming trip"
    if raw_date:
        try:
            day = format_day(date.fromisoformat(raw_date))
        except ValueError:
            day = raw_date
    return f"Design {n} versatile travel outfits for {destination} on {day}."


def _event(fields: Mapping[str, str], n: int) -> str:
    return f"Design {n} on-trend outfits suitable for a {_field(fields, 'event', 'special occasion')}."


def _lyrics(fields: Mapping[str, str], n: int) -> str:
    lyrics = _field(fields, "lyrics")
    work = _field(fields, "referencedWork")
    if lyrics and work:
        return f'Design {n} expressive outfits inspired by the vibe of these lyrics from "{work}": "{lyrics}".'
    if lyrics:
        return f'Design {n} expressive outfits inspired by the vibe of these lyrics: "{lyrics}".'
    if work:
        return f'Design {n} expressive outfits inspired by the vibe of the song "{work}".'
    return f"Design {n} expressive outfits inspired by the vibe of a favourite song."


def _movie(fields: Mapping[str, str], n: int) -> str:
    work = _field(fields, "referencedWork")
    if not work:
        return f"Design {n} modern looks echoing the aesthetic of classic cinema."
    return f'Design {n} modern looks echoing the aesthetic of "{work}".'


def _anime(fields: Mapping[str, str], n: int) -> str:
    work = _field(fields, "referencedWork")
    if not work:
        return f"Design {n} stylish outfits channeling the characters and art style of popular anime."
    return f'Design {n} stylish outfits channeling the characters and art style of "{work}".'


def _sports(fields: Mapping[str, str], n: int) -> str:
    team = _field(fields, "team")
    work = _field(fields, "referencedWork", "game day")
    if team:
        return f"Design {n} fan-centric outfits supporting {team} for the {work} occasion."
    return f"Design {n} fan-centric outfits for the {work} occasion."


def _culture(fields: Mapping[str, str], n: int) -> str:
    return f'Design {n} culturally resonant outfits for "{_field(fields, "culture", "a cultural celebration")}".'


def _season(fields: Mapping[str, str], n: int) -> str:
    return f"Design {n} seasonal outfits that capture the best of {_field(fields, 'season', 'the current season')}."


def _celebrity(fields: Mapping[str, str], n: int) -> str:
    who = _field(fields, "celebrity", "a style icon")
    return f"Design {n} outfits inspired by the signature style of {who}."


def _trend(fields: Mapping[str, str], n: int) -> str:
    trend = _field(fields, "trend")
    if not trend:
        return f"Design {n} outfits built around this season's most talked-about trends."
    return f'Design {n} outfits built around the "{trend}" trend.'


def _theme(fields: Mapping[str, str], n: int) -> str:
    return f'Design {n} outfits that fit a "{_field(fields, "theme", "themed party")}" theme.'


def _activity(fields: Mapping[str, str], n: int) -> str:
    return f"Design {n} practical yet stylish outfits for {_field(fields, 'activity', 'an active day out')}."


def _item(fields: Mapping[str, str], n: int) -> str:
    return f"Design {n} outfits styled around a {_field(fields, 'item', 'wardrobe staple')}."


def _weather(fields: Mapping[str, str], n: int) -> str:
    condition = _field(fields, "condition", "changeable weather")
    location = _field(fields, "location")
    where = f" in {location}" if location else ""
    return f"Design {n} weather-ready outfits for {condition}{where}."


def _generic(fields: Mapping[str, str], n: int) -> str:
    return f"Design {n} globally inspired outfits following current fashion trends."


CATEGORY_SPECS: Dict[str, CategorySpec] = {
    "travel": CategorySpec(("destination", "date"), _travel, "trip destination and travel date (YYYY-MM-DD)"),
    "event": CategorySpec(("event",), _event, "wedding, party, interview, photo-shoot ..."),
    "lyrics": CategorySpec(("referencedWork", "lyrics"), _lyrics, "a song or a quoted lyric line"),
    "movie": CategorySpec(("referencedWork",), _movie, "film or TV title"),
    "anime": CategorySpec(("referencedWork",), _anime, "anime or manga title"),
    "sports": CategorySpec(("referencedWork", "team"), _sports, "game, match or sport, optional team"),
    "culture": CategorySpec(("culture",), _culture, "holiday, festival or tradition"),
    "season": CategorySpec(("season",), _season, "a season of the year"),
    "celebrity": CategorySpec(("celebrity",), _celebrity, "a named person whose style to follow"),
    "trend": CategorySpec(("trend",), _trend, "a named fashion trend or aesthetic"),
    "theme": CategorySpec(("theme",), _theme, "a party or dress-code theme"),
    "activity": CategorySpec(("activity",), _activity, "hiking, brunch, gym, commute ..."),
    "item": CategorySpec(("item",), _item, "a specific garment to style"),
    "weather": CategorySpec(("condition", "location"), _weather, "a weather condition, optional place"),
    FALLBACK_CATEGORY: CategorySpec((), _generic, "nothing specific matches"),
}


def spec_for(category: str) -> CategorySpec:
    return CATEGORY_SPECS.get(category, CATEGORY_SPECS[FALLBACK_CATEGORY])


def weather_directive(weather: WeatherObservation, count: int) -> str:
    temp = round_temperature(weather.temperature_f)
    season = season_for_date(weather.date)
    directive = (
        f"Design {count} fashion-forward {season.lower()} outfits for {weather.location} on "
        f"{format_day(weather.date)}. Temperature: {temp}°F ({temperature_category(weather.temperature_f)})"
    )
    if weather.description.strip():
        directive += f", Condition: {weather.description.strip()}"
    return directive + "."


def build_directive(
    context: OutfitContext, weather: Optional[WeatherObservation] = None, count: int = 4
) -> str:
    if weather is not None:
        return weather_directive(weather, count)
    return spec_for(context.category).template(context.fields, count)


def describe_field_schema() -> str:
    lines = []
    for category, spec in CATEGORY_SPECS.items():
        keys = ", ".join(spec.fields) if spec.fields else "(no fields)"
        lines.append(f"- {category}: {keys} ({spec.hint})")
    return "\n".join(lines)
