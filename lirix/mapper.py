"""Map raw OpenWeatherMap documents onto WeatherSample / ForecastSet.

Pure functions: no I/O, no logging, no shared state. A document is decoded
once into the strict schema in ``lirix.models.weather``; each top-level key
then goes through its rule in ``FIELD_RULES``. Absent keys keep the
WeatherSample defaults, wrong-shaped values raise StructuralMismatchError.
"""

from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from lirix.exceptions import (
    EmptyWeatherDescriptionError,
    ForecastCountMismatchError,
    StructuralMismatchError,
    WeatherMappingError,
)
from lirix.models.weather import (
    CloudsInfo,
    ForecastDocument,
    ForecastSet,
    MainMeasurements,
    ObservationDocument,
    PrecipitationInfo,
    SunEvents,
    WeatherCondition,
    WeatherSample,
    WindInfo,
)

KELVIN_OFFSET = 273.15
WIND_DIRECTION_UNDEFINED = "UNDEFINED"

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# (label, lower inclusive, upper exclusive), first match wins.
# N is centred on both 0 and 360. SW keeps the 213.25 lower bound of the
# reference table; SSW is checked first, so SW effectively starts at 213.75.
COMPASS_BINS: tuple[tuple[str, float, float], ...] = (
    ("N", -11.25, 11.25),
    ("N", 348.75, 371.25),
    ("NNE", 11.25, 33.75),
    ("NE", 33.75, 56.25),
    ("ENE", 56.25, 78.75),
    ("E", 78.75, 101.25),
    ("ESE", 101.25, 123.75),
    ("SE", 123.75, 146.25),
    ("SSE", 146.25, 168.75),
    ("S", 168.75, 191.25),
    ("SSW", 191.25, 213.75),
    ("SW", 213.25, 236.25),
    ("WSW", 236.25, 258.75),
    ("W", 258.75, 281.25),
    ("WNW", 281.25, 303.75),
    ("NW", 303.75, 326.25),
    ("NNW", 326.25, 348.75),
)


class TimestampMode(str, Enum):
    """How the ``dt`` field is rendered."""

    INSTANT = "instant"  # current conditions, full date
    FORECAST = "forecast"  # forecast entry, weekday and time only


def _to_datetime(epoch: float, tz: tzinfo) -> datetime:
    try:
        return datetime.fromtimestamp(int(epoch), tz)
    except (OverflowError, OSError, ValueError) as e:
        raise StructuralMismatchError(
            f"Timestamp out of range: {epoch!r}",
            details={"value": repr(epoch)},
        ) from e


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


def _meridiem(dt: datetime) -> str:
    return "AM" if dt.hour < 12 else "PM"


def format_timestamp(epoch: float, tz: tzinfo = UTC) -> str:
    """Full date-time, e.g. ``Monday, January 2 2006 @ 03:04:05PM (UTC)``."""
    dt = _to_datetime(epoch, tz)
    return (
        f"{WEEKDAYS[dt.weekday()]}, {MONTHS[dt.month - 1]} {dt.day} {dt.year} "
        f"@ {_hour12(dt):02d}:{dt.minute:02d}:{dt.second:02d}{_meridiem(dt)} ({dt.tzname()})"
    )


def format_time(epoch: float, tz: tzinfo = UTC) -> str:
    """Time of day, e.g. ``03:04:05pm (UTC)``."""
    dt = _to_datetime(epoch, tz)
    return f"{_hour12(dt):02d}:{dt.minute:02d}:{dt.second:02d}{_meridiem(dt).lower()} ({dt.tzname()})"


def format_short_datetime(epoch: float, tz: tzinfo = UTC) -> str:
    """Weekday and time, e.g. ``Mon 3:04pm``."""
    dt = _to_datetime(epoch, tz)
    return f"{WEEKDAYS[dt.weekday()][:3]} {_hour12(dt)}:{dt.minute:02d}{_meridiem(dt).lower()}"


def compass_direction(degrees: float) -> str:
    """Classify a bearing into one of 16 compass points.

    Bearings above 360 are reduced by a single subtraction of 360; anything
    still outside the table (above 371.25 after that, or below -11.25)
    is ``UNDEFINED``.
    """
    if degrees > 360:
        degrees -= 360

    for label, lower, upper in COMPASS_BINS:
        if lower <= degrees < upper:
            return label

    return WIND_DIRECTION_UNDEFINED


def format_celsius(kelvin: float) -> str:
    return f"{kelvin - KELVIN_OFFSET:.2f}"


def format_percentage(value: float) -> str:
    # str.format rounding: nearest, ties to even on the binary value
    return f"{value:.0f}"


def _target_time_rule(value: float, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    if mode is TimestampMode.INSTANT:
        return {"target_time": format_timestamp(value, tz)}
    return {"target_time": format_short_datetime(value, tz)}


def _sun_events_rule(value: SunEvents, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if value.sunrise is not None:
        fields["sunrise_time"] = format_time(value.sunrise, tz)
    if value.sunset is not None:
        fields["sunset_time"] = format_time(value.sunset, tz)
    return fields


def _main_rule(value: MainMeasurements, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if value.temp is not None:
        fields["temperature"] = format_celsius(value.temp)
    if value.humidity is not None:
        fields["humidity"] = format_percentage(value.humidity)
    return fields


def _weather_rule(value: list[WeatherCondition], mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    if not value:
        raise EmptyWeatherDescriptionError()
    description = value[0].description
    return {} if description is None else {"weather_description": description}


def _wind_rule(value: WindInfo, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if value.speed is not None:
        fields["wind_speed"] = value.speed
    if value.deg is not None:
        fields["wind_direction"] = compass_direction(value.deg)
    if value.gust is not None:
        fields["wind_gusts"] = value.gust
    return fields


def _clouds_rule(value: CloudsInfo, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
    return {} if value.all is None else {"cloud_coverage": value.all}


def _precipitation_rule(target: str) -> "FieldRule":
    def rule(value: PrecipitationInfo, mode: TimestampMode, tz: tzinfo) -> dict[str, Any]:
        return {} if value.three_hour is None else {target: value.three_hour}

    return rule


FieldRule = Callable[[Any, TimestampMode, tzinfo], dict[str, Any]]

# Source key -> rule producing WeatherSample field values
FIELD_RULES: dict[str, FieldRule] = {
    "dt": _target_time_rule,
    "sys": _sun_events_rule,
    "main": _main_rule,
    "weather": _weather_rule,
    "wind": _wind_rule,
    "clouds": _clouds_rule,
    "rain": _precipitation_rule("rain_height"),
    "snow": _precipitation_rule("snow_height"),
}


def _decode(model: type[BaseModel], document: Any, what: str) -> Any:
    try:
        return model.model_validate(document)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors(include_url=False)
        ]
        raise StructuralMismatchError(
            f"Malformed {what}: {errors[0]['loc'] or '<root>'}: {errors[0]['msg']}",
            details={"errors": errors},
        ) from e


def map_observation(document: Any, mode: TimestampMode = TimestampMode.INSTANT, tz: tzinfo = UTC) -> WeatherSample:
    """Map one observation document onto a WeatherSample.

    Location fields are left empty; callers attach them with ``model_copy``.

    Args:
        document: Parsed JSON object from the API
        mode: INSTANT for current conditions, FORECAST for forecast entries
        tz: Timezone used to render timestamps

    Returns:
        WeatherSample with every present field filled in

    Raises:
        StructuralMismatchError: A present key holds a wrong-shaped value
        EmptyWeatherDescriptionError: The ``weather`` array is empty
    """
    decoded: ObservationDocument = _decode(ObservationDocument, document, "observation document")

    fields: dict[str, Any] = {}
    for key, rule in FIELD_RULES.items():
        value = getattr(decoded, key)
        if value is not None:
            fields.update(rule(value, mode, tz))

    return WeatherSample(**fields)


def map_forecast(document: Any, tz: tzinfo = UTC) -> ForecastSet:
    """Map a forecast listing onto a ForecastSet.

    The first ``cnt`` entries of ``list`` are mapped in FORECAST mode; extra
    entries are ignored. A missing ``cnt`` means zero entries.

    Raises:
        ForecastCountMismatchError: ``list`` holds fewer entries than ``cnt``
        StructuralMismatchError: The listing or one of its entries is malformed
        EmptyWeatherDescriptionError: An entry has an empty ``weather`` array
    """
    decoded: ForecastDocument = _decode(ForecastDocument, document, "forecast document")

    count = decoded.cnt or 0
    raw_entries = decoded.entries or []
    if len(raw_entries) < count:
        raise ForecastCountMismatchError(declared=count, actual=len(raw_entries))

    entries = []
    for index, raw_entry in enumerate(raw_entries[:count]):
        try:
            entries.append(map_observation(raw_entry, TimestampMode.FORECAST, tz))
        except WeatherMappingError as e:
            e.details.setdefault("entry_index", index)
            raise

    return ForecastSet(count=count, entries=tuple(entries))
