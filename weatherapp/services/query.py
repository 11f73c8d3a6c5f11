from __future__ import annotations

from weatherapp.core.errors import InvalidCityError
from weatherapp.models.weather import WeatherQuery


def normalize_query(raw: str | None, *, append_country_code: str | None = None) -> WeatherQuery:
    """Trim user input into a provider query.

    Blank input raises ``InvalidCityError`` so callers can refuse to issue any
    request. ``append_country_code`` restricts the lookup to one country
    ("Cambé" -> "Cambé,BR"); ``None`` searches globally.
    """
    city = (raw or "").strip()
    if not city:
        raise InvalidCityError()
    country = (append_country_code or "").strip().upper() or None
    return WeatherQuery(city=city, country_code=country)
