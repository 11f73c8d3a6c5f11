from __future__ import annotations

from datetime import datetime

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

PT_BR_WEEKDAYS = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)

PT_BR_MONTHS = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

# Checked in order against the lower-cased description.
CONDITION_EMOJIS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("chuva",), "🌧️"),
    (("sol", "limpo"), "☀️"),
    (("nuvens",), "☁️"),
)
UNKNOWN_CONDITION_EMOJI = "❓"


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_long_date_pt(moment: datetime) -> str:
    """pt-BR long date, e.g. "Segunda-feira, 19 de outubro"."""
    weekday = PT_BR_WEEKDAYS[moment.weekday()]
    month = PT_BR_MONTHS[moment.month - 1]
    return capitalize_first(f"{weekday}, {moment.day} de {month}")


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def condition_emoji(description: str) -> str:
    lowered = description.lower()
    for needles, emoji in CONDITION_EMOJIS:
        if any(n in lowered for n in needles):
            return emoji
    return UNKNOWN_CONDITION_EMOJI


def icon_url(icon_code: str) -> str:
    if not icon_code:
        return ""
    return ICON_URL_TEMPLATE.format(icon=icon_code)
