"""Map OpenWeatherMap icon codes to display glyphs."""

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"
DEFAULT_EMOJI = "🌡️"

# Checked in order, first match wins ("01d" must be tried before "01n" and
# the two-digit groups, since codes share prefixes).
ICON_RULES: tuple[tuple[str, str], ...] = (
    ("01d", "☀️"),  # clear, day
    ("01n", "🌙"),  # clear, night
    ("02", "⛅"),  # few clouds
    ("03", "☁️"),  # scattered clouds
    ("04", "🌫️"),  # broken clouds
    ("09", "🌧️"),  # shower rain
    ("10", "🌦️"),  # rain
    ("11", "⛈️"),  # thunderstorm
    ("13", "❄️"),  # snow
    ("50", "🌫️"),  # mist
)


def emoji_for(icon_code: str) -> str:
    """Return the glyph for an icon code, or the thermometer for unknown codes."""
    for pattern, emoji in ICON_RULES:
        if pattern in icon_code:
            return emoji
    return DEFAULT_EMOJI


def icon_url(icon_code: str) -> str:
    """Return the URL of the upstream icon image."""
    return ICON_URL_TEMPLATE.format(code=icon_code)
