"""Formatting helpers for recipe times and URLs."""

import re

_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>[0-9]{1,4})D)?(?:T(?:(?P<hours>[0-9]{1,6})H)?"
    r"(?:(?P<minutes>[0-9]{1,6})M)?(?:(?P<seconds>[0-9]{1,6})S)?)?$",
    re.IGNORECASE,
)
_PLAIN_MINUTES = re.compile(r"^[0-9]{1,6}$")


def format_time(value: str | int | None) -> str:
    """Format a recipe duration for display.

    Seconds are rounded to the nearest minute, with half a minute rounding up.
    """
    if value is None:
        return ""
    text = str(value).strip()
    if _PLAIN_MINUTES.match(text):
        return _join_duration(0, int(text))
    match = _ISO_DURATION.match(text)
    if match and any(match.groupdict().values()):
        parts = {key: int(raw or 0) for key, raw in match.groupdict().items()}
        total_seconds = (
            parts["days"] * 86400
            + parts["hours"] * 3600
            + parts["minutes"] * 60
            + parts["seconds"]
        )
        return _join_duration(*divmod((total_seconds + 30) // 60, 60))
    return text


def _join_duration(hours: int, minutes: int) -> str:
    hours, minutes = hours + minutes // 60, minutes % 60
    if hours and minutes:
        return f"{hours} h {minutes} min"
    if hours:
        return f"{hours} h"
    return f"{minutes} min"


def recipe_image_url(
    base_url: str, recipe_id: str | None, has_image: bool
) -> str | None:
    """Return the image URL for a recipe, or None when it has no image."""
    if not has_image or not recipe_id:
        return None
    base = base_url.rstrip("/")
    return f"{base}/api/media/recipes/{recipe_id}/images/min-original.webp"


def recipe_url(base_url: str, slug: str | None, clickable: bool, group: str) -> str:
    """Return the recipe page URL, or ``#`` when links are disabled."""
    if not clickable or not base_url or not slug:
        return "#"
    return f"{base_url.rstrip('/')}/g/{group}/r/{slug}"
