"""Shape checks for candidate recommendations."""

from singmeasong.domain.exceptions import ValidationError


def _require_text(value: str | None, field: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} cannot be empty", field=field)
    return value


def validate_recommendation(name: str | None, link: str | None) -> None:
    """
    Check that a candidate has a name and a link.

    Uniqueness and link format are checked elsewhere.
    Raises ValidationError on the first missing field.
    """
    _require_text(name, "name")
    _require_text(link, "youtubeLink")
