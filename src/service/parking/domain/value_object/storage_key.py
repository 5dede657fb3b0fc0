from src.platform.exception.exceptions import ValidationError


def clean_key(value: str | None, field: str) -> str:
    """Surrounding whitespace is dropped; an empty key never reaches the store"""
    cleaned = value.strip() if isinstance(value, str) else ''
    if not cleaned:
        raise ValidationError(f'{field} cannot be empty')
    return cleaned


def clean_site_key(location: str | None, site: str | None) -> tuple[str, str]:
    return clean_key(location, 'Location'), clean_key(site, 'Site')
