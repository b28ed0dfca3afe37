def to_uppercase(value: str | None) -> str | None:
    """
    Strip and uppercase a string if it's not None.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Strip and lowercase a string if it's not None.
    """
    if value is None:
        return None
    return value.strip().lower()
