"""Single name-normalization policy shared by groceries, recipes and lookups."""


def normalize_name(name: str) -> str:
    """Return the case-insensitive key for a grocery or ingredient name."""
    if not isinstance(name, str):
        raise ValueError(f"Name must be a string, got {type(name).__name__}")
    return name.strip().lower()
