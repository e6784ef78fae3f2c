import os


def is_url(identifier: str) -> bool:
    return identifier.startswith(("http://", "https://"))


def resolve_asset(base: str, name: str) -> str:
    """Joins an asset name onto a directory or a base URL."""
    if is_url(base):
        return f"{base.rstrip('/')}/{name}"
    return os.path.join(base, name)
