"""Common validation helpers for user use cases."""

MIN_PASSWORD_LENGTH = 8


def normalize_email(email: str) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = (email or "").strip().lower()
    if normalized.count("@") != 1:
        raise ValueError("A valid email address is required")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("A valid email address is required")
    return normalized


def ensure_password(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return password
