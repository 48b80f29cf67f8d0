"""Common validation helpers for user use cases."""

USER_ROLES = ("admin", "buyer", "user")


def normalize_email(email: str) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = email.strip()
    if normalized.count("@") != 1:
        raise ValueError("A valid email address is required")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("A valid email address is required")

    return f"{local_part}@{domain.lower()}"


def ensure_valid_role(role: str) -> str:
    normalized = role.strip().lower()
    if normalized not in USER_ROLES:
        raise ValueError(f"Role must be one of: {', '.join(USER_ROLES)}")
    return normalized
