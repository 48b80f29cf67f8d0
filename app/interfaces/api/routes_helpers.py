"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status


def http_error_from_value_error(exc: ValueError) -> HTTPException:
    """Translate a use case ``ValueError`` into the matching HTTP error.

    Messages ending in "not found" become 404 responses; every other
    validation problem is reported as 400.
    """

    detail = str(exc)
    if detail.lower().endswith("not found"):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


__all__ = ["http_error_from_value_error"]
