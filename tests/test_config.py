"""Tests for the environment backed settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_cors_origins_are_split() -> None:
    settings = Settings(
        database_url="sqlite://",
        cors_origins="http://localhost:3000, https://assets.example.com,",
    )

    assert settings.allowed_origins() == [
        "http://localhost:3000",
        "https://assets.example.com",
    ]


def test_sendgrid_settings_must_be_paired() -> None:
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite://", sendgrid_api_key="SG.fake")


def test_sendgrid_sender_must_be_an_email() -> None:
    with pytest.raises(ValidationError):
        Settings(
            database_url="sqlite://",
            sendgrid_api_key="SG.fake",
            sendgrid_sender="not-an-address",
        )
