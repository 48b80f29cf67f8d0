"""Use case for updating assets."""

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Asset
from app.infrastructure.repositories import AssetRepository
from .validators import ensure_asset_references

_READ_ONLY_FIELDS = {"id", "created_at", "updated_at", "asset_type", "purchased_by", "current_user"}
EDITABLE_FIELDS = frozenset(
    entity_field.name
    for entity_field in fields(Asset)
    if entity_field.name not in _READ_ONLY_FIELDS
)


def update_asset(session: Session, asset_id: str, changes: Mapping[str, Any]) -> Asset:
    """Apply ``changes`` to the asset; keys not present keep their value."""

    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown asset fields: {', '.join(sorted(unknown))}")

    repository = AssetRepository(session)
    current = repository.get(asset_id)
    if current is None:
        raise ValueError("Asset not found")

    updated = replace(current, **dict(changes))
    ensure_asset_references(session, updated)
    return repository.update(updated)
