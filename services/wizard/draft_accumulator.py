# -*- coding: utf-8 -*-
"""
Draft accumulation for the create project wizard.

merge_draft() is the only way draft data changes. The list helpers
below never touch the draft directly: they build a partial update that
is then applied through merge_draft().
"""

from dataclasses import replace
from typing import Any, Dict, Optional

from app.config import Config
from models.project import (
    Deliverable,
    Metric,
    ProjectDraft,
    ProjectMode,
    SuccessType,
    check_item_fields,
    coerce_field,
    generate_item_id,
)
from services.exceptions import ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)

DELIVERABLES = "deliverables"
METRICS = "metrics"

_ITEM_FACTORIES = {
    DELIVERABLES: Deliverable,
    METRICS: Metric,
}


def merge_draft(draft: ProjectDraft, partial: Dict[str, Any]) -> ProjectDraft:
    """
    Shallow-merge partial fields into the draft.

    Fields not named in ``partial`` are left untouched. Setting
    ``success_type`` seeds the matching list when it is empty.
    """
    if not partial:
        return draft

    merged = draft.with_updates(partial)

    if "success_type" in partial:
        merged = _seed_for_success_type(merged)

    return merged


def _seed_for_success_type(draft: ProjectDraft) -> ProjectDraft:
    """Seed deliverables/metrics with one entry if the chosen list is empty."""
    if draft.success_type == SuccessType.DELIVERABLE and not draft.deliverables:
        logger.debug("Seeding first deliverable")
        return replace(draft, deliverables=(Deliverable(),))

    if draft.success_type == SuccessType.METRIC and not draft.metrics:
        if draft.metric_name or draft.metric_target:
            logger.debug("Seeding first metric from legacy metric fields")
            seeded = Metric(
                id=generate_item_id(f"{Config.METRIC_ID_PREFIX}-seed"),
                name=draft.metric_name or "",
                target=draft.metric_target,
            )
        else:
            seeded = Metric()
        return replace(draft, metrics=(seeded,))

    return draft


# =========================================================================
# List mutations (deliverables / metrics)
# =========================================================================

def _check_collection(collection: str):
    if collection not in _ITEM_FACTORIES:
        raise ValidationException(
            f"Unknown item collection: {collection}",
            field=collection,
            context="draft_accumulator"
        )


def add_item(draft: ProjectDraft, collection: str) -> Dict[str, Any]:
    """Partial that appends one blank item with a fresh id."""
    _check_collection(collection)
    items = getattr(draft, collection)
    return {collection: items + (_ITEM_FACTORIES[collection](),)}


def update_item(
    draft: ProjectDraft,
    collection: str,
    item_id: str,
    partial: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Partial that merges fields into the item matching ``item_id``.

    Returns None when no item matches. The item's id is never rewritten.
    """
    _check_collection(collection)
    items = getattr(draft, collection)
    if not any(item.id == item_id for item in items):
        logger.debug(f"update_item: {collection} has no item {item_id}")
        return None

    changes = {k: v for k, v in partial.items() if k != "id"}
    check_item_fields(_ITEM_FACTORIES[collection], changes.keys(), "update_item")
    updated = tuple(
        replace(item, **changes) if item.id == item_id else item
        for item in items
    )
    return {collection: updated}


def remove_item(draft: ProjectDraft, collection: str, item_id: str) -> Optional[Dict[str, Any]]:
    """Partial that removes the item matching ``item_id``, or None if absent."""
    _check_collection(collection)
    items = getattr(draft, collection)
    remaining = tuple(item for item in items if item.id != item_id)
    if len(remaining) == len(items):
        logger.debug(f"remove_item: {collection} has no item {item_id}")
        return None
    return {collection: remaining}


# =========================================================================
# Mode changes
# =========================================================================

def is_mode_switch(draft: ProjectDraft, new_mode: Any) -> bool:
    """True when ``new_mode`` replaces a different, already chosen mode."""
    mode = coerce_field("mode", new_mode)
    return draft.mode != ProjectMode.UNSET and mode != draft.mode


def reset_for_mode(draft: ProjectDraft, new_mode: Any) -> ProjectDraft:
    """Fresh draft for a newly chosen mode; earlier answers are discarded."""
    logger.info(f"Mode switched from {draft.mode.value}; clearing previous answers")
    return ProjectDraft(mode=coerce_field("mode", new_mode))
