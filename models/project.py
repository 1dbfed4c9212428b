# -*- coding: utf-8 -*-
"""
Project draft model.

The draft is the project configuration accumulated across the create
project wizard. It is immutable: every change produces a new draft via
``with_updates()``.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple, Type
import uuid

from app.config import Config
from services.exceptions import ValidationException


class ProjectMode(Enum):
    """How the project is created."""
    QUICK = "quick"
    GUIDED = "guided"
    UNSET = "unset"


class ProjectIntent(Enum):
    """What the project is mainly about."""
    DELIVERY = "delivery"
    EXPERIMENT = "experiment"
    INTERNAL = "internal"
    UNSET = "unset"


class SuccessType(Enum):
    """How success is measured."""
    DELIVERABLE = "deliverable"
    METRIC = "metric"
    UNDEFINED = "undefined"


class DeadlineType(Enum):
    NONE = "none"
    TARGET = "target"
    FIXED = "fixed"


class WorkStructure(Enum):
    """How the project's work is organised."""
    LINEAR = "linear"
    MILESTONES = "milestones"
    MULTISTREAM = "multistream"
    UNSET = "unset"


def generate_item_id(prefix: str) -> str:
    """Generate a unique list item identifier, e.g. ``dlv-3f2a9c01b7d4``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class Deliverable:
    """A deliverable that defines project success."""
    id: str = field(default_factory=lambda: generate_item_id(Config.DELIVERABLE_ID_PREFIX))
    title: str = ""
    due_date: Optional[str] = None  # YYYY-MM-DD

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "due_date": self.due_date}


@dataclass(frozen=True)
class Metric:
    """A measurable success metric."""
    id: str = field(default_factory=lambda: generate_item_id(Config.METRIC_ID_PREFIX))
    name: str = ""
    target: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "target": self.target}


# Enum-typed draft fields
_ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "mode": ProjectMode,
    "intent": ProjectIntent,
    "success_type": SuccessType,
    "deadline_type": DeadlineType,
    "structure": WorkStructure,
}

# List-typed draft fields and their item class
_ITEM_FIELDS: Dict[str, type] = {
    "deliverables": Deliverable,
    "metrics": Metric,
}

_ID_SET_FIELDS = ("contributor_ids", "stakeholder_ids")


@dataclass(frozen=True)
class ProjectDraft:
    """
    Accumulated, not-yet-submitted project configuration.

    Deliverables and metrics are kept as tuples in display order.
    Contributor and stakeholder ids are sets (unique, unordered).
    """

    # Mode selection
    mode: ProjectMode = ProjectMode.UNSET

    # Step 1: Intent
    intent: ProjectIntent = ProjectIntent.UNSET

    # Step 2: Outcome & success
    success_type: SuccessType = SuccessType.UNDEFINED
    deliverables: Tuple[Deliverable, ...] = ()
    metrics: Tuple[Metric, ...] = ()
    description: str = ""
    deadline_type: DeadlineType = DeadlineType.NONE
    deadline_date: Optional[str] = None  # only meaningful when deadline_type != none

    # Legacy single-metric fields, carried into the first seeded metric
    metric_name: Optional[str] = None
    metric_target: Optional[str] = None

    # Step 3: Ownership
    owner_id: Optional[str] = None
    contributor_ids: FrozenSet[str] = frozenset()
    stakeholder_ids: FrozenSet[str] = frozenset()

    # Step 4: Structure
    structure: WorkStructure = WorkStructure.UNSET
    add_starter_tasks: bool = False

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_updates(self, partial: Dict[str, Any]) -> 'ProjectDraft':
        """
        Return a copy with the given fields replaced.

        Values are coerced to the field's type (enum values may be given
        as strings, id sets as any iterable, items as dicts).

        Raises:
            ValidationException: On unknown fields or invalid values.
        """
        known = self.field_names()
        coerced = {}
        for key, value in partial.items():
            if key not in known:
                raise ValidationException(
                    f"Unknown project draft field: {key}",
                    field=key,
                    context="ProjectDraft.with_updates"
                )
            coerced[key] = coerce_field(key, value)
        return replace(self, **coerced)

    def has_deadline(self) -> bool:
        return self.deadline_type != DeadlineType.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize draft to a JSON-ready dictionary."""
        return {
            "mode": self.mode.value,
            "intent": self.intent.value,
            "success_type": self.success_type.value,
            "deliverables": [d.to_dict() for d in self.deliverables],
            "metrics": [m.to_dict() for m in self.metrics],
            "description": self.description,
            "deadline_type": self.deadline_type.value,
            "deadline_date": self.deadline_date if self.has_deadline() else None,
            "metric_name": self.metric_name,
            "metric_target": self.metric_target,
            "owner_id": self.owner_id,
            "contributor_ids": sorted(self.contributor_ids),
            "stakeholder_ids": sorted(self.stakeholder_ids),
            "structure": self.structure.value,
            "add_starter_tasks": self.add_starter_tasks,
        }


def coerce_field(key: str, value: Any) -> Any:
    """Coerce a raw value for a draft field to the field's type."""
    if key in _ENUM_FIELDS:
        enum_cls = _ENUM_FIELDS[key]
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            allowed = [member.value for member in enum_cls]
            raise ValidationException(
                f"Invalid value for {key}: {value!r}",
                field=key,
                errors=[f"expected one of {allowed}"],
                context="ProjectDraft.with_updates"
            )

    if key in _ITEM_FIELDS:
        return tuple(_coerce_item(_ITEM_FIELDS[key], item) for item in (value or ()))

    if key in _ID_SET_FIELDS:
        return _coerce_id_set(value)

    if key == "add_starter_tasks":
        return bool(value)

    if key == "description":
        return value or ""

    return value


def check_item_fields(item_cls: type, keys: Iterable[str], context: str):
    """
    Raise ValidationException for the first key that is not a field of item_cls.
    """
    known = {f.name for f in fields(item_cls)}
    for key in keys:
        if key not in known:
            raise ValidationException(
                f"Unknown {item_cls.__name__.lower()} field: {key}",
                field=key,
                errors=[f"expected one of {sorted(known)}"],
                context=context
            )


def _coerce_item(item_cls: type, item: Any):
    if isinstance(item, item_cls):
        return item
    if isinstance(item, dict):
        check_item_fields(item_cls, item.keys(), "ProjectDraft.with_updates")
        return item_cls(**item)
    raise ValidationException(
        f"Cannot convert {type(item).__name__} to {item_cls.__name__}",
        context="ProjectDraft.with_updates"
    )


def _coerce_id_set(value: Optional[Iterable[str]]) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value])
    return frozenset(value)
