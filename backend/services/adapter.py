"""
Maps an incoming JSON payload onto the canonical report entities.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .kinds import ReportKind
from .models import (
    DispositionRecord,
    FollowupRecord,
    PartyRecord,
    Report,
    ReportHeader,
    TrackingBlock,
)

# payload list key -> entity type, in validation order
_LISTS = (
    ("dispositions", DispositionRecord),
    ("followups", FollowupRecord),
    ("expeditions", PartyRecord),
)


def _field_keys(model: type[BaseModel]) -> set:
    return {info.alias or name for name, info in model.model_fields.items()}


def _first_error(exc: PydanticValidationError, model: type[BaseModel],
                 prefix: str = "") -> ValidationError:
    err = exc.errors()[0]
    # union members add their type tag to loc; keep payload keys and indices
    keys = _field_keys(model)
    path = ".".join(str(part) for part in err["loc"] if isinstance(part, int) or part in keys)
    if prefix:
        path = f"{prefix}.{path}" if path else prefix
    message = "field required" if err["type"] == "missing" else err["msg"]
    return ValidationError(path or "payload", message)


def _validate(model: type[BaseModel], data: Mapping, prefix: str = "") -> Any:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise _first_error(exc, model, prefix) from exc


def _records(payload: Mapping, key: str, model: type[BaseModel]) -> tuple:
    items = payload.get(key)
    if items is None:
        return ()
    if not isinstance(items, list):
        raise ValidationError(key, "must be a list")
    records = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValidationError(f"{key}.{i}", "must be an object")
        records.append(_validate(model, item, f"{key}.{i}"))
    return tuple(records)


def adapt(kind: ReportKind, payload: Any) -> Report:
    """Build a Report for *kind* from *payload*.

    Raises ValidationError naming the first missing or malformed field.
    Header fields are checked first, then the tracking block (for kinds that
    print one), then each record list.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("payload", "must be an object")

    header = _validate(ReportHeader, payload)
    tracking = _validate(TrackingBlock, payload) if kind.has_tracking else None
    lists = {key: _records(payload, key, model) for key, model in _LISTS}

    return Report(kind=kind.slug, header=header, tracking=tracking, **lists)
