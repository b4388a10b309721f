"""
Payload Translation Helpers

Small pure functions shared by the translators and the bootstrap scripts:
partial-update body building, handle normalisation, id-prefix gates and the
variant title to option-value mapping.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .errors import BadRequestError

VARIANT_TITLE_SEPARATOR = " - "


class StrictModel(BaseModel):
    """Request body model rejecting fields it does not declare"""
    model_config = ConfigDict(extra="forbid")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-01T00:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def compact(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None"""
    return {key: value for key, value in data.items() if value is not None}


def provided_fields(model: BaseModel, nullable: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Fields the caller explicitly set on a request model.

    Unset fields never appear. An explicit null is kept only for fields listed
    in ``nullable``; for every other field it is treated as not provided.
    """
    allowed_nulls = set(nullable)
    data = model.model_dump(exclude_unset=True)
    return {
        key: value
        for key, value in data.items()
        if value is not None or key in allowed_nulls
    }


def normalize_handle(value: str) -> str:
    """URL slug: trimmed, lowercased, whitespace runs collapsed to '-'"""
    return re.sub(r"\s+", "-", value.strip().lower())


def ensure_id_prefix(resource_id: Optional[str], prefix: str, label: str) -> str:
    """Reject ids that do not carry the platform prefix for their resource type"""
    if not resource_id or not resource_id.startswith(prefix):
        raise BadRequestError(f"Invalid {label} ID format")
    return resource_id


def parse_variant_title(title: str, option_titles: Sequence[str]) -> Dict[str, str]:
    """
    Derive a variant's option values from its display title.

    Titles encode values positionally, e.g. "256GB - Natural Titanium" for
    options ["Storage", "Color"]. A product without options maps to {}, and a
    single option takes the whole title so values may contain the separator.
    Any other segment/option count mismatch is rejected instead of guessed.
    """
    if not option_titles:
        return {}

    if len(option_titles) == 1:
        return {option_titles[0]: title.strip()}

    segments = [segment.strip() for segment in title.split(VARIANT_TITLE_SEPARATOR)]
    if len(segments) != len(option_titles):
        raise BadRequestError(f"Variant '{title}' does not match product options")
    return dict(zip(option_titles, segments))


def resolve_variant_options(
    title: str,
    options: Sequence[Mapping[str, Any]],
    explicit: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Option-value map for a variant being created.

    An explicit map is canonical; the title is only parsed when none is
    given. Every declared option must be assigned exactly one declared value.
    """
    option_titles: List[str] = [option["title"] for option in options]
    allowed = {option["title"]: list(option.get("values") or []) for option in options}

    if explicit:
        resolved = {str(key): str(value) for key, value in explicit.items()}
        unknown = [key for key in resolved if key not in allowed]
        if unknown:
            raise BadRequestError(
                f"Variant '{title}' references unknown option(s): {', '.join(unknown)}"
            )
        missing = [name for name in option_titles if name not in resolved]
        if missing:
            raise BadRequestError(
                f"Variant '{title}' is missing option(s): {', '.join(missing)}"
            )
    else:
        resolved = parse_variant_title(title, option_titles)

    for name, value in resolved.items():
        if allowed[name] and value not in allowed[name]:
            raise BadRequestError(
                f"Variant '{title}' uses value '{value}' not declared for option '{name}'"
            )
    return resolved


__all__ = [
    "VARIANT_TITLE_SEPARATOR",
    "StrictModel",
    "utc_timestamp",
    "compact",
    "provided_fields",
    "normalize_handle",
    "ensure_id_prefix",
    "parse_variant_title",
    "resolve_variant_options",
]
