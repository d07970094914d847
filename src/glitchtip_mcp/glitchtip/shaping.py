"""Response shaping for issue details.

Glitchtip issue and event payloads are large: full project metadata, SDK and
package listings, long breadcrumb trails and verbose messenger payloads. These
helpers build reduced copies that fit comfortably in an LLM context. Inputs
are never mutated; untouched nested values are shared with the result.
"""

from __future__ import annotations

import json
from typing import Any

ISSUE_DROPPED_FIELDS = ("project",)
EVENT_DROPPED_FIELDS = ("packages", "sdk")

BREADCRUMB_WINDOW = 10
FIELDS_PREVIEW_LENGTH = 200
TRUNCATED_SUFFIX = "... [truncated]"


def _without(payload: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if key not in keys}


def shape_issue(issue: dict[str, Any]) -> dict[str, Any]:
    """Return the issue without its embedded project."""
    return _without(issue, ISSUE_DROPPED_FIELDS)


def shape_event(event: dict[str, Any]) -> dict[str, Any]:
    """Return the event without SDK/package listings and with reduced entries."""
    shaped = _without(event, EVENT_DROPPED_FIELDS)
    entries = shaped.get("entries")
    if isinstance(entries, list):
        shaped["entries"] = [shape_entry(entry) for entry in entries]
    return shaped


def shape_entry(entry: Any) -> Any:
    """Shape one event entry.

    Breadcrumb entries keep only the most recent breadcrumbs. Messenger
    payloads found on any record in ``data.values`` are capped in size.
    """
    if not isinstance(entry, dict):
        return entry
    data = entry.get("data")
    if not isinstance(data, dict) or not isinstance(data.get("values"), list):
        return entry

    values = data["values"]
    if entry.get("type") == "breadcrumbs":
        values = truncate_breadcrumbs(values)
    values = [cap_messenger_fields(value) for value in values]
    return {**entry, "data": {**data, "values": values}}


def truncate_breadcrumbs(breadcrumbs: list[Any]) -> list[Any]:
    """Keep the last BREADCRUMB_WINDOW breadcrumbs, prefixed by a marker.

    The marker records how many older breadcrumbs were dropped and borrows the
    timestamp of the first breadcrumb that was kept. Lists at or under the
    window are returned unchanged.
    """
    if len(breadcrumbs) <= BREADCRUMB_WINDOW:
        return breadcrumbs

    retained = breadcrumbs[-BREADCRUMB_WINDOW:]
    first = retained[0]
    timestamp = first.get("timestamp") if isinstance(first, dict) else None
    marker = {
        "timestamp": timestamp or None,
        "type": "info",
        "category": "truncation",
        "level": "info",
        "message": f"[{len(breadcrumbs) - BREADCRUMB_WINDOW} earlier breadcrumbs removed]",
    }
    return [marker, *retained]


def cap_messenger_fields(record: Any) -> Any:
    """Cap ``fields`` of every message under ``data.messenger.messages``."""
    if not isinstance(record, dict):
        return record
    data = record.get("data")
    if not isinstance(data, dict):
        return record
    messenger = data.get("messenger")
    if not isinstance(messenger, dict) or not isinstance(messenger.get("messages"), list):
        return record

    messages = [_cap_message(message) for message in messenger["messages"]]
    return {**record, "data": {**data, "messenger": {**messenger, "messages": messages}}}


def _cap_message(message: Any) -> Any:
    if not isinstance(message, dict) or message.get("fields") is None:
        return message
    serialized = _compact_json(message["fields"])
    if len(serialized) <= FIELDS_PREVIEW_LENGTH:
        return message
    return {**message, "fields": serialized[:FIELDS_PREVIEW_LENGTH] + TRUNCATED_SUFFIX}


def _compact_json(value: Any) -> str:
    """Serialize to compact JSON with JavaScript-style numbers.

    Compact separators, non-ASCII kept, and whole floats written without a
    fractional part (``1.0`` -> ``1``).
    """
    return json.dumps(_integral_floats_as_int(value), separators=(",", ":"), ensure_ascii=False)


def _integral_floats_as_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_int(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_int(item) for item in value]
    return value
