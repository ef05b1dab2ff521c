"""Data loader: raw records → validated EventCatalog.

Validation happens here, at the boundary, so the engine never sees a
malformed event. Record keys follow the catalog's frontmatter naming
(producerNames, consumerNames); snake_case aliases are accepted too.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from catalogfilter.domain.exceptions import (
    CatalogLoadError,
    DuplicateEventError,
    EventValidationError,
)
from catalogfilter.domain.model.catalog import EventCatalog
from catalogfilter.domain.model.event import Event

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Accepted spellings per field, first match wins
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "producer_names": ("producerNames", "producer_names"),
    "consumer_names": ("consumerNames", "consumer_names"),
}


def _lookup(record: Mapping[str, object], field: str) -> object | None:
    for key in _FIELD_ALIASES.get(field, (field,)):
        if key in record:
            return record[key]
    return None


def _optional_str(record: Mapping[str, object], key: str, index: int) -> str | None:
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        raise EventValidationError(index, f"'{key}' must be a string, got {type(value).__name__}")
    return str(value)


def _names(record: Mapping[str, object], field: str, index: int) -> tuple[str, ...]:
    value = _lookup(record, field)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, list | tuple):
        raise EventValidationError(index, f"'{field}' must be a list of strings")
    for item in value:
        if not isinstance(item, str) or not item:
            raise EventValidationError(index, f"'{field}' must contain non-empty strings, got {item!r}")
    return tuple(value)


def event_from_record(record: Mapping[str, object], index: int = 0) -> Event:
    """Build one Event from a raw record.

    Missing producer/consumer lists become empty tuples.
    Missing domain becomes empty string.

    Raises:
        EventValidationError: If record shape is wrong.
    """
    if not isinstance(record, Mapping):
        raise EventValidationError(index, f"record must be an object, got {type(record).__name__}")

    name = record.get("name")
    if not isinstance(name, str) or not name:
        raise EventValidationError(index, "'name' must be a non-empty string")

    domain = record.get("domain")
    if domain is None:
        domain = ""
    if not isinstance(domain, str):
        raise EventValidationError(index, f"'domain' must be a string, got {type(domain).__name__}")

    return Event(
        name=name,
        domain=domain,
        producer_names=_names(record, "producer_names", index),
        consumer_names=_names(record, "consumer_names", index),
        version=_optional_str(record, "version", index),
        summary=_optional_str(record, "summary", index),
    )


def load_events(records: Iterable[Mapping[str, object]]) -> tuple[Event, ...]:
    """Validate records and build events in source order.

    Raises:
        EventValidationError: If any record is malformed.
        DuplicateEventError: If two records share a name.
    """
    events: list[Event] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        event = event_from_record(record, index)
        if event.name in seen:
            raise DuplicateEventError(event.name)
        seen.add(event.name)
        events.append(event)
    return tuple(events)


def unique_service_names(events: Iterable[Event]) -> tuple[str, ...]:
    """Distinct service ids across all events, first-seen order.

    Per event: producers first, then consumers.
    """
    names: dict[str, None] = {}
    for event in events:
        for service in (*event.producer_names, *event.consumer_names):
            names.setdefault(service, None)
    return tuple(names)


def unique_domain_names(events: Iterable[Event]) -> tuple[str, ...]:
    """Distinct domain labels, first-seen order. Empty domains skipped."""
    names: dict[str, None] = {}
    for event in events:
        if event.domain:
            names.setdefault(event.domain, None)
    return tuple(names)


def build_catalog(events: Iterable[Event]) -> EventCatalog:
    """Assemble catalog and derive sidebar option lists."""
    events = tuple(events)
    catalog = EventCatalog(
        events=events,
        services=unique_service_names(events),
        domains=unique_domain_names(events),
    )
    logger.debug(
        "catalog built: %d events, %d services, %d domains",
        len(catalog.events),
        len(catalog.services),
        len(catalog.domains),
    )
    return catalog


def load_catalog(path: Path | str) -> EventCatalog:
    """Read catalog JSON from disk.

    Accepted shapes: a list of event records, or an object with an
    "events" list.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or not a catalog.
        EventValidationError: If a record is malformed.
        DuplicateEventError: If two records share a name.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CatalogLoadError(path, f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise CatalogLoadError(path, exc.strerror or type(exc).__name__) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(path, f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc

    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise CatalogLoadError(path, "expected a list of events or an object with an 'events' list")

    logger.info("loading %d event records from %s", len(data), path)
    return build_catalog(load_events(data))
