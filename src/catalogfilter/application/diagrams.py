"""Mermaid diagram source for a single event.

  producer ──> Event ──> consumer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogfilter.domain.model.event import Event

EVENT_ID = "e0"


def _label(name: str) -> str:
    return name.replace('"', "#quot;")


def build_mermaid(event: Event) -> str:
    """Render event as a left-to-right Mermaid flowchart.

    Producers point at the event, the event points at consumers.
    Node ids are positional (e0 for the event, s0, s1, ... per distinct
    service), so names that differ only in punctuation never share a node.
    A service that both produces and consumes keeps one node. Labels keep
    the original names with double quotes written as #quot;.
    """
    service_ids: dict[str, str] = {}

    def service_node(name: str) -> str:
        if name in service_ids:
            return service_ids[name]
        service_ids[name] = f"s{len(service_ids)}"
        return f'{service_ids[name]}["{_label(name)}"]'

    lines = ["flowchart LR", f'    {EVENT_ID}("{_label(event.name)}")']
    for producer in event.producer_names:
        lines.append(f"    {service_node(producer)} --> {EVENT_ID}")
    for consumer in event.consumer_names:
        lines.append(f"    {EVENT_ID} --> {service_node(consumer)}")
    return "\n".join(lines)
