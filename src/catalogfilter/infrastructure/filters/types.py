"""Filter type alias.

PEP 695 type alias syntax.
Filter function: takes Event, returns True to include.
"""

from collections.abc import Callable

from catalogfilter.domain.model.event import Event

type Filter = Callable[[Event], bool]
