"""Base reporter class for page rendering.

Concrete reporters inherit from this.
Output is str, not print(). Caller decides destination.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogfilter.application.page import CatalogPage


class BaseReporter(ABC):
    """Base class for page reporters.

    Example:
        class CountReporter(BaseReporter):
            def report(self, page: CatalogPage) -> str:
                return page.heading()
    """

    @abstractmethod
    def report(self, page: CatalogPage) -> str:
        """Render current page state.

        Args:
            page: Page with catalog, view state and visible events
        """
