"""Tests for CatalogConfig."""

import pytest

from catalogfilter.config import DEFAULT_DEBOUNCE_SECONDS, CatalogConfig


class TestCatalogConfig:
    def test_defaults(self) -> None:
        config = CatalogConfig()
        assert config.title == "EventCatalog"
        assert config.debounce_seconds == DEFAULT_DEBOUNCE_SECONDS == 0.5
        assert config.show_diagrams is False
        assert config.console_width == 120

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"title": ""}, "title must not be empty"),
            ({"debounce_seconds": -1}, "debounce_seconds must be >= 0"),
            ({"console_width": 10}, "console_width must be >= 40"),
        ],
    )
    def test_invalid(self, kwargs: dict[str, object], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            CatalogConfig(**kwargs)  # type: ignore[arg-type]

    def test_from_mapping(self) -> None:
        config = CatalogConfig.from_mapping({"title": "Shop", "debounce-seconds": 0.25})
        assert config.title == "Shop"
        assert config.debounce_seconds == 0.25

    def test_from_mapping_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="unknown config keys: colour"):
            CatalogConfig.from_mapping({"colour": "blue"})
