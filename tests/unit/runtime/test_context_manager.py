"""Unit tests for the application context."""

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    merge_configs,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_with_context_override(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        override = ConfigData()
        override.app.host = "custom_host"

        with with_context(override):
            assert get_config().app.host == "custom_host"
            assert get_config().app.port == original_config.app.port

        assert get_config() is original_config

    def test_nested_overrides(self):
        level1 = ConfigData()
        level1.app.host = "level1_host"

        with with_context(level1):
            level1_log_level = get_config().logging.level
            level2 = ConfigData()
            level2.logging.level = "TRACE"

            with with_context(level2):
                assert get_config().app.host == "level1_host"
                assert get_config().logging.level == "TRACE"

            assert get_config().logging.level == level1_log_level
            assert get_config().app.host == "level1_host"

    def test_none_override_is_noop(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"host": "x"}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_whole_config(self):
        original_context = get_context()
        replacement = ConfigData()
        replacement.app.name = "replaced"

        try:
            set_config(replacement)

            assert get_config() is replacement
            assert get_config().app.name == "replaced"
        finally:
            set_context(original_context)

        assert get_config() is original_context.config

    def test_merge_keeps_unset_fields(self):
        base = ConfigData()
        base.app.port = 9001
        override = ConfigData()
        override.catalog.seed_products = False

        merged = merge_configs(base, override)

        assert merged.app.port == 9001
        assert merged.catalog.seed_products is False
