"""Unit tests for the application context and configuration overrides."""

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_url = original_config.database.url

        test_config = ConfigData()
        test_config.database.url = "sqlite:///:memory:"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.database.url == "sqlite:///:memory:"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.database.url == original_url
        assert after_config is original_config

    def test_partial_override_inherits_the_rest(self):
        """Values the override does not set are taken from the current config."""
        original_config = get_config()

        test_config = ConfigData()
        test_config.logging.level = "DEBUG"

        with with_context(test_config):
            merged = get_config()
            assert merged.logging.level == "DEBUG"
            assert merged.logging.format == original_config.logging.format
            assert merged.database.url == original_config.database.url
            assert merged.app.name == original_config.app.name

    def test_with_context_nested_overrides(self):
        level1_config = ConfigData()
        level1_config.database.url = "sqlite:///level1.db"
        level1_config.app.environment = "test"

        with with_context(level1_config):
            level2_config = ConfigData()
            level2_config.database.seed_on_init = True

            with with_context(level2_config):
                level2 = get_config()
                assert level2.database.url == "sqlite:///level1.db"
                assert level2.database.seed_on_init is True
                assert level2.app.environment == "test"

            level1 = get_config()
            assert level1.database.url == "sqlite:///level1.db"
            assert level1.database.seed_on_init is False

    def test_context_restored_after_exception(self):
        original_config = get_config()
        test_config = ConfigData()
        test_config.database.echo = True

        with pytest.raises(RuntimeError):
            with with_context(test_config):
                assert get_config().database.echo is True
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_with_context_none_is_a_no_op(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):
                pass

    def test_set_config_replaces_configuration(self):
        original_config = get_config()
        replacement = ConfigData()
        replacement.app.name = "branch-library"

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original_config)

        assert get_config() is original_config
