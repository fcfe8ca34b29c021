"""Tests for `sexpand.config` focusing on behavior and correctness."""

from dataclasses import FrozenInstanceError

import pytest

from sexpand.config import DEFAULT_CONFIG, ExpansionConfig


def test_default_values() -> None:
    """Defaults match the documented CLI behavior."""
    config = ExpansionConfig()
    assert config.placeholder == "{}"
    assert config.expand_separator == ","
    assert config.template_separator == "\n"
    assert config.lenient_width is False
    assert config.max_hosts == 100_000
    assert DEFAULT_CONFIG == config


def test_separator_for_mode() -> None:
    """Plain expansion joins with commas; template output joins with newlines."""
    config = ExpansionConfig()
    assert config.separator_for(None) == ","
    assert config.separator_for("{}.example.com") == "\n"
    # An empty template still selects template mode
    assert config.separator_for("") == "\n"


def test_with_overrides_ignores_none() -> None:
    """None overrides leave fields unchanged; others replace them."""
    config = DEFAULT_CONFIG.with_overrides(placeholder=None, max_hosts=5)
    assert config.placeholder == "{}"
    assert config.max_hosts == 5
    # The global instance is untouched
    assert DEFAULT_CONFIG.max_hosts == 100_000


def test_with_overrides_unknown_field_raises() -> None:
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.with_overrides(bogus=1)


def test_config_is_frozen() -> None:
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CONFIG.max_hosts = 1  # type: ignore[misc]
