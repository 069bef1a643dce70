"""
Pytest configuration and shared fixtures for bem-classes tests.

This module provides the sample class mappings, resolvers and
configurations used across the test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path for testing
sys.path.insert(0, str(Path(__file__).parent.parent))

from bem_classes import bem_classes
from bem_classes.utils.config import BemClassesConfig, set_config
from bem_classes.utils.constants import CONFIG_ENV_VAR, STRICT_ENV_VAR, LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep environment overrides and the global config out of every test."""
    for var in (CONFIG_ENV_VAR, STRICT_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


# Mapping fixtures
@pytest.fixture
def button_module():
    """The smallest mapping covering block, modifier and element keys."""
    return {
        "btn": "c1",
        "btn--primary": "c2",
        "btn__label": "c3",
    }


@pytest.fixture
def card_module():
    """A CSS-modules style mapping with hashed class names."""
    return {
        "card": "card_x7f2a",
        "card--raised": "card--raised_x7f2a",
        "card--compact": "card--compact_x7f2a",
        "card--0": "card--0_x7f2a",
        "card__title": "card__title_x7f2a",
        "card__title--large": "card__title--large_x7f2a",
        "card__title--muted": "card__title--muted_x7f2a",
        "card__body": "card__body_x7f2a",
        "card__footer": "card__footer_x7f2a",
        "card__footer--sticky": "card__footer--sticky_x7f2a",
        "badge": "badge_x7f2a",
        "badge--new": "badge--new_x7f2a",
    }


# Configuration fixtures
@pytest.fixture
def default_config(tmp_path):
    """Configuration built from defaults (no file on disk)."""
    return BemClassesConfig(str(tmp_path / "missing.json"))


@pytest.fixture
def lenient_config(tmp_path):
    """Configuration that substitutes a placeholder for unknown classes."""
    config = BemClassesConfig(str(tmp_path / "lenient.json"))
    config.resolver.strict = False
    return config


# Resolver fixtures
@pytest.fixture
def button(button_module, default_config):
    return bem_classes(button_module, "btn", default_config)


@pytest.fixture
def card(card_module, default_config):
    return bem_classes(card_module, "card", default_config)
