# topmark:header:start
#
#   project      : PoshKit
#   file         : test_settings_model.py
#   file_relpath : tests/config/test_settings_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the mutable/frozen settings pair."""

from __future__ import annotations

import dataclasses

import pytest

from poshkit.config import MutableSettings, Settings
from poshkit.errors import ConfigError
from tests.conftest import parametrize


def test_defaults() -> None:
    """Built-in defaults target posh-git with home abbreviation on."""
    s = Settings()
    assert s.module_name == "posh-git"
    assert s.import_marker == "posh-git"
    assert s.abbreviate_home_directory is True
    assert s.abbreviate_git_directory is False
    assert s.error_buffer_capacity == 64
    assert s.config_files == ()


def test_settings_are_frozen() -> None:
    """A frozen `Settings` cannot be mutated."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Settings().module_name = "other"  # type: ignore[misc]


def test_thaw_freeze_round_trip() -> None:
    """`thaw` then `freeze` yields equal settings; edits go to the copy."""
    s = Settings(module_name="oh-my-posh", import_marker="oh-my-posh")
    draft = s.thaw()
    assert draft.freeze() == s
    draft.abbreviate_git_directory = True
    assert draft.freeze().abbreviate_git_directory is True
    assert s.abbreviate_git_directory is False


def test_merge_mapping_applies_known_keys_and_ignores_unknown(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Recognized keys are applied; unknown keys only produce a warning."""
    draft = MutableSettings()
    draft.merge_mapping(
        {"module_name": "posh-sshell", "error_buffer_capacity": 8, "colour": "yes"},
        source="test.toml",
    )
    s = draft.freeze()
    assert s.module_name == "posh-sshell"
    assert s.error_buffer_capacity == 8
    assert "colour" in caplog.text


@parametrize(
    "data",
    [
        {"module_name": 3},
        {"abbreviate_home_directory": "yes"},
        {"error_buffer_capacity": True},
        {"error_buffer_capacity": "10"},
    ],
)
def test_merge_mapping_rejects_wrong_types(data: dict[str, object]) -> None:
    """Type mismatches are configuration errors (booleans are not integers)."""
    with pytest.raises(ConfigError):
        MutableSettings().merge_mapping(data, source="bad.toml")


@parametrize(
    "field, value",
    [
        ("error_buffer_capacity", 0),
        ("module_name", "   "),
        ("import_marker", ""),
    ],
)
def test_freeze_validates_values(field: str, value: object) -> None:
    """Out-of-range values are rejected when freezing."""
    draft = MutableSettings()
    setattr(draft, field, value)
    with pytest.raises(ConfigError):
        draft.freeze()
