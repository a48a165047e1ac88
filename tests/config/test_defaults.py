# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the defaults module."""

import os
from pathlib import Path

import pytest

from pommeta.config.defaults import create_defaults, defaults, load_defaults


def test_load_defaults() -> None:
    """Test loading defaults."""
    config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources", "defaults.ini")

    # Test that the user configuration is loaded.
    assert load_defaults(config_path) is True

    # Test that the values in user configuration is prioritized.
    assert defaults.get("pom.metadata", "enforcer_plugin") == "custom-enforcer-plugin"

    # Test that the packaged values are kept when not overridden.
    assert defaults.get("pom.metadata", "checkstyle_plugin") == "maven-checkstyle-plugin"


def test_load_defaults_missing_user_config() -> None:
    """Test that a missing user configuration falls back to the packaged values."""
    assert load_defaults("invalid") is True
    assert defaults.get("pom.metadata", "line_coverage_property") == "jacoco.min.linecoverage"


def test_load_defaults_invalid_user_config(tmp_path: Path) -> None:
    """Test loading a user configuration that is not a valid ini file."""
    user_config = tmp_path.joinpath("defaults.ini")
    user_config.write_text("enforcer_plugin = no-section\n", encoding="utf-8")
    assert load_defaults(str(user_config)) is False


def test_create_defaults(tmp_path: Path) -> None:
    """Test dumping the default values."""
    assert create_defaults(str(tmp_path), os.getcwd()) is True
    assert "[pom.metadata]" in tmp_path.joinpath("defaults.ini").read_text(encoding="utf-8")


@pytest.mark.xfail(
    os.geteuid() == 0,
    reason="Only effective for non-root users",
)
def test_create_defaults_without_permission() -> None:
    """Test dumping default config in cases where the user does not have write permission to the output location."""
    assert create_defaults(output_path="/", cwd_path="/") is False
