# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""
from collections.abc import Iterator

import pytest

from pommeta.config.defaults import defaults, load_defaults


@pytest.fixture(autouse=True)
def setup_test() -> Iterator[None]:
    """Load the packaged defaults before each test and clear them afterwards."""
    load_defaults("")
    yield
    defaults.clear()
