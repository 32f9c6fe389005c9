from __future__ import annotations

import pytest

from datify import DatifyConfig


@pytest.fixture
def cfg() -> DatifyConfig:
    # isolated store; tests must not mutate DEFAULT_CONFIG
    return DatifyConfig()
