from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.model_builder import ModelBuilder, RecordingToolRunner


@pytest.fixture
def model_builder(tmp_path: Path) -> ModelBuilder:
    """Provide a reusable model directory builder rooted at the pytest tmp_path."""
    return ModelBuilder(tmp_path)


@pytest.fixture
def tool_runner() -> RecordingToolRunner:
    return RecordingToolRunner()
