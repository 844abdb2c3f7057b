from __future__ import annotations

from pathlib import Path

import pytest

from sizevalue.core.size_config import SizeConfig
from sizevalue.core.size_unit import SizeUnit
from sizevalue.core.size_value import SizeValue


SAMPLE_ENV = """
# limits
MAX_CONTENT_SIZE=2m
RECEIVE_BUFFER_SIZE="64k"
CHUNK_SIZE=512b
""".strip()


@pytest.fixture
def sample_env_file(tmp_path: Path) -> Path:
    env_file = tmp_path / "sizes.env"
    env_file.write_text(SAMPLE_ENV + "\n", encoding="utf-8")
    return env_file


@pytest.fixture
def sample_config(tmp_path: Path) -> SizeConfig:
    return SizeConfig(
        env_file=tmp_path / "sizes.env",
        sizes={
            "MAX_CONTENT_SIZE": SizeValue(2 * 1024**2),
            "CHUNK_SIZE": SizeValue(512),
            "SPOOL_SIZE": SizeValue(3, SizeUnit.GIGA),
        },
    )
