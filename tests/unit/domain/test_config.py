"""Tests for writer configuration."""

import dataclasses
import io

import pytest

from osc94.domain.config import WriterConfig
from osc94.domain.value_objects import Terminator


class TestWriterConfig:
    """Tests for WriterConfig dataclass."""

    def test_defaults(self) -> None:
        """Default is enabled output with a BEL terminator."""
        stream = io.StringIO()
        config = WriterConfig(stream=stream)
        assert config.stream is stream
        assert config.enabled is True
        assert config.terminator is Terminator.BEL

    def test_is_frozen(self) -> None:
        config = WriterConfig(stream=io.StringIO())
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.enabled = False  # type: ignore[misc]
