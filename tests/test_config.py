from __future__ import annotations

import pytest
import regex

from pyfilereader import ConfigurationError, OutputFormat, ReaderConfig


def test_defaults() -> None:
    cfg = ReaderConfig()
    assert cfg.charset == "utf-8"
    assert cfg.decode_errors == "strict"
    assert cfg.max_file_bytes == 0
    assert cfg.multiline is False
    assert cfg.track_positions is True
    assert cfg.output_format == OutputFormat.TEXT
    cfg.validate()


@pytest.mark.parametrize(
    "cfg",
    [
        ReaderConfig(charset="not-a-codec"),
        ReaderConfig(decode_errors="explode"),
        ReaderConfig(max_file_bytes=-1),
    ],
)
def test_validate_rejects(cfg: ReaderConfig) -> None:
    with pytest.raises(ConfigurationError):
        cfg.validate()


def test_compile_flags() -> None:
    assert ReaderConfig().compile_flags() == 0
    assert ReaderConfig(ignore_case=True).compile_flags() & regex.IGNORECASE
    flags = ReaderConfig(ignore_case=True, regex_flags=regex.VERBOSE).compile_flags()
    assert flags & regex.VERBOSE
    assert flags & regex.IGNORECASE
