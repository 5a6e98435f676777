from __future__ import annotations

from pathlib import Path

import pytest

from fund_velocity.adapters.input_source import FileInputSource
from fund_velocity.domain.errors import ParseError
from fund_velocity.domain.messages import RawLine
from fund_velocity.domain.reasons import ReasonCode
from fund_velocity.ports.input_source import InputSource


def test_input_source_reads_lines_in_order(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text('{"id":"1"}\n{"id":"2"}\n', encoding="utf-8")
    assert list(FileInputSource(path).read()) == [
        RawLine(line_no=1, raw_text='{"id":"1"}'),
        RawLine(line_no=2, raw_text='{"id":"2"}'),
    ]


def test_input_source_skips_blank_lines_but_keeps_physical_numbers(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text('{"id":"1"}\r\n\n   \n{"id":"2"}', encoding="utf-8")
    assert [line.line_no for line in FileInputSource(path).read()] == [1, 4]


def test_input_source_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list(FileInputSource(tmp_path / "missing.txt").read())


def test_input_source_satisfies_port(tmp_path: Path) -> None:
    assert isinstance(FileInputSource(tmp_path / "x"), InputSource)


def test_input_source_rejects_invalid_utf8_with_line_number(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b'{"id":"1"}\n{"id":"\xff"}\n')
    with pytest.raises(ParseError) as exc:
        list(FileInputSource(path).read())
    assert exc.value.reason == ReasonCode.INPUT_PARSE_ERROR
    assert exc.value.line_no == 2
