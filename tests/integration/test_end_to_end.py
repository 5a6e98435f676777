from __future__ import annotations

import io
import json
from pathlib import Path

from helpers import ndjson

from fund_velocity.adapters.input_source import FileInputSource
from fund_velocity.adapters.output_sink import FileOutputSink
from fund_velocity.observability.logging import Logger, StdoutLogSink
from fund_velocity.usecases.pipeline import run_pipeline


def _run(tmp_path: Path, text: str) -> list[dict[str, object]]:
    input_path = tmp_path / "input.txt"
    output_path = tmp_path / "output.txt"
    input_path.write_text(text, encoding="utf-8")
    logger = Logger(sink=StdoutLogSink(io.StringIO()))
    run_pipeline(FileInputSource(input_path), FileOutputSink(output_path), logger=logger)
    content = output_path.read_text(encoding="utf-8")
    return [json.loads(line) for line in content.split("\n")] if content else []


def test_single_oversized_load_is_declined(tmp_path: Path) -> None:
    out = _run(tmp_path, ndjson(("1", "1", "9999.99", "2020-01-01T00:00:00Z")))
    assert out == [{"id": "1", "customer_id": "1", "accepted": False}]


def test_duplicate_with_later_timestamp_is_absent(tmp_path: Path) -> None:
    out = _run(
        tmp_path,
        ndjson(
            ("7", "1", "$100.00", "2020-01-01T00:00:00Z"),
            ("7", "1", "$100.00", "2020-01-01T00:01:00Z"),
        ),
    )
    assert out == [{"id": "7", "customer_id": "1", "accepted": True}]


def test_same_day_loads_hit_attempt_cap(tmp_path: Path) -> None:
    records = [(str(i), "1", "$100.00", f"2020-01-01T0{i}:00:00Z") for i in range(1, 6)]
    out = _run(tmp_path, ndjson(*records))
    assert [r["accepted"] for r in out] == [True, True, True, True, False]
    assert [r["id"] for r in out] == ["1", "2", "3", "4", "5"]


def test_mixed_batch_keeps_input_order(tmp_path: Path) -> None:
    out = _run(
        tmp_path,
        ndjson(
            ("15887", "528", "$3318.47", "2000-01-01T00:00:00Z"),
            ("30081", "154", "$1413.18", "2000-01-01T01:01:22Z"),
            ("26540", "426", "$404.56", "2000-01-01T02:02:44Z"),
            ("10694", "1", "$785.11", "2000-01-01T03:04:06Z"),
            ("15089", "528", "$1920.00", "2000-01-01T04:05:28Z"),
            ("15887", "528", "$3318.47", "2000-01-01T05:06:50Z"),
        ),
    )
    assert out == [
        {"id": "15887", "customer_id": "528", "accepted": True},
        {"id": "30081", "customer_id": "154", "accepted": True},
        {"id": "26540", "customer_id": "426", "accepted": True},
        {"id": "10694", "customer_id": "1", "accepted": True},
        {"id": "15089", "customer_id": "528", "accepted": False},
    ]


def test_empty_input_writes_empty_output(tmp_path: Path) -> None:
    assert _run(tmp_path, "") == []
