from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fund_velocity.domain.errors import ParseError
from fund_velocity.domain.messages import RawLine
from fund_velocity.domain.reasons import ReasonCode
from fund_velocity.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # NDJSON file adapter; line numbers count every physical line, blanks are skipped.
    path: Path

    def read(self) -> Iterable[RawLine]:
        # Lines are decoded one by one so an invalid byte is reported with its line number.
        with self.path.open("rb") as handle:
            for idx, raw in enumerate(handle, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as exc:
                    raise ParseError(ReasonCode.INPUT_PARSE_ERROR, line_no=idx, detail=exc.reason) from exc
                text = line.rstrip("\r\n")
                if not text.strip():
                    continue
                yield RawLine(line_no=idx, raw_text=text)
