from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fund_velocity.ports.output_sink import OutputSink


@dataclass(frozen=True, slots=True)
class FileOutputSink(OutputSink):
    # Lines are joined with "\n" and written in one call; no trailing newline.
    path: Path
    atomic_replace: bool = False

    def write_lines(self, lines: Sequence[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = "\n".join(lines)
        if not self.atomic_replace:
            self.path.write_text(text, encoding="utf-8")
            return

        # Temp file is committed to the final path only after a complete write.
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        temp_path.write_text(text, encoding="utf-8")
        temp_path.replace(self.path)
