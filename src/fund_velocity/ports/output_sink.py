from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


# OutputSink port defines how formatted output leaves the system.
@runtime_checkable
class OutputSink(Protocol):
    def write_lines(self, lines: Sequence[str]) -> None:
        """Persist all formatted lines, in order, as one write."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
