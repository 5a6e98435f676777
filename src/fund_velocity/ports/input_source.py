from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from fund_velocity.domain.messages import RawLine


# InputSource port defines how raw input lines enter the system.
@runtime_checkable
class InputSource(Protocol):
    def read(self) -> Iterable[RawLine]:
        """Yield RawLine records in deterministic input order."""
        raise NotImplementedError("InputSource is a port; use a concrete adapter.")
