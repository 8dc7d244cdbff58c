"""Explicit collector for recoverable problems found during a conversion."""

import logging
from typing import Iterator, List, Optional


class Diagnostics:
    """
    Accumulates warnings for a single conversion call.

    Every warning is also sent to the given logger at WARNING level, so
    callers can either inspect the collector or rely on logging.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.warnings: List[str] = []
        self._logger = logger or logging.getLogger("lottiepack")

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        self._logger.warning(message)

    def extend(self, other: "Diagnostics") -> None:
        self.warnings.extend(other.warnings)

    def __len__(self) -> int:
        return len(self.warnings)

    def __iter__(self) -> Iterator[str]:
        return iter(self.warnings)

    def __repr__(self) -> str:
        return f"Diagnostics({len(self.warnings)} warnings)"
