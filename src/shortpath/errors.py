# errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shortpath.solver.validation import ValidationFailure


class InvalidArgumentError(ValueError):
    """Raised when an editing call names a node or weight the graph cannot accept."""


class IllegalStateError(RuntimeError):
    """Raised by DijkstraEngine.run() when the bound graph failed validation."""

    def __init__(self, reason: ValidationFailure):
        super().__init__(reason.value)
        self.reason = reason
