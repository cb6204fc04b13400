"""Forward-only (loading, error, data) state shared by the view-models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ViewPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass
class ViewState(Generic[T]):
    """Mutable view state owned by a single view-model instance.

    Transitions only move forward: ``IDLE -> LOADING -> (READY | FAILED)``.
    A fresh instance is created for every new load target.
    """

    phase: ViewPhase = ViewPhase.IDLE
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.phase is ViewPhase.LOADING

    @property
    def settled(self) -> bool:
        return self.phase in (ViewPhase.READY, ViewPhase.FAILED)

    def start(self) -> "ViewState[T]":
        self._require(ViewPhase.IDLE, "start")
        self.phase = ViewPhase.LOADING
        return self

    def succeed(self, data: T) -> "ViewState[T]":
        self._require(ViewPhase.LOADING, "succeed")
        self.phase = ViewPhase.READY
        self.data = data
        return self

    def fail(self, message: str, code: Optional[str] = None) -> "ViewState[T]":
        self._require(ViewPhase.LOADING, "fail")
        self.phase = ViewPhase.FAILED
        self.error = message
        self.error_code = code
        return self

    def _require(self, expected: ViewPhase, action: str) -> None:
        if self.phase is not expected:
            raise RuntimeError(
                f"Cannot {action} view state in phase '{self.phase.value}'."
            )


__all__ = ["ViewPhase", "ViewState"]
