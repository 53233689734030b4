"""
Navigation State Models
=======================
Records produced by the path parser.

Architecture:
- GuiState: Panel sub-state keyed by GUI sub-marker
- NavigationState: Everything a path asks the application to display
- SectionResult: Tagged outcome of a single section parser
- StateResult: Final result of build_state (state plus error)

Absent fields are None. An empty string is a present field with no sub-path,
e.g. `i/machines` yields GuiState(machines='').
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional


def _present(record) -> Dict[str, Any]:
    """Collect the non-None fields of a dataclass record."""
    return {
        f.name: getattr(record, f.name)
        for f in fields(record)
        if getattr(record, f.name) is not None
    }


@dataclass(frozen=True)
class GuiState:
    """Panel sub-state parsed from the GUI section of a path."""

    applications: Optional[str] = None
    deploy: Optional[str] = None
    inspector: Optional[str] = None
    machines: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return _present(self)


@dataclass(frozen=True)
class NavigationState:
    """
    Structured navigation state for a single location path.

    Attributes:
        root: Reserved top-level view (exclusive of every other field)
        search: Search query, slash-joined (exclusive of every other field)
        profile: "<owner>" or "<owner>/<suffix>"
        user: "<owner>/<model>", the selected model
        store: Store reference, "[<owner>/]<name>[/<series>][/<revision>]"
        gui: Panel sub-state
    """

    root: Optional[str] = None
    search: Optional[str] = None
    profile: Optional[str] = None
    user: Optional[str] = None
    store: Optional[str] = None
    gui: Optional[GuiState] = None

    def merge(self, **changes: Any) -> "NavigationState":
        """Return a copy with the given fields committed."""
        return replace(self, **changes)

    @property
    def is_empty(self) -> bool:
        return not _present(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, omitting absent fields."""
        data = _present(self)
        if self.gui is not None:
            data["gui"] = self.gui.to_dict()
        return data


class Outcome(Enum):
    """How a section parser responded to the segments it was given."""

    MATCHED = "matched"  # Section claimed the segments
    DECLINED = "declined"  # Section does not apply, try the next one
    FAILED = "failed"  # Section applies but the segments are malformed


@dataclass
class SectionResult:
    """
    Result of running one section parser.

    Attributes:
        outcome: Matched, declined or failed
        state: Accumulated state after this section (unchanged on decline)
        parts: Leftover segments for the orchestrator to parse further
        error: Error message when the section failed
    """

    outcome: Outcome
    state: NavigationState
    parts: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def matched(cls, state: NavigationState, parts: Optional[List[str]] = None) -> "SectionResult":
        return cls(Outcome.MATCHED, state, list(parts or []))

    @classmethod
    def declined(cls, state: NavigationState, parts: Optional[List[str]] = None) -> "SectionResult":
        return cls(Outcome.DECLINED, state, list(parts or []))

    @classmethod
    def failed(cls, state: NavigationState, error: str) -> "SectionResult":
        return cls(Outcome.FAILED, state, [], error)

    @property
    def is_failed(self) -> bool:
        return self.outcome is Outcome.FAILED

    def to_state_result(self) -> "StateResult":
        return StateResult(state=self.state, error=self.error)


@dataclass
class StateResult:
    """Outcome of parsing a full path: best-effort state plus first error."""

    state: NavigationState = field(default_factory=NavigationState)
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {"state": self.state.to_dict(), "error": self.error}
