"""Location path parsing into navigation state."""

from urlstate.state.models import GuiState, NavigationState, Outcome, SectionResult, StateResult
from urlstate.state.parser import State, StateConfigError

__all__ = [
    "GuiState",
    "NavigationState",
    "Outcome",
    "SectionResult",
    "State",
    "StateConfigError",
    "StateResult",
]
