"""urlstate - parse application location paths into navigation state."""

from urlstate.state import NavigationState, State, StateConfigError, StateResult

__version__ = "0.1.0"

__all__ = ["NavigationState", "State", "StateConfigError", "StateResult", "__version__"]
