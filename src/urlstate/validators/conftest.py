"""
Shared fixtures for urlstate validators.
"""
import pytest

from urlstate.state.models import NavigationState
from urlstate.state.parser import State


BASE_URL = "http://abc.com:123"


@pytest.fixture
def base_url():
    """Base URL every fixture path is rooted at."""
    return BASE_URL


@pytest.fixture
def state():
    """State parser with the built-in series list."""
    return State(BASE_URL)


@pytest.fixture
def empty():
    """Fresh, empty accumulator for section parsers."""
    return NavigationState()
