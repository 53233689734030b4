"""
Location Path Parser
====================
Turns a location path into a NavigationState.

Path grammar (segments separated by '/', base URL stripped first):
- root:    {about|docs|login|new|store}
           Example: /login
- search:  q/{query...}
           Example: /q/k8s/core -> search 'k8s/core'
- user:    u/{owner}[/{model}|/{profile-suffix}][/u/{owner}/{store-ref}]
           Example: /u/hatch/staging/u/frankban/django
- store:   {name}[/{series}][/{revision}]
           Example: /django/bundle/47
- gui:     i/{marker}[/{sub-path...}][/{marker}...]
           Example: /i/inspector/apache2/machines/3/lxc-0

Sections are tried in order (root, search, user/store, gui). Root and search
claim the whole path. User/store and gui may share a path, with gui always
trailing after the first 'i' segment.

Usage:
    from urlstate.state.parser import State

    state = State("http://abc.com:123")
    result = state.build_state("http://abc.com:123/u/hatch/staging/haproxy")
    result.state.user   # 'hatch/staging'
    result.state.store  # 'haproxy'
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from urlstate.state.constants import (
    BUNDLE_SERIES,
    DEFAULT_SERIES,
    GUI_DELIMITER,
    GUI_RESERVED,
    INVALID_GUI,
    INVALID_ROOT,
    INVALID_STORE,
    INVALID_USER,
    INVALID_USER_STORE,
    PATH_SEPARATOR,
    PROFILE_RESERVED,
    ROOT_RESERVED,
    SEARCH_DELIMITER,
    USER_DELIMITER,
)
from urlstate.state.models import GuiState, NavigationState, Outcome, SectionResult, StateResult

logger = logging.getLogger(__name__)

_REPEATED_SEPARATOR_RE = re.compile(r"/{2,}")
_REVISION_RE = re.compile(r"^[0-9]+$")


class StateConfigError(ValueError):
    """Raised when a State is constructed with invalid configuration."""


class State:
    """Location path parser bound to a base URL and series list."""

    def __init__(self, base_url: str, series_list: Optional[Sequence[str]] = None):
        if not isinstance(base_url, str) or not base_url:
            raise StateConfigError("base_url must be a non-empty string")
        self.base_url = base_url
        self._series = self._build_series(series_list)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "State":
        """
        Build a State from a config mapping.

        Args:
            config: Mapping with 'base_url' and optional 'series' keys

        Returns:
            Configured State

        Example:
            State.from_config({"base_url": "http://abc.com:123", "series": ["trusty"]})
        """
        return cls(config.get("base_url"), config.get("series"))

    @staticmethod
    def _build_series(series_list: Optional[Sequence[str]]) -> tuple:
        if series_list is None:
            return DEFAULT_SERIES
        if not isinstance(series_list, (list, tuple)):
            raise StateConfigError(
                f"series_list must be a list of strings, got {type(series_list).__name__}"
            )
        if not all(isinstance(series, str) for series in series_list):
            raise StateConfigError("series_list entries must be strings")
        series = tuple(series_list)
        if BUNDLE_SERIES not in series:
            series += (BUNDLE_SERIES,)
        return series

    @property
    def series_list(self) -> List[str]:
        return list(self._series)

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def get_clean_path(self, url: str) -> str:
        """
        Strip the base URL and redundant separators from a path.

        Example:
            State("http://abc.com:123").get_clean_path("http://abc.com:123///a/b/c/d/")
            -> "a/b/c/d"
        """
        if url.startswith(self.base_url):
            rest = url[len(self.base_url):]
            # Only strip on a segment boundary: ':123' must not eat ':1234'.
            if not rest or rest.startswith(PATH_SEPARATOR) or self.base_url.endswith(PATH_SEPARATOR):
                url = rest
        path = _REPEATED_SEPARATOR_RE.sub(PATH_SEPARATOR, url)
        if path.startswith(PATH_SEPARATOR):
            path = path[1:]
        if path.endswith(PATH_SEPARATOR):
            path = path[:-1]
        return path

    def get_path_parts(self, url: str) -> List[str]:
        """Split a cleaned path into its non-empty segments."""
        return [part for part in self.get_clean_path(url).split(PATH_SEPARATOR) if part]

    # -------------------------------------------------------------------------
    # Section parsers
    # -------------------------------------------------------------------------

    def parse_root(self, parts: List[str], state: NavigationState) -> SectionResult:
        """Claim the path when it names a reserved top-level view."""
        if not parts or parts[0] not in ROOT_RESERVED:
            return SectionResult.declined(state, parts)
        state = state.merge(root=parts[0])
        if len(parts) > 1:
            return SectionResult.failed(state, INVALID_ROOT)
        return SectionResult.matched(state)

    def parse_search(self, parts: List[str], state: NavigationState) -> SectionResult:
        """Join the segments following the search marker into a query."""
        if not parts:
            return SectionResult.declined(state)
        return SectionResult.matched(state.merge(search=PATH_SEPARATOR.join(parts)))

    def parse_gui(self, parts: List[str], state: NavigationState) -> SectionResult:
        """
        Group the segments following the GUI marker under their sub-markers.

        Each sub-marker owns the segments up to the next sub-marker. A marker
        with nothing after it is present with an empty value.

        Example:
            parse_gui(['inspector', 'apache2', 'machines', '3', 'lxc-0'], state)
            -> gui: inspector='apache2', machines='3/lxc-0'
        """
        if not parts or parts[0] not in GUI_RESERVED:
            return SectionResult.failed(state, INVALID_GUI)

        sections: Dict[str, List[str]] = {}
        current = None
        for part in parts:
            if part in GUI_RESERVED:
                current = part
                sections[current] = []
            else:
                sections[current].append(part)

        gui = GuiState(**{
            marker: PATH_SEPARATOR.join(values) for marker, values in sections.items()
        })
        return SectionResult.matched(state.merge(gui=gui))

    def parse_user(self, parts: List[str], state: NavigationState) -> SectionResult:
        """
        Parse an owner section: profile, model and owned store references.

        Returns a matched result carrying any leftover segments (to be parsed
        as a top-level store), a declined result when the path has no user
        marker, or a failed result with the state committed so far.
        """
        if USER_DELIMITER not in parts:
            return SectionResult.declined(state, parts)
        if parts[0] != USER_DELIMITER:
            logger.debug("User marker out of place in %s", parts)
            return SectionResult.failed(state, INVALID_USER)

        owner_parts = parts[1:]
        if not owner_parts or owner_parts[0] == USER_DELIMITER:
            return SectionResult.failed(state, INVALID_USER)

        owner, remainder = owner_parts[0], owner_parts[1:]
        if not remainder:
            return SectionResult.matched(state.merge(profile=owner))

        head = remainder[0]
        if head == USER_DELIMITER:
            return SectionResult.failed(state.merge(profile=owner), INVALID_USER_STORE)

        if head in PROFILE_RESERVED:
            claimed = state.merge(profile=f"{owner}/{head}")
            leftover = remainder[1:]
        elif len(remainder) == 1:
            claimed = state.merge(user=f"{owner}/{head}")
            leftover = []
        elif self.is_store_path(remainder):
            claimed = state.merge(store=f"{owner}/{PATH_SEPARATOR.join(remainder)}")
            leftover = []
        else:
            claimed = state.merge(user=f"{owner}/{head}")
            leftover = remainder[1:]

        if not leftover:
            return SectionResult.matched(claimed)
        if leftover[0] == USER_DELIMITER:
            return self._parse_user_store(leftover[1:], claimed)
        if USER_DELIMITER in leftover:
            logger.debug("User marker out of place in leftover %s", leftover)
            return SectionResult.failed(state, INVALID_USER)
        if len(remainder) >= 4 and head not in PROFILE_RESERVED and not self.is_store_path(leftover):
            logger.debug("No store reference in model leftover %s", leftover)
            return SectionResult.failed(claimed, INVALID_USER_STORE)
        logger.debug("User section leaves %s", leftover)
        return SectionResult.matched(claimed, leftover)

    def _parse_user_store(self, parts: List[str], state: NavigationState) -> SectionResult:
        """Parse the owner store reference following a nested user marker."""
        if len(parts) < 2 or parts[0] == USER_DELIMITER:
            return SectionResult.failed(state, INVALID_USER_STORE)
        owner, remainder = parts[0], parts[1:]
        if not self.is_store_path(remainder):
            return SectionResult.failed(state, INVALID_USER_STORE)
        return SectionResult.matched(
            state.merge(store=f"{owner}/{PATH_SEPARATOR.join(remainder)}")
        )

    def parse_store(self, parts: List[str], state: NavigationState) -> SectionResult:
        """Claim the segments as an unowned store reference."""
        if not parts:
            return SectionResult.declined(state)
        if not self.is_store_path(parts):
            return SectionResult.failed(state, INVALID_STORE)
        return SectionResult.matched(state.merge(store=PATH_SEPARATOR.join(parts)))

    def is_store_path(self, parts: List[str]) -> bool:
        """
        Check whether segments form a store reference without owner.

        Valid shapes:
            [name]
            [name, series]
            [name, revision]
            [name, series, revision]
        """
        if not parts or len(parts) > 3 or USER_DELIMITER in parts:
            return False
        qualifiers = parts[1:]
        if len(qualifiers) == 1:
            return qualifiers[0] in self._series or self._is_revision(qualifiers[0])
        if len(qualifiers) == 2:
            return qualifiers[0] in self._series and self._is_revision(qualifiers[1])
        return True

    @staticmethod
    def _is_revision(part: str) -> bool:
        return bool(_REVISION_RE.match(part))

    # -------------------------------------------------------------------------
    # Orchestration
    # -------------------------------------------------------------------------

    def build_state(self, url: str) -> StateResult:
        """
        Parse a location path into a navigation state.

        Never raises for malformed paths. Parsing of the main sections stops
        at the first structural error and the state committed before it is
        returned along with the error. The GUI section is parsed on its own,
        so its state is kept even when an earlier section failed; the error
        reported is the first one in path order.

        Args:
            url: Full URL or path

        Returns:
            StateResult with the state and the first error (or None)
        """
        parts = self.get_path_parts(url)
        state = NavigationState()
        if not parts:
            return StateResult(state=state)

        result = self.parse_root(parts, state)
        if result.outcome is not Outcome.DECLINED:
            logger.debug("Root section claimed %s", url)
            return self._finish(url, result.to_state_result())

        if parts[0] == SEARCH_DELIMITER:
            result = self.parse_search(parts[1:], state)
            if result.outcome is Outcome.MATCHED:
                logger.debug("Search section claimed %s", url)
                return self._finish(url, result.to_state_result())

        gui_parts = None
        if GUI_DELIMITER in parts:
            gui_index = parts.index(GUI_DELIMITER)
            gui_parts = parts[gui_index + 1:]
            parts = parts[:gui_index]

        error = None
        result = self.parse_user(parts, state)
        state = result.state
        if result.is_failed:
            error = result.error
        elif result.parts:
            result = self.parse_store(result.parts, state)
            state = result.state
            error = result.error

        if gui_parts is not None:
            result = self.parse_gui(gui_parts, state)
            state = result.state
            error = error or result.error

        return self._finish(url, StateResult(state=state, error=error))

    @staticmethod
    def _finish(url: str, result: StateResult) -> StateResult:
        if result.error is not None:
            logger.debug("Invalid path %s: %s", url, result.error)
        return result
