"""
Path normalization validators.
"""
import pytest


@pytest.mark.state
@pytest.mark.parametrize("suffix", [
    "/a/b/c/d/",
    "///a/b/c/d/",
    "/a/b/c/d///",
    "/a//b///c/d",
    "a/b/c/d",
])
def test_clean_path_collapses_separators(state, base_url, suffix):
    assert state.get_clean_path(base_url + suffix) == "a/b/c/d"
    assert state.get_path_parts(base_url + suffix) == ["a", "b", "c", "d"]


@pytest.mark.state
def test_clean_path_is_idempotent(state):
    clean = state.get_clean_path("http://abc.com:123//u/hatch//staging/")

    assert clean == "u/hatch/staging"
    assert state.get_clean_path(clean) == clean
    assert state.get_path_parts(clean) == ["u", "hatch", "staging"]


@pytest.mark.state
@pytest.mark.parametrize("url", ["http://abc.com:123", "http://abc.com:123/", "http://abc.com:123///"])
def test_base_url_alone_has_no_parts(state, url):
    assert state.get_clean_path(url) == ""
    assert state.get_path_parts(url) == []


@pytest.mark.state
def test_base_url_match_is_case_sensitive(state):
    assert state.get_clean_path("HTTP://ABC.COM:123/login") == "HTTP:/ABC.COM:123/login"


@pytest.mark.state
def test_paths_without_base_url_are_accepted(state):
    assert state.get_path_parts("/u/ant/") == ["u", "ant"]


@pytest.mark.state
@pytest.mark.parametrize("url,expected", [
    ("http://abc.com:1234/haproxy", "http:/abc.com:1234/haproxy"),
    ("http://abc.com:123x", "http:/abc.com:123x"),
    ("http://abc.com:123/haproxy", "haproxy"),
])
def test_base_url_is_stripped_on_segment_boundary(state, url, expected):
    assert state.get_clean_path(url) == expected


@pytest.mark.state
def test_base_url_with_trailing_separator(base_url):
    from urlstate.state.parser import State

    assert State(base_url + "/").get_clean_path(base_url + "/u/ant") == "u/ant"
    assert State("/").get_path_parts("/haproxy/xenial") == ["haproxy", "xenial"]
