"""Tests for memhistory.location module."""

import pytest

from memhistory.location import Location, carries_state, create_location, resolve_pathname


class TestLocation:
    def test_path_property(self):
        loc = Location(pathname="/a/b", search="?q=1", hash="#frag")
        assert loc.path == "/a/b?q=1#frag"

    def test_immutable(self):
        loc = Location(pathname="/a")
        with pytest.raises(AttributeError):
            loc.pathname = "/b"

    def test_hashable_with_unhashable_state(self):
        loc = Location(pathname="/a", state={"x": [1, 2]})
        assert hash(loc) == hash(Location(pathname="/a", state={"y": 1}))


class TestCreateLocationFromString:
    def test_parses_path(self):
        loc = create_location("/a/b?q=1#frag", key="k1")
        assert loc.pathname == "/a/b"
        assert loc.search == "?q=1"
        assert loc.hash == "#frag"
        assert loc.key == "k1"

    def test_carries_state(self):
        loc = create_location("/a", {"id": 3})
        assert loc.state == {"id": 3}

    def test_no_key(self):
        assert create_location("/a").key == ""

    def test_relative_path_resolved_against_current(self):
        current = create_location("/a/b")
        assert create_location("c", current_location=current).pathname == "/a/c"

    def test_parent_relative_path(self):
        current = create_location("/a/b/c")
        assert create_location("../x", current_location=current).pathname == "/a/x"


class TestCreateLocationFromObject:
    def test_mapping_fields(self):
        loc = create_location({"pathname": "/a", "search": "q=1", "hash": "top"})
        assert loc.path == "/a?q=1#top"

    def test_object_state_wins(self):
        loc = create_location({"pathname": "/a", "state": "own"}, "other")
        assert loc.state == "own"

    def test_state_argument_used_when_object_has_none(self):
        loc = create_location({"pathname": "/a"}, "given")
        assert loc.state == "given"

    def test_explicit_key_overrides_object_key(self):
        loc = create_location({"pathname": "/a", "key": "own"}, key="new")
        assert loc.key == "new"

    def test_object_key_kept_without_key_argument(self):
        assert create_location({"pathname": "/a", "key": "own"}).key == "own"

    def test_empty_pathname_without_current_is_root(self):
        assert create_location({"search": "?q=1"}).pathname == "/"

    def test_empty_pathname_inherits_current(self):
        current = create_location("/a/b")
        loc = create_location({"search": "?page=2"}, current_location=current)
        assert loc.path == "/a/b?page=2"

    def test_from_location(self):
        original = Location(pathname="/a", search="?x=1", state=5, key="abc")
        loc = create_location(original)
        assert loc == original


class TestCarriesState:
    def test_string(self):
        assert not carries_state("/a")

    def test_mapping(self):
        assert carries_state({"pathname": "/a", "state": 1})
        assert not carries_state({"pathname": "/a"})

    def test_location(self):
        assert carries_state(Location(state=0))
        assert not carries_state(Location())


def test_resolve_pathname_absolute():
    assert resolve_pathname("/x", "/a/b") == "/x"


class TestResolvePathname:
    def test_sibling(self):
        assert resolve_pathname("c", "/a/b") == "/a/c"

    def test_segment_with_colon(self):
        assert resolve_pathname("user:2", "/users/1") == "/users/user:2"

    def test_parent_to_root(self):
        assert resolve_pathname("..", "/a/b") == "/"

    def test_current_directory(self):
        assert resolve_pathname("./", "/a/b") == "/a/"

    def test_cannot_climb_above_root(self):
        assert resolve_pathname("../../../x", "/a/b") == "/x"

    def test_push_colon_segment_keeps_href(self, make_history):
        history = make_history(initial_entries=["/users/1"])
        history.push("user:2")
        assert history.location.pathname == "/users/user:2"
        assert history.create_href(history.location) == "/users/user:2"
