"""Location values and the factory that builds them from paths or partial objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .paths import add_leading_slash, create_path, parse_path


@dataclass(frozen=True)
class Location:
    """An immutable navigation target."""

    pathname: str = "/"
    search: str = ""
    hash: str = ""
    state: Any = field(default=None, hash=False)
    key: str = ""

    @property
    def path(self) -> str:
        """The serialized pathname + search + hash (state and key excluded)."""
        return create_path(self.pathname, self.search, self.hash)


# What callers may hand to push/replace or list in initial entries
LocationDescriptor = Union[str, Mapping[str, Any], Location]


def carries_state(path: LocationDescriptor) -> bool:
    """Check if a location-like object already holds its own state."""
    if isinstance(path, Location):
        return path.state is not None
    if isinstance(path, Mapping):
        return path.get("state") is not None
    return False


def _with_prefix(value: str | None, prefix: str) -> str:
    if not value:
        return ""
    return value if value.startswith(prefix) else prefix + value


def resolve_pathname(to: str, base: str) -> str:
    """Resolve a relative pathname against a base pathname.

    Examples:
        ("c", "/a/b") -> "/a/c"
        ("../x", "/a/b/c") -> "/a/x"
        ("user:2", "/users/1") -> "/users/user:2"
    """
    if to.startswith("/"):
        return to

    # Drop the base's last segment, then walk the relative segments
    segments = base.split("/")[:-1] + to.split("/")
    resolved: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        if segment == "..":
            if len(resolved) > 1:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)
            continue
        if last:
            resolved.append("")
    return add_leading_slash("/".join(resolved))


def create_location(
    path: LocationDescriptor,
    state: Any = None,
    key: str | None = None,
    current_location: Location | None = None,
) -> Location:
    """Build a Location from a path string or a location-like object.

    Args:
        path: A path string ("/a?b#c"), a mapping with any of pathname,
            search, hash, state and key, or an existing Location
        state: State for the new location. Ignored when path is an object
            that already carries state.
        key: Key for the new location. Overrides any key on path when given.
        current_location: Location to resolve empty or relative pathnames
            against

    Returns:
        The new Location
    """
    if isinstance(path, str):
        pathname, search, hash_ = parse_path(path)
        own_key = ""
    else:
        if isinstance(path, Location):
            fields = {
                "pathname": path.pathname,
                "search": path.search,
                "hash": path.hash,
                "state": path.state,
                "key": path.key,
            }
        else:
            fields = path
        pathname = fields.get("pathname") or ""
        search = _with_prefix(fields.get("search"), "?")
        hash_ = _with_prefix(fields.get("hash"), "#")
        own_key = fields.get("key") or ""
        if fields.get("state") is not None:
            state = fields["state"]

    if current_location is not None:
        if not pathname:
            pathname = current_location.pathname
        elif not pathname.startswith("/"):
            pathname = resolve_pathname(pathname, current_location.pathname)
    elif not pathname:
        pathname = "/"

    return Location(
        pathname=pathname,
        search=search,
        hash=hash_,
        state=state,
        key=key or own_key,
    )
