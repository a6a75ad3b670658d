"""Path string helpers: leading/trailing slashes, basenames, path splitting."""

import re


def add_leading_slash(path: str) -> str:
    return path if path.startswith("/") else "/" + path


def strip_leading_slash(path: str) -> str:
    return path[1:] if path.startswith("/") else path


def strip_trailing_slash(path: str) -> str:
    return path[:-1] if path.endswith("/") else path


def has_basename(path: str, prefix: str) -> bool:
    """Check if path starts with prefix as a whole segment (case-insensitive)."""
    pattern = "^" + re.escape(prefix) + r"(/|\?|#|$)"
    return re.match(pattern, path, re.IGNORECASE) is not None


def strip_basename(path: str, prefix: str) -> str:
    """Remove prefix from path, or return path unchanged if it doesn't match."""
    return path[len(prefix):] if has_basename(path, prefix) else path


def normalize_basename(basename: str | None) -> str:
    """Normalize a basename to "/prefix" form, or "" when unset."""
    if not basename:
        return ""
    return strip_trailing_slash(add_leading_slash(basename))


def parse_path(path: str) -> tuple[str, str, str]:
    """Split a path into (pathname, search, hash).

    Examples:
        "/a/b?q=1#top" -> ("/a/b", "?q=1", "#top")
        "" -> ("/", "", "")
    """
    pathname = path or "/"
    search = ""
    hash_ = ""

    hash_index = pathname.find("#")
    if hash_index != -1:
        hash_ = pathname[hash_index:]
        pathname = pathname[:hash_index]

    search_index = pathname.find("?")
    if search_index != -1:
        search = pathname[search_index:]
        pathname = pathname[:search_index]

    return (
        pathname,
        "" if search == "?" else search,
        "" if hash_ == "#" else hash_,
    )


def create_path(pathname: str, search: str = "", hash_: str = "") -> str:
    """Join pathname, search and hash back into a single path string."""
    path = pathname or "/"
    if search and search != "?":
        path += search if search.startswith("?") else "?" + search
    if hash_ and hash_ != "#":
        path += hash_ if hash_.startswith("#") else "#" + hash_
    return path
