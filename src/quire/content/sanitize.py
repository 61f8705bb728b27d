"""URL-safe identifiers and path segments.

Both transforms lowercase their input first, so applying either of them twice
gives the same result as applying it once.
"""

import re

_ENTRY_ID_DISALLOWED = re.compile(r"[^\w\s\-.]+")
_DOT_RUN = re.compile(r"\.{2,}")
_WHITESPACE_RUN = re.compile(r"\s{2,}")
_PATH_DISALLOWED = re.compile(r"[^\w\-\\/]+")


def sanitize_entry_id(value: str) -> str:
    """Turn a file name into a lowercase, dash-separated entry id.

    Examples:
        >>> sanitize_entry_id("My First Post.html")
        'my-first-post.html'
        >>> sanitize_entry_id("../../etc/passwd")
        'etcpasswd'
        >>> sanitize_entry_id("   ")
        ''

    """
    if not value or value.isspace():
        return ""

    value = value.lower()
    value = _ENTRY_ID_DISALLOWED.sub("", value)  # words, spaces, underscores, dashes and dots only
    value = _DOT_RUN.sub("", value)  # no "..", so no traversal
    value = _WHITESPACE_RUN.sub(" ", value)
    value = value.strip(" .")
    if value.isspace():
        return ""
    return value.replace(" ", "-")


def sanitize_path(value: str) -> str:
    """Turn a relative folder path into lowercase, dash-separated segments.

    Path separators are preserved.

    Examples:
        >>> sanitize_path("Blog Posts/2024 Recap")
        'blog-posts/2024-recap'
        >>> sanitize_path("(drafts)")
        'drafts'

    """
    if not value or value.isspace():
        return ""

    value = _PATH_DISALLOWED.sub("-", value.lower())
    return value.strip("-")


__all__ = ["sanitize_entry_id", "sanitize_path"]
