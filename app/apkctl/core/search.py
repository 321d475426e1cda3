"""Fuzzy matching of applications against a search query."""

from apkctl.models.application import Application


def has_wildcard_match(source: str, text: str) -> bool:
    """Check if source contains all the characters of text in the correct order.

    Characters may be separated by any number of other characters.
    Matching is case-sensitive; callers lower-case both sides.

    Example:
        >>> has_wildcard_match("abcdef", "adf")
        True
        >>> has_wildcard_match("dbcaef", "adf")
        False

    Args:
        source: Text to search in.
        text: Characters to look for, in order.

    Returns:
        True if text is an ordered subsequence of source.
    """
    remaining = iter(source)
    return all(char in remaining for char in text)


def matches_application(app: Application, query: str) -> bool:
    """Check if an application matches a search query.

    The query is matched against the app name and package name joined by
    a single space, both lower-cased.

    Args:
        app: Application to test.
        query: Free-text search query.

    Returns:
        True if the application matches.
    """
    return has_wildcard_match(app.search_source, query.lower())


def filter_applications(apps: list[Application], query: str) -> list[Application]:
    """Return the applications matching query, preserving their order."""
    return [app for app in apps if matches_application(app, query)]
