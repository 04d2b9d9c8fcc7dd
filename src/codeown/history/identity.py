"""Canonical contributor identities."""

from __future__ import annotations


def extract_username(email: str) -> str:
    """Derive a username from a commit email: the part before ``@``."""
    return email.split("@")[0]


def strip_marker(owner: str) -> str:
    """Identity of an owner string: ``@alice`` and ``alice`` are the same owner."""
    return owner[1:] if owner.startswith("@") else owner


class IdentityResolver:
    """Maps raw commit emails to canonical usernames.

    The first resolution of an email fixes its username for the lifetime of
    the resolver; later calls return the cached value unchanged.
    """

    def __init__(self) -> None:
        self._cache: dict[str, str] = {}

    def resolve(self, email: str) -> str:
        username = self._cache.get(email)
        if username is None:
            username = extract_username(email)
            self._cache[email] = username
        return username

    def username_for(self, email: str) -> str:
        """Cached username, or the derived one for an email never seen."""
        return self._cache.get(email) or extract_username(email)

    def __contains__(self, email: object) -> bool:
        return email in self._cache

    def __len__(self) -> int:
        return len(self._cache)
