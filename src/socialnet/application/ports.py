"""Application ports (interfaces). Implemented by infrastructure adapters.

Adapters backed by durable storage raise StorageError for I/O failures; it
propagates through lookups and listings untouched.
"""

from typing import Protocol

from socialnet.domain import Post, Profile


class ProfileRepository(Protocol):
    """Stores profiles, unique by id, username, and email."""

    def next_id(self) -> int:
        """Return the next profile id: highest stored id + 1 (1 for an empty store)."""
        ...

    def add(self, profile: Profile) -> None:
        """Store a profile. Raises AlreadyExistsError if id, username, or email is taken."""
        ...

    def find_by_id(self, profile_id: int) -> Profile:
        """Return the profile with the given id. Raises NotFoundError."""
        ...

    def find_by_username(self, username: str) -> Profile:
        """Return the profile with the given username. Raises NotFoundError."""
        ...

    def find_by_email(self, email: str) -> Profile:
        """Return the profile with the given email. Raises NotFoundError."""
        ...

    def list_all(self) -> list[Profile]:
        """Return all profiles in insertion order."""
        ...


class PostRepository(Protocol):
    """Stores posts of every kind."""

    def next_id(self) -> int:
        """Return the next post id: highest stored id + 1 (1 for an empty store)."""
        ...

    def add(self, post: Post) -> None:
        """Store a post whose id the caller guarantees is fresh."""
        ...

    def find_by_id(self, post_id: int) -> Post:
        """Return the post with the given id. Raises NotFoundError."""
        ...

    def list_all(self) -> list[Post]:
        """Return all posts in insertion order."""
        ...

    def list_by_owner_username(self, username: str) -> list[Post]:
        """Return the owner's posts in insertion order. Raises NotFoundError for an unknown owner."""
        ...
