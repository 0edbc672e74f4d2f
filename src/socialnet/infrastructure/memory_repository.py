"""In-memory implementations of ProfileRepository and PostRepository (no DB)."""

import logging
import threading

from socialnet.application.ports import ProfileRepository
from socialnet.domain import AlreadyExistsError, NotFoundError, Post, Profile

logger = logging.getLogger(__name__)


class _IdCounter:
    """Highest id stored so far. Advanced only by a successful insert."""

    def __init__(self) -> None:
        self._last = 0

    def peek_next(self) -> int:
        return self._last + 1

    def observe(self, stored_id: int) -> None:
        self._last = max(self._last, stored_id)


class InMemoryProfileRepository:
    """Stores profiles in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = _IdCounter()
        self._by_id: dict[int, Profile] = {}
        self._by_username: dict[str, int] = {}
        self._by_email: dict[str, int] = {}

    def next_id(self) -> int:
        with self._lock:
            return self._ids.peek_next()

    def add(self, profile: Profile) -> None:
        with self._lock:
            if (
                profile.id in self._by_id
                or profile.username in self._by_username
                or profile.email in self._by_email
            ):
                raise AlreadyExistsError(
                    "A profile with this username, email, or id already exists."
                )
            self._by_id[profile.id] = profile
            self._by_username[profile.username] = profile.id
            self._by_email[profile.email] = profile.id
            self._ids.observe(profile.id)
        logger.debug("Stored profile id %s", profile.id)

    def find_by_id(self, profile_id: int) -> Profile:
        profile = self._by_id.get(profile_id)
        if profile is None:
            raise NotFoundError(f"No profile found with id: {profile_id}")
        return profile

    def find_by_username(self, username: str) -> Profile:
        profile_id = self._by_username.get(username)
        if profile_id is None:
            raise NotFoundError(f"No profile found with username: {username}")
        return self._by_id[profile_id]

    def find_by_email(self, email: str) -> Profile:
        profile_id = self._by_email.get(email)
        if profile_id is None:
            raise NotFoundError(f"No profile found with email: {email}")
        return self._by_id[profile_id]

    def list_all(self) -> list[Profile]:
        return list(self._by_id.values())


class InMemoryPostRepository:
    """Stores posts in memory. Owner lookups go through the profile repository."""

    def __init__(self, profiles: ProfileRepository) -> None:
        self._profiles = profiles
        self._lock = threading.Lock()
        self._ids = _IdCounter()
        self._by_id: dict[int, Post] = {}

    def next_id(self) -> int:
        with self._lock:
            return self._ids.peek_next()

    def add(self, post: Post) -> None:
        with self._lock:
            if post.id in self._by_id:
                raise AlreadyExistsError(f"A post with id {post.id} already exists.")
            self._by_id[post.id] = post
            self._ids.observe(post.id)
        logger.debug("Stored post id %s", post.id)

    def find_by_id(self, post_id: int) -> Post:
        post = self._by_id.get(post_id)
        if post is None:
            raise NotFoundError(f"No post found with id: {post_id}")
        return post

    def list_all(self) -> list[Post]:
        return list(self._by_id.values())

    def list_by_owner_username(self, username: str) -> list[Post]:
        owner = self._profiles.find_by_username(username)
        return [post for post in self._by_id.values() if post.owner_id == owner.id]
