"""JSON snapshot of profiles and posts.
Friends are stored as id lists (no cyclic encoding); kind tags select the entity class on load.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from socialnet.application.ports import PostRepository, ProfileRepository
from socialnet.domain import (
    AdvancedProfile,
    Interaction,
    InteractionType,
    InteractivePost,
    Post,
    PostKind,
    Profile,
    ProfileKind,
    SocialNetworkError,
    StorageError,
)

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class InteractionRecord(BaseModel):
    id: int
    kind: InteractionType
    author_id: int


class ProfileRecord(BaseModel):
    id: int
    username: str
    email: str
    photo: str = ""
    kind: ProfileKind = ProfileKind.BASIC
    active: bool = False
    friend_ids: list[int] = Field(default_factory=list)
    post_ids: list[int] = Field(default_factory=list)


class PostRecord(BaseModel):
    id: int
    content: str
    owner_id: int
    created_at: datetime
    kind: PostKind = PostKind.BASIC
    interactions: list[InteractionRecord] = Field(default_factory=list)


class SnapshotDocument(BaseModel):
    version: int = SNAPSHOT_VERSION
    profiles: list[ProfileRecord] = Field(default_factory=list)
    posts: list[PostRecord] = Field(default_factory=list)


def _profile_to_record(profile: Profile) -> ProfileRecord:
    return ProfileRecord(
        id=profile.id,
        username=profile.username,
        email=profile.email,
        photo=profile.photo,
        kind=profile.kind,
        active=getattr(profile, "active", False),
        friend_ids=sorted(profile.friend_ids),
        post_ids=list(profile.post_ids),
    )


def _record_to_profile(record: ProfileRecord) -> Profile:
    fields = dict(
        id=record.id,
        username=record.username,
        email=record.email,
        photo=record.photo,
        friend_ids=set(record.friend_ids),
        post_ids=list(record.post_ids),
    )
    if record.kind is ProfileKind.ADVANCED:
        return AdvancedProfile(active=record.active, **fields)
    return Profile(**fields)


def _post_to_record(post: Post) -> PostRecord:
    interactions = []
    if isinstance(post, InteractivePost):
        interactions = [
            InteractionRecord(id=i.id, kind=i.kind, author_id=i.author_id)
            for i in post.interactions
        ]
    return PostRecord(
        id=post.id,
        content=post.content,
        owner_id=post.owner_id,
        created_at=post.created_at,
        kind=post.kind,
        interactions=interactions,
    )


def _record_to_post(record: PostRecord) -> Post:
    if record.kind is PostKind.INTERACTIVE:
        return InteractivePost(
            id=record.id,
            content=record.content,
            owner_id=record.owner_id,
            created_at=record.created_at,
            interactions=[
                Interaction(id=i.id, kind=i.kind, author_id=i.author_id)
                for i in record.interactions
            ],
        )
    return Post(
        id=record.id,
        content=record.content,
        owner_id=record.owner_id,
        created_at=record.created_at,
    )


def _check_integrity(document: SnapshotDocument) -> None:
    """Raise ValueError unless keys are unique and every reference resolves."""
    seen_ids: set[int] = set()
    seen_usernames: set[str] = set()
    seen_emails: set[str] = set()
    for record in document.profiles:
        username, email = record.username.strip(), record.email.strip()
        if record.id in seen_ids:
            raise ValueError(f"duplicate profile id {record.id}")
        if username in seen_usernames:
            raise ValueError(f"duplicate username {username!r}")
        if email in seen_emails:
            raise ValueError(f"duplicate email {email!r}")
        seen_ids.add(record.id)
        seen_usernames.add(username)
        seen_emails.add(email)

    friends = {r.id: set(r.friend_ids) for r in document.profiles}
    for profile_id, friend_ids in friends.items():
        for friend_id in friend_ids:
            if friend_id not in friends:
                raise ValueError(f"profile {profile_id} lists unknown friend {friend_id}")
            if profile_id not in friends[friend_id]:
                raise ValueError(
                    f"friendship {profile_id} -> {friend_id} is not mutual"
                )

    post_ids: set[int] = set()
    for record in document.posts:
        if record.id in post_ids:
            raise ValueError(f"duplicate post id {record.id}")
        if record.owner_id not in friends:
            raise ValueError(f"post {record.id} has unknown owner {record.owner_id}")
        post_ids.add(record.id)


class JsonSnapshotStore:
    """Saves and restores the full profile and post lists as one JSON document."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, profiles: list[Profile], posts: list[Post]) -> None:
        document = SnapshotDocument(
            profiles=[_profile_to_record(p) for p in profiles],
            posts=[_post_to_record(p) for p in posts],
        )
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StorageError(f"Could not write snapshot {self._path}: {exc}") from exc
        logger.info(
            "Snapshot saved to %s (%d profiles, %d posts)",
            self._path,
            len(document.profiles),
            len(document.posts),
        )

    def load(self) -> tuple[list[Profile], list[Post]]:
        """Return (profiles, posts). A missing file is an empty network."""
        if not self._path.exists():
            logger.info("No snapshot at %s, starting empty", self._path)
            return [], []
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not read snapshot {self._path}: {exc}") from exc
        try:
            document = SnapshotDocument.model_validate_json(raw)
            _check_integrity(document)
            profiles = [_record_to_profile(r) for r in document.profiles]
            posts = [_record_to_post(r) for r in document.posts]
        except (ValidationError, ValueError) as exc:
            raise StorageError(f"Invalid snapshot {self._path}: {exc}") from exc
        logger.info(
            "Snapshot loaded from %s (%d profiles, %d posts)",
            self._path,
            len(profiles),
            len(posts),
        )
        return profiles, posts

    def load_into(self, profiles: ProfileRepository, posts: PostRepository) -> None:
        """Add every snapshot entity to the given stores (advancing their id counters).

        Raises StorageError if the snapshot collides with what the stores already hold.
        """
        loaded_profiles, loaded_posts = self.load()
        try:
            for profile in loaded_profiles:
                profiles.add(profile)
            for post in loaded_posts:
                posts.add(post)
        except SocialNetworkError as exc:
            raise StorageError(f"Snapshot {self._path} conflicts with stored data: {exc}") from exc
