"""Domain entities: Profile, AdvancedProfile, Post, InteractivePost, and Interaction."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

from socialnet.domain.errors import (
    ProfileAlreadyActivatedError,
    ProfileAlreadyDeactivatedError,
)


class ProfileKind(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"


class PostKind(str, Enum):
    BASIC = "basic"
    INTERACTIVE = "interactive"


class InteractionType(str, Enum):
    """Closed set of reactions a profile can leave on an interactive post."""

    LIKE = "like"
    DISLIKE = "dislike"
    LAUGH = "laugh"
    SURPRISE = "surprise"

    @property
    def emoji(self) -> str:
        return _INTERACTION_EMOJI[self]


_INTERACTION_EMOJI = {
    InteractionType.LIKE: "👍",
    InteractionType.DISLIKE: "👎",
    InteractionType.LAUGH: "😂",
    InteractionType.SURPRISE: "😲",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Profile:
    """
    A member of the network.
    Friends and posts are held as identifiers; the stores own the entities.
    """

    kind: ClassVar[ProfileKind] = ProfileKind.BASIC

    id: int
    username: str
    email: str
    photo: str = ""
    friend_ids: set[int] = field(default_factory=set)
    post_ids: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.id is None or self.id < 1:
            raise ValueError("Profile id must be a positive integer.")
        username = (self.username or "").strip()
        if not username:
            raise ValueError("Profile username must be non-empty.")
        email = (self.email or "").strip()
        if not email:
            raise ValueError("Profile email must be non-empty.")
        self.username = username
        self.email = email
        if self.id in self.friend_ids:
            raise ValueError("A profile cannot be its own friend.")

    def is_friend_of(self, other_id: int) -> bool:
        return other_id in self.friend_ids

    def add_friend(self, other_id: int) -> None:
        if other_id == self.id:
            raise ValueError("A profile cannot be its own friend.")
        self.friend_ids.add(other_id)

    def add_post(self, post_id: int) -> None:
        if post_id not in self.post_ids:
            self.post_ids.append(post_id)


@dataclass
class AdvancedProfile(Profile):
    """Profile with an activation flag. Starts inactive."""

    kind: ClassVar[ProfileKind] = ProfileKind.ADVANCED

    active: bool = False

    def activate(self) -> None:
        if self.active:
            raise ProfileAlreadyActivatedError(
                f"Profile '{self.username}' is already active."
            )
        self.active = True

    def deactivate(self) -> None:
        if not self.active:
            raise ProfileAlreadyDeactivatedError(
                f"Profile '{self.username}' is already inactive."
            )
        self.active = False


@dataclass(frozen=True)
class Interaction:
    """A typed reaction left by one profile. Owned by the post it is attached to."""

    id: int
    kind: InteractionType
    author_id: int


@dataclass
class Post:
    kind: ClassVar[PostKind] = PostKind.BASIC

    id: int
    content: str
    owner_id: int
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if self.id is None or self.id < 1:
            raise ValueError("Post id must be a positive integer.")
        if self.content is None or not self.content.strip():
            raise ValueError("Post content must be non-empty.")


@dataclass
class InteractivePost(Post):
    """
    Post that accepts interactions, kept in the order they were attached.
    At most one interaction per author.
    """

    kind: ClassVar[PostKind] = PostKind.INTERACTIVE

    interactions: list[Interaction] = field(default_factory=list)

    def has_interaction_from(self, author_id: int) -> bool:
        return any(i.author_id == author_id for i in self.interactions)

    def add_interaction(self, interaction: Interaction) -> None:
        self.interactions.append(interaction)
