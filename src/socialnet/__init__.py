"""
SocialNet core: clean-architecture layout.

- domain: entities (Profile, Post, Interaction and their kinds) and errors. No outer dependencies.
- application: use cases (SocialNetwork, RelationshipManager, InteractionManager), ports, DTOs.
- infrastructure: adapters (in-memory repositories, JsonSnapshotStore).
"""

from socialnet.application import (
    FriendRequest,
    InteractionSummary,
    PostRepository,
    ProfileRepository,
    SocialNetwork,
)
from socialnet.domain import (
    AdvancedProfile,
    Interaction,
    InteractionType,
    InteractivePost,
    Post,
    Profile,
    SocialNetworkError,
    StorageError,
)
from socialnet.infrastructure import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    JsonSnapshotStore,
)

__all__ = [
    "AdvancedProfile",
    "FriendRequest",
    "InMemoryPostRepository",
    "InMemoryProfileRepository",
    "Interaction",
    "InteractionSummary",
    "InteractionType",
    "InteractivePost",
    "JsonSnapshotStore",
    "Post",
    "PostRepository",
    "Profile",
    "ProfileRepository",
    "SocialNetwork",
    "SocialNetworkError",
    "StorageError",
]
