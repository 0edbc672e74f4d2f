"""Domain layer: entities, value objects, and errors. No dependencies on outer layers."""

from socialnet.domain.entities import (
    AdvancedProfile,
    Interaction,
    InteractionType,
    InteractivePost,
    Post,
    PostKind,
    Profile,
    ProfileKind,
)
from socialnet.domain.errors import (
    AlreadyExistsError,
    FriendshipAlreadyExistsError,
    InteractionDuplicatedError,
    NotFoundError,
    PostUnauthorizedError,
    ProfileAlreadyActivatedError,
    ProfileAlreadyDeactivatedError,
    ProfileUnauthorizedError,
    RequestNotFoundError,
    SelfRequestError,
    SocialNetworkError,
    StorageError,
    UnauthorizedError,
)

__all__ = [
    "AdvancedProfile",
    "AlreadyExistsError",
    "FriendshipAlreadyExistsError",
    "Interaction",
    "InteractionDuplicatedError",
    "InteractionType",
    "InteractivePost",
    "NotFoundError",
    "Post",
    "PostKind",
    "PostUnauthorizedError",
    "Profile",
    "ProfileAlreadyActivatedError",
    "ProfileAlreadyDeactivatedError",
    "ProfileKind",
    "ProfileUnauthorizedError",
    "RequestNotFoundError",
    "SelfRequestError",
    "SocialNetworkError",
    "StorageError",
    "UnauthorizedError",
]
