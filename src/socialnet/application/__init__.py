"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from socialnet.application.dto import FriendRequest, InteractionSummary
from socialnet.application.interactions import InteractionManager
from socialnet.application.ports import PostRepository, ProfileRepository
from socialnet.application.relationships import RelationshipManager
from socialnet.application.social_network import SocialNetwork

__all__ = [
    "FriendRequest",
    "InteractionManager",
    "InteractionSummary",
    "PostRepository",
    "ProfileRepository",
    "RelationshipManager",
    "SocialNetwork",
]
