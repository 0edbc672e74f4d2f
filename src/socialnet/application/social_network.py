"""SocialNetwork: the single entry point for profiles, posts, friend requests, and interactions."""

import logging

from socialnet.application.dto import FriendRequest, InteractionSummary
from socialnet.application.interactions import InteractionManager
from socialnet.application.ports import PostRepository, ProfileRepository
from socialnet.application.relationships import RelationshipManager
from socialnet.domain import (
    AdvancedProfile,
    Interaction,
    InteractionType,
    InteractivePost,
    Post,
    Profile,
    ProfileUnauthorizedError,
)

logger = logging.getLogger(__name__)


class SocialNetwork:
    """Composes the stores and managers. Domain errors propagate to the caller unchanged."""

    def __init__(self, profiles: ProfileRepository, posts: PostRepository) -> None:
        self._profiles = profiles
        self._posts = posts
        self._relationships = RelationshipManager(profiles)
        self._interactions = InteractionManager(posts)

    # --- profiles ---

    def create_profile(self, username: str, email: str, photo: str = "") -> Profile:
        """Build a basic profile with the next id. Call add_profile to store it."""
        return Profile(
            id=self._profiles.next_id(), username=username, email=email, photo=photo
        )

    def create_advanced_profile(
        self, username: str, email: str, photo: str = ""
    ) -> AdvancedProfile:
        """Build an (inactive) advanced profile with the next id. Call add_profile to store it."""
        return AdvancedProfile(
            id=self._profiles.next_id(), username=username, email=email, photo=photo
        )

    def add_profile(self, profile: Profile) -> None:
        self._profiles.add(profile)
        logger.info("Profile %s added (%s)", profile.username, profile.kind.value)

    def find_profile_by_id(self, profile_id: int) -> Profile:
        return self._profiles.find_by_id(profile_id)

    def find_profile_by_username(self, username: str) -> Profile:
        return self._profiles.find_by_username(username)

    def find_profile_by_email(self, email: str) -> Profile:
        return self._profiles.find_by_email(email)

    def list_profiles(self) -> list[Profile]:
        return self._profiles.list_all()

    def list_advanced_profiles(self) -> list[AdvancedProfile]:
        return [p for p in self._profiles.list_all() if isinstance(p, AdvancedProfile)]

    def list_friends(self, username: str) -> list[Profile]:
        """Return the profile's friends ordered by id."""
        profile = self._profiles.find_by_username(username)
        return [self._profiles.find_by_id(fid) for fid in sorted(profile.friend_ids)]

    def has_profiles(self) -> bool:
        return bool(self._profiles.list_all())

    def has_advanced_profiles(self) -> bool:
        return bool(self.list_advanced_profiles())

    def _advanced(self, username: str) -> AdvancedProfile:
        profile = self._profiles.find_by_username(username)
        if not isinstance(profile, AdvancedProfile):
            raise ProfileUnauthorizedError(
                "Only advanced profiles can be activated or deactivated."
            )
        return profile

    def activate_profile(self, username: str) -> None:
        self._advanced(username).activate()
        logger.info("Profile %s activated", username)

    def deactivate_profile(self, username: str) -> None:
        self._advanced(username).deactivate()
        logger.info("Profile %s deactivated", username)

    # --- posts ---

    def create_post(self, content: str, owner_username: str) -> Post:
        """Build a basic post with the next id. Call add_post to store it."""
        owner = self._profiles.find_by_username(owner_username)
        return Post(id=self._posts.next_id(), content=content, owner_id=owner.id)

    def create_interactive_post(self, content: str, owner_username: str) -> InteractivePost:
        """Build an interactive post with the next id. Call add_post to store it."""
        owner = self._profiles.find_by_username(owner_username)
        return InteractivePost(id=self._posts.next_id(), content=content, owner_id=owner.id)

    def add_post(self, post: Post) -> None:
        """Store the post and record it on its owner. Raises NotFoundError for an unknown owner."""
        owner = self._profiles.find_by_id(post.owner_id)
        self._posts.add(post)
        owner.add_post(post.id)
        logger.info("Post %s added by %s (%s)", post.id, owner.username, post.kind.value)

    def find_post_by_id(self, post_id: int) -> Post:
        return self._posts.find_by_id(post_id)

    def list_posts(self) -> list[Post]:
        return self._posts.list_all()

    def list_interactive_posts(self) -> list[InteractivePost]:
        return [p for p in self._posts.list_all() if isinstance(p, InteractivePost)]

    def list_posts_by_profile(self, username: str) -> list[Post]:
        return self._posts.list_by_owner_username(username)

    def has_posts(self) -> bool:
        return bool(self._posts.list_all())

    def has_interactive_posts(self) -> bool:
        return bool(self.list_interactive_posts())

    # --- friend requests ---

    def send_request(self, applicant: str, receiver: str) -> None:
        self._relationships.send_request(applicant, receiver)

    def accept_request(self, applicant: str, receiver: str) -> None:
        self._relationships.accept_request(applicant, receiver)

    def refuse_request(self, applicant: str, receiver: str) -> None:
        self._relationships.refuse_request(applicant, receiver)

    def has_pending_requests(self) -> bool:
        return self._relationships.has_pending()

    def list_pending_requests(self) -> list[FriendRequest]:
        out = []
        for applicant_id, receiver_id in self._relationships.list_pending().items():
            applicant = self._profiles.find_by_id(applicant_id)
            receiver = self._profiles.find_by_id(receiver_id)
            out.append(
                FriendRequest(
                    applicant_id=applicant.id,
                    applicant_username=applicant.username,
                    receiver_id=receiver.id,
                    receiver_username=receiver.username,
                )
            )
        return out

    # --- interactions ---

    def create_interaction(self, kind: InteractionType, author_username: str) -> Interaction:
        author = self._profiles.find_by_username(author_username)
        return self._interactions.create_interaction(kind, author)

    def add_interaction(self, post_id: int, interaction: Interaction) -> None:
        self._interactions.attach(post_id, interaction)

    def interaction_summary(self, post_id: int) -> InteractionSummary:
        post = self._posts.find_by_id(post_id)
        return InteractionSummary(
            post_id=post.id, counts=self._interactions.counts_by_kind(post)
        )
