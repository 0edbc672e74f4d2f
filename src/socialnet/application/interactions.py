"""Interaction creation and attachment, one interaction per author per post."""

import logging
import threading

from socialnet.application.ports import PostRepository
from socialnet.domain import (
    Interaction,
    InteractionDuplicatedError,
    InteractionType,
    InteractivePost,
    Post,
    PostUnauthorizedError,
    Profile,
)

logger = logging.getLogger(__name__)


class InteractionManager:
    def __init__(self, posts: PostRepository) -> None:
        self._posts = posts
        self._lock = threading.Lock()
        self._last_id: int | None = None

    def _highest_attached_id(self) -> int:
        ids = [
            i.id
            for post in self._posts.list_all()
            if isinstance(post, InteractivePost)
            for i in post.interactions
        ]
        return max(ids, default=0)

    def create_interaction(self, kind: InteractionType, author: Profile) -> Interaction:
        """Build an interaction with the next id. Nothing is attached."""
        with self._lock:
            # Seeded on first use so interactions loaded from a snapshot are counted.
            if self._last_id is None:
                self._last_id = self._highest_attached_id()
            self._last_id += 1
            interaction_id = self._last_id
        logger.debug("Reserved interaction id %s", interaction_id)
        return Interaction(id=interaction_id, kind=InteractionType(kind), author_id=author.id)

    def attach(self, post_id: int, interaction: Interaction) -> None:
        """Append the interaction to an interactive post.

        Raises NotFoundError (unknown post), PostUnauthorizedError (basic post),
        or InteractionDuplicatedError (author already interacted, whatever the kind).
        """
        post = self._posts.find_by_id(post_id)
        if not isinstance(post, InteractivePost):
            raise PostUnauthorizedError("Only interactive posts accept interactions.")
        if post.has_interaction_from(interaction.author_id):
            raise InteractionDuplicatedError(
                f"Profile {interaction.author_id} already interacted with post {post.id}."
            )
        post.add_interaction(interaction)
        logger.info(
            "Interaction %s (%s) added to post %s",
            interaction.id,
            interaction.kind.value,
            post.id,
        )

    @staticmethod
    def counts_by_kind(post: Post) -> dict[InteractionType, int]:
        counts = {kind: 0 for kind in InteractionType}
        if isinstance(post, InteractivePost):
            for interaction in post.interactions:
                counts[interaction.kind] += 1
        return counts
