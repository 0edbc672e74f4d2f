"""Result types handed to the presentation layer."""

from dataclasses import dataclass, field

from socialnet.domain import InteractionType


@dataclass(frozen=True)
class FriendRequest:
    """One pending friend request, as listed by list_pending_requests."""

    applicant_id: int
    applicant_username: str
    receiver_id: int
    receiver_username: str


@dataclass(frozen=True)
class InteractionSummary:
    """Interaction counts for one post. Every kind is present, zero-filled."""

    post_id: int
    counts: dict[InteractionType, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())
