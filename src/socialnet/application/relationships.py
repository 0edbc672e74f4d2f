"""Friend requests: send -> pending -> accept (friends) or refuse. One pending request per applicant."""

import logging

from socialnet.application.ports import ProfileRepository
from socialnet.domain import (
    AlreadyExistsError,
    FriendshipAlreadyExistsError,
    Profile,
    RequestNotFoundError,
    SelfRequestError,
)

logger = logging.getLogger(__name__)


class RelationshipManager:
    """Owns the pending-request table (applicant id -> receiver id) and forms friendships."""

    def __init__(self, profiles: ProfileRepository) -> None:
        self._profiles = profiles
        self._pending: dict[int, int] = {}

    def _resolve_pair(self, applicant: str, receiver: str) -> tuple[Profile, Profile]:
        return (
            self._profiles.find_by_username(applicant),
            self._profiles.find_by_username(receiver),
        )

    def _is_pending(self, applicant: Profile, receiver: Profile) -> bool:
        return self._pending.get(applicant.id) == receiver.id

    def send_request(self, applicant: str, receiver: str) -> None:
        """Record a pending request from applicant to receiver.

        A request already pending in either direction raises AlreadyExistsError.
        A second request by the same applicant to someone else replaces the first.
        """
        sender, target = self._resolve_pair(applicant, receiver)
        if sender.id == target.id:
            raise SelfRequestError("A profile cannot send a friend request to itself.")
        if self._is_pending(sender, target) or self._is_pending(target, sender):
            raise AlreadyExistsError(
                f"A friend request between '{sender.username}' and "
                f"'{target.username}' is already pending."
            )
        if sender.is_friend_of(target.id):
            raise FriendshipAlreadyExistsError(
                f"'{sender.username}' and '{target.username}' are already friends."
            )
        replaced = self._pending.get(sender.id)
        if replaced is not None:
            logger.warning(
                "Pending request %s -> %s replaced by %s -> %s",
                sender.id,
                replaced,
                sender.id,
                target.id,
            )
        self._pending[sender.id] = target.id
        logger.info("Friend request sent: %s -> %s", sender.username, target.username)

    def accept_request(self, applicant: str, receiver: str) -> None:
        """Make both profiles friends and drop the pending request."""
        sender, target = self._resolve_pair(applicant, receiver)
        if not self._is_pending(sender, target):
            raise RequestNotFoundError(
                f"No pending friend request from '{sender.username}' to '{target.username}'."
            )
        sender.add_friend(target.id)
        target.add_friend(sender.id)
        del self._pending[sender.id]
        logger.info("Friendship formed: %s <-> %s", sender.username, target.username)

    def refuse_request(self, applicant: str, receiver: str) -> None:
        """Drop the pending request without forming a friendship."""
        sender, target = self._resolve_pair(applicant, receiver)
        if not self._is_pending(sender, target):
            raise RequestNotFoundError(
                f"No pending friend request from '{sender.username}' to '{target.username}'."
            )
        del self._pending[sender.id]
        logger.info("Friend request refused: %s -> %s", sender.username, target.username)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def list_pending(self) -> dict[int, int]:
        return dict(self._pending)
