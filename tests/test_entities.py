"""Unit tests for domain entities."""

import pytest

from socialnet.domain import (
    AdvancedProfile,
    Interaction,
    InteractionType,
    InteractivePost,
    Post,
    PostKind,
    Profile,
    ProfileAlreadyActivatedError,
    ProfileAlreadyDeactivatedError,
    ProfileKind,
)


def test_profile_strips_and_requires_username_and_email() -> None:
    profile = Profile(id=1, username="  ana ", email=" ana@x.com ")
    assert profile.username == "ana"
    assert profile.email == "ana@x.com"

    with pytest.raises(ValueError, match="username"):
        Profile(id=1, username="   ", email="ana@x.com")
    with pytest.raises(ValueError, match="email"):
        Profile(id=1, username="ana", email="")


def test_profile_id_must_be_positive() -> None:
    with pytest.raises(ValueError, match="positive"):
        Profile(id=0, username="ana", email="ana@x.com")


def test_profile_cannot_befriend_itself() -> None:
    profile = Profile(id=1, username="ana", email="ana@x.com")
    with pytest.raises(ValueError, match="own friend"):
        profile.add_friend(1)
    assert profile.friend_ids == set()


def test_kind_tags() -> None:
    assert Profile(id=1, username="a", email="a@x").kind is ProfileKind.BASIC
    assert AdvancedProfile(id=2, username="b", email="b@x").kind is ProfileKind.ADVANCED
    assert Post(id=1, content="hi", owner_id=1).kind is PostKind.BASIC
    assert InteractivePost(id=2, content="hi", owner_id=1).kind is PostKind.INTERACTIVE


def test_advanced_profile_starts_inactive_and_toggles() -> None:
    profile = AdvancedProfile(id=1, username="ana", email="ana@x.com")
    assert profile.active is False

    profile.activate()
    assert profile.active is True
    with pytest.raises(ProfileAlreadyActivatedError):
        profile.activate()
    assert profile.active is True

    profile.deactivate()
    with pytest.raises(ProfileAlreadyDeactivatedError):
        profile.deactivate()
    assert profile.active is False


def test_post_requires_content() -> None:
    with pytest.raises(ValueError, match="content"):
        Post(id=1, content="  ", owner_id=1)


def test_post_created_at_is_timezone_aware() -> None:
    post = Post(id=1, content="hello", owner_id=1)
    assert post.created_at.tzinfo is not None


def test_interactive_post_tracks_authors() -> None:
    post = InteractivePost(id=1, content="hello", owner_id=1)
    assert not post.has_interaction_from(2)
    post.add_interaction(Interaction(id=1, kind=InteractionType.LAUGH, author_id=2))
    assert post.has_interaction_from(2)
    assert not post.has_interaction_from(3)


def test_interaction_type_emoji() -> None:
    assert InteractionType.LIKE.emoji == "👍"
    assert InteractionType.DISLIKE.emoji == "👎"
    assert InteractionType.LAUGH.emoji == "😂"
    assert InteractionType.SURPRISE.emoji == "😲"
