"""Tests for JsonSnapshotStore (file-backed, tmp_path)."""

import json

import pytest

from socialnet.application import SocialNetwork
from socialnet.domain import (
    AdvancedProfile,
    InteractionType,
    InteractivePost,
    Profile,
    SocialNetworkError,
    StorageError,
)
from socialnet.infrastructure import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    JsonSnapshotStore,
)


def _network() -> SocialNetwork:
    profiles = InMemoryProfileRepository()
    return SocialNetwork(profiles, InMemoryPostRepository(profiles))


def _populated() -> SocialNetwork:
    network = _network()
    network.add_profile(network.create_profile("ana", "ana@x.com", "🙂"))
    network.add_profile(network.create_advanced_profile("bruno", "bruno@x.com"))
    network.activate_profile("bruno")
    network.send_request("ana", "bruno")
    network.accept_request("ana", "bruno")
    network.add_post(network.create_post("plain", "ana"))
    post = network.create_interactive_post("react to me", "bruno")
    network.add_post(post)
    network.add_interaction(post.id, network.create_interaction(InteractionType.LAUGH, "ana"))
    return network


def _restore(store: JsonSnapshotStore) -> SocialNetwork:
    profiles = InMemoryProfileRepository()
    posts = InMemoryPostRepository(profiles)
    store.load_into(profiles, posts)
    return SocialNetwork(profiles, posts)


def test_save_then_load_preserves_network(tmp_path) -> None:
    saved = _populated()
    store = JsonSnapshotStore(tmp_path / "data" / "socialnet.json")
    store.save(saved.list_profiles(), saved.list_posts())
    assert store.path.exists()

    restored = _restore(store)

    assert restored.list_profiles() == saved.list_profiles()
    assert restored.list_posts() == saved.list_posts()
    bruno = restored.find_profile_by_username("bruno")
    assert isinstance(bruno, AdvancedProfile)
    assert bruno.active is True
    assert [p.username for p in restored.list_friends("ana")] == ["bruno"]
    assert [p.username for p in restored.list_friends("bruno")] == ["ana"]

    post = restored.find_post_by_id(2)
    assert isinstance(post, InteractivePost)
    assert post.created_at == saved.find_post_by_id(2).created_at
    assert restored.interaction_summary(2).counts[InteractionType.LAUGH] == 1


def test_ids_continue_after_load(tmp_path) -> None:
    saved = _populated()
    store = JsonSnapshotStore(tmp_path / "socialnet.json")
    store.save(saved.list_profiles(), saved.list_posts())

    restored = _restore(store)
    assert restored.create_profile("carla", "carla@x.com").id == 3
    assert restored.create_post("again", "ana").id == 3
    assert restored.create_interaction(InteractionType.LIKE, "bruno").id == 2


def test_snapshot_stores_friends_as_ids(tmp_path) -> None:
    saved = _populated()
    path = tmp_path / "socialnet.json"
    JsonSnapshotStore(path).save(saved.list_profiles(), saved.list_posts())

    data = json.loads(path.read_text(encoding="utf-8"))
    by_name = {p["username"]: p for p in data["profiles"]}
    assert by_name["ana"]["friend_ids"] == [2]
    assert by_name["ana"]["kind"] == "basic"
    assert by_name["bruno"]["kind"] == "advanced"
    assert data["posts"][1]["interactions"] == [{"id": 1, "kind": "laugh", "author_id": 1}]


def test_missing_file_loads_empty(tmp_path) -> None:
    store = JsonSnapshotStore(tmp_path / "absent.json")
    assert store.load() == ([], [])


def test_invalid_snapshot_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"profiles": [{"id": "not-a-number"}]}', encoding="utf-8")
    with pytest.raises(StorageError) as excinfo:
        JsonSnapshotStore(path).load()
    assert not isinstance(excinfo.value, SocialNetworkError)


def test_snapshot_with_invalid_entity_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "bad-entity.json"
    path.write_text(
        '{"profiles": [{"id": 1, "username": " ", "email": "a@x.com"}]}',
        encoding="utf-8",
    )
    with pytest.raises(StorageError):
        JsonSnapshotStore(path).load()


def test_save_into_unwritable_location_raises_storage_error(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JsonSnapshotStore(blocker / "socialnet.json")
    with pytest.raises(StorageError):
        store.save([], [])


def _write(path, profiles, posts=()) -> None:
    path.write_text(
        json.dumps({"version": 1, "profiles": list(profiles), "posts": list(posts)}),
        encoding="utf-8",
    )


def _profile(pid: int, name: str, friend_ids=(), email: str | None = None) -> dict:
    return {
        "id": pid,
        "username": name,
        "email": email or f"{name}@x.com",
        "friend_ids": list(friend_ids),
    }


@pytest.mark.parametrize(
    "profiles",
    [
        [_profile(1, "ana"), _profile(2, "ana", email="other@x.com")],
        [_profile(1, "ana"), _profile(2, "bruno", email="ana@x.com")],
        [_profile(1, "ana"), _profile(1, "bruno")],
    ],
    ids=["same-username", "same-email", "same-id"],
)
def test_snapshot_with_duplicate_profiles_leaves_stores_empty(tmp_path, profiles) -> None:
    path = tmp_path / "dupes.json"
    _write(path, profiles)
    store_profiles = InMemoryProfileRepository()
    store_posts = InMemoryPostRepository(store_profiles)

    with pytest.raises(StorageError, match="duplicate"):
        JsonSnapshotStore(path).load_into(store_profiles, store_posts)
    assert store_profiles.list_all() == []
    assert store_posts.list_all() == []


def test_snapshot_with_unknown_friend_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "dangling.json"
    _write(path, [_profile(1, "ana", friend_ids=[9])])
    with pytest.raises(StorageError, match="unknown friend 9"):
        JsonSnapshotStore(path).load()


def test_snapshot_with_one_sided_friendship_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "one-sided.json"
    _write(path, [_profile(1, "ana", friend_ids=[2]), _profile(2, "bruno")])
    with pytest.raises(StorageError, match="not mutual"):
        JsonSnapshotStore(path).load()


def test_snapshot_post_with_unknown_owner_raises_storage_error(tmp_path) -> None:
    path = tmp_path / "orphan.json"
    post = {"id": 1, "content": "hi", "owner_id": 5, "created_at": "2024-01-01T00:00:00Z"}
    _write(path, [_profile(1, "ana")], [post])
    with pytest.raises(StorageError, match="unknown owner 5"):
        JsonSnapshotStore(path).load()


def test_load_into_non_empty_store_raises_storage_error(tmp_path) -> None:
    saved = _populated()
    store = JsonSnapshotStore(tmp_path / "socialnet.json")
    store.save(saved.list_profiles(), saved.list_posts())

    profiles = InMemoryProfileRepository()
    profiles.add(Profile(id=1, username="ana", email="ana@x.com"))
    with pytest.raises(StorageError, match="conflicts"):
        store.load_into(profiles, InMemoryPostRepository(profiles))
