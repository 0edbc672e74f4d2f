"""
Interactive console for SocialNet, backed by a JSON snapshot.
Run: python -m console (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/console/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from console.app import ConsoleApp  # noqa: E402
from socialnet.application import SocialNetwork  # noqa: E402
from socialnet.domain import StorageError  # noqa: E402
from socialnet.infrastructure import (  # noqa: E402
    InMemoryPostRepository,
    InMemoryProfileRepository,
    JsonSnapshotStore,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_PATH = "socialnet.json"


def main() -> None:
    snapshot_path = (
        os.environ.get("SOCIALNET_SNAPSHOT_PATH", DEFAULT_SNAPSHOT_PATH).strip()
        or DEFAULT_SNAPSHOT_PATH
    )
    autosave = os.environ.get("SOCIALNET_AUTOSAVE", "").strip().lower() in ("1", "true", "yes")

    store = JsonSnapshotStore(snapshot_path)
    profiles = InMemoryProfileRepository()
    posts = InMemoryPostRepository(profiles)
    try:
        store.load_into(profiles, posts)
    except StorageError as e:
        raise SystemExit(f"Could not load snapshot: {e}")
    network = SocialNetwork(profiles, posts)

    def save() -> None:
        store.save(network.list_profiles(), network.list_posts())

    app = ConsoleApp(network, on_change=save if autosave else None)
    logger.info("Console running (snapshot: %s, autosave: %s)", store.path, autosave)
    print("SocialNet console. Type /help for commands.")
    try:
        while not app.finished:
            try:
                line = input("> ")
            except EOFError:
                break
            reply = app.handle(line)
            if reply:
                print(reply)
    except KeyboardInterrupt:
        print()
    finally:
        try:
            save()
        except StorageError as e:
            logger.error("Snapshot not saved: %s", e)


if __name__ == "__main__":
    main()
