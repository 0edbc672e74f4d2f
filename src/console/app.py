"""Line-oriented commands over SocialNetwork. No I/O here: handle() returns the reply text."""

from collections.abc import Callable

from socialnet.application import SocialNetwork
from socialnet.domain import (
    AdvancedProfile,
    InteractionType,
    InteractivePost,
    Post,
    Profile,
    SocialNetworkError,
    StorageError,
)

HELP_TEXT = """Commands:
/profile <username> <email> [photo] - add a basic profile
/advanced <username> <email> [photo] - add an advanced profile
/find <username> - show one profile
/profiles - list all profiles
/friends <username> - list a profile's friends
/activate <username> | /deactivate <username>
/post <username> <content...> - add a basic post
/ipost <username> <content...> - add an interactive post
/posts [username] - list posts
/request <applicant> <receiver> - send a friend request
/accept <applicant> <receiver> | /refuse <applicant> <receiver>
/pending - list pending friend requests
/react <username> <post_id> <like|dislike|laugh|surprise>
/quit - save and exit"""

# Commands whose success changes what a snapshot would contain.
MUTATING_COMMANDS = frozenset(
    {
        "/profile",
        "/advanced",
        "/activate",
        "/deactivate",
        "/post",
        "/ipost",
        "/accept",
        "/react",
    }
)


def format_profile(profile: Profile) -> str:
    name = f"{profile.photo} {profile.username}" if profile.photo else profile.username
    parts = [f"#{profile.id} {name} <{profile.email}>"]
    if isinstance(profile, AdvancedProfile):
        parts.append("advanced, " + ("active" if profile.active else "inactive"))
    parts.append(f"{len(profile.friend_ids)} friend(s), {len(profile.post_ids)} post(s)")
    return " | ".join(parts)


class ConsoleApp:
    """Maps commands to SocialNetwork calls and domain errors to messages."""

    def __init__(
        self,
        network: SocialNetwork,
        *,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._network = network
        self._on_change = on_change
        self.finished = False
        self._handlers: dict[str, Callable[[str], str]] = {
            "/help": self._help,
            "/profile": self._add_basic_profile,
            "/advanced": self._add_advanced_profile,
            "/find": self._find,
            "/profiles": self._profiles,
            "/friends": self._friends,
            "/activate": self._activate,
            "/deactivate": self._deactivate,
            "/post": self._add_basic_post,
            "/ipost": self._add_interactive_post,
            "/posts": self._posts,
            "/request": self._request,
            "/accept": self._accept,
            "/refuse": self._refuse,
            "/pending": self._pending,
            "/react": self._react,
            "/quit": self._quit,
        }

    def handle(self, line: str) -> str:
        text = (line or "").strip()
        if not text:
            return ""
        command, _, rest = text.partition(" ")
        command = command.lower()
        handler = self._handlers.get(command)
        if handler is None:
            return "Unknown command. Use /help to see the available commands."
        try:
            reply = handler(rest.strip())
        except (SocialNetworkError, ValueError) as e:
            return f"! {e}"
        if command in MUTATING_COMMANDS and self._on_change is not None:
            try:
                self._on_change()
            except StorageError as e:
                return f"{reply}\n! Snapshot not saved: {e}"
        return reply

    def format_post(self, post: Post) -> str:
        owner = self._network.find_profile_by_id(post.owner_id)
        line = f"#{post.id} {owner.username} ({post.created_at:%Y-%m-%d %H:%M}): {post.content}"
        if isinstance(post, InteractivePost):
            counts = self._network.interaction_summary(post.id).counts
            line += "  " + " ".join(f"{k.emoji} {counts[k]}" for k in InteractionType)
        return line

    def _help(self, rest: str) -> str:
        return HELP_TEXT

    # --- profiles ---

    def _add_basic_profile(self, rest: str) -> str:
        args = rest.split()
        if len(args) not in (2, 3):
            return "Usage: /profile <username> <email> [photo]"
        profile = self._network.create_profile(*args)
        self._network.add_profile(profile)
        return f"Profile {profile.username} created with id {profile.id}."

    def _add_advanced_profile(self, rest: str) -> str:
        args = rest.split()
        if len(args) not in (2, 3):
            return "Usage: /advanced <username> <email> [photo]"
        profile = self._network.create_advanced_profile(*args)
        self._network.add_profile(profile)
        return f"Advanced profile {profile.username} created with id {profile.id} (inactive)."

    def _find(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 1:
            return "Usage: /find <username>"
        return format_profile(self._network.find_profile_by_username(args[0]))

    def _profiles(self, rest: str) -> str:
        profiles = self._network.list_profiles()
        if not profiles:
            return "No profiles yet. Use /profile to add one."
        return "\n".join(format_profile(p) for p in profiles)

    def _friends(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 1:
            return "Usage: /friends <username>"
        friends = self._network.list_friends(args[0])
        if not friends:
            return f"{args[0]} has no friends yet."
        return "\n".join(format_profile(p) for p in friends)

    def _activate(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 1:
            return "Usage: /activate <username>"
        self._network.activate_profile(args[0])
        return f"Profile {args[0]} activated."

    def _deactivate(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 1:
            return "Usage: /deactivate <username>"
        self._network.deactivate_profile(args[0])
        return f"Profile {args[0]} deactivated."

    # --- posts ---

    def _add_basic_post(self, rest: str) -> str:
        username, _, content = rest.partition(" ")
        if not username or not content.strip():
            return "Usage: /post <username> <content...>"
        post = self._network.create_post(content.strip(), username)
        self._network.add_post(post)
        return f"Post #{post.id} published."

    def _add_interactive_post(self, rest: str) -> str:
        username, _, content = rest.partition(" ")
        if not username or not content.strip():
            return "Usage: /ipost <username> <content...>"
        post = self._network.create_interactive_post(content.strip(), username)
        self._network.add_post(post)
        return f"Interactive post #{post.id} published."

    def _posts(self, rest: str) -> str:
        args = rest.split()
        if len(args) > 1:
            return "Usage: /posts [username]"
        if args:
            posts = self._network.list_posts_by_profile(args[0])
        else:
            posts = self._network.list_posts()
        if not posts:
            return "No posts yet."
        return "\n".join(self.format_post(p) for p in posts)

    # --- friend requests ---

    def _request(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 2:
            return "Usage: /request <applicant> <receiver>"
        self._network.send_request(args[0], args[1])
        return f"Friend request sent from {args[0]} to {args[1]}."

    def _accept(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 2:
            return "Usage: /accept <applicant> <receiver>"
        self._network.accept_request(args[0], args[1])
        return f"{args[0]} and {args[1]} are now friends."

    def _refuse(self, rest: str) -> str:
        args = rest.split()
        if len(args) != 2:
            return "Usage: /refuse <applicant> <receiver>"
        self._network.refuse_request(args[0], args[1])
        return f"Friend request from {args[0]} to {args[1]} refused."

    def _pending(self, rest: str) -> str:
        requests = self._network.list_pending_requests()
        if not requests:
            return "No pending friend requests."
        return "\n".join(f"{r.applicant_username} -> {r.receiver_username}" for r in requests)

    # --- interactions ---

    def _react(self, rest: str) -> str:
        usage = "Usage: /react <username> <post_id> <like|dislike|laugh|surprise>"
        args = rest.split()
        if len(args) != 3 or not args[1].isdigit():
            return usage
        try:
            kind = InteractionType(args[2].lower())
        except ValueError:
            return usage
        interaction = self._network.create_interaction(kind, args[0])
        self._network.add_interaction(int(args[1]), interaction)
        return f"{kind.emoji} added to post #{args[1]}."

    def _quit(self, rest: str) -> str:
        self.finished = True
        return "Bye."
