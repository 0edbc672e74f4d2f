"""Domain errors. Every caller-visible failure of the core derives from SocialNetworkError."""


class SocialNetworkError(Exception):
    """Base class for recoverable domain failures."""


class NotFoundError(SocialNetworkError):
    """Requested profile or post does not exist."""


class AlreadyExistsError(SocialNetworkError):
    """Duplicate profile (id, username or email) or duplicate pending request."""


class FriendshipAlreadyExistsError(SocialNetworkError):
    pass


class RequestNotFoundError(SocialNetworkError):
    """Accept or refuse without a matching pending request."""


class SelfRequestError(SocialNetworkError):
    """A profile tried to send a friend request to itself."""


class UnauthorizedError(SocialNetworkError):
    """Operation not supported by this kind of profile or post."""


class ProfileUnauthorizedError(UnauthorizedError):
    pass


class PostUnauthorizedError(UnauthorizedError):
    pass


class ProfileAlreadyActivatedError(SocialNetworkError):
    pass


class ProfileAlreadyDeactivatedError(SocialNetworkError):
    pass


class InteractionDuplicatedError(SocialNetworkError):
    """The author already interacted with this post."""


class StorageError(Exception):
    """
    Persistence failure (I/O, unreadable snapshot).
    Not a SocialNetworkError: callers must not mistake it for a domain outcome.
    """
