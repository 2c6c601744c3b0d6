class SessionError(Exception):
    """Base class for recoverable game session failures."""


class InvalidUsernameError(SessionError):
    pass


class ImagePoolError(SessionError):
    pass


class PhaseError(SessionError):
    pass
