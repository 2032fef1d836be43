"""Exceptions."""


class InvalidAction(ValueError):
    """An action creator was called without a required argument."""


class IndexOutOfSync(RuntimeError):
    """The username index disagrees with the user records it indexes."""


class InvalidSnapshot(ValueError):
    """Data could not be loaded as a users state snapshot."""
