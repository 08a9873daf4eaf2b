"""Exceptions raised at the tank combat API boundaries."""


class ConfigurationError(ValueError):
    """Settings or caller arguments violate a precondition."""


class InvalidActionError(ValueError):
    """A discrete action buffer does not match the move/turn/fire layout."""
