class InvalidTransitionError(Exception):
    """Raised when a session is asked to move between states that are not linked."""
