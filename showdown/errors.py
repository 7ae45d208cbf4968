class HandStateError(RuntimeError):
    """A hand reached evaluation before the round engine finalized it.

    Raised when a player has no hand at showdown or when a hand is not five
    distinct cards. Callers treat it as a server-side fault; retrying with the
    same state reproduces it.
    """
