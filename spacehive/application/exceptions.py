class SessionNotFoundError(LookupError):
    """Raised when a booking-form or match-request session id is unknown (expired, closed, or never created)."""
    pass


class VenueNotFoundError(LookupError):
    """Raised when a venue id is not in the catalog."""
    pass


class StepNotReadyError(RuntimeError):
    """Raised when a flow is asked to advance before the current step is complete."""
    pass
