class BookingNotFound(Exception):
    pass


class WorkerNotFound(Exception):
    pass


class SelectionConflict(Exception):
    """The worker or booking changed since the match list was produced."""
