class NotFoundError(LookupError):
    """A referenced row is missing or outside the caller's ownership chain.

    Both cases are reported identically so callers cannot probe for other
    users' ids.
    """
