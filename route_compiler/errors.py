"""Route compiler error classes.

All errors are raised synchronously from compile and are never retried:
a malformed route cannot succeed on a second attempt.
"""


class RouteCompilerError(Exception):
    """Base error for route compilation."""

    pass


class EmptyRoute(RouteCompilerError):
    """No hops were supplied."""

    pass


class UnknownPool(RouteCompilerError):
    """A hop references a pool id absent from the supplied pool metadata."""

    def __init__(self, pool_id: str) -> None:
        super().__init__(f"Pool does not exist: {pool_id}")
        self.pool_id = pool_id


class UnknownToken(RouteCompilerError):
    """The route's input or output token is not in the route's asset list."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Token not in route assets: {token}")
        self.token = token


class InvalidHopClassification(RouteCompilerError):
    """A hop has its own pool's share token as both input and output."""

    pass


class InvalidAmount(RouteCompilerError):
    """A literal amount falls inside the chained reference tag range or outside uint256."""

    pass


class DanglingReference(RouteCompilerError):
    """A hop needs a chained amount but no earlier hop produces one."""

    pass
