class FeedforwardError(Exception):
    """Base class for errors raised by the feedforward package."""


class DimensionMismatch(FeedforwardError, ValueError):
    """Raised when operand lengths or shapes disagree.

    A mismatch means the caller built an inconsistent topology or passed a
    vector of the wrong size. Nothing is retried and no state is mutated
    before it is raised.
    """

    def __init__(self, operation: str, left, right) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"{operation}: dimensions do not match ({self.left} vs {self.right})")
