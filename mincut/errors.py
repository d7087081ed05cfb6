class MinCutError(Exception):
    """Base class for every error raised by the min cut estimator."""


class InputFormatError(MinCutError, ValueError):
    """An edge list record is not two non-negative vertex ids."""


class GraphTooSmall(MinCutError, ValueError):
    """Fewer than two vertices have incident edges, so no cut exists."""


class InvalidTrialCount(MinCutError, ValueError):
    pass


class InvariantViolation(MinCutError, RuntimeError):
    """
    Internal state of a contraction went inconsistent (e.g. a live edge that
    became a self-loop). Never recovered from.
    """


class PartitionInvariantViolation(InvariantViolation):
    """A vertex was assigned to both sides of a cut."""
