"""
Exceptions raised by the estimation library.
"""


class EstimationError(Exception):
    """Base class for errors raised by gaussian_estimation."""


class InvalidTimeOrder(EstimationError, ValueError):
    """
    Raised when an estimator is asked to predict backwards in time.

    The estimator is left exactly as it was before the call.

    Attributes
    ----------
    current_time
        Time of the estimator when the call was made
    requested_time
        The (earlier) time passed to ``predict``
    """

    def __init__(self, current_time, requested_time):
        self.current_time = current_time
        self.requested_time = requested_time
        super().__init__(
            f"Unable to wind back time: requested {requested_time!r} "
            f"is earlier than current time {current_time!r}"
        )
