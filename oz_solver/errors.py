# oz_solver/errors.py

"""Exception types shared by the grid, transform and solver layers."""


class OZError(Exception):
    """Base class for every error raised by oz_solver."""


class ConfigurationError(OZError, ValueError):
    """Raised when a component is assembled from invalid inputs."""


class InvalidGrid(ConfigurationError):
    """Raised for a non-positive point count or radius."""


class IncompleteConfiguration(ConfigurationError):
    """Raised by a builder when a required field was never supplied."""

    def __init__(self, missing_field, owner=None):
        self.missing_field = missing_field
        self.owner = owner
        where = f" for {owner}" if owner else ""
        super().__init__(f"missing '{missing_field}'; required{where}")


class LengthMismatch(ConfigurationError):
    """Raised when a sequence length disagrees with the grid size."""

    def __init__(self, name, expected, got):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(f"'{name}' has length {got}, expected {expected}")


class MalformedInput(ConfigurationError):
    """Raised when a strategy receives an empty or non 1-D sequence."""


class TransformSizeMismatch(ConfigurationError):
    """Raised when a transform plan is used against a different grid size."""


class PlanConstructionFailed(OZError):
    """Raised when the spectral library cannot build a plan of the requested size."""


class NumericalDivergence(OZError, ArithmeticError):
    """Raised when NaN/inf appears during the iteration or the OZ denominator vanishes."""

    def __init__(self, quantity, iteration, detail=""):
        self.quantity = quantity
        self.iteration = iteration
        msg = f"non-finite or singular '{quantity}' at iteration {iteration}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidSolverState(OZError, RuntimeError):
    """Raised when a solver operation is called out of order."""
