"""
Domain errors raised by the calculation engine.

All errors subclass ValueError so the CLI and API report them the same way
as input validation failures. Inadequate designs (short bearing life, unsafe
shaft, large ratio error) are never errors; they are reported as result data.
"""


class UnknownMaterialError(ValueError):
    """A material name is not present in the requested catalog."""


class BearingSelectionError(ValueError):
    """Base class for structurally unsatisfiable bearing requests."""


class MissingBearingError(BearingSelectionError):
    """No resolvable bearing reference was supplied."""


class NoBearingCandidateError(BearingSelectionError):
    """No catalog entry matches the requested bore and kind."""
