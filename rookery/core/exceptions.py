"""
Pipeline Error Taxonomy.

Every failure raised by the pipeline derives from `RookeryError` and carries
the name of the stage that produced it, so the entry point can report which
component failed without inspecting tracebacks.
"""

# =========================================================================== #
#                                 ERROR TYPES                                 #
# =========================================================================== #


class RookeryError(Exception):
    """Base class for all pipeline failures."""

    stage: str = "pipeline"

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        return f"[{self.stage}] {super().__str__()}"


class InvalidArgumentError(RookeryError, ValueError):
    """Bad split proportion, empty table or malformed schema."""

    stage = "arguments"


class DataQualityError(RookeryError, ValueError):
    """
    Missing values found in the observation table.

    Attributes:
        missing_counts: Column name to number of missing cells.
    """

    stage = "loader"

    def __init__(self, message: str, missing_counts: dict[str, int] | None = None):
        super().__init__(message)
        self.missing_counts = dict(missing_counts or {})


class TrainingFailureError(RookeryError):
    """The classifier could not be fitted on the training subset."""

    stage = "trainer"


class EvaluationFailureError(RookeryError):
    """No predictions could be produced for the testing subset."""

    stage = "evaluator"
