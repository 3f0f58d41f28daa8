from .errors import EngineError, QperfError, RunInProgressError
from .models import (
    EngineFailure,
    EngineReport,
    PersistenceFailure,
    QuestionType,
    RunOutcome,
    RunRequest,
    Success,
    ValidationFailure,
)

__all__ = [
    "EngineError",
    "EngineFailure",
    "EngineReport",
    "PersistenceFailure",
    "QperfError",
    "QuestionType",
    "RunInProgressError",
    "RunOutcome",
    "RunRequest",
    "Success",
    "ValidationFailure",
]
