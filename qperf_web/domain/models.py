######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class QuestionType(str, Enum):
    """Question-type codes in engine index order (0..8)."""
    A = "A"
    G = "G"
    I = "I"  # noqa: E741
    Q = "Q"
    R = "R"
    S = "S"
    X = "X"
    V = "V"
    # Memory verse totals (Q, R, V); passed to the engine as a literal code
    M = "M"

    @property
    def label(self) -> str:
        if self is QuestionType.M:
            return "Memory Verse totals (Q, R, V)"
        return self.value


@dataclass(frozen=True)
class RunRequest:
    question_source: Path
    records_file: Path
    output_destination: Path
    selected_types: tuple[QuestionType, ...]

    @property
    def type_codes(self) -> str:
        return "".join(t.value for t in self.selected_types)


@dataclass(frozen=True)
class EngineReport:
    warnings: tuple[str, ...]
    report: str


# -----------------------------
# Run outcomes
# -----------------------------
@dataclass(frozen=True)
class Success:
    warnings: tuple[str, ...] = ()
    status_text: str = "Saved"

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    message: str

    ok = False

    @property
    def warnings(self) -> tuple[str, ...]:
        return ()

    @property
    def status_text(self) -> str:
        return self.message


ENGINE_FAILURE_TEXT = "Error running qperf function"


@dataclass(frozen=True)
class EngineFailure:
    detail: str = ""            # logs only, never shown

    ok = False

    @property
    def warnings(self) -> tuple[str, ...]:
        return ()

    @property
    def status_text(self) -> str:
        return ENGINE_FAILURE_TEXT


@dataclass(frozen=True)
class PersistenceFailure:
    message: str

    ok = False

    @property
    def warnings(self) -> tuple[str, ...]:
        return ()

    @property
    def status_text(self) -> str:
        return self.message


RunOutcome = Union[Success, ValidationFailure, EngineFailure, PersistenceFailure]
