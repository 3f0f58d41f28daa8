from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from qperf_web.domain.errors import RunInProgressError
from qperf_web.domain.models import (
    EngineFailure,
    RunOutcome,
    RunRequest,
    Success,
)
from qperf_web.repositories.report_repository import ReportWriter
from qperf_web.services.analysis_invoker import AnalysisInvoker
from qperf_web.services.path_validation import PathLike, PathValidator
from qperf_web.services.type_selection import Toggles, select_types

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SELECTING = "selecting"
    INVOKING = "invoking"
    PERSISTING = "persisting"
    DONE = "done"


@dataclass
class RunCoordinator:
    """
    Service layer: one run = validate -> select types -> invoke engine -> persist.

    Every failure ends the run immediately with its outcome; nothing is retried
    and nothing (warnings included) carries over to the next run.
    """
    validator: PathValidator
    invoker: AnalysisInvoker
    writer: ReportWriter
    state: RunState = RunState.IDLE
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def run(
        self,
        question_source: PathLike,
        records_file: PathLike,
        output_destination: PathLike,
        toggles: Toggles,
    ) -> RunOutcome:
        if not self._lock.acquire(blocking=False):
            raise RunInProgressError()
        try:
            self.state = RunState.IDLE
            outcome = self._run(question_source, records_file, output_destination, toggles)
        finally:
            self.state = RunState.DONE
            self._lock.release()

        if outcome.ok:
            logger.info("Run finished: %s (%d warnings)", outcome.status_text, len(outcome.warnings))
        else:
            logger.warning("Run failed: %s", outcome.status_text)
        return outcome

    def _enter(self, state: RunState) -> None:
        logger.debug("Run state %s -> %s", self.state.value, state.value)
        self.state = state

    def _run(
        self,
        question_source: PathLike,
        records_file: PathLike,
        output_destination: PathLike,
        toggles: Toggles,
    ) -> RunOutcome:
        self._enter(RunState.VALIDATING)
        failure = self.validator.validate(question_source, records_file, output_destination)
        if failure is not None:
            return failure

        self._enter(RunState.SELECTING)
        request = RunRequest(
            question_source=Path(question_source),
            records_file=Path(records_file),
            output_destination=Path(output_destination),
            selected_types=select_types(toggles),
        )
        logger.info(
            "Run started: questions=%s records=%s output=%s types=%s",
            request.question_source, request.records_file, request.output_destination, request.type_codes,
        )

        self._enter(RunState.INVOKING)
        result = self.invoker.invoke(request)
        if isinstance(result, EngineFailure):
            return result

        self._enter(RunState.PERSISTING)
        failure = self.writer.write(result.report, request.output_destination)
        if failure is not None:
            return failure

        return Success(warnings=result.warnings)
