from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from qperf_web.domain.models import EngineFailure, EngineReport, QuestionType, RunRequest

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Strategy interface. Implementations raise on failure."""
    def analyze(
        self,
        question_source: Path,
        records_file: Path,
        detail: bool,
        types: Sequence[QuestionType],
    ) -> EngineReport:
        raise NotImplementedError


@dataclass
class AnalysisInvoker:
    """
    Adapter between a RunRequest and the engine call signature.
    Every engine error is reported as one EngineFailure; nothing is classified.
    """
    engine: AnalysisEngine

    def invoke(self, request: RunRequest) -> Union[EngineReport, EngineFailure]:
        try:
            result = self.engine.analyze(
                request.question_source,
                request.records_file,
                False,
                request.selected_types,
            )
        except Exception as e:
            logger.warning("Analysis engine failed: %s", e, exc_info=True)
            return EngineFailure(detail=str(e))

        return EngineReport(warnings=tuple(result.warnings), report=result.report)
