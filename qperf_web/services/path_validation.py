from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from qperf_web.domain.models import ValidationFailure

logger = logging.getLogger(__name__)

QUESTIONS_MISSING = "Question set location does not exist."
RECORDS_MISSING = "QuizMachine records file does not exist."
OUTPUT_EXISTS = "Output file already exists. Choose a different file name."

PathLike = Union[str, Path]


def _blank(p: PathLike) -> bool:
    # Path("") would resolve to the working directory
    return not str(p or "").strip()


def _exists(p: PathLike) -> bool:
    # os.path.* report OSError (permissions included) as False
    return not _blank(p) and os.path.exists(p)


def _is_file(p: PathLike) -> bool:
    return not _blank(p) and os.path.isfile(p)


class PathValidator:
    """
    Read-only precondition checks for one run.
    Order is fixed: question source, records file, output destination.
    """

    def validate(
        self,
        question_source: PathLike,
        records_file: PathLike,
        output_destination: PathLike,
    ) -> Optional[ValidationFailure]:
        if not _exists(question_source):
            logger.info("Question source not found: %r", str(question_source))
            return ValidationFailure(QUESTIONS_MISSING)

        if not _is_file(records_file):
            logger.info("Records file not found: %r", str(records_file))
            return ValidationFailure(RECORDS_MISSING)

        # a blank destination is not "existing"; ReportWriter rejects it on create
        if _exists(output_destination):
            logger.info("Output destination already exists: %r", str(output_destination))
            return ValidationFailure(OUTPUT_EXISTS)

        return None
