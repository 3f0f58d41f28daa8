from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from qperf_web.domain.models import PersistenceFailure

logger = logging.getLogger(__name__)

CREATE_FAILED = "Error creating output file"
WRITE_FAILED = "Error writing to output file"


@dataclass
class ReportWriter:
    """
    Repository pattern: persists the engine report to the chosen destination.

    The file is opened with mode "x", so the existence test and the create are
    one step. The payload is written as-is (no newline translation).
    """
    encoding: str = "utf-8"

    def write(self, payload: str, destination: Path) -> Optional[PersistenceFailure]:
        try:
            # unknown codec must fail before the file exists
            codecs.lookup(self.encoding)
            fh = open(destination, "x", encoding=self.encoding, newline="")
        except (OSError, ValueError, LookupError) as e:
            logger.warning("Cannot create %s: %s", destination, e)
            return PersistenceFailure(CREATE_FAILED)

        try:
            with fh:
                fh.write(payload)
        except (OSError, UnicodeError) as e:
            # no cleanup: a partial file stays at the destination
            logger.warning("Cannot write %s: %s", destination, e)
            return PersistenceFailure(WRITE_FAILED)

        logger.info("Report saved to %s (%d chars)", destination, len(payload))
        return None
