from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from qperf_web.domain.errors import EngineError
from qperf_web.domain.models import EngineReport, QuestionType
from qperf_web.services.analysis_invoker import AnalysisEngine

logger = logging.getLogger(__name__)


def _tail(text: str, lines: int = 20) -> str:
    return "\n".join((text or "").splitlines()[-lines:])


@dataclass
class QperfExeEngine(AnalysisEngine):
    """
    Runs the qperf executable.

        qperf --questions <path> --records <path> --types <codes> [--detail]

    On exit code 0, stdout is a JSON object: {"warnings": [...], "report": "..."}.
    """
    exe_path: Path
    timeout_seconds: int

    def build_command(
        self,
        question_source: Path,
        records_file: Path,
        detail: bool,
        types: Sequence[QuestionType],
    ) -> list[str]:
        cmd = [
            str(self.exe_path),
            "--questions", str(question_source),
            "--records", str(records_file),
            "--types", "".join(t.value for t in types),
        ]
        if detail:
            cmd.append("--detail")
        return cmd

    def analyze(
        self,
        question_source: Path,
        records_file: Path,
        detail: bool,
        types: Sequence[QuestionType],
    ) -> EngineReport:
        cmd = self.build_command(question_source, records_file, detail, types)
        logger.info("Running: %r", cmd)

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                cwd=str(self.exe_path.parent),
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            raise EngineError("Execution timed out.") from e
        except OSError as e:
            raise EngineError(f"Failed to execute: {e}") from e

        logger.info("qperf exit=%s", proc.returncode)
        if proc.returncode != 0:
            raise EngineError(f"qperf exited with code {proc.returncode}: {_tail(proc.stderr)}")

        return self.parse_output(proc.stdout)

    @staticmethod
    def parse_output(stdout: str) -> EngineReport:
        try:
            data = json.loads(stdout or "")
        except json.JSONDecodeError as e:
            raise EngineError(f"qperf produced invalid output: {e}") from e

        if not isinstance(data, dict):
            raise EngineError("qperf output is not a JSON object.")

        warnings = data.get("warnings", [])
        report = data.get("report")
        if not isinstance(warnings, list) or not all(isinstance(w, str) for w in warnings):
            raise EngineError("qperf output 'warnings' must be a list of strings.")
        if not isinstance(report, str):
            raise EngineError("qperf output 'report' must be a string.")

        return EngineReport(warnings=tuple(warnings), report=report)
