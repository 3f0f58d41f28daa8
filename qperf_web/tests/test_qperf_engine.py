from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from qperf_web.adapters import qperf_engine
from qperf_web.adapters.qperf_engine import QperfExeEngine
from qperf_web.domain.errors import EngineError
from qperf_web.domain.models import EngineReport, QuestionType as T


# -----------------------------
# Test doubles
# -----------------------------
@dataclass
class FakeCompletedProcess:
    returncode: int
    stdout: str = ""
    stderr: str = ""


class FakeRun:
    def __init__(self, proc=None, error: Exception | None = None):
        self._proc = proc
        self._error = error
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self._error is not None:
            raise self._error
        return self._proc


# -----------------------------
# Helpers
# -----------------------------
def make_engine(tmp_path: Path) -> QperfExeEngine:
    exe_path = tmp_path / "bin" / "qperf"
    exe_path.parent.mkdir()
    exe_path.write_text("not really an exe")  # just needs to exist as a Path
    return QperfExeEngine(exe_path=exe_path, timeout_seconds=30)


def payload(warnings, report) -> str:
    return json.dumps({"warnings": warnings, "report": report})


def test_build_command_uses_index_ordered_codes(tmp_path: Path):
    engine = make_engine(tmp_path)

    cmd = engine.build_command(Path("q"), Path("r.csv"), False, (T.A, T.Q, T.V, T.M))

    assert cmd == [str(engine.exe_path), "--questions", "q", "--records", "r.csv", "--types", "AQVM"]


def test_build_command_detail_flag(tmp_path: Path):
    cmd = make_engine(tmp_path).build_command(Path("q"), Path("r.csv"), True, ())
    assert cmd[-2:] == ["", "--detail"]


def test_analyze_parses_stdout(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    fake = FakeRun(FakeCompletedProcess(0, stdout=payload(["w1", "w2"], "REPORT-BODY")))
    monkeypatch.setattr(qperf_engine.subprocess, "run", fake)
    engine = make_engine(tmp_path)

    got = engine.analyze(Path("q"), Path("r.csv"), False, (T.G,))

    assert got == EngineReport(warnings=("w1", "w2"), report="REPORT-BODY")
    cmd, kwargs = fake.calls[0]
    assert cmd[-2:] == ["--types", "G"]
    assert kwargs["cwd"] == str(engine.exe_path.parent)
    assert kwargs["timeout"] == 30


def test_nonzero_exit_raises_with_stderr_tail(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    fake = FakeRun(FakeCompletedProcess(3, stderr="line1\ncannot parse set1.rtf"))
    monkeypatch.setattr(qperf_engine.subprocess, "run", fake)

    with pytest.raises(EngineError, match=r"(?s)code 3.*cannot parse set1.rtf"):
        make_engine(tmp_path).analyze(Path("q"), Path("r.csv"), False, ())


def test_timeout_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    fake = FakeRun(error=subprocess.TimeoutExpired(cmd="qperf", timeout=30))
    monkeypatch.setattr(qperf_engine.subprocess, "run", fake)

    with pytest.raises(EngineError, match="timed out"):
        make_engine(tmp_path).analyze(Path("q"), Path("r.csv"), False, ())


def test_launch_failure_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    fake = FakeRun(error=PermissionError("denied"))
    monkeypatch.setattr(qperf_engine.subprocess, "run", fake)

    with pytest.raises(EngineError, match="Failed to execute"):
        make_engine(tmp_path).analyze(Path("q"), Path("r.csv"), False, ())


@pytest.mark.parametrize(
    "stdout",
    [
        "",
        "not json",
        "[1, 2]",
        json.dumps({"warnings": ["ok"]}),
        json.dumps({"warnings": "oops", "report": "x"}),
        json.dumps({"warnings": [1], "report": "x"}),
    ],
)
def test_bad_output_raises(stdout: str):
    with pytest.raises(EngineError):
        QperfExeEngine.parse_output(stdout)


def test_missing_warnings_defaults_to_empty():
    got = QperfExeEngine.parse_output(json.dumps({"report": "x"}))
    assert got == EngineReport(warnings=(), report="x")
