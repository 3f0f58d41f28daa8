from __future__ import annotations


class QperfError(Exception):
    """Base class for qperf_web errors."""


class EngineError(QperfError):
    """Raised by analysis engine adapters; AnalysisInvoker turns it into EngineFailure."""


class RunInProgressError(QperfError):
    def __init__(self) -> None:
        super().__init__("A run is already in progress.")
