from .analysis_invoker import AnalysisEngine, AnalysisInvoker
from .path_validation import PathValidator
from .run_coordinator import RunCoordinator, RunState
from .type_selection import select_types, toggles_from_codes

__all__ = [
    "AnalysisEngine",
    "AnalysisInvoker",
    "PathValidator",
    "RunCoordinator",
    "RunState",
    "select_types",
    "toggles_from_codes",
]
