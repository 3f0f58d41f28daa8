from __future__ import annotations

from typing import Optional

from flask import Flask

from qperf_web.adapters.qperf_engine import QperfExeEngine
from qperf_web.config.ini_config import AppSettings, IniConfig
from qperf_web.repositories.report_repository import ReportWriter
from qperf_web.services.analysis_invoker import AnalysisInvoker
from qperf_web.services.path_validation import PathValidator
from qperf_web.services.run_coordinator import RunCoordinator
from qperf_web.web.routes import create_blueprint


def build_coordinator(settings: AppSettings) -> RunCoordinator:
    engine = QperfExeEngine(
        exe_path=settings.engine_path,
        timeout_seconds=settings.timeout_seconds,
    )

    return RunCoordinator(
        validator=PathValidator(),
        invoker=AnalysisInvoker(engine=engine),
        writer=ReportWriter(encoding=settings.report_encoding),
    )


def create_app(
    settings: Optional[AppSettings] = None,
    coordinator: Optional[RunCoordinator] = None,
) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()
    if coordinator is None:
        coordinator = build_coordinator(settings)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(coordinator, settings.default_types))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app

# Composition root
#   QPerformance.ini -> IniConfig -> AppSettings
#   QperfExeEngine (adapter, subprocess) -> AnalysisInvoker
#   PathValidator + AnalysisInvoker + ReportWriter -> RunCoordinator
#   RunCoordinator -> web blueprint (form in, status + warnings out)
