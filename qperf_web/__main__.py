import logging

from qperf_web.app_factory import create_app
from qperf_web.config.ini_config import IniConfig

if __name__ == "__main__":
    settings = IniConfig.from_env_or_default().load_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = create_app(settings)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])

#############################
#
# Layout
# •	app_factory.py: composition root; builds the engine adapter, services and blueprint.
# •	config/: IniConfig reads QPerformance.ini (or APP_INI) into AppSettings.
# •	domain/: RunRequest, QuestionType, run outcomes, errors. No Flask, no filesystem.
# •	services/: PathValidator, select_types, AnalysisInvoker, RunCoordinator.
# •	adapters/: QperfExeEngine runs the qperf executable.
# •	repositories/: ReportWriter persists the report.
# •	web/: form in, status + warnings out. No run logic.
#
# Run flow
# •	POST /run -> RunCoordinator.run
# •	validate paths -> select types -> qperf -> write report
# •	first failure ends the run; its status text is shown
