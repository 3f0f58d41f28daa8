## routes.py
from __future__ import annotations

from typing import Iterable

from flask import Blueprint, current_app, render_template, request

from qperf_web.domain.errors import RunInProgressError
from qperf_web.domain.models import QuestionType, ValidationFailure
from qperf_web.services.run_coordinator import RunCoordinator
from qperf_web.services.type_selection import toggles_from_codes

HOW_TO_USE = [
    "Select the question set location. Either a single .RTF file, or a folder containing multiple files",
    "Select the QuizMachine records file (.csv).",
    "Select the output file location (.csv)",
    "Click Run. Results are saved to the chosen location",
]

# checkbox rows as laid out on the form; M gets its own line
TYPE_ROWS = [
    [QuestionType.A, QuestionType.G, QuestionType.I, QuestionType.Q],
    [QuestionType.R, QuestionType.S, QuestionType.X, QuestionType.V],
    [QuestionType.M],
]


def _form_path(name: str) -> str:
    return (request.form.get(name) or "").strip()


def create_blueprint(coordinator: RunCoordinator, default_types: Iterable[QuestionType]) -> Blueprint:
    bp = Blueprint("web", __name__)
    default_types = tuple(default_types)

    def render(*, toggles, question_source="", records_file="", output_destination="",
               status="", warnings=(), code=200):
        page_model = dict(
            question_source=question_source,
            records_file=records_file,
            output_destination=output_destination,
            type_rows=TYPE_ROWS,
            toggles=toggles,
            status=status,
            warnings=list(warnings),
            how_to_use=HOW_TO_USE,
        )
        return render_template("index.html", **page_model), code

    @bp.get("/")
    def index():
        return render(toggles=toggles_from_codes(default_types))

    @bp.post("/run")
    def run_report():
        question_source = _form_path("question_source")
        records_file = _form_path("records_file")
        output_destination = _form_path("output_destination")
        toggles = toggles_from_codes(request.form.getlist("types"))

        paths = dict(
            question_source=question_source,
            records_file=records_file,
            output_destination=output_destination,
        )

        try:
            outcome = coordinator.run(question_source, records_file, output_destination, toggles)
        except RunInProgressError as e:
            current_app.logger.warning("Run rejected: %s", e)
            return render(toggles=toggles, status=str(e), code=409, **paths)

        if outcome.ok:
            code = 200
        elif isinstance(outcome, ValidationFailure):
            code = 400
        else:
            code = 500
        current_app.logger.info("Run status=%r warnings=%d", outcome.status_text, len(outcome.warnings))

        return render(
            toggles=toggles,
            status=outcome.status_text,
            warnings=outcome.warnings,
            code=code,
            **paths,
        )

    @bp.post("/clear")
    def clear():
        # paths, status and warnings reset; checkbox state is kept
        return render(toggles=toggles_from_codes(request.form.getlist("types")))

    return bp
