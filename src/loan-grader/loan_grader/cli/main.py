"""CLI entrypoint for loan-grader — a typer app with a single scoring command."""

import json
import sys
from pathlib import Path

import structlog
import typer

from loan_grader.candidate.infrastructure.observer import StructlogCandidateObserver
from loan_grader.candidate.infrastructure.subprocess_invoker import (
    SubprocessCandidateInvoker,
)
from loan_grader.cli.output.report import build_report_json, format_report
from loan_grader.config.domain.config import GraderConfig
from loan_grader.config.infrastructure.loader import load_config
from loan_grader.config.infrastructure.observer import StructlogConfigObserver
from loan_grader.core.errors import GraderError
from loan_grader.evaluation.application.runner import GradingRunner
from loan_grader.evaluation.domain.observer import GradingObserver
from loan_grader.evaluation.domain.summary import GradingSummary
from loan_grader.evaluation.infrastructure.composite_observer import (
    CompositeGradingObserver,
)
from loan_grader.evaluation.infrastructure.observer import StructlogGradingObserver
from loan_grader.evaluation.infrastructure.progress_observer import (
    ProgressGradingObserver,
)
from loan_grader.scoring.domain.cases import default_cases

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr; stdout is reserved for the score report.
    """
    if log_format == "console":
        renderers: list[structlog.types.Processor] = [structlog.dev.ConsoleRenderer()]
    elif log_format == "json":
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_runner(config: GraderConfig, log_format: str) -> GradingRunner:
    invoker = SubprocessCandidateInvoker(
        executable=config.executable,
        data_file=config.data_file,
        timeout_seconds=config.timeout_seconds,
        observer=StructlogCandidateObserver(),
        working_dir=config.working_dir,
    )
    observers: list[GradingObserver] = [StructlogGradingObserver()]
    if log_format != "json":
        observers.append(ProgressGradingObserver())
    return GradingRunner(
        executable=config.executable,
        invoker=invoker,
        cases=default_cases(),
        observer=CompositeGradingObserver(observers=observers),
    )


def _write_report(report_path: Path, summary: GradingSummary) -> None:
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(
        json.dumps(build_report_json(summary=summary), indent=2), encoding="utf-8"
    )


@app.command()
def score(
    executable: str = typer.Argument(..., help="Path to the candidate executable"),
    data_file: str = typer.Option(
        "market.csv",
        "--data-file",
        envvar="LOAN_GRADER_DATA_FILE",
        help="Data file name passed to the candidate",
    ),
    timeout: float = typer.Option(
        30.0,
        "--timeout",
        envvar="LOAN_GRADER_TIMEOUT",
        help="Seconds to wait for each candidate invocation",
    ),
    working_dir: Path | None = typer.Option(
        None,
        "--working-dir",
        envvar="LOAN_GRADER_WORKING_DIR",
        help="Directory the candidate runs in (must contain the data file)",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    report: Path | None = typer.Option(
        None,
        "--report",
        help="Optional path for a JSON report of every case",
    ),
) -> None:
    """Score a loan calculator executable and print FS_SCORE:<n>%."""
    _configure_structlog(log_format=log_format)

    try:
        config = load_config(
            observer=StructlogConfigObserver(),
            executable=executable,
            data_file=data_file,
            timeout_seconds=timeout,
            working_dir=working_dir,
        )
    except GraderError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    runner = _build_runner(config=config, log_format=log_format)
    summary = runner.score()

    if summary.failed:
        typer.echo(f"Unable to score submission: {summary.failure_reason}", err=True)
    for line in format_report(summary=summary):
        typer.echo(line)

    if report is not None:
        _write_report(report_path=report, summary=summary)


if __name__ == "__main__":
    app()
