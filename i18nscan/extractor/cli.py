"""Command-line entry point for extracting translation catalogs."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final, NoReturn
from uuid import uuid4

import typer

from i18nscan import __version__
from i18nscan.extractor.analyzer import Analyzer
from i18nscan.extractor.discovery import iter_source_files
from i18nscan_common.errors import I18nScanError, SettingsError, SourceParseError
from i18nscan_common.logging import LoggerAdapter, get_logger, setup_logging, with_fields
from i18nscan_common.settings import DEFAULT_FUNC_NAME, load_settings

CLI_COMMAND: Final[str] = "i18nscan"
CLI_TITLE: Final[str] = "i18nscan translation key extractor"

EXIT_ERROR: Final[int] = 1
EXIT_VIOLATION: Final[int] = 2

LOGGER = get_logger(__name__)

app = typer.Typer(help=f"{CLI_TITLE} ({__version__})", no_args_is_help=True, add_completion=False)

SourcePathsArgument = Annotated[
    list[Path],
    typer.Argument(
        help="Go source files or directories to scan, in analysis order.",
        show_default=False,
    ),
]
FuncNameOption = Annotated[
    str,
    typer.Option(
        "--func",
        "-f",
        help="Name of the translation function whose literal arguments are collected.",
        show_default=True,
    ),
]
OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        dir_okay=False,
        help="Write the catalog to this file instead of stdout.",
    ),
]
IndentOption = Annotated[
    int | None,
    typer.Option(
        "--indent",
        min=0,
        help="Pretty-print the catalog with this many spaces of indentation.",
    ),
]
DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug/--no-debug",
        help="Dump every parsed syntax tree to stderr.",
        show_default=True,
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging threshold (DEBUG, INFO, WARNING, ERROR).",
        case_sensitive=False,
        show_default=True,
    ),
]


@dataclass(slots=True)
class _CommandContext:
    """Structured metadata shared across a single command invocation."""

    subcommand: str
    correlation_id: str
    logger: LoggerAdapter
    start: float

    def elapsed(self) -> float:
        return time.monotonic() - self.start


def _exit_code_for(exc: I18nScanError) -> int:
    if isinstance(exc, (SourceParseError, SettingsError)):
        return EXIT_VIOLATION
    return EXIT_ERROR


def _fail_command(context: _CommandContext, exc: I18nScanError) -> NoReturn:
    problem = exc.to_problem_details(instance=f"urn:cli:{CLI_COMMAND}:{context.subcommand}")
    context.logger.log(
        exc.log_level,
        "Command failed",
        extra={
            "status": "error",
            "error": exc.code.value,
            "problem": dict(problem),
            "duration_seconds": context.elapsed(),
        },
    )
    typer.echo(exc.message, err=True)
    raise typer.Exit(code=_exit_code_for(exc))


def _resolve_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        msg = f"Unknown log level '{name}'."
        raise typer.BadParameter(msg, param_hint="--log-level")
    return level


@app.command(name="extract")
def extract(  # noqa: PLR0913 - mirrors the CLI surface
    paths: SourcePathsArgument,
    func_name: FuncNameOption = DEFAULT_FUNC_NAME,
    output: OutputOption = None,
    indent: IndentOption = None,
    debug: DebugOption = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Scan Go sources for translation calls and emit a JSON catalog.

    Files are analysed in the order given; the first file that fails to parse aborts the run and
    no catalog is written.
    """
    setup_logging(_resolve_log_level(log_level))
    correlation_id = uuid4().hex
    with with_fields(
        LOGGER,
        correlation_id=correlation_id,
        command=CLI_COMMAND,
        subcommand="extract",
        operation="extract",
    ) as logger:
        context = _CommandContext(
            subcommand="extract",
            correlation_id=correlation_id,
            logger=logger,
            start=time.monotonic(),
        )
        logger.info("Command started", extra={"status": "start", "paths": [str(p) for p in paths]})
        try:
            settings = load_settings(func_name=func_name, debug=debug)
            analyzer = Analyzer.from_settings(
                settings, dump_stream=typer.get_text_stream("stderr")
            )
            files = iter_source_files(paths)
            records = analyzer.analyze_files(files)
            if output is None:
                typer.echo(analyzer.dump_json(indent=indent).decode("utf-8"))
            else:
                analyzer.save_json(output, indent=indent)
        except I18nScanError as exc:
            _fail_command(context, exc)
        logger.info(
            "Command completed",
            extra={
                "status": "success",
                "files": len(files),
                "records": len(records),
                "output": str(output) if output is not None else "<stdout>",
                "duration_seconds": context.elapsed(),
            },
        )


@app.command(name="version")
def version() -> None:
    """Print the installed i18nscan version."""
    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover - manual execution entrypoint
    app()
