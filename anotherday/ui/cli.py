# -*- coding: utf-8 -*-

import logging
from pathlib import Path
from typing import Optional

import typer

from anotherday.ui.log_setup import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Timestamp the start of tasks and breaks; see where the day went.",
)

VERBOSE = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _services(ctx: typer.Context):
    # built by anotherday.app.main (or handed in by tests)
    if ctx.obj is None:
        from anotherday.app import build_services
        from anotherday.config import AppConfig

        ctx.obj = build_services(AppConfig.from_env())
    return ctx.obj


@app.command("task")
def task(
    ctx: typer.Context,
    project: str = typer.Argument(..., help="Project name"),
    label: str = typer.Argument(..., metavar="TASK", help="What you are starting on"),
    id_arg: Optional[str] = typer.Argument(None, metavar="[ID]", help="Ticket/issue id"),
    task_id: Optional[str] = typer.Option(None, "--id", help="Ticket/issue id"),
    at: Optional[str] = typer.Option(None, "--time", help="Local start time HH:MM[:SS], default now"),
    verbose: bool = VERBOSE,
):
    """Marks the current time as the start of a new task."""
    configure_logging(verbose)
    services = _services(ctx)
    try:
        services.log_service.start_task(project, label, task_id=task_id or id_arg, at=at)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    except OSError:
        logger.exception("could not write task entry")


@app.command("break")
def break_(
    ctx: typer.Context,
    at: Optional[str] = typer.Option(None, "--time", help="Local break time HH:MM[:SS], default now"),
    verbose: bool = VERBOSE,
):
    """Sets a break at the current time. The time between a break and the next task is not counted."""
    configure_logging(verbose)
    services = _services(ctx)
    try:
        services.log_service.take_break(at=at)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    except OSError:
        logger.exception("could not write break entry")


@app.command("show")
def show(
    ctx: typer.Context,
    start: Optional[str] = typer.Argument(None, help="yyyy-mm-dd | yesterday | week | month"),
    end: Optional[str] = typer.Argument(None, help="yyyy-mm-dd, inclusive"),
    verbose: bool = VERBOSE,
):
    """Shows saved records for a date or within an inclusive range of dates."""
    configure_logging(verbose)
    services = _services(ctx)
    services.view.render(services.report_service.show(start, end))


@app.command("export")
def export(
    ctx: typer.Context,
    start: Optional[str] = typer.Argument(None, help="yyyy-mm-dd | yesterday | week | month"),
    end: Optional[str] = typer.Argument(None, help="yyyy-mm-dd, inclusive"),
    out: Path = typer.Option(..., "--out", "-o", help="File to write"),
    as_markdown: bool = typer.Option(False, "--markdown", help="Write markdown instead of HTML"),
    verbose: bool = VERBOSE,
):
    """Writes the records of a date range to an HTML (or markdown) report."""
    configure_logging(verbose)
    services = _services(ctx)
    reports = services.report_service.show(start, end)

    if as_markdown:
        content = services.markdown.to_markdown(reports)
    else:
        content = services.markdown.render_reports(reports)
    try:
        out.write_text(content, encoding="utf-8")
    except OSError:
        logger.exception("could not write report to %s", out)
        return
    logger.debug("wrote %d day(s) to %s", len(reports), out)


# short forms
app.command("t", hidden=True)(task)
app.command("b", hidden=True)(break_)
app.command("s", hidden=True)(show)
