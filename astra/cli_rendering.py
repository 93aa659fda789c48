"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
stream counters, profile listings, and demo session results.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .buffers import OutputRecord
from .errors import PipelineStageError
from .models.datatypes import StreamStats, TransformProfile


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_stream_stats(stats: StreamStats) -> None:
    """Print stream counters to stderr so stdout carries only data."""

    typer.echo(
        f"Lines read: {stats.read} | written: {stats.written} | skipped: {stats.skipped}",
        err=True,
    )


def echo_profile(profile: TransformProfile) -> None:
    """Print profile switches in declaration order."""

    for name, enabled in profile.as_dict().items():
        typer.echo(f"{name}: {'true' if enabled else 'false'}")


def echo_demo_result(index: int, record: OutputRecord) -> None:
    """Print one numbered demo result or its omission notice."""

    if record.is_suppressed:
        typer.echo(f"{index}) omitted (duplicate)")
        return
    typer.echo(f"{index}) {record.text}")
