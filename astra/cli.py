"""Command-line interface for astra.

Responsibilities:
- Expose user-facing commands that exercise the session engine.
- Convert CLI arguments into `AstraConfig` and run stream processing.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Annotated, BinaryIO

import typer

from .buffers import buffer_release
from .cli_rendering import (
    echo_demo_result,
    echo_profile,
    echo_stream_stats,
    exit_with_command_error,
)
from .config import AstraConfig, ConfigLoader
from .errors import PipelineStageError
from .session import profile_default, session_create, session_destroy, session_transform
from .stream import process_stream
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="astra",
    no_args_is_help=True,
    help="astra line normalization CLI.",
)

DEMO_LINES = ("  hola mundo  ", "hola mundo", "rust y c")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with profile defaults."),
]
TrimOption = Annotated[
    bool | None,
    typer.Option("--trim/--no-trim", help="Strip leading/trailing ASCII whitespace."),
]
UpperOption = Annotated[
    bool | None,
    typer.Option("--upper/--no-upper", help="Convert ASCII letters to uppercase."),
]
DropEmptyOption = Annotated[
    bool | None,
    typer.Option("--drop-empty/--no-drop-empty", help="Omit lines that end up empty."),
]
DedupOption = Annotated[
    bool | None,
    typer.Option("--dedup/--no-dedup", help="Omit lines already written in this run."),
]


def _load_base_config(config_path: Path | None) -> AstraConfig:
    """Load YAML config when requested, otherwise environment defaults."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `ASTRA_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    input_path: Path | None = None,
    output_path: Path | None = None,
    trim: bool | None = None,
    upper: bool | None = None,
    drop_empty: bool | None = None,
    dedup: bool | None = None,
) -> AstraConfig:
    """Resolve effective config from file or environment plus explicit CLI flags."""

    return _load_base_config(config_file).with_overrides(
        input_path=input_path,
        output_path=output_path,
        trim=trim,
        to_upper=upper,
        drop_empty=drop_empty,
        deduplicate=dedup,
    )


def _open_reader(stack: ExitStack, path: Path | None) -> BinaryIO:
    """Open the input file, or stdin when no path is configured."""

    if path is None:
        return typer.get_binary_stream("stdin")
    try:
        return stack.enter_context(path.open("rb"))
    except OSError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Cannot open input file `{path}`: {exc.strerror or exc}.",
            hint="Verify the input file exists and is readable.",
        ) from exc


def _open_writer(stack: ExitStack, path: Path | None) -> BinaryIO:
    """Open the output file, or stdout when no path is configured."""

    if path is None:
        return typer.get_binary_stream("stdout")
    try:
        return stack.enter_context(path.open("wb"))
    except OSError as exc:
        raise PipelineStageError(
            stage="output",
            detail=f"Cannot open output file `{path}`: {exc.strerror or exc}.",
            hint="Verify the output directory exists and is writable.",
        ) from exc


@app.command("process")
def process_command(
    input_path: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Input file; stdin when omitted."),
    ] = None,
    output_path: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file; stdout when omitted."),
    ] = None,
    config_file: ConfigOption = None,
    trim: TrimOption = None,
    upper: UpperOption = None,
    drop_empty: DropEmptyOption = None,
    dedup: DedupOption = None,
) -> None:
    """Normalize every input line and write the produced lines."""

    try:
        config = _resolve_config(
            config_file=config_file,
            input_path=input_path,
            output_path=output_path,
            trim=trim,
            upper=upper,
            drop_empty=drop_empty,
            dedup=dedup,
        )
        with ExitStack() as stack:
            reader = _open_reader(stack, config.input_path)
            writer = _open_writer(stack, config.output_path)
            stats = process_stream(reader, writer, config.profile, run_logger=RunLogger())
    except Exception as exc:
        exit_with_command_error("process", exc)

    echo_stream_stats(stats)


@app.command("demo")
def demo_command() -> None:
    """Walk one deduplicating uppercase session through three sample lines."""

    try:
        profile = profile_default().with_changes(to_upper=True, deduplicate=True)
        session = session_create(profile)
        try:
            for index, line in enumerate(DEMO_LINES, start=1):
                record = session_transform(session, line.encode("utf-8"))
                echo_demo_result(index, record)
                buffer_release(record)
        finally:
            session_destroy(session)
    except Exception as exc:
        exit_with_command_error("demo", exc)


@app.command("profile")
def profile_command(
    config_file: ConfigOption = None,
    trim: TrimOption = None,
    upper: UpperOption = None,
    drop_empty: DropEmptyOption = None,
    dedup: DedupOption = None,
) -> None:
    """Print the effective profile after config and flag resolution."""

    try:
        config = _resolve_config(
            config_file=config_file,
            trim=trim,
            upper=upper,
            drop_empty=drop_empty,
            dedup=dedup,
        )
    except Exception as exc:
        exit_with_command_error("profile", exc)

    echo_profile(config.profile)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
