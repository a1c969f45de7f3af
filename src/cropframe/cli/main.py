"""cropframe CLI.

Command-line interface for computing default layouts and replaying
recorded gesture scripts through the crop editor.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from cropframe import __version__
from cropframe.config import ConfigError, settings
from cropframe.geometry import Size
from cropframe.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="cropframe",
    help="cropframe: geometric constraint engine for interactive image cropping",
    add_completion=False,
)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"cropframe {__version__}")


@app.command()
def layout(
    image: Annotated[
        Path | None,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Image file to measure (or pass --size)",
        ),
    ] = None,
    size: Annotated[
        str | None, typer.Option("--size", "-s", help="Native image size as WxH")
    ] = None,
    area: Annotated[
        str, typer.Option("--area", "-a", help="Editing area size as WxH")
    ] = "928x528",
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
) -> None:
    """Print the default state computed for an image, as JSON."""
    from cropframe.core import GeometricState, compute_default_state  # noqa: PLC0415
    from cropframe.exceptions import CropframeError  # noqa: PLC0415
    from cropframe.image import read_native_size  # noqa: PLC0415

    _configure_logging(verbose)

    if (image is None) == (size is None):
        typer.echo("Error: pass either an IMAGE path or --size", err=True)
        raise typer.Exit(2)

    try:
        native = read_native_size(image) if image is not None else _parse_size(size)
    except CropframeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    template = GeometricState.template(
        settings.DEFAULT_CROP_WIDTH, settings.DEFAULT_CROP_HEIGHT
    )
    state = compute_default_state(native, _parse_size(area), template)
    typer.echo(state.model_dump_json(indent=2))


@app.command()
def replay(  # noqa: PLR0913
    script_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Gesture script (JSON)",
        ),
    ],
    session: Annotated[
        str | None,
        typer.Option("--session", help="Session key for logging and saved state"),
    ] = None,
    restore: Annotated[
        bool, typer.Option("--restore", help="Start from the state saved for --session")
    ] = False,
    save: Annotated[
        bool, typer.Option("--save", help="Save the final state under --session")
    ] = False,
    state_dir: Annotated[
        Path | None,
        typer.Option("--state-dir", help="Saved state directory (default: STATE_DIR)"),
    ] = None,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Replay a gesture script and print the final state."""
    from cropframe.cli.script import GestureScript  # noqa: PLC0415
    from cropframe.cli.script import replay as replay_script  # noqa: PLC0415
    from cropframe.editor import CropEditor  # noqa: PLC0415
    from cropframe.exceptions import CropframeError  # noqa: PLC0415
    from cropframe.persistence import StateRepository  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    if (restore or save) and session is None:
        typer.echo("Error: --restore and --save require --session", err=True)
        raise typer.Exit(2)

    try:
        script = GestureScript.from_file(script_path)
        repository = None
        if restore or save:
            repository = StateRepository(state_dir or settings.require_state_dir())

        saved = None
        if restore and repository is not None and session is not None:
            saved = repository.load(session)
            if saved is None:
                logger.warning("No saved state to restore", session=session)

        editor = CropEditor(session_key=session)
        result = replay_script(script, editor, saved=saved)

        if save and repository is not None and session is not None:
            repository.save(session, result.state)
    except (CropframeError, ConfigError, ValueError) as e:
        logger.debug("Replay failed", error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if json_output:
        payload = {
            "state": result.state.model_dump(mode="json"),
            "committed": result.committed,
            "rejected": result.rejected,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        crop = result.state.crop
        typer.echo(
            f"Crop: x={crop.x:.2f} y={crop.y:.2f} "
            f"w={crop.width:.2f} h={crop.height:.2f}"
        )
        typer.echo(f"Zoom: {result.state.zoom:.4f}")
        typer.echo(f"Angle: {result.state.angle:g}")
        typer.echo(f"Committed: {result.committed}, rejected: {result.rejected}")


def _parse_size(value: str) -> Size:
    """Parse a WxH string into a Size."""
    try:
        width, height = (float(part) for part in value.lower().split("x"))
        return Size(width=width, height=height)
    except ValueError as e:
        raise typer.BadParameter(
            f"Expected WxH with positive numbers, got {value!r}"
        ) from e


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)
