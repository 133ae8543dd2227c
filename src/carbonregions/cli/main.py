# src/carbonregions/cli/main.py
"""
This module is the main entry point for the carbonregions CLI.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import Config, PipelineSettings, config
from ..core.exceptions import CarbonRegionsError
from ..core.factory import get_pipeline

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="carbonregions",
    help="Enrich cloud regions with Electricity Maps zones and WattTime regions.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of carbonregions.
    """
    if value:
        from .. import __version__

        typer.echo(f"carbonregions version: {__version__}")
        raise typer.Exit()


@app.command()
def enrich(
    input_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="CSV file of cloud regions to enrich.",
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the enriched table here instead of stdout."),
    ] = None,
    delay: Annotated[
        Optional[float],
        typer.Option("--delay", min=0.0, help="Seconds to pause after each row (default: INTER_ROW_DELAY or 1)."),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
):
    """
    Reads INPUT_PATH, fills in missing coordinates, zones and regions, and
    writes the table to stdout (or --output).
    """
    pipeline = None
    try:
        cfg = Config()
        settings = PipelineSettings.from_config(cfg, inter_row_delay=delay)
        pipeline = get_pipeline(settings=settings, cfg=cfg)
        pipeline.run(input_path, output)
    except (CarbonRegionsError, ValueError, OSError) as e:
        logger.error(f"Enrichment failed: {e}")
        raise typer.Exit(code=1)
    finally:
        if pipeline is not None:
            pipeline.close()


if __name__ == "__main__":
    app()
