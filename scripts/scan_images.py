#!/usr/bin/env python3
"""
Screenshot Vacancy Scanner CLI

Extracts structured vacancies from screenshots of job boards using the
scanning context.

Commands:
    image     - Scan a single screenshot
    directory - Scan every supported screenshot in a folder

Examples:\n

    scan_images.py image screens/linkedin_01.png                  # Scan one image

    scan_images.py directory screens/                             # Scan a folder

    scan_images.py directory screens/ --pattern "djinni_*.png"    # Only matching files

    scan_images.py image screens/feed.png -o outs/feed.json       # Choose output file
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from scout.contexts.scanning import (
    ImageScanResult,
    ScanSummary,
    VacancyImageScanner,
    load_scanner_settings,
)
from scout.contexts.scanning.logger import setup_scanning_logger
from scout.utils import now, now_exact
from scout.utils.report_formatter import Column, TableFormatter, format_percentage, format_salary

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
SCAN_OUTPUT_PATH = Path(os.getenv("SCAN_OUTPUT_PATH", "outs/scans"))

VACANCY_COLUMNS = [
    Column("Title", 36),
    Column("Company", 20),
    Column("Location", 18),
    Column("Salary", 20),
    Column("OK", 3, align="^"),
]


app = typer.Typer(
    help="Extract structured vacancies from job-board screenshots",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _build_scanner(log_dir: Optional[Path]) -> VacancyImageScanner:
    log_dir = log_dir or LOGS_PATH / f"scan_{now()}"
    setup_scanning_logger(log_dir)
    return VacancyImageScanner(settings=load_scanner_settings())


def format_scan_result(result: ImageScanResult) -> str:
    """Render one image's vacancies as a fixed-width table."""
    table = TableFormatter(VACANCY_COLUMNS)
    table.add_section_header(
        f"{Path(result.image_path).name}  (confidence {result.ocr_confidence:.1f})"
    )

    if not result.vacancies:
        table.add_line("No vacancies extracted.")
    else:
        table.add_table_header()
        for vacancy, assessment in zip(result.vacancies, result.assessments):
            table.add_row(
                [
                    vacancy.title,
                    vacancy.company,
                    vacancy.location or vacancy.remote_policy.value,
                    format_salary(vacancy.salary_min, vacancy.salary_max, vacancy.salary_currency),
                    "✓" if assessment.is_eligible else "✗",
                ]
            )

    for warning in result.warnings:
        table.add_line(f"Warning: {warning}")

    return table.render()


def format_summary(summary: ScanSummary) -> str:
    """Render directory totals with eligibility percentages."""
    table = TableFormatter([], total_width=60)
    table.add_section_header("Summary")
    table.add_line(f"Images scanned:   {summary.images_scanned}")
    table.add_line(f"Vacancies:        {summary.total_vacancies}")
    table.add_line(
        f"Eligible:         {summary.eligible_count} "
        f"({format_percentage(summary.eligible_count, summary.total_vacancies) or 'n/a'})"
    )
    table.add_line(
        f"Ineligible:       {summary.ineligible_count} "
        f"({format_percentage(summary.ineligible_count, summary.total_vacancies) or 'n/a'})"
    )
    return table.render()


def write_vacancies(results: list[ImageScanResult], output: Optional[Path]) -> Optional[Path]:
    """
    Write extracted vacancies as indented JSON.

    Returns:
        Path written, or None when there was nothing to write
    """
    if not any(result.vacancies for result in results):
        return None

    output = output or SCAN_OUTPUT_PATH / f"image-vacancies-{now()}.json"
    output.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "scanned_at": now_exact(),
        "results": [result.to_dict() for result in results],
    }
    output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return output


@app.command("image")
def image_command(
    image_path: Annotated[
        Path,
        typer.Argument(help="Screenshot to scan (.png, .jpg, .jpeg, .bmp, .tiff, .tif)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="JSON output file (default: outs/scans/image-vacancies-<timestamp>.json)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the scan log (default: LOGS_PATH/scan_<timestamp>)"),
    ] = None,
):
    """
    Scan a single screenshot and print its vacancies.

    Examples:\n

        $ scan_images.py image screens/linkedin_01.png

        $ scan_images.py image screens/linkedin_01.png --output outs/linkedin.json
    """
    if not image_path.is_file():
        typer.secho(f"Error: Image not found: {image_path}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nScanning: {image_path}", fg=typer.colors.BLUE, bold=True)

    scanner = _build_scanner(log_dir)
    result = scanner.scan_image(image_path)

    typer.echo(format_scan_result(result))

    written = write_vacancies([result], output)
    if written:
        typer.secho(f"✓ Wrote {len(result.vacancies)} vacancies to {written}", fg=typer.colors.GREEN)
    typer.echo("")


@app.command("directory")
def directory_command(
    directory: Annotated[
        Path,
        typer.Argument(help="Folder of screenshots (not searched recursively)"),
    ],
    pattern: Annotated[
        str,
        typer.Option("--pattern", "-p", help="Glob applied inside the folder"),
    ] = "*.*",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="JSON output file (default: outs/scans/image-vacancies-<timestamp>.json)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the scan log (default: LOGS_PATH/scan_<timestamp>)"),
    ] = None,
):
    """
    Scan every supported screenshot in a folder and print a summary.

    Examples:\n

        $ scan_images.py directory screens/

        $ scan_images.py directory screens/ --pattern "*.png"
    """
    if not directory.is_dir():
        typer.secho(f"Error: Directory not found: {directory}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nScanning directory: {directory}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Pattern: {pattern}")

    scanner = _build_scanner(log_dir)
    summary = scanner.scan_directory(directory, search_pattern=pattern)

    for result in summary.results:
        typer.echo(format_scan_result(result))
    typer.echo(format_summary(summary))

    written = write_vacancies(summary.results, output)
    if written:
        typer.secho(f"✓ Wrote {summary.total_vacancies} vacancies to {written}", fg=typer.colors.GREEN)
    typer.echo("")


if __name__ == "__main__":
    app()
