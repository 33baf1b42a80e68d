"""CLI entry point rendering a ``jest --json`` result file as HTML."""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from jest_html_report.config import ConfigError, load_config
from jest_html_report.generator import ReportGenerator
from jest_html_report.models.results import TestRun


async def load_test_run(results_path: Path) -> TestRun | None:
    """Load a Jest JSON result file.

    Returns:
        The parsed test run, or None when the file holds JSON ``null``

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a valid test run

    """
    content = await asyncio.to_thread(results_path.read_text, encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {results_path}: {e}") from e

    if data is None:
        return None

    try:
        return TestRun.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid test results in {results_path}: {e}") from e


async def run(
    results_path: Path,
    config_path: Path | None = None,
    output_path: Path | None = None,
    *,
    ignore_console: bool = False,
) -> int:
    """Generate the report and return the exit code."""
    log = logging.getLogger("jest_html_report")

    try:
        config = load_config(Path.cwd(), os.environ, config_path)
        test_run = await load_test_run(results_path)
    except (OSError, ValueError) as e:
        if not ignore_console:
            log.error("%s", e)
        return 1

    if output_path is not None:
        config = config.model_copy(update={"output_path": output_path})

    generator = ReportGenerator(config=config)
    outcome = await generator.generate(test_run, ignore_console=ignore_console)
    return 0 if outcome.ok else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render a Jest JSON result file as a static HTML report"
    )
    parser.add_argument(
        "results",
        type=Path,
        help="Path to the JSON written by 'jest --json --outputFile'",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (default: jesthtmlreporter.config.json or package.json)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path of the HTML report, overrides the configured path",
    )
    parser.add_argument(
        "--ignore-console",
        action="store_true",
        help="Do not log the outcome",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            results_path=args.results,
            config_path=args.config,
            output_path=args.output,
            ignore_console=args.ignore_console,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
