"""Run report output: JSON file and plain-text summary."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from searchprobe.constants import StepStatus
from searchprobe.results import RunReport

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    StepStatus.PASSED: "PASS",
    StepStatus.FAILED: "FAIL",
    StepStatus.SKIPPED: "SKIP",
    StepStatus.UNTESTED: "OK  ",
}


def write_json_report(report: RunReport, path: str | Path) -> Path:
    """Write the machine-readable report.

    Parameters
    ----------
    report : RunReport
        Finished run
    path : str | Path
        Destination file; parent directories are created

    Returns
    -------
    Path
        The written file

    Raises
    ------
    RuntimeError
        If the report cannot be written
    """
    report_path = Path(path)

    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report.to_dict(), indent=2) + "\n")
    except OSError as e:
        logger.error("Failed to write report %s: %s", report_path, e)
        raise RuntimeError(f"Failed to write report {report_path}: {e}") from e

    logger.debug("Wrote JSON report to %s", report_path)
    return report_path


def format_summary(report: RunReport) -> list[str]:
    """Render one line per scenario plus a totals line."""
    lines = []

    for scenario in report.scenarios:
        label = STATUS_LABELS[scenario.status]
        lines.append(f"{label} {scenario.feature}: {scenario.name} ({scenario.location})")

        if scenario.status == StepStatus.FAILED:
            lines.append(f"     {scenario.error_kind}: {scenario.error_message}")

    totals = report.totals
    mode = "dry run, " if report.dry_run else ""
    counted = ", ".join(f"{count} {status}" for status, count in totals.items() if count)
    lines.append(
        f"{len(report.scenarios)} scenario(s) ({mode}{counted or 'none found'}) "
        f"in {report.duration:.1f}s"
    )

    return lines


def emit_summary(report: RunReport) -> None:
    """Log the summary to stdout through the stream-routing handlers."""
    for line in format_summary(report):
        logger.info(line, extra={"stream": "stdout"})
