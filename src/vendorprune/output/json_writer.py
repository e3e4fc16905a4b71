"""JSON output for prune reports."""

import json
from pathlib import Path

from vendorprune.errors import ReportError
from vendorprune.models.results import PruneResults


def write_report(results: PruneResults, output_path: Path) -> None:
    """Write the prune report JSON file.

    Raises:
        ReportError: If the file cannot be written.
    """
    data = results.to_dict()

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise ReportError(f"Could not write report {output_path}: {e.strerror or e}") from e


def load_report(report_path: Path) -> dict:
    """Load a prune report JSON file."""
    with open(report_path, "r", encoding="utf-8") as f:
        return json.load(f)
