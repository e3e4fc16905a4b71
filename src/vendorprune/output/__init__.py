"""Output formatters for VendorPrune."""

from vendorprune.output.json_writer import load_report, write_report
from vendorprune.output.tree import build_plan_tree, display_tree

__all__ = ["build_plan_tree", "display_tree", "load_report", "write_report"]
