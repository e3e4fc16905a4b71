"""Vendor tree pruning stages."""

from vendorprune.pruning.classifier import RetentionClassifier
from vendorprune.pruning.executor import execute_plan
from vendorprune.pruning.importset import ImportSet, build_import_set
from vendorprune.pruning.pipeline import VendorPruner, cleanup
from vendorprune.pruning.planner import build_keep_set, plan_deletions
from vendorprune.pruning.walker import walk_vendor

__all__ = [
    "ImportSet",
    "RetentionClassifier",
    "VendorPruner",
    "build_import_set",
    "build_keep_set",
    "cleanup",
    "execute_plan",
    "plan_deletions",
    "walk_vendor",
]
