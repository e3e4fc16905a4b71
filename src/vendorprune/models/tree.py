"""Data models for vendor tree entries and deletion plans."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from vendorprune.models.imports import PackageParts
from vendorprune.paths import VENDOR_DIR


class KeepReason(Enum):
    """Why an entry survives pruning."""

    PACKAGE_FILE = "package_file"  # File directly inside a needed package
    KEEP_PATTERN = "keep_pattern"  # Matched a user keep pattern
    LEGAL_FILE = "legal_file"  # License/notice file of a needed repo or package
    PACKAGE_DIR = "package_dir"  # Directory of a needed package
    ANCESTOR = "ancestor"  # Parent of something kept


@dataclass(frozen=True)
class VendorEntry:
    """A file or directory found under the vendor root."""

    path: Path
    rel_parts: PackageParts
    is_dir: bool

    @property
    def name(self) -> str:
        return self.rel_parts[-1]

    @property
    def rel_path(self) -> str:
        """Path relative to the vendor root, using the host separator."""
        return os.sep.join(self.rel_parts)

    @property
    def kind(self) -> str:
        return "dir" if self.is_dir else "file"

    @property
    def effective_parts(self) -> PackageParts:
        """Path relative to the innermost enclosing vendor directory.

        Outside any nested vendor directory this is the path relative to the
        walk root. A directory literally named "vendor" is its own scope and
        maps to the empty path.
        """
        candidates = self.rel_parts if self.is_dir else self.rel_parts[:-1]
        for index in range(len(candidates) - 1, -1, -1):
            if candidates[index] == VENDOR_DIR:
                return self.rel_parts[index + 1 :]
        return self.rel_parts

    @property
    def effective_dir_parts(self) -> PackageParts:
        """Directory portion of the effective path."""
        return self.effective_parts[:-1]


@dataclass(frozen=True)
class ClassificationDecision:
    """Keep/delete verdict for one entry."""

    entry: VendorEntry
    keep: bool
    reason: KeepReason | None = None


@dataclass
class DeletionPlan:
    """Entries to remove, in traversal order, none nested in another."""

    entries: list[VendorEntry] = field(default_factory=list)

    def add(self, entry: VendorEntry) -> None:
        self.entries.append(entry)

    @property
    def files(self) -> list[VendorEntry]:
        return [e for e in self.entries if not e.is_dir]

    @property
    def dirs(self) -> list[VendorEntry]:
        return [e for e in self.entries if e.is_dir]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
