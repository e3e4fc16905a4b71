"""Data models for prune results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RemovalStatus(Enum):
    """Outcome of a single removal."""

    REMOVED = "removed"
    DRY_RUN = "dry_run"  # Reported only, filesystem untouched
    MISSING = "missing"  # Already gone when its turn came


@dataclass
class RemovalRecord:
    """One entry of the deletion plan after execution."""

    path: str
    kind: str  # "file" or "dir"
    bytes: int = 0
    status: RemovalStatus = RemovalStatus.REMOVED

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "kind": self.kind,
            "bytes": self.bytes,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RemovalRecord":
        return cls(
            path=data["path"],
            kind=data["kind"],
            bytes=data.get("bytes", 0),
            status=RemovalStatus(data.get("status", "removed")),
        )


@dataclass
class PruneSummary:
    """Counters for a prune run."""

    visited: int = 0
    kept: int = 0
    removed_files: int = 0
    removed_dirs: int = 0
    bytes_removed: int = 0

    def to_dict(self) -> dict:
        return {
            "visited": self.visited,
            "kept": self.kept,
            "removed_files": self.removed_files,
            "removed_dirs": self.removed_dirs,
            "bytes_removed": self.bytes_removed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PruneSummary":
        return cls(
            visited=data.get("visited", 0),
            kept=data.get("kept", 0),
            removed_files=data.get("removed_files", 0),
            removed_dirs=data.get("removed_dirs", 0),
            bytes_removed=data.get("bytes_removed", 0),
        )


@dataclass
class PruneMetadata:
    """Metadata about the prune run."""

    vendor_path: str
    lockfile_path: str
    pruned_at: datetime
    vendorprune_version: str
    dry_run: bool
    policy: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "vendor_path": self.vendor_path,
            "lockfile_path": self.lockfile_path,
            "pruned_at": self.pruned_at.isoformat(),
            "vendorprune_version": self.vendorprune_version,
            "dry_run": self.dry_run,
            "policy": self.policy,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PruneMetadata":
        return cls(
            vendor_path=data["vendor_path"],
            lockfile_path=data["lockfile_path"],
            pruned_at=datetime.fromisoformat(data["pruned_at"]),
            vendorprune_version=data["vendorprune_version"],
            dry_run=data.get("dry_run", False),
            policy=data.get("policy", {}),
        )


@dataclass
class PruneResults:
    """Complete results of a prune run, saved with --report."""

    version: str = "1.0"
    metadata: PruneMetadata | None = None
    summary: PruneSummary = field(default_factory=PruneSummary)
    removals: list[RemovalRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "summary": self.summary.to_dict(),
            "removals": [r.to_dict() for r in self.removals],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PruneResults":
        metadata = data.get("metadata")
        return cls(
            version=data.get("version", "1.0"),
            metadata=PruneMetadata.from_dict(metadata) if metadata else None,
            summary=PruneSummary.from_dict(data.get("summary", {})),
            removals=[RemovalRecord.from_dict(r) for r in data.get("removals", [])],
        )
