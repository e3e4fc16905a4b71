"""Data models for lockfile imports and package allowlists."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from vendorprune.errors import ConfigurationError

# A package path split into its segments, e.g. ("github.com", "org", "repo")
PackageParts = tuple[str, ...]


@dataclass
class ImportRecord:
    """A single import entry from the lockfile."""

    name: str
    subpackages: list[str] = field(default_factory=list)
    version: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "subpackages": self.subpackages,
            "version": self.version,
        }


@dataclass
class Lockfile:
    """The parts of glide.lock VendorPrune cares about."""

    imports: list[ImportRecord] = field(default_factory=list)
    dev_imports: list[ImportRecord] = field(default_factory=list)


def split_import_path(path: str) -> PackageParts:
    """Split a slash-separated import path into normalized segments.

    Empty and "." segments are dropped, so "a//b/" and "a/./b" both give
    ("a", "b"). An empty result is returned for "" and ".".

    Raises:
        ConfigurationError: If the path contains a ".." segment.
    """
    parts = tuple(p for p in path.replace("\\", "/").split("/") if p not in ("", "."))
    if ".." in parts:
        raise ConfigurationError(f"Invalid import path: {path!r}")
    return parts


class PackagePathSet:
    """Set of package paths keyed on path segments.

    Membership is exact: ("a", "pkg1") does not match ("a", "pkg10") nor
    any of its subdirectories.
    """

    def __init__(self, paths: Iterable[PackageParts] = ()) -> None:
        self._paths: set[PackageParts] = set()
        for path in paths:
            self.add(path)

    def add(self, path: PackageParts | str) -> None:
        if isinstance(path, str):
            path = split_import_path(path)
        self._paths.add(tuple(path))

    def union(self, other: "PackagePathSet") -> "PackagePathSet":
        return PackagePathSet(self._paths | other._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[PackageParts]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackagePathSet):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"PackagePathSet({['/'.join(p) for p in self]!r})"
