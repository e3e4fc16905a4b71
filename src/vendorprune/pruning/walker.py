"""Depth-first traversal of the vendor tree."""

from pathlib import Path
from typing import Callable, Iterator

from vendorprune.errors import WalkError
from vendorprune.models.imports import PackageParts
from vendorprune.models.tree import VendorEntry

# Decides whether the walk enters a directory
DescendFilter = Callable[[VendorEntry], bool]


def walk_vendor(root: Path, descend: DescendFilter | None = None) -> Iterator[VendorEntry]:
    """Yield every entry below root, pre-order, children sorted by name.

    The root itself is not yielded. Symlinks are reported as files and never
    followed. Directories that vanish while walking are skipped.

    Raises:
        WalkError: If a directory or entry cannot be read.
    """
    yield from _walk_dir(root, (), descend)


def _walk_dir(
    directory: Path,
    parent_parts: PackageParts,
    descend: DescendFilter | None,
) -> Iterator[VendorEntry]:
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except FileNotFoundError:
        return
    except OSError as e:
        raise WalkError("/".join(parent_parts) or str(directory), e) from e

    for child in children:
        parts = parent_parts + (child.name,)
        try:
            is_dir = child.is_dir() and not child.is_symlink()
        except OSError as e:
            raise WalkError("/".join(parts), e) from e
        entry = VendorEntry(path=child, rel_parts=parts, is_dir=is_dir)
        yield entry

        if is_dir and (descend is None or descend(entry)):
            yield from _walk_dir(child, parts, descend)
