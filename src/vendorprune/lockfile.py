"""Loading of glide.lock files."""

from pathlib import Path

import yaml

from vendorprune.errors import LockfileError
from vendorprune.models.imports import ImportRecord, Lockfile


def load_lockfile(lockfile_path: Path) -> Lockfile:
    """Load a glide.lock file.

    Raises:
        LockfileError: If the file is missing, unreadable or malformed.
    """
    try:
        with open(lockfile_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise LockfileError(f"Could not load lockfile {lockfile_path}: {e.strerror or e}") from e

    return parse_lockfile(content, source=str(lockfile_path))


def parse_lockfile(content: str, source: str = "<string>") -> Lockfile:
    """Parse the YAML content of a glide.lock file."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LockfileError(f"Malformed lockfile {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LockfileError(f"Malformed lockfile {source}: expected a mapping at top level")

    return Lockfile(
        imports=_parse_imports(data.get("imports"), "imports", source),
        dev_imports=_parse_imports(data.get("devImports"), "devImports", source),
    )


def _parse_imports(raw: object, key: str, source: str) -> list[ImportRecord]:
    """Convert one import sequence into ImportRecords."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise LockfileError(f"Malformed lockfile {source}: '{key}' must be a list")

    records: list[ImportRecord] = []
    for index, item in enumerate(raw):
        where = f"{key}[{index}]"
        if not isinstance(item, dict):
            raise LockfileError(f"Malformed lockfile {source}: {where} must be a mapping")

        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise LockfileError(f"Malformed lockfile {source}: {where} has no name")

        subpackages = item.get("subpackages") or []
        if not isinstance(subpackages, list) or not all(isinstance(s, str) for s in subpackages):
            raise LockfileError(
                f"Malformed lockfile {source}: {where} subpackages must be a list of strings"
            )

        version = item.get("version")
        records.append(
            ImportRecord(
                name=name.strip(),
                subpackages=list(subpackages),
                version=str(version) if version is not None else None,
            )
        )

    return records
