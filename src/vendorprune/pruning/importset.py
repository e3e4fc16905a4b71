"""Build package allowlists from lockfile imports."""

from dataclasses import dataclass

from vendorprune.errors import ConfigurationError
from vendorprune.models.imports import ImportRecord, Lockfile, PackagePathSet, split_import_path


@dataclass
class ImportSet:
    """Allowlists derived from the lockfile."""

    packages: PackagePathSet  # Every needed package directory
    repos: PackagePathSet  # Root of every import, for legal file retention

    @property
    def legal_scope(self) -> PackagePathSet:
        """Directories whose legal files are kept."""
        return self.repos.union(self.packages)


def build_import_set(
    imports: list[ImportRecord],
    dev_imports: list[ImportRecord] | None = None,
) -> ImportSet:
    """Convert import records into package and repo allowlists.

    The root of every import is itself a package: glide does not list "."
    as a subpackage even when files in the root are used.
    """
    packages = PackagePathSet()
    repos = PackagePathSet()

    for record in [*imports, *(dev_imports or [])]:
        root = split_import_path(record.name)
        if not root:
            raise ConfigurationError(f"Invalid import name: {record.name!r}")

        repos.add(root)
        packages.add(root)
        for subpackage in record.subpackages:
            packages.add(root + split_import_path(subpackage))

    return ImportSet(packages=packages, repos=repos)


def import_set_from_lockfile(lockfile: Lockfile, include_dev_imports: bool) -> ImportSet:
    """Build the import set, optionally counting devImports as needed."""
    return build_import_set(
        lockfile.imports,
        lockfile.dev_imports if include_dev_imports else None,
    )
