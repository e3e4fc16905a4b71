"""Centralized path management for VendorPrune."""

from pathlib import Path

from vendorprune.errors import VendorNotFoundError

# Files that mark the root of a glide-managed project
MANIFEST_FILE = "glide.yaml"
LOCK_FILE = "glide.lock"

# Directory name for vendored dependencies (also used for nested vendors)
VENDOR_DIR = "vendor"

# Optional project-level config file
CONFIG_FILE = ".vendorprune.toml"


def find_project_root(start: Path) -> Path:
    """Find the nearest directory at or above start holding glide files.

    Falls back to start itself when no ancestor has a manifest or lockfile.
    """
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / MANIFEST_FILE).exists() or (candidate / LOCK_FILE).exists():
            return candidate
    return start


def get_lockfile_path(project_root: Path) -> Path:
    """Get the glide.lock path for a project."""
    return project_root / LOCK_FILE


def get_config_path(project_root: Path) -> Path:
    """Get the .vendorprune.toml path for a project."""
    return project_root / CONFIG_FILE


def get_vendor_path(project_root: Path) -> Path:
    """Get the vendor directory for a project.

    Raises:
        VendorNotFoundError: If the directory does not exist.
    """
    return ensure_vendor_dir(project_root / VENDOR_DIR)


def ensure_vendor_dir(vendor_path: Path) -> Path:
    """Check that vendor_path is a directory and return it resolved."""
    if not vendor_path.is_dir():
        raise VendorNotFoundError(f"Cannot find vendor dir: {vendor_path}")
    return vendor_path.resolve()
