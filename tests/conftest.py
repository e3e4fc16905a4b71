"""Shared fixtures for VendorPrune tests."""

from pathlib import Path

import pytest

from vendor_trees import LOCKDATA, VENDOR_TREE, create_vendor_tree


@pytest.fixture
def glide_project(tmp_path: Path) -> Path:
    """A glide project with glide.yaml, glide.lock and a populated vendor dir."""
    (tmp_path / "glide.yaml").write_text("")
    (tmp_path / "glide.lock").write_text(LOCKDATA)
    create_vendor_tree(tmp_path / "vendor", VENDOR_TREE)
    return tmp_path
