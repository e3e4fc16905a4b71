"""VendorPrune - remove unused packages and files from a Go vendor tree."""

__version__ = "0.3.0"
