"""Exception types raised by VendorPrune."""


class VendorPruneError(RuntimeError):
    """Base class for all fatal VendorPrune errors."""


class ConfigurationError(VendorPruneError, ValueError):
    """Invalid option combination, bad pattern or bad config file."""


class LockfileError(VendorPruneError):
    """The lockfile is missing or malformed."""


class VendorNotFoundError(VendorPruneError):
    """The vendor directory could not be resolved."""


class RemovalError(VendorPruneError):
    """A file or directory could not be removed."""

    def __init__(self, rel_path: str, cause: OSError) -> None:
        super().__init__(f"Could not remove {rel_path}: {cause.strerror or cause}")
        self.rel_path = rel_path
        self.cause = cause


class WalkError(VendorPruneError):
    """A directory in the vendor tree could not be read."""

    def __init__(self, rel_path: str, cause: OSError) -> None:
        super().__init__(f"Could not read {rel_path}: {cause.strerror or cause}")
        self.rel_path = rel_path
        self.cause = cause


class ReportError(VendorPruneError):
    """The JSON report could not be written."""
