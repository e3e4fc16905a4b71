"""Keep/delete classification of vendor tree entries."""

from pathlib import Path

from vendorprune.config import RetentionPolicy
from vendorprune.models.tree import ClassificationDecision, KeepReason, VendorEntry
from vendorprune.pruning.importset import ImportSet
from vendorprune.pruning.legal import is_legal_file, is_test_file
from vendorprune.pruning.walker import walk_vendor


class RetentionClassifier:
    """Decide which vendor entries a project needs.

    Every rule compares effective paths (relative to the innermost vendor
    directory) with the allowlists, so nested vendor trees are judged the
    same way as the top-level one. When several rules apply, any rule that
    keeps an entry wins over the exclusions.
    """

    def __init__(self, import_set: ImportSet, policy: RetentionPolicy) -> None:
        self.import_set = import_set
        self.policy = policy
        self._packages = import_set.packages
        self._legal_scope = import_set.legal_scope
        self._keep_matcher = policy.build_keep_matcher()

    def classify(self, entry: VendorEntry) -> ClassificationDecision:
        """Classify a single entry."""
        if entry.is_dir:
            if entry.effective_parts in self._packages:
                return ClassificationDecision(entry, True, KeepReason.PACKAGE_DIR)
            return ClassificationDecision(entry, False)

        parent = entry.effective_dir_parts

        if parent in self._packages:
            reason = self._package_file_reason(entry)
            if reason is not None:
                return ClassificationDecision(entry, True, reason)

        if (
            not self.policy.exclude_legal_files
            and parent in self._legal_scope
            and is_legal_file(entry.name, self.policy.test_suffixes)
        ):
            return ClassificationDecision(entry, True, KeepReason.LEGAL_FILE)

        return ClassificationDecision(entry, False)

    def _package_file_reason(self, entry: VendorEntry) -> KeepReason | None:
        """Apply the code-only filters to a file inside a needed package."""
        if not self.policy.code_only:
            return KeepReason.PACKAGE_FILE

        if entry.name.endswith(self.policy.code_suffixes):
            if not (
                self.policy.exclude_tests
                and is_test_file(entry.name, self.policy.test_suffixes)
            ):
                return KeepReason.PACKAGE_FILE

        if self._keep_matcher is not None and self._keep_matcher.match(
            "/".join(entry.effective_parts)
        ):
            return KeepReason.KEEP_PATTERN

        return None

    def classify_tree(self, vendor_root: Path) -> list[ClassificationDecision]:
        """Walk the whole vendor tree and classify every entry."""
        return [self.classify(entry) for entry in walk_vendor(vendor_root)]
