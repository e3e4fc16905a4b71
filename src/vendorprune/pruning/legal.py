"""Detection of legal and test files by name.

Name lists follow github.com/client9/gosupplychain (license.go).
"""

# Lowercase filename prefixes indicating a software license
LICENSE_FILE_PREFIXES = (
    "licence",  # UK spelling
    "license",  # US spelling
    "copying",
    "unlicense",
    "copyright",
    "copyleft",
)

# Lowercase substrings indicating some legal declaration
LEGAL_FILE_SUBSTRINGS = (
    "legal",
    "notice",
    "disclaimer",
    "patent",
    "third-party",
    "thirdparty",
)


def is_test_file(name: str, test_suffixes: tuple[str, ...] = ("_test.go",)) -> bool:
    """Check if a file name follows the test file naming convention."""
    return name.endswith(tuple(test_suffixes))


def is_legal_file(name: str, test_suffixes: tuple[str, ...] = ("_test.go",)) -> bool:
    """
    Check if a file is likely to hold license or legal text.

    Args:
        name: Base name of the file (case does not matter)
        test_suffixes: Test file suffixes; test files are never legal files

    Returns:
        True for names like LICENSE, COPYING.txt, NOTICE or PATENTS
    """
    lower = name.lower()
    if is_test_file(lower, tuple(s.lower() for s in test_suffixes)):
        return False
    if lower.startswith(LICENSE_FILE_PREFIXES):
        return True
    return any(substring in lower for substring in LEGAL_FILE_SUBSTRINGS)
