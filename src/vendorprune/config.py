"""Configuration loading and retention policy for VendorPrune."""

from dataclasses import asdict, dataclass
from pathlib import Path

import tomli

from vendorprune.errors import ConfigurationError
from vendorprune.paths import get_config_path
from vendorprune.patterns import KeepMatcher

# File suffixes treated as code by --only-code
DEFAULT_CODE_SUFFIXES = (
    ".go",
    ".c",
    ".s",
    ".S",
    ".cc",
    ".cpp",
    ".cxx",
    ".h",
    ".hh",
    ".hpp",
    ".hxx",
)

# File name suffixes identifying test files
DEFAULT_TEST_SUFFIXES = ("_test.go",)

# Keys accepted in the [vendorprune] table
CONFIG_KEYS = frozenset(
    {
        "only_code",
        "no_tests",
        "no_legal_files",
        "dev_imports",
        "keep",
        "code_suffixes",
        "test_suffixes",
    }
)


@dataclass(frozen=True)
class RetentionPolicy:
    """What to keep inside the vendor tree."""

    dry_run: bool = False
    code_only: bool = False
    exclude_tests: bool = False
    exclude_legal_files: bool = False
    include_dev_imports: bool = True
    keep_patterns: tuple[str, ...] = ()
    code_suffixes: tuple[str, ...] = DEFAULT_CODE_SUFFIXES
    test_suffixes: tuple[str, ...] = DEFAULT_TEST_SUFFIXES

    def validate(self) -> None:
        """Reject inconsistent options before touching the filesystem.

        Raises:
            ConfigurationError: On an invalid combination or keep pattern.
        """
        if self.exclude_tests and not self.code_only:
            raise ConfigurationError("--no-tests requires --only-code")
        self.build_keep_matcher()

    def build_keep_matcher(self) -> KeepMatcher | None:
        """Compile keep patterns into a matcher (None when there are none)."""
        if not self.keep_patterns:
            return None
        return KeepMatcher(self.keep_patterns)

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("keep_patterns", "code_suffixes", "test_suffixes"):
            data[key] = list(data[key])
        return data


def load_config(config_path: Path | None, project_root: Path) -> dict:
    """Load the [vendorprune] settings for a project.

    With an explicit config_path that file must exist. Otherwise
    .vendorprune.toml and then pyproject.toml ([tool.vendorprune]) in the
    project root are tried. Returns an empty dict when nothing is configured.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigurationError(f"Config file not found: {config_path}")
        return _read_section(config_path)

    default_path = get_config_path(project_root)
    if default_path.is_file():
        return _read_section(default_path)

    pyproject_path = project_root / "pyproject.toml"
    if pyproject_path.is_file():
        return _read_section(pyproject_path)

    return {}


def _read_section(path: Path) -> dict:
    """Read the vendorprune table from a TOML file."""
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e

    if path.name == "pyproject.toml":
        section = data.get("tool", {}).get("vendorprune", {})
    else:
        section = data.get("vendorprune", data)

    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid vendorprune section in {path}")

    unknown = sorted(set(section) - CONFIG_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")
    return section


def _get_bool(config: dict, key: str, default: bool) -> bool:
    value = config.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"Config key '{key}' must be true or false")
    return value


def _get_str_list(config: dict, key: str) -> list[str]:
    value = config.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"Config key '{key}' must be a list of strings")
    return value


def get_only_code(config: dict) -> bool:
    """Check if only code files should be kept."""
    return _get_bool(config, "only_code", False)


def get_no_tests(config: dict) -> bool:
    """Check if test files should be removed."""
    return _get_bool(config, "no_tests", False)


def get_no_legal_files(config: dict) -> bool:
    """Check if legal files should be removed."""
    return _get_bool(config, "no_legal_files", False)


def get_dev_imports(config: dict) -> bool:
    """Check if devImports count as needed packages."""
    return _get_bool(config, "dev_imports", True)


def get_keep_patterns(config: dict) -> list[str]:
    """Get extra keep patterns from config."""
    return _get_str_list(config, "keep")


def get_code_suffixes(config: dict) -> list[str]:
    """Get code suffixes: defaults plus any configured extras."""
    extra = _get_str_list(config, "code_suffixes")
    return list(DEFAULT_CODE_SUFFIXES) + [s for s in extra if s not in DEFAULT_CODE_SUFFIXES]


def get_test_suffixes(config: dict) -> list[str]:
    """Get test file suffixes, replacing the defaults when configured."""
    return _get_str_list(config, "test_suffixes") or list(DEFAULT_TEST_SUFFIXES)


def build_policy(
    config: dict,
    *,
    dry_run: bool = False,
    only_code: bool = False,
    no_tests: bool = False,
    no_legal_files: bool = False,
    dev_imports: bool | None = None,
    keep: list[str] | None = None,
    code_suffixes: list[str] | None = None,
) -> RetentionPolicy:
    """Merge command line options over config file values and validate."""
    suffixes = get_code_suffixes(config)
    for suffix in code_suffixes or []:
        if suffix not in suffixes:
            suffixes.append(suffix)

    policy = RetentionPolicy(
        dry_run=dry_run,
        code_only=only_code or get_only_code(config),
        exclude_tests=no_tests or get_no_tests(config),
        exclude_legal_files=no_legal_files or get_no_legal_files(config),
        include_dev_imports=get_dev_imports(config) if dev_imports is None else dev_imports,
        keep_patterns=tuple(get_keep_patterns(config) + list(keep or [])),
        code_suffixes=tuple(suffixes),
        test_suffixes=tuple(get_test_suffixes(config)),
    )
    policy.validate()
    return policy
