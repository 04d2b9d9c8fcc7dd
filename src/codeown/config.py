"""Configuration loading and the ownership rule model for codeown.

Two kinds of configuration exist:

    OwnershipConfig  the rule set read from ``codeown.json`` (or a TOML file):
                     include/exclude globs, overrides, default owners,
                     membership allow-list and the min/max owner policy.
    RunSettings      per-run parameters normally supplied on the command line:
                     repository path, lookback window, commit threshold and
                     output file name.

Rule sources are merged in priority order:
    1. Defaults (OwnershipConfig field defaults)
    2. Config file (explicit path, else ./codeown.json in the repository)
    3. Environment variables (CODEOWN_MAX_OWNERS, CODEOWN_MIN_OWNERS)

Example:
    >>> config = config_from_mapping({"maxOwners": 2, "exclude": ["docs/"]})
    >>> config.max_owners
    2
    >>> config.should_include_file("docs/index.md")
    False
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from .exceptions import ConfigLoadError, InvalidConfigError
from .history.identity import strip_marker
from .logging_config import get_logger
from .patterns import best_match, matches_filter

logger = get_logger(__name__)

CONFIG_FILENAME = "codeown.json"
DEFAULT_MAX_OWNERS = 3
DEFAULT_MIN_OWNERS = 1

# Accepted spellings in config files -> dataclass field name
_KEY_ALIASES = {
    "members": "members",
    "include": "include",
    "exclude": "exclude",
    "overrides": "overrides",
    "defaultOwners": "default_owners",
    "default_owners": "default_owners",
    "maxOwners": "max_owners",
    "max_owners": "max_owners",
    "minOwners": "min_owners",
    "min_owners": "min_owners",
    "projectOwners": "project_owners",
    "project_owners": "project_owners",
}

_LIST_FIELDS = ("members", "include", "exclude")
_OWNER_LIST_FIELDS = ("project_owners",)
_MAP_FIELDS = ("overrides", "default_owners")
_INT_FIELDS = ("max_owners", "min_owners")


@dataclass(frozen=True)
class OwnershipConfig:
    """Read-only rule set consulted while resolving owners.

    Attributes:
        members: Allow-list of emails or usernames (empty = everyone)
        include: Globs a file must match to be analyzed (empty = all files)
        exclude: Globs that remove files; wins over ``include``
        overrides: Pattern -> owners used verbatim, ignoring history
        default_owners: Pattern -> owners used to top up short owner lists
        max_owners: Cap on history-derived owners per file
        min_owners: Target owner count reached through defaults
        project_owners: Global fallback owners, also rendered as ``*``
        configured: Field names that were set explicitly by a config source
    """

    members: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    overrides: dict[str, tuple[str, ...]] = field(default_factory=dict)
    default_owners: dict[str, tuple[str, ...]] = field(default_factory=dict)
    max_owners: int = DEFAULT_MAX_OWNERS
    min_owners: int = DEFAULT_MIN_OWNERS
    project_owners: tuple[str, ...] = ()
    configured: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate owner-count policy."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfigError(name, value, "must be an integer >= 1")

    def should_include_file(self, filepath: str) -> bool:
        """Apply include then exclude globs; exclusion always wins."""
        if self.include and not any(matches_filter(filepath, p) for p in self.include):
            return False
        if self.exclude and any(matches_filter(filepath, p) for p in self.exclude):
            return False
        return True

    def should_include_contributor(self, email: str, username: Optional[str] = None) -> bool:
        """True when no membership list is set or the contributor is on it."""
        if not self.members:
            return True
        return email in self.members or (username is not None and username in self.members)

    def override_owners_for(self, filepath: str) -> Optional[list[str]]:
        """Owners from the most specific matching override, or None."""
        pattern = best_match(filepath, list(self.overrides))
        if pattern is None:
            return None
        return list(self.overrides[pattern])

    def default_owners_for(self, filepath: str) -> Optional[list[str]]:
        """Owners from the most specific matching default rule, or None."""
        pattern = best_match(filepath, list(self.default_owners))
        if pattern is None:
            return None
        return list(self.default_owners[pattern])

    def describe(self) -> list[str]:
        """Human summary of explicitly configured rules, one line each."""
        lines = []
        if "members" in self.configured:
            lines.append(f"Members filter: {', '.join(self.members)}")
        if "overrides" in self.configured:
            lines.append(f"Override rules: {len(self.overrides)} patterns")
        if "max_owners" in self.configured:
            lines.append(f"Max owners per file: {self.max_owners}")
        if "min_owners" in self.configured:
            lines.append(f"Min owners per file: {self.min_owners}")
        if "project_owners" in self.configured:
            lines.append(f"Project owners (fallback): {', '.join(self.project_owners)}")
        return lines


@dataclass(frozen=True)
class RunSettings:
    """Parameters of one generation run.

    Attributes:
        repo_path: Repository root; git runs here and output lands here
        since_days: Lookback window in days
        min_commits: Commits a contributor needs on a file to own it
        output_file: Name of the generated file, relative to ``repo_path``
        config_file: Explicit rule file; None = auto-discover
        reference_date: "Today" for the lookback cutoff (None = current UTC date)
    """

    repo_path: Path = field(default_factory=Path.cwd)
    since_days: int = 365
    min_commits: int = 1
    output_file: str = "CODEOWNERS"
    config_file: Optional[Path] = None
    reference_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.since_days < 1:
            raise InvalidConfigError("since_days", self.since_days, "must be at least 1")
        if self.min_commits < 1:
            raise InvalidConfigError("min_commits", self.min_commits, "must be at least 1")
        if not self.output_file:
            raise InvalidConfigError("output_file", self.output_file, "must not be empty")

    @property
    def since_date(self) -> str:
        """Lookback cutoff as an ISO date (YYYY-MM-DD)."""
        today = self.reference_date or datetime.now(timezone.utc).date()
        return (today - timedelta(days=self.since_days)).isoformat()

    @property
    def output_path(self) -> Path:
        return Path(self.repo_path) / self.output_file


def load_config(
    config_file: Optional[Path] = None, repo_path: Optional[Path] = None
) -> OwnershipConfig:
    """Load the ownership rule set.

    Args:
        config_file: Explicit config path; must exist if given
        repo_path: Directory searched for ``codeown.json`` when no explicit
            path is given (default: current directory)

    Returns:
        Validated OwnershipConfig; empty (permissive) when no file exists

    Raises:
        ConfigLoadError: If the file is missing (explicit path only),
            unparsable, or holds invalid values
    """
    path: Optional[Path]
    if config_file is not None:
        path = Path(config_file)
        if not path.exists():
            raise ConfigLoadError(path, "file not found")
    else:
        path = Path(repo_path or Path.cwd()) / CONFIG_FILENAME
        if not path.exists():
            logger.debug("No %s found in %s, using empty configuration", CONFIG_FILENAME, path.parent)
            path = None

    raw: dict[str, Any] = {}
    if path is not None:
        try:
            raw = _read_config_file(path)
        except (OSError, ValueError) as e:
            raise ConfigLoadError(path, str(e))
        if not isinstance(raw, dict):
            raise ConfigLoadError(path, "top-level value must be an object")
        logger.debug("Loaded configuration from %s", path)

    source = path or Path(CONFIG_FILENAME)
    try:
        merged = _normalize_keys(raw)
        merged.update(_load_env_vars())
        return _build_config(merged)
    except InvalidConfigError as e:
        raise ConfigLoadError(source, str(e))


def config_from_mapping(raw: Mapping[str, Any]) -> OwnershipConfig:
    """Build a config from an already parsed mapping (no env overrides).

    Raises:
        InvalidConfigError: On unknown keys or values of the wrong type
    """
    return _build_config(_normalize_keys(raw))


def _normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in raw.items():
        name = _KEY_ALIASES.get(key)
        if name is None:
            raise InvalidConfigError(key, value, "unknown configuration key")
        result[name] = value
    return result


def _build_config(values: dict[str, Any]) -> OwnershipConfig:
    kwargs: dict[str, Any] = {}
    for name, value in values.items():
        if name in _LIST_FIELDS:
            kwargs[name] = _as_string_tuple(name, value)
        elif name in _OWNER_LIST_FIELDS:
            kwargs[name] = _as_owner_tuple(name, value)
        elif name in _MAP_FIELDS:
            if not isinstance(value, dict):
                raise InvalidConfigError(name, value, "expected a mapping of pattern to owners")
            kwargs[name] = {
                str(pattern): _as_owner_tuple(f"{name}[{pattern}]", owners)
                for pattern, owners in value.items()
            }
        else:
            kwargs[name] = value
    return OwnershipConfig(configured=frozenset(values), **kwargs)


def _as_string_tuple(name: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidConfigError(name, value, "expected a list of strings")
    return tuple(dict.fromkeys(value))


def _as_owner_tuple(name: str, value: Any) -> tuple[str, ...]:
    """Owner list without repeats; ``@alice`` and ``alice`` count as one owner."""
    owners: dict[str, str] = {}
    for owner in _as_string_tuple(name, value):
        owners.setdefault(strip_marker(owner), owner)
    return tuple(owners.values())


def _load_env_vars() -> dict[str, Any]:
    """Load owner-count overrides from CODEOWN_* environment variables.

    Supported environment variables:
        CODEOWN_MAX_OWNERS: int
        CODEOWN_MIN_OWNERS: int
    """
    result: dict[str, Any] = {}
    for field_name in _INT_FIELDS:
        env_key = f"CODEOWN_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[field_name] = int(env_value)
        except ValueError:
            raise InvalidConfigError(env_key, env_value, "expected an integer")
    return result


def _read_config_file(path: Path) -> Any:
    """Parse a JSON or TOML (by ``.toml`` suffix) config file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If parsing fails (JSONDecodeError and TOMLDecodeError
            are both ValueError subclasses)
    """
    if path.suffix == ".toml":
        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore

        with open(path, "rb") as f:
            return tomllib.load(f)

    with open(path, encoding="utf-8") as f:
        return json.load(f)
