"""Project configuration: ``graft.yml`` / ``graft.json`` loading and lookups."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

from graft.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("graft.yml", "graft.yaml", "graft.json", ".graft/config.yml")

DEFAULT_SOURCE_ROOT = "src"
DEFAULT_TS_CONFIG_PATH = "tsconfig.build.json"
DEFAULT_WEBPACK_CONFIG_PATH = "webpack.config.js"


@dataclass(frozen=True)
class CompilerOptions:
    """Build settings, top-level or per project."""

    ts_config_path: str | None = None
    webpack: bool | None = None
    webpack_config_path: str | None = None


@dataclass(frozen=True)
class ProjectConfig:
    """A named project inside a multi-project workspace."""

    source_root: str
    compiler_options: CompilerOptions = field(default_factory=CompilerOptions)


@dataclass(frozen=True)
class Configuration:
    """Parsed project configuration."""

    source_root: str = DEFAULT_SOURCE_ROOT
    projects: dict[str, ProjectConfig] = field(default_factory=dict)
    package_manager: str | None = None
    compiler_options: CompilerOptions = field(
        default_factory=lambda: CompilerOptions(
            ts_config_path=DEFAULT_TS_CONFIG_PATH,
            webpack=False,
            webpack_config_path=DEFAULT_WEBPACK_CONFIG_PATH,
        )
    )
    path: Path | None = None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return str(value)


def _parse_compiler_options(data: Any, *, defaults: CompilerOptions) -> CompilerOptions:
    if not isinstance(data, dict):
        return defaults
    webpack = data.get("webpack")
    return CompilerOptions(
        ts_config_path=_optional_str(data, "tsConfigPath") or defaults.ts_config_path,
        webpack=bool(webpack) if webpack is not None else defaults.webpack,
        webpack_config_path=(
            _optional_str(data, "webpackConfigPath") or defaults.webpack_config_path
        ),
    )


def _parse_projects(data: Any, source: Path) -> dict[str, ProjectConfig]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{source}: 'projects' must be a mapping of project name to settings"
        raise ConfigurationError(msg)

    projects: dict[str, ProjectConfig] = {}
    for name, settings in data.items():
        if not isinstance(settings, dict):
            msg = f"{source}: project '{name}' must be a mapping"
            raise ConfigurationError(msg)
        source_root = _optional_str(settings, "sourceRoot")
        if source_root is None:
            msg = f"{source}: project '{name}' has no sourceRoot"
            raise ConfigurationError(msg)
        projects[str(name)] = ProjectConfig(
            source_root=source_root,
            compiler_options=_parse_compiler_options(
                settings.get("compilerOptions"), defaults=CompilerOptions()
            ),
        )
    return projects


def parse_configuration(data: dict[str, Any], source: Path) -> Configuration:
    """Build a :class:`Configuration` from an already-decoded mapping."""
    base = Configuration()
    return Configuration(
        source_root=_optional_str(data, "sourceRoot") or base.source_root,
        projects=_parse_projects(data.get("projects"), source),
        package_manager=_optional_str(data, "packageManager"),
        compiler_options=_parse_compiler_options(
            data.get("compilerOptions"), defaults=base.compiler_options
        ),
        path=source,
    )


def find_configuration_file(project_root: Path) -> Path | None:
    """Return the first existing config file under *project_root*."""
    for name in CONFIG_FILENAMES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def load_configuration(project_root: Path) -> Configuration:
    """Load the project configuration, falling back to built-in defaults.

    YAML and JSON files go through the same ``yaml.safe_load`` call.

    Raises
    ------
    ConfigurationError
        If a config file exists but cannot be read or is not a mapping.
    """
    path = find_configuration_file(project_root)
    if path is None:
        logger.debug("No configuration file in %s, using defaults", project_root)
        return Configuration()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        msg = f"Cannot read configuration {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Configuration {path} must be a mapping"
        raise ConfigurationError(msg)

    logger.debug("Loaded configuration from %s", path)
    return parse_configuration(data, path)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_value_or_default(
    config: Configuration,
    attribute: str,
    project_name: str | None,
) -> Any:
    """Resolve *attribute* for *project_name*, falling back to the top level.

    Supported attributes: ``sourceRoot``, ``tsConfigPath``, ``webpack``,
    ``webpackConfigPath``.
    """
    project = config.projects.get(project_name) if project_name else None

    if attribute == "sourceRoot":
        return project.source_root if project is not None else config.source_root

    compiler_attrs = {
        "tsConfigPath": "ts_config_path",
        "webpack": "webpack",
        "webpackConfigPath": "webpack_config_path",
    }
    if attribute not in compiler_attrs:
        msg = f"Unknown configuration attribute: {attribute}"
        raise KeyError(msg)

    attr = compiler_attrs[attribute]
    if project is not None:
        value = getattr(project.compiler_options, attr)
        if value is not None:
            return value
    return getattr(config.compiler_options, attr)
