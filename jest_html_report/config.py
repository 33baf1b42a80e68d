"""Reporter configuration and its resolution from files and environment."""

import json
import logging
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic.alias_generators import to_camel

from jest_html_report.models.base import Model
from jest_html_report.sorting import SortMethod

log = logging.getLogger(__name__)

STYLE_DIR = Path(__file__).parent / "style"
CONFIG_FILENAME = "jesthtmlreporter.config.json"
PACKAGE_JSON_KEY = "jest-html-reporter"

ENV_VARS: Mapping[str, str] = {
    "output_path": "JEST_HTML_REPORTER_OUTPUT_PATH",
    "theme": "JEST_HTML_REPORTER_THEME",
    "style_override_path": "JEST_HTML_REPORTER_STYLE_OVERRIDE_PATH",
    "page_title": "JEST_HTML_REPORTER_PAGE_TITLE",
    "logo": "JEST_HTML_REPORTER_LOGO",
    "include_failure_msg": "JEST_HTML_REPORTER_INCLUDE_FAILURE_MSG",
    "include_suite_failure": "JEST_HTML_REPORTER_INCLUDE_SUITE_FAILURE",
    "date_format": "JEST_HTML_REPORTER_DATE_FORMAT",
    "sort": "JEST_HTML_REPORTER_SORT",
}


class ConfigError(ValueError):
    """Raised when a configuration source cannot be parsed."""


class Theme(StrEnum):
    """Stylesheets bundled with the package."""

    DEFAULT = "defaultTheme"
    LIGHT = "lightTheme"
    DARK = "darkTheme"


class ReporterConfig(Model):
    """Configuration for report generation."""

    output_path: Path = Path("test-report.html")
    theme: Theme = Theme.DEFAULT
    style_override_path: Path | None = None
    page_title: str = "Test report"
    logo: str | None = None
    include_failure_msg: bool = False
    include_suite_failure: bool = False
    date_format: str = "%Y-%m-%d %H:%M:%S"
    sort: SortMethod = SortMethod.DEFAULT

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: Any) -> SortMethod:
        if isinstance(value, SortMethod):
            return value
        return SortMethod.parse(str(value) if value is not None else None)

    @property
    def stylesheet_path(self) -> Path:
        """Stylesheet to embed: the override if set, else the theme file."""
        if self.style_override_path is not None:
            return self.style_override_path
        return STYLE_DIR / f"{self.theme}.css"


def read_config_file(cwd: Path, config_path: Path | None = None) -> Mapping[str, Any]:
    """Read raw configuration values from the first available file.

    Lookup order: the explicit ``config_path``, ``jesthtmlreporter.config.json``
    in ``cwd``, then the ``jest-html-reporter`` key of ``cwd/package.json``.
    """
    if config_path is not None:
        return _load_json_object(config_path)

    if (dedicated := cwd / CONFIG_FILENAME).is_file():
        return _load_json_object(dedicated)

    if (package_json := cwd / "package.json").is_file():
        section = _load_json_object(package_json).get(PACKAGE_JSON_KEY, {})
        if not isinstance(section, dict):
            raise ConfigError(
                f"'{PACKAGE_JSON_KEY}' in {package_json} must be an object"
            )
        return section

    return {}


def _load_json_object(path: Path) -> Mapping[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config in {path} must be a JSON object")
    return data


def load_config(
    cwd: Path,
    environ: Mapping[str, str],
    config_path: Path | None = None,
) -> ReporterConfig:
    """Resolve the reporter configuration.

    Environment variables take precedence over file values, which take
    precedence over the defaults.
    """
    values: dict[str, Any] = dict(read_config_file(cwd, config_path))
    for field_name, env_var in ENV_VARS.items():
        if (env_value := environ.get(env_var)) is not None:
            values.pop(to_camel(field_name), None)
            values[field_name] = env_value

    try:
        config = ReporterConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid reporter configuration: {e}") from e

    log.debug("Resolved reporter configuration: %s", config)
    return config
