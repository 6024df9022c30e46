"""Evaluator configuration, optionally loaded from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError

from ._errors import ConfigError

DEFAULT_MAX_DEPTH = 10_000
DEFAULT_MAX_RENDER_LENGTH = 100_000


class EvaluatorConfig(BaseModel):
    """Settings applied when evaluating or rendering an expression graph.

    Attributes:
        max_depth: Maximum number of nodes on a single root-to-leaf traversal
            path. Deeper graphs fail with GraphTooDeepError.
        max_render_length: Maximum number of characters `render` produces.
            Longer text fails with ExpressionTooLargeError.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: PositiveInt = DEFAULT_MAX_DEPTH
    max_render_length: PositiveInt = DEFAULT_MAX_RENDER_LENGTH


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> EvaluatorConfig:
    """Load and validate [tool.compgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed EvaluatorConfig. Defaults are used when the section is absent.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or the
            section is invalid.

    """
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {pyproject_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {pyproject_path}: {e.strerror or e}"
        raise ConfigError(msg) from e

    section = data.get("tool", {}).get("compgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.compgraph] configuration: expected a table"
        raise ConfigError(msg)

    try:
        return EvaluatorConfig.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.compgraph] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e


def get_config(start_dir: Path | None = None) -> EvaluatorConfig:
    """Get config from pyproject.toml in start_dir (default: cwd) or its parents."""
    pyproject_path = find_pyproject_toml(start_dir)
    if pyproject_path is None:
        return EvaluatorConfig()
    return load_config(pyproject_path)
