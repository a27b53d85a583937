"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import RenderChainConfig

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_search_paths(explicit: str | None = None) -> list[Path]:
    """Candidate config files, highest precedence first."""
    paths = [Path("./renderchain.yaml"), Path.home() / ".renderchain" / "config.yaml"]
    if explicit:
        paths.insert(0, Path(explicit))
    return paths


def load_config(cli_path: str | None = None) -> RenderChainConfig:
    """Load config with resolution order: explicit > project-local > user-global > defaults.

    Empty files are skipped so a blank project file doesn't mask the user one.
    """
    for path in config_search_paths(cli_path):
        if not path.exists():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping at top level")
        try:
            return RenderChainConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return RenderChainConfig()


def _read_yaml(path: Path) -> object:
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings. Unset vars expand to ''."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Starter file for hosts that want a project-local config
DEFAULT_CONFIG_TEMPLATE = """\
# renderchain.yaml

# Priority used when add_renderer() is called without one
default_priority: 10

# Dispatch behaviour
dispatch:
  on_error: "raise"            # raise | isolate
  callable_check: "dispatch"   # dispatch | register

# Host hooks that open and close the capture for each pipeline
hooks:
  admin:
    begin: "admin_enqueue_scripts"
    end: "admin_print_footer_scripts"
    begin_priority: -9999
    end_priority: 9999
  front:
    begin: "wp_enqueue_scripts"
    end: "wp_print_footer_scripts"
    begin_priority: -9999
    end_priority: 9999

# Renderers registered when the context is created
# renderers:
#   - pipeline: "front"        # admin | front
#     callback: "mypkg.filters:minify_html"
#     priority: 20

# Logging
log_level: "info"              # debug | info | warn | error
"""
