import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

# Environment overrides applied on top of the rules file
ENV_OVERRIDES = {
    "HUB_CMS_URL": ("cms", "base_url"),
    "HUB_PUBLIC_URL": ("cms", "public_url"),
}


def load_rules(path: Path, env: dict[str, str] | None = None) -> Rules:
    """
    Load and validate the rules file.
    A missing file yields the defaults.
    Raises ValueError if the YAML or the schema is invalid.
    """
    data: dict = {}

    if path.exists():
        with open(path) as f:
            content = f.read()

        try:
            loaded = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError("Rules file must contain a mapping at the top level")
        data = loaded or {}

    _apply_env_overrides(data, os.environ if env is None else env)

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e


def _apply_env_overrides(data: dict, env: dict[str, str]) -> None:
    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = env.get(env_var)
        if value:
            data.setdefault(section, {})
            data[section][key] = value
