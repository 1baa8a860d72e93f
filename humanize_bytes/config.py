import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from humanize_bytes.formatting import format_magnitude
from humanize_bytes.units import PROFILES, UnitProfile, get_profile


logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "binary"

DEFAULT_CONFIG_TEMPLATE = """\
# humanize-bytes configuration

# Unit profile used by FormatterConfig.humanize():
#   binary   - 1024 steps: B, KiB, MiB, GiB, ...
#   decimal  - 1000 steps: B, kB, MB, GB, ...
#   quantity - 1000 steps without a unit: k, M, G, ...
profile: binary
"""


def load_yaml_config(path: str) -> dict[str, Any]:
    """Load YAML configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Dictionary with configuration values, or empty dict if file doesn't exist.
    """
    if not os.path.exists(path):
        return {}

    with open(path, encoding="utf-8") as f:
        content = f.read()
        if not content.strip():
            return {}
        return yaml.safe_load(content) or {}


def generate_default_config(path: str) -> bool:
    """Write the default configuration template if ``path`` does not exist.

    Returns:
        True if a new file was written, False if one already existed.
    """
    if os.path.exists(path):
        return False

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(DEFAULT_CONFIG_TEMPLATE)
    return True


class FormatterConfig(BaseModel):
    """Formatting preferences a caller keeps alongside its own settings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    profile: str = DEFAULT_PROFILE

    @field_validator("profile", mode="before")
    @classmethod
    def parse_profile(cls, v: Any) -> str:
        """Lower-case the profile name and check it exists."""
        if not isinstance(v, str):
            raise ValueError(f"profile must be a string, got: {type(v)}")
        name = v.strip().lower()
        if name not in PROFILES:
            raise ValueError(f"profile must be one of {', '.join(PROFILES)}, got: {v}")
        return name

    @property
    def unit_profile(self) -> UnitProfile:
        """Get the configured unit profile."""
        return get_profile(self.profile)

    def humanize(self, value) -> str:
        """Format ``value`` with the configured unit profile."""
        return format_magnitude(value, self.unit_profile)


def load_config(path: str) -> FormatterConfig:
    """Load a FormatterConfig from a YAML file.

    A missing or empty file yields the defaults.

    Raises:
        pydantic.ValidationError: If the file holds an invalid profile.
    """
    data = load_yaml_config(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got: {type(data).__name__}")
    config = FormatterConfig.model_validate(data)
    logger.debug(f"Loaded {path}: profile={config.profile}")
    return config
