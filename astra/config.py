"""Configuration model and loaders for astra.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `AstraConfig`: normalized settings for one stream run.
- `ConfigLoader`: static construction helpers for `AstraConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import TransformProfile


_PROFILE_SWITCHES = ("trim", "to_upper", "drop_empty", "deduplicate")
_TRUE_SWITCH_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_SWITCH_TOKENS = frozenset({"0", "false", "no", "off"})


def _clean_setting(value: object) -> str | None:
    """Return a stripped setting value, or `None` when it is unset or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_switch(value: object, switch: str, source_label: str) -> bool | None:
    """Parse one profile switch value.

    Returns `None` for blank values so the profile default applies.

    Raises:
        ValueError: If the value is not a recognized boolean token. The message
            names both the source and the profile switch.
    """

    if isinstance(value, bool):
        return value

    token = _clean_setting(value)
    if token is None:
        return None

    lowered = token.lower()
    if lowered in _TRUE_SWITCH_TOKENS:
        return True
    if lowered in _FALSE_SWITCH_TOKENS:
        return False
    raise ValueError(
        f"{source_label} sets profile switch `{switch}` to `{token}`; expected a boolean "
        "value (`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)."
    )


@dataclass(slots=True)
class AstraConfig:
    """Runtime configuration for one stream run.

    Attributes:
        profile: Normalization switches for the session.
        input_path: Input file, or `None` for stdin.
        output_path: Output file, or `None` for stdout.
    """

    profile: TransformProfile = field(default_factory=TransformProfile.default)
    input_path: Path | None = None
    output_path: Path | None = None

    def with_overrides(
        self,
        *,
        input_path: Path | None = None,
        output_path: Path | None = None,
        **profile_overrides: bool | None,
    ) -> AstraConfig:
        """Return a copy where non-`None` arguments replace configured values."""

        changes = {
            key: value for key, value in profile_overrides.items() if value is not None
        }
        unknown = sorted(set(changes).difference(_PROFILE_SWITCHES))
        if unknown:
            raise ValueError(f"Unknown profile override(s): {', '.join(unknown)}.")
        return AstraConfig(
            profile=self.profile.with_changes(**changes),
            input_path=input_path if input_path is not None else self.input_path,
            output_path=output_path if output_path is not None else self.output_path,
        )


class ConfigLoader:
    """Factory methods for creating `AstraConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({*_PROFILE_SWITCHES, "input", "output"})
    _ENV_SWITCH_KEYS = {
        "ASTRA_TRIM": "trim",
        "ASTRA_TO_UPPER": "to_upper",
        "ASTRA_DROP_EMPTY": "drop_empty",
        "ASTRA_DEDUPLICATE": "deduplicate",
    }

    @staticmethod
    def from_yaml(path: Path) -> AstraConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> AstraConfig:
        """Create a validated config from environment variables.

        Every variable is optional; unset values fall back to profile defaults.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        switches = {
            switch: _parse_switch(
                env_map.get(env_key), switch, source_label=f"Environment variable `{env_key}`"
            )
            for env_key, switch in ConfigLoader._ENV_SWITCH_KEYS.items()
        }

        return AstraConfig(
            profile=ConfigLoader._profile_from_switches(switches),
            input_path=ConfigLoader._optional_path(env_map.get("ASTRA_INPUT")),
            output_path=ConfigLoader._optional_path(env_map.get("ASTRA_OUTPUT")),
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> AstraConfig:
        """Build and validate config from a parsed mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        switches = {
            switch: _parse_switch(payload.get(switch), switch, source_label)
            for switch in _PROFILE_SWITCHES
        }

        return AstraConfig(
            profile=ConfigLoader._profile_from_switches(switches),
            input_path=ConfigLoader._optional_path(payload.get("input")),
            output_path=ConfigLoader._optional_path(payload.get("output")),
        )

    @staticmethod
    def _profile_from_switches(switches: Mapping[str, bool | None]) -> TransformProfile:
        """Apply parsed switches over the default profile, skipping unset ones."""

        changes = {switch: value for switch, value in switches.items() if value is not None}
        return TransformProfile.default().with_changes(**changes)

    @staticmethod
    def _optional_path(value: object) -> Path | None:
        """Convert a non-blank setting into a path."""

        text = _clean_setting(value)
        if text is None:
            return None
        return Path(text)
