"""Static method-definition profiles. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from knnschema.config.method.models import MethodDefinition

_config_path = Path(__file__).resolve().parent / "static.json"

ACTIVE_PROFILE = "active"
DEFAULT_ACTIVE_PROFILE = "hnsw_default"

_cached: tuple[dict[str, MethodDefinition], str] | None = None


def _load() -> tuple[dict[str, MethodDefinition], str]:
    """Parse static.json once: (profiles by name, name of the active profile)."""
    global _cached
    if _cached is None:
        data = json.loads(_config_path.read_text(encoding="utf-8"))
        profiles = {k: MethodDefinition.model_validate(v) for k, v in data.get("profiles", {}).items()}
        _cached = (profiles, data.get(ACTIVE_PROFILE, DEFAULT_ACTIVE_PROFILE))
    return _cached


def load_method_profiles() -> dict[str, MethodDefinition]:
    """Method profiles from static.json, keyed by profile name."""
    return _load()[0]


def get_method_profile(profile_name: str) -> MethodDefinition | None:
    """Return method definition for the given profile, or None if missing."""
    return load_method_profiles().get(profile_name)


def resolve_method_definition(profile_or_inline: str | dict[str, Any]) -> MethodDefinition:
    """
    Resolve a method definition from an inline document, a profile name, or "active"
    (the profile static.json marks as active).
    Raises ValueError if the profile is unknown or the inline document is invalid.
    """
    if isinstance(profile_or_inline, dict):
        return MethodDefinition.model_validate(profile_or_inline)
    profiles, active = _load()
    name = profile_or_inline.strip()
    if name == ACTIVE_PROFILE:
        name = active
    definition = profiles.get(name)
    if definition is None:
        raise ValueError(f"Unknown method profile: {profile_or_inline!r}")
    return definition
