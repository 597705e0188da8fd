from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from verlet_sims.core.config import SimConfig

PRESET_DIR = Path(__file__).resolve().parent.parent / "presets"


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes + preset itself

    def to_config(self) -> SimConfig:
        return SimConfig.from_dict(self.resolved.get("simulation", {}))


def _deep_merge(base: Any, override: Any) -> Any:
    """
    Merge override into base and return merged value.

    dicts merge recursively; lists and scalars in override replace base.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = _deep_merge(out[k], v) if k in out else v
        return out

    if isinstance(override, list):
        return list(override)

    return override


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return data


def resolve_preset_path(name_or_path: str | Path) -> Path:
    """Accept a file path or the bare name of a bundled preset ("default")."""
    path = Path(name_or_path).expanduser()
    if path.exists():
        return path.resolve()
    bundled = PRESET_DIR / f"{name_or_path}.yaml"
    if bundled.exists():
        return bundled
    raise FileNotFoundError(f"No preset file or bundled preset named {name_or_path!r}")


def load_preset(preset_path: str | Path, _seen: Tuple[Path, ...] = ()) -> LoadedPreset:
    """
    Load a preset YAML that may contain:

      include:
        - other.yaml

    Includes are resolved relative to the preset, may include further files,
    and are merged in order before the preset's own keys.
    """
    preset_path = resolve_preset_path(preset_path)
    if preset_path in _seen:
        raise ValueError(f"Circular include detected at {preset_path}")
    preset_dir = preset_path.parent

    preset_data = _load_yaml(preset_path)

    include_list = preset_data.get("include", [])
    if include_list is None:
        include_list = []
    if not isinstance(include_list, list):
        raise ValueError(f"'include' must be a list in {preset_path}")

    loaded: List[Path] = []
    merged: Dict[str, Any] = {}

    for rel in include_list:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings. Got {type(rel)} in {preset_path}")
        inc = load_preset(preset_dir / rel, _seen + (preset_path,))
        merged = _deep_merge(merged, inc.resolved)
        loaded.extend(inc.loaded_files)

    preset_overrides = dict(preset_data)
    preset_overrides.pop("include", None)
    merged = _deep_merge(merged, preset_overrides)

    loaded.append(preset_path)

    return LoadedPreset(
        preset_path=preset_path,
        resolved=merged,
        loaded_files=tuple(loaded),
    )
