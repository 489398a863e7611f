# onboarding/presets/config.py
"""
Preset Configuration Module

Read-only catalog of presets (guided task flows) and their ordered steps.
Hooks are plain optional callables attached to a preset or to the wizard.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from onboarding.config import JSON_CONFIG_SUFFIXES, YAML_CONFIG_SUFFIXES
from onboarding.logger import logger

Hook = Callable[[Dict[str, Any]], Any]


def _check_callable(hooks: Any, names) -> None:
    for name in names:
        value = getattr(hooks, name)
        if value is not None and not callable(value):
            raise ValueError(
                f"Hook '{name}' must be callable, got {type(value).__name__}. "
                f"Attach hooks in code, not in a config file."
            )


@dataclass(frozen=True)
class StepConfig:
    """A single step of a preset."""

    slug: str                                    # Unique within its preset
    title: str = ""                              # Display title
    description: str = ""                        # Hint text for the step

    def __post_init__(self):
        if not self.slug:
            raise ValueError("Step slug is required")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StepConfig":
        return cls(
            slug=data.get("slug", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
        }


@dataclass
class PresetHooks:
    """Optional lifecycle callbacks of a preset."""

    on_start: Optional[Hook] = None
    on_end: Optional[Hook] = None

    def __post_init__(self):
        _check_callable(self, ("on_start", "on_end"))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PresetHooks":
        data = data or {}
        return cls(
            on_start=data.get("on_start", data.get("onStart")),
            on_end=data.get("on_end", data.get("onEnd")),
        )


@dataclass
class WizardHooks:
    """Optional wizard-wide callbacks."""

    on_add_preset: Optional[Hook] = None
    on_show_hint: Optional[Hook] = None
    on_step_pass: Optional[Hook] = None
    on_close_hint: Optional[Hook] = None

    def __post_init__(self):
        _check_callable(self, ("on_add_preset", "on_show_hint", "on_step_pass", "on_close_hint"))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "WizardHooks":
        data = data or {}
        return cls(
            on_add_preset=data.get("on_add_preset", data.get("onAddPreset")),
            on_show_hint=data.get("on_show_hint", data.get("onShowHint")),
            on_step_pass=data.get("on_step_pass", data.get("onStepPass")),
            on_close_hint=data.get("on_close_hint", data.get("onCloseHint")),
        )


@dataclass
class PresetConfig:
    """A named guided task flow."""

    name: str
    steps: List[StepConfig] = field(default_factory=list)
    hooks: PresetHooks = field(default_factory=PresetHooks)
    title: str = ""
    description: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("Preset name is required")

    @property
    def step_slugs(self) -> List[str]:
        return [step.slug for step in self.steps]

    def has_step(self, step_slug: str) -> bool:
        return any(step.slug == step_slug for step in self.steps)

    def first_pending_step(self, passed: List[str]) -> Optional[StepConfig]:
        """First step in order whose slug is not in ``passed``."""
        for step in self.steps:
            if step.slug not in passed:
                return step
        return None

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "PresetConfig":
        return cls(
            name=name,
            steps=[
                step if isinstance(step, StepConfig) else StepConfig.from_dict(step)
                for step in data.get("steps", [])
            ],
            hooks=PresetHooks.from_dict(data.get("hooks")),
            title=data.get("title", ""),
            description=data.get("description", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization (hooks are not serializable)."""
        return {
            "title": self.title,
            "description": self.description,
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass
class WizardConfig:
    """Catalog of presets plus wizard-wide hooks."""

    presets: Dict[str, PresetConfig] = field(default_factory=dict)
    hooks: WizardHooks = field(default_factory=WizardHooks)

    # ------------------------------------------------------------------
    # Reader
    # ------------------------------------------------------------------

    def has_preset(self, name: str) -> bool:
        return name in self.presets

    def get_preset(self, name: str) -> Optional[PresetConfig]:
        return self.presets.get(name)

    def get_steps(self, name: str) -> List[StepConfig]:
        preset = self.presets.get(name)
        return list(preset.steps) if preset else []

    @property
    def preset_names(self) -> List[str]:
        return list(self.presets)

    def presets_with_step(self, step_slug: str) -> List[str]:
        """Names of presets that contain a step with ``step_slug``."""
        return [name for name, preset in self.presets.items() if preset.has_step(step_slug)]

    def set_preset_hooks(
        self,
        name: str,
        on_start: Optional[Hook] = None,
        on_end: Optional[Hook] = None,
    ) -> None:
        """Attach lifecycle hooks to a preset loaded from a file."""
        preset = self.presets.get(name)
        if preset is None:
            raise KeyError(f"Unknown preset '{name}'")
        preset.hooks = PresetHooks(on_start=on_start, on_end=on_end)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WizardConfig":
        """
        Build a catalog from ``{"presets": {name: {...}}, "hooks": {...}}``.

        Preset entries may already be ``PresetConfig`` instances.
        """
        presets: Dict[str, PresetConfig] = {}
        for name, preset_data in (data.get("presets") or {}).items():
            if isinstance(preset_data, PresetConfig):
                presets[name] = preset_data
            else:
                presets[name] = PresetConfig.from_dict(name, preset_data)
        return cls(presets=presets, hooks=WizardHooks.from_dict(data.get("hooks")))

    @classmethod
    def load(cls, config_path: Path) -> "WizardConfig":
        """
        Load a preset catalog from a JSON or YAML file.

        Args:
            config_path: Path to the configuration file

        Returns:
            WizardConfig instance (empty if the file does not exist)

        Raises:
            json.JSONDecodeError: If a JSON file is invalid
            yaml.YAMLError: If a YAML file is invalid
            ValueError: If the suffix is unsupported or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"[CONFIG] Preset config file not found: {config_path}")
            return cls()

        suffix = config_path.suffix.lower()
        text = config_path.read_text(encoding="utf-8")
        try:
            if suffix in JSON_CONFIG_SUFFIXES:
                data = json.loads(text)
            elif suffix in YAML_CONFIG_SUFFIXES:
                data = yaml.safe_load(text)
            else:
                raise ValueError(f"Unsupported preset config format: {config_path.suffix}")
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error(f"[CONFIG] Invalid preset config file {config_path}: {e}")
            raise

        config = cls.from_dict(data or {})
        logger.info(f"[CONFIG] Loaded {len(config.presets)} preset(s) from {config_path}")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {"presets": {name: preset.to_dict() for name, preset in self.presets.items()}}
