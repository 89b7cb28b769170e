from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    if not yaml_path or not Path(yaml_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {yaml_path}, got {type(data).__name__}")
    return data


@dataclass
class RulesConfig:
    """
    Configuration for the validation rules.

    Attributes:
        rules_enabled: Per-rule toggles keyed by rule_id.
        year_min: Lower bound used by the year_in_range rule.
        year_max: Upper bound used by the year_in_range rule.
    """
    rules_enabled: Dict[str, bool] = field(default_factory=dict)
    year_min: int = 1
    year_max: int = 9999

    def rule_enabled(self, rule_id: str, default: bool = True) -> bool:
        """Return the configured toggle for rule_id, or default when unset."""
        return bool(self.rules_enabled.get(rule_id, default))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> RulesConfig:
        """
        Load configuration from a YAML file.

        Keys missing from the file fall back to the packaged config.yaml.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            RulesConfig: Configuration instance loaded from YAML.
        """
        return cls.from_dict(_load_yaml(Path(yaml_path)))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> RulesConfig:
        """
        Create configuration from a dictionary.

        Unknown keys are ignored; missing keys come from the packaged defaults.
        A partial rules_enabled mapping is merged over the default toggles.

        Args:
            config_dict: Dictionary with configuration values.

        Returns:
            RulesConfig: Configuration instance.
        """
        defaults = _load_yaml(DEFAULT_CONFIG_PATH)
        values = {}
        for f in fields(cls):
            if f.name == 'rules_enabled':
                merged = dict(defaults.get('rules_enabled') or {})
                merged.update(config_dict.get('rules_enabled') or {})
                values[f.name] = merged
            elif f.name in config_dict:
                values[f.name] = config_dict[f.name]
            elif f.name in defaults:
                values[f.name] = defaults[f.name]
        return cls(**values)

    @classmethod
    def default(cls, yaml_path: Optional[Path] = None) -> RulesConfig:
        """Load the packaged config.yaml, or yaml_path when given."""
        return cls.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
