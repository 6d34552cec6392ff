"""Configuration helpers for the link scout engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name, {})

    def confidence_weight(self, factor: str) -> float:
        return float(self.section("confidence").get(factor, 0.0))

    def opportunity_weight(self, factor: str) -> float:
        return float(self.section("opportunity").get("weights", {}).get(factor, 0.0))

    @property
    def blog_page_types(self) -> List[str]:
        return [str(value).lower() for value in self.raw.get("blog_page_types", [])]


# Heuristic tuning values; the defaults reproduce the production ranking.
DEFAULTS: Dict[str, Any] = {
    "max_per_blog": 3,
    "max_per_project": 40,
    "sweep_max_per_project": 20,
    "snippet_padding": 80,
    "blog_page_types": ["blog", "article", "guide", "content", "news"],
    "confidence": {
        "base": 0.35,
        "anchor": 0.35,
        "snippet": 0.15,
        "topical": 0.15,
        "anchor_length_norm": 30,
        "snippet_token_norm": 60,
        "topical_default": 0.3,
    },
    "priority_thresholds": {
        "HIGH": 0.75,
        "MEDIUM": 0.55,
    },
    "opportunity": {
        "weights": {
            "traffic_gap": 0.35,
            "intent": 0.2,
            "position": 0.2,
            "conversion": 0.15,
            "effort": 0.15,
        },
        "position_midpoint": 5,
        "position_steepness": 0.45,
        "default_position": 12,
        "position_floor": 0.1,
        "max_traffic_gap": 100,
        "max_conversion_rate": 0.2,
        "intent_by_priority": {
            "LOW": 0.25,
            "MEDIUM": 0.5,
            "HIGH": 0.75,
            "CRITICAL": 1.0,
        },
        "effort_by_type": {
            "ONPAGE": 3,
            "CONTENT": 4,
            "TECH": 5,
            "LINK": 4,
            "LOCAL": 2,
        },
    },
}


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        merge_into(data, user)

    return EngineConfig(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value
