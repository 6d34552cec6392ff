"""Opportunity scoring for heterogeneous work items.

Every task on the board, whatever its type, is reduced to one comparable
0-100 value. Five normalised factors feed a weighted sum: the traffic gap
between current and potential value, search intent, SERP position (through a
logistic curve), conversion rate and, as a penalty, the effort the work type
usually takes.

The scorer is total: missing or malformed numbers fall back to documented
defaults instead of raising.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from ..choices import TaskPriority, TaskType, coerce_choice
from .config import EngineConfig, load_config
from .text import clamp
from .types import OpportunityInput

_DEFAULT_CONFIG = load_config(None)
_DEFAULT_CURVE = _DEFAULT_CONFIG.section("opportunity")

POSITION_MIDPOINT: float = _DEFAULT_CURVE["position_midpoint"]
POSITION_STEEPNESS: float = _DEFAULT_CURVE["position_steepness"]

# Exponent bound that keeps math.exp from overflowing on absurd positions
_MAX_EXPONENT = 60.0


def _finite(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is not one."""

    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _settings(config: EngineConfig | None) -> Dict[str, Any]:
    return (config or _DEFAULT_CONFIG).section("opportunity")


def normalize_traffic_gap(gap: Any, config: EngineConfig | None = None) -> float:
    value = _finite(gap)
    if value is None:
        return 0.0
    ceiling = _settings(config).get("max_traffic_gap") or 100
    return clamp(value / ceiling)


def normalize_intent(
    intent_score: Any,
    priority: Any = None,
    config: EngineConfig | None = None,
) -> float:
    explicit = _finite(intent_score)
    if explicit is not None:
        return clamp(explicit)

    table = _settings(config).get("intent_by_priority", {})
    member = coerce_choice(TaskPriority, priority)
    if member is not None and member.value in table:
        return float(table[member.value])
    return float(table.get(TaskPriority.MEDIUM.value, 0.5))


def normalize_conversion_rate(rate: Any, config: EngineConfig | None = None) -> float:
    value = _finite(rate)
    if value is None or value <= 0:
        return 0.0
    ceiling = _settings(config).get("max_conversion_rate") or 0.2
    return clamp(value / ceiling)


def normalize_effort(
    effort_override: Any,
    task_type: Any = None,
    config: EngineConfig | None = None,
) -> float:
    table = _settings(config).get("effort_by_type", {})
    scale = max(table.values()) if table else 5

    effort = _finite(effort_override)
    if effort is None or effort <= 0:
        member = coerce_choice(TaskType, task_type)
        if member is not None and member.value in table:
            effort = float(table[member.value])
        else:
            effort = float(table.get(TaskType.CONTENT.value, 4))
    return clamp(effort / scale)


def logistic_position_weight(
    position: Any,
    midpoint: Optional[float] = None,
    steepness: Optional[float] = None,
    config: EngineConfig | None = None,
) -> float:
    """Return a [0, 1] weight that decreases as the SERP position worsens.

    Missing positions count as page two (12 by default). Positions are
    floored at 0.1 so zero or negative values cannot bend the curve.
    ``midpoint`` and ``steepness`` default to the configured curve.
    """

    settings = _settings(config)
    if midpoint is None:
        midpoint = float(settings.get("position_midpoint", POSITION_MIDPOINT))
    if steepness is None:
        steepness = float(settings.get("position_steepness", POSITION_STEEPNESS))

    value = _finite(position)
    if value is None:
        value = float(settings.get("default_position", 12))
    sanitized = max(float(settings.get("position_floor", 0.1)), value)

    exponent = max(min(steepness * (sanitized - midpoint), _MAX_EXPONENT), -_MAX_EXPONENT)
    weight = 1.0 / (1.0 + math.exp(exponent))
    return clamp(round(clamp(weight), 4))


def calculate_opportunity_score(
    opportunity: OpportunityInput,
    config: EngineConfig | None = None,
) -> float:
    """Return the opportunity score of a work item on a 0-100 scale (one decimal)."""

    engine_config = config or _DEFAULT_CONFIG

    traffic_gap = opportunity.traffic_gap
    if traffic_gap is None:
        current = _finite(opportunity.score_current) or 0.0
        potential = _finite(opportunity.score_potential) or 0.0
        traffic_gap = max(0.0, potential - current)

    gap_value = normalize_traffic_gap(traffic_gap, engine_config)
    intent_value = normalize_intent(opportunity.intent_score, opportunity.priority, engine_config)
    position_value = logistic_position_weight(opportunity.average_position, config=engine_config)
    conversion_value = normalize_conversion_rate(opportunity.conversion_rate, engine_config)
    effort_value = normalize_effort(opportunity.effort_override, opportunity.type, engine_config)

    weighted = (
        engine_config.opportunity_weight("traffic_gap") * gap_value
        + engine_config.opportunity_weight("intent") * intent_value
        + engine_config.opportunity_weight("position") * position_value
        + engine_config.opportunity_weight("conversion") * conversion_value
        - engine_config.opportunity_weight("effort") * effort_value
    )

    return round(clamp(weighted) * 100, 1)
