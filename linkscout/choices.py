"""Closed enumerations shared by the models and the engine."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from django.db import models

E = TypeVar('E', bound=Enum)


class ProjectStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    PAUSED = 'PAUSED', 'Paused'
    ARCHIVED = 'ARCHIVED', 'Archived'


class TaskStatus(models.TextChoices):
    OPEN = 'OPEN', 'To-do'
    IN_PROGRESS = 'IN_PROGRESS', 'In progress'
    REVIEW = 'REVIEW', 'Review'
    DONE = 'DONE', 'Done'
    BLOCKED = 'BLOCKED', 'Blocked'


class TaskPriority(models.TextChoices):
    LOW = 'LOW', 'Low'
    MEDIUM = 'MEDIUM', 'Medium'
    HIGH = 'HIGH', 'High'
    CRITICAL = 'CRITICAL', 'Critical'


class TaskType(models.TextChoices):
    ONPAGE = 'ONPAGE', 'On-page'
    CONTENT = 'CONTENT', 'Content'
    TECH = 'TECH', 'Technical'
    LINK = 'LINK', 'Internal link'
    LOCAL = 'LOCAL', 'Local'


def coerce_choice(enum_cls: Type[E], value: object) -> Optional[E]:
    """Return the enum member for ``value`` or ``None`` when it is not a member."""

    if value is None:
        return None
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        return None
