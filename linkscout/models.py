"""Database models for the link scout app.

Projects own pages, keywords and tasks. A keyword may point at a money page
it should send traffic to; blog-type pages carry extracted text that the
miner scans for anchor mentions. Every internal-link task the miner creates
is mirrored by a ``LinkSuggestion`` row whose unique constraint guards
against duplicate suggestions.
"""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .choices import ProjectStatus, TaskPriority, TaskStatus, TaskType
from .engine.text import html_to_text

SCORE_VALIDATORS = [MinValueValidator(0), MaxValueValidator(100)]


class Workspace(models.Model):
    """Tenant grouping projects and the users allowed to work on them."""

    name = models.CharField(max_length=200)
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='linkscout_workspaces',
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.name


class Project(models.Model):
    """A website tracked inside a workspace."""

    workspace = models.ForeignKey(Workspace, on_delete=models.CASCADE, related_name='projects')
    name = models.CharField(max_length=200)
    status = models.CharField(max_length=20, choices=ProjectStatus.choices, default=ProjectStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.name

    def has_member(self, user) -> bool:
        if not getattr(user, 'is_authenticated', False):
            return False
        return self.workspace.members.filter(pk=user.pk).exists()


class Page(models.Model):
    """A crawled page of a project."""

    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='pages')
    url = models.URLField(max_length=500)
    title = models.CharField(max_length=300, null=True, blank=True)
    page_type = models.CharField(max_length=50, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('project', 'url')

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.url


class PageContent(models.Model):
    """Raw markup and extracted text of a page."""

    page = models.OneToOneField(Page, on_delete=models.CASCADE, related_name='content')
    html = models.TextField(blank=True)
    content_text = models.TextField(blank=True)
    extracted_at = models.DateTimeField(auto_now=True)

    def save(self, *args, **kwargs) -> None:
        if not self.content_text and self.html:
            self.content_text = html_to_text(self.html)
        super().save(*args, **kwargs)


class Keyword(models.Model):
    """Tracked search phrase, optionally mapped to the page it should rank."""

    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='keywords')
    phrase = models.CharField(max_length=255)
    secondary_terms = models.JSONField(default=list, blank=True)
    target_page = models.ForeignKey(
        Page,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='targeted_keywords',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.phrase


class Task(models.Model):
    """Unit of SEO work shown on the task board."""

    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=500)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=TaskStatus.choices, default=TaskStatus.OPEN)
    priority = models.CharField(max_length=20, choices=TaskPriority.choices, default=TaskPriority.MEDIUM)
    type = models.CharField(max_length=20, choices=TaskType.choices, default=TaskType.ONPAGE)
    score_current = models.PositiveSmallIntegerField(default=0, validators=SCORE_VALIDATORS)
    score_potential = models.PositiveSmallIntegerField(default=0, validators=SCORE_VALIDATORS)
    average_position = models.FloatField(null=True, blank=True)
    conversion_rate = models.FloatField(null=True, blank=True)
    intent_score = models.FloatField(null=True, blank=True)
    traffic_gap = models.FloatField(null=True, blank=True)
    effort_estimate = models.FloatField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.title


class LinkSuggestion(models.Model):
    """Internal-link suggestion created by the miner, keyed by its signature."""

    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='link_suggestions')
    task = models.OneToOneField(Task, on_delete=models.CASCADE, related_name='link_suggestion')
    source_page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='outbound_suggestions')
    target_page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='inbound_suggestions')
    anchor = models.CharField(max_length=255)
    anchor_key = models.CharField(max_length=255)
    confidence = models.FloatField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['project', 'source_page', 'target_page', 'anchor_key'],
                name='unique_link_suggestion_signature',
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return f"{self.source_page_id} → {self.target_page_id} · {self.anchor}"

    @property
    def signature(self) -> str:
        from .engine.signatures import build_signature

        return build_signature(self.source_page_id, self.target_page_id, self.anchor_key)
