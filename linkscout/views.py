"""Django views for the link scout app.

The views expose the miner and the task board as small JSON endpoints: an
on-demand mining run for project members, the scheduled sweep over every
active project, and the scored task board.
"""

from __future__ import annotations

import hmac

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from .forms import LinkSuggestionOptionsForm
from .models import Project
from .services import build_task_board, generate_link_suggestions, run_link_scout_sweep


def _member_project(request: HttpRequest, project_id: int) -> Project | JsonResponse:
    """Return the project if the signed-in user belongs to its workspace."""

    if not request.user.is_authenticated:
        return JsonResponse({'error': 'Unauthorized'}, status=401)

    project = Project.objects.select_related('workspace').filter(pk=project_id).first()
    if project is None:
        return JsonResponse({'error': 'Project not found'}, status=404)

    if not project.has_member(request.user):
        return JsonResponse({'error': 'Forbidden'}, status=403)

    return project


@require_POST
def project_link_suggestions(request: HttpRequest, project_id: int) -> JsonResponse:
    """Run the miner for one project and return the suggestions it created."""

    project = _member_project(request, project_id)
    if isinstance(project, JsonResponse):
        return project

    form = LinkSuggestionOptionsForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'error': 'Invalid options', 'fields': form.errors.get_json_data()}, status=400)

    suggestions = generate_link_suggestions(
        project.pk,
        max_per_blog=form.cleaned_data.get('max_per_blog'),
        max_per_project=form.cleaned_data.get('max_per_project'),
    )
    return JsonResponse({'suggestions': [suggestion.as_dict() for suggestion in suggestions]})


@require_GET
def project_task_board(request: HttpRequest, project_id: int) -> JsonResponse:
    """Return the project's tasks grouped by status and ranked by opportunity."""

    project = _member_project(request, project_id)
    if isinstance(project, JsonResponse):
        return project

    board = build_task_board(project.tasks.all())
    columns = {
        status: [
            {
                'id': item.task.pk,
                'title': item.task.title,
                'type': item.task.type,
                'priority': item.task.priority,
                'status': item.task.status,
                'opportunity_score': item.opportunity_score,
            }
            for item in items
        ]
        for status, items in board.items()
    }
    return JsonResponse({'columns': columns})


@require_GET
def cron_link_scout(request: HttpRequest) -> JsonResponse:
    """Scheduled sweep over all active projects."""

    secret = getattr(settings, 'LINKSCOUT_CRON_SECRET', '')
    if secret:
        header = request.META.get('HTTP_AUTHORIZATION', '')
        if not hmac.compare_digest(header.encode(), f'Bearer {secret}'.encode()):
            return JsonResponse({'error': 'Unauthorized'}, status=401)

    results = run_link_scout_sweep()
    payload = [
        {'project_id': result.project_id, 'created': result.created, 'error': result.error}
        for result in results
    ]
    return JsonResponse({'ok': all(result.error is None for result in results), 'results': payload})
