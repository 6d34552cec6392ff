"""Mine link suggestions for one, several or all projects."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from linkscout.models import Project
from linkscout.services import generate_link_suggestions


class Command(BaseCommand):
    help = 'Scan blog pages for money-keyword mentions and create internal link tasks.'

    def add_arguments(self, parser) -> None:
        parser.add_argument('project_ids', nargs='*', type=int, help='Projects to scan (default: all).')
        parser.add_argument('--max-per-blog', type=int, default=None)
        parser.add_argument('--max-per-project', type=int, default=None)

    def handle(self, *args, **options) -> None:
        projects = Project.objects.order_by('pk')
        if options['project_ids']:
            projects = projects.filter(pk__in=options['project_ids'])

        if not projects.exists():
            self.stdout.write('No projects found to scan.')
            return

        for project in projects:
            try:
                suggestions = generate_link_suggestions(
                    project.pk,
                    max_per_blog=options['max_per_blog'],
                    max_per_project=options['max_per_project'],
                )
            except Exception as exc:
                raise CommandError(f'Link scout failed for project {project.name or project.pk}: {exc}') from exc
            count = len(suggestions)
            self.stdout.write(
                f"Project {project.name or project.pk}: created {count} "
                f"link suggestion task{'' if count == 1 else 's'}."
            )
