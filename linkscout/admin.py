from django.contrib import admin

from .models import Keyword, LinkSuggestion, Page, Project, Task, Workspace


@admin.register(Workspace)
class WorkspaceAdmin(admin.ModelAdmin):
    list_display = ('name', 'created_at')
    search_fields = ('name',)
    filter_horizontal = ('members',)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('name', 'workspace', 'status', 'created_at')
    list_filter = ('status', 'workspace')
    search_fields = ('name',)


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ('url', 'project', 'title', 'page_type', 'created_at')
    list_filter = ('project', 'page_type')
    search_fields = ('url', 'title')


@admin.register(Keyword)
class KeywordAdmin(admin.ModelAdmin):
    list_display = ('phrase', 'project', 'target_page', 'created_at')
    list_filter = ('project',)
    search_fields = ('phrase',)


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('title', 'project', 'type', 'status', 'priority', 'score_current', 'score_potential')
    list_filter = ('project', 'type', 'status', 'priority')
    search_fields = ('title', 'description')


@admin.register(LinkSuggestion)
class LinkSuggestionAdmin(admin.ModelAdmin):
    list_display = ('anchor', 'source_page', 'target_page', 'confidence', 'created_at')
    list_filter = ('project',)
    search_fields = ('anchor',)
