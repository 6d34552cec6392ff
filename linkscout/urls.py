"""URL configuration for the link scout app.

This module defines the URL patterns for the app's views. It also
specifies the ``app_name`` to allow namespacing from the project URL
configuration.
"""

from django.urls import path

from . import views

app_name = 'linkscout'

urlpatterns = [
    path('projects/<int:project_id>/link-suggestions/', views.project_link_suggestions, name='link_suggestions'),
    path('projects/<int:project_id>/tasks/board/', views.project_task_board, name='task_board'),
    path('cron/link-scout/', views.cron_link_scout, name='cron_link_scout'),
]
