from django.apps import AppConfig


class LinkscoutConfig(AppConfig):
    """Configuration for the link scout Django app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'linkscout'
