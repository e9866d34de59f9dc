from django.apps import AppConfig


class BackendConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backend'

    def ready(self):
        # Pick the remote or null client once, at startup.
        from .client import get_data_service

        get_data_service()
