from django.apps import AppConfig


class MoodsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "moods"
    verbose_name = "Moods"

    def ready(self) -> None:
        # Connect signal handlers (profile creation at signup).
        from . import signals  # noqa: F401
