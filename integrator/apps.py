from django.apps import AppConfig


class IntegratorConfig(AppConfig):
    name = 'integrator'
    default_auto_field = 'django.db.models.BigAutoField'

    orchestrator = None

    def ready(self):
        from integrator.sync import build_orchestrator

        # One orchestrator per process; its in-flight flag and last results
        # are what the HTTP layer reports.
        self.orchestrator = build_orchestrator()
