from django.apps import AppConfig


class DemoDocsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'demodocs'
    verbose_name = 'Demo documentation'
