from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """
    Configuration for the Catalog application.

    Covers products, their variants and option types, prices scoped to
    market pricelists and stock items per location.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Catálogo'

    def ready(self):
        import apps.catalog.signals  # noqa: F401
