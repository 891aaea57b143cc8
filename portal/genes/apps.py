from django.apps import AppConfig


class GenesConfig(AppConfig):
    name = "genes"
    verbose_name = "Genes and gene panels"
