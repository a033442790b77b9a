from django.db import models

# Create your models here.
class School(models.Model):
    """
    Établissement propriétaire d'un barème de notes.
    Créé/supprimé via l'admin Django; lecture seule pour la gestion des barèmes.
    """
    name = models.CharField(max_length=255)
    address = models.TextField(blank=True)
    phone = models.CharField(max_length=32, blank=True)
    website = models.URLField(blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
