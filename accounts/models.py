from django.db import models
from django.contrib.auth.models import AbstractUser
# Create your models here.

class User(AbstractUser):
    class Role(models.TextChoices):
        TEACHER = "TEACHER"
        REGISTRAR = "REGISTRAR"
        PRINCIPAL = "PRINCIPAL"
        ADMIN = "ADMIN"
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.TEACHER)

    GRADING_ROLES = (Role.REGISTRAR, Role.PRINCIPAL, Role.ADMIN)

    @property
    def can_manage_grading(self):
        """Registrar, principal, admin (ou superuser) gèrent les barèmes."""
        return self.is_superuser or self.role in self.GRADING_ROLES
