# core/permissions.py
from rest_framework.permissions import BasePermission, SAFE_METHODS

def can_manage_grading(user) -> bool:
    """True si l'utilisateur peut créer/modifier/supprimer des barèmes."""
    if not (user and getattr(user, "is_authenticated", False)):
        return False
    # le rôle est porté par accounts.User
    return bool(getattr(user, "can_manage_grading", False))

class IsRegistrarOrAdmin(BasePermission):
    """
    - Lecture: tout utilisateur authentifié
    - Écriture: REGISTRAR/PRINCIPAL/ADMIN (ou superuser)
    """
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return can_manage_grading(request.user)
