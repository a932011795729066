"""
Custom permissions for the venue booking backend
"""
from rest_framework import permissions
from rest_framework.exceptions import PermissionDenied


class IsVenueAdmin(permissions.BasePermission):
    """
    Permission check for venue administrators.

    A request without any Authorization header is refused with 403
    ("No token provided"); a header carrying an invalid or expired token is
    rejected by JWT authentication with 401 before this check runs.
    """
    message = "Only venue administrators can perform this action"

    def has_permission(self, request, view):
        if not request.META.get('HTTP_AUTHORIZATION'):
            raise PermissionDenied("No token provided")

        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.is_staff
        )


class IsVenueAdminOrReadOnly(IsVenueAdmin):
    """Allow anyone to read, administrators to write"""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
