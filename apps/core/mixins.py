"""
Reusable view mixins
"""
from django.http import Http404
from rest_framework.exceptions import NotFound


class NotFoundMessageMixin:
    """
    Replace DRF's generic "No X matches the given query." with a
    resource-specific 404 message.
    """
    not_found_message = 'Not found.'

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)
