"""
Venue administrator user model
"""
import uuid

from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Administrator account for the venue back office.

    Public visitors never authenticate; every row here is an admin that can
    log in with email and password and receives a bearer token.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(unique=True)

    # Status
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=True)
    # is_superuser provided by PermissionsMixin
    # last_login provided by AbstractBaseUser
    # password provided by AbstractBaseUser

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['created_at']

    def __str__(self):
        return self.email
