"""
Custom user manager for venue administrators
"""
from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """
    Manager for email/password administrator accounts.
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save an administrator.
        """
        if not email:
            raise ValueError('The Email field must be set')

        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('is_staff', True)

        user = self.model(email=self.normalize_email(email), **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser with email and password.
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password=password, **extra_fields)

    def first_admin(self):
        """Oldest active administrator, used as the notification recipient."""
        return self.filter(is_active=True, is_staff=True).order_by('created_at').first()
