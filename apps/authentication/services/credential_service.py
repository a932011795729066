"""
Administrator credential management
"""
import logging
from typing import Optional

from django.db import transaction

from apps.authentication.models import User

logger = logging.getLogger(__name__)


def update_credentials(user: User, email: Optional[str] = None, password: Optional[str] = None) -> User:
    """
    Change an administrator's login email and/or password.

    A supplied password is always hashed before it is stored; fields that are
    not supplied are left untouched.

    Args:
        user: Administrator to update
        email: New login email
        password: New plain-text password

    Returns:
        The updated user
    """
    update_fields = []

    if email:
        user.email = User.objects.normalize_email(email)
        update_fields.append('email')

    if password:
        user.set_password(password)
        update_fields.append('password')

    if update_fields:
        with transaction.atomic():
            user.save(update_fields=update_fields)
        logger.info(f"Updated credentials for admin {user.id}: {', '.join(update_fields)}")

    return user
