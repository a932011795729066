"""
Management command to bootstrap a venue administrator account.
Safe to run repeatedly: an existing admin with the same email is left as is
unless --reset-password is given.
"""
from django.core.management.base import BaseCommand, CommandError

from apps.authentication.models import User
from apps.authentication.services.credential_service import update_credentials


class Command(BaseCommand):
    help = 'Create a venue administrator who can log in to the admin API'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Login email for the admin')
        parser.add_argument('--password', required=True, help='Login password for the admin')
        parser.add_argument(
            '--reset-password',
            action='store_true',
            help='Overwrite the password if the admin already exists',
        )

    def handle(self, *args, **options):
        email = options['email'].strip()
        password = options['password']

        if not email or not password:
            raise CommandError('Both --email and --password are required')

        existing = User.objects.filter(email__iexact=email).first()
        if existing:
            if options['reset_password']:
                update_credentials(existing, password=password)
                self.stdout.write(self.style.SUCCESS(f"Password reset for admin {existing.email}"))
            else:
                self.stdout.write(self.style.WARNING(f"Admin {existing.email} already exists, skipped"))
            return

        user = User.objects.create_user(email=email, password=password)
        self.stdout.write(self.style.SUCCESS(f"Admin created: {user.email}"))
