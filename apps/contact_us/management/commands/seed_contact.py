"""
Management command to reset the venue contact record.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.contact_us.models import Contact

HALL_CONTACT = {
    'phone': '8960306353',
    'location': 'Sanjarpur To Saraimir Mainroad, Sanjar Pur, Azamgarh',
    'social_media': {
        'facebook': 'https://www.facebook.com/people/The-Heritage-Marriage-Hall-Hotel/61551881138942/?_rdr',
        'instagram': 'https://www.instagram.com/heritage.sanjarpur/',
    },
}


class Command(BaseCommand):
    help = 'Replace all contact records with the hall contact'

    def add_arguments(self, parser):
        parser.add_argument('--phone', default=HALL_CONTACT['phone'])
        parser.add_argument('--location', default=HALL_CONTACT['location'])

    def handle(self, *args, **options):
        with transaction.atomic():
            Contact.objects.all().delete()
            contact = Contact.objects.create(
                phone=options['phone'],
                location=options['location'],
                social_media=dict(HALL_CONTACT['social_media']),
            )

        self.stdout.write(self.style.SUCCESS(f"Hall contact inserted: {contact.id}"))
