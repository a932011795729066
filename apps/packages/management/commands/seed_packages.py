"""
Management command to load the venue's standard package catalogue.
Existing packages are removed first.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.utils.constants import PRICING_FIXED, PRICING_PER_PERSON
from apps.packages.models import Package

NON_REFUNDABLE = '25% of the booking amount is non-refundable'

HALL_EXCLUDED = [
    'Diesel for Generator',
    'Halwai (Cook) Booking',
    'Dish Washing Services',
    'Waiter Services',
    'Coffee / Popcorn Machine and similar items',
    'Cooler (Jumbo) / Water Fan',
]


def _hall_included(decoration):
    return [
        "2 AC Rooms for Bride's Family",
        "2 AC Rooms for Groom's Family",
        '1 AC Hall for Baraksha / Tilak Ceremony',
        'Stage Hall for Ring Ceremony',
        'Food Serving Stalls',
        decoration,
        'All Kitchen Utensils',
        'RO Purified Drinking Water',
        'Soft Music with Two Speakers',
        'Flower Arrangement for Blessings',
    ]


def _catered_included(starters, main_course, stage):
    return [
        'Welcome Sweet (1 Variety)',
        starters,
        main_course,
        stage,
        'Decorated Gate & Gallery',
        'VIP Lounge Access',
        'Buffet Style Serving Stalls',
        '4 AC Rooms',
        '1 AC Hall and 1 Non-AC Hall',
        'Dance Floor with DJ',
    ]


def _tiers(*pairs):
    return [{'peopleCount': people, 'price': price} for people, price in pairs]


ENGAGEMENT_TERMS = [
    'Sweets and snacks served for 90-120 minutes',
    'Day Program: 11:00 AM - 4:00 PM',
    'Night Program: 7:00 PM - 11:00 PM',
    NON_REFUNDABLE,
]

SHAADI_TERMS = [
    'Sweets and snacks served for 90-120 minutes',
    'Program Timing: From 6:00 PM onwards',
    NON_REFUNDABLE,
]

PACKAGES = [
    {
        'name': 'Engagement Day Program',
        'category': 'Engagement',
        'pricing_type': PRICING_FIXED,
        'fixed_price': 25000,
        'included': _hall_included('Beautiful Flower Decorations'),
        'excluded': HALL_EXCLUDED,
        'terms': [NON_REFUNDABLE],
    },
    {
        'name': 'Engagement Night Program',
        'category': 'Engagement',
        'pricing_type': PRICING_FIXED,
        'fixed_price': 35000,
        'included': _hall_included('Elegant Flower Decorations'),
        'excluded': HALL_EXCLUDED,
        'terms': [NON_REFUNDABLE],
    },
    {
        'name': 'Engagement Gold Package',
        'category': 'Engagement',
        'pricing_type': PRICING_PER_PERSON,
        'per_person_pricing': _tiers((150, 180000), (200, 210000), (250, 240000)),
        'included': _catered_included(
            '5 Types of Starter Items',
            'Complete Main Course (3 Sabzi, 1 Dal, 1 Rice)',
            'Stage & Selfie Point Setup',
        ),
        'terms': ENGAGEMENT_TERMS,
    },
    {
        'name': 'Engagement Platinum Package',
        'category': 'Engagement',
        'pricing_type': PRICING_PER_PERSON,
        'per_person_pricing': _tiers((150, 210000), (200, 240000), (250, 270000)),
        'included': _catered_included(
            '8 Types of Starter Items',
            'Grand Main Course (4 Sabzi, 2 Dal, 2 Rice)',
            'Stage & Selfie Point Setup',
        ),
        'terms': ENGAGEMENT_TERMS,
    },
    {
        'name': 'Shaadi Gold Package',
        'category': 'Shaadi',
        'pricing_type': PRICING_PER_PERSON,
        'per_person_pricing': _tiers((200, 230000), (250, 260000), (300, 290000), (400, 350000)),
        'included': _catered_included(
            '7 Types of Starter Items',
            'Complete Main Course (3 Sabzi, 1 Dal, 1 Rice)',
            'Stage, Mandap & Selfie Point Setup',
        ),
        'terms': SHAADI_TERMS,
    },
    {
        'name': 'Shaadi Platinum Package',
        'category': 'Shaadi',
        'pricing_type': PRICING_PER_PERSON,
        'per_person_pricing': _tiers((200, 260000), (250, 290000), (300, 320000), (400, 380000)),
        'included': _catered_included(
            '10 Types of Starter Items',
            'Grand Main Course (4 Sabzi, 2 Dal, 2 Rice)',
            'Stage, Mandap & Selfie Point Setup',
        ),
        'terms': SHAADI_TERMS,
    },
]


class Command(BaseCommand):
    help = 'Replace all packages with the standard Engagement and Shaadi catalogue'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted, _ = Package.objects.all().delete()
            for data in PACKAGES:
                Package.objects.create(**data)

        self.stdout.write(f"Removed {deleted} existing package(s)")
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(PACKAGES)} packages"))
