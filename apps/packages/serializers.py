"""
Package serializers
"""
from rest_framework import serializers

from apps.core.utils.constants import PRICING_FIXED, PRICING_PER_PERSON, PRICING_TYPES
from .models import Package


class PricingTierSerializer(serializers.Serializer):
    """One people-count to price tier"""
    peopleCount = serializers.IntegerField(min_value=1)
    price = serializers.IntegerField(min_value=0)


class MenuSerializer(serializers.Serializer):
    welcomeSweets = serializers.ListField(child=serializers.CharField(), required=False)
    starters = serializers.ListField(child=serializers.CharField(), required=False)
    mainCourse = serializers.ListField(child=serializers.CharField(), required=False)


def _plain(value):
    """Strip serializer OrderedDicts down to JSON-ready dicts and lists."""
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


class PackageSerializer(serializers.ModelSerializer):
    """
    Serializer for reading and writing packages.

    Updates merge into the stored package: lists are replaced, the menu is
    merged section by section, and scalars are overwritten.
    """
    pricingType = serializers.ChoiceField(source='pricing_type', choices=PRICING_TYPES)
    fixedPrice = serializers.IntegerField(source='fixed_price', min_value=0, required=False, allow_null=True)
    perPersonPricing = PricingTierSerializer(source='per_person_pricing', many=True, required=False)
    included = serializers.ListField(child=serializers.CharField(), required=False)
    excluded = serializers.ListField(child=serializers.CharField(), required=False)
    menu = MenuSerializer(required=False)
    terms = serializers.ListField(child=serializers.CharField(), required=False)
    images = serializers.ListField(child=serializers.CharField(), required=False)
    createdBy = serializers.UUIDField(source='created_by_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Package
        fields = [
            'id', 'name', 'category', 'description',
            'pricingType', 'fixedPrice', 'perPersonPricing',
            'included', 'excluded', 'menu', 'terms', 'images',
            'createdBy', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id']

    def validate(self, attrs):
        instance = self.instance
        pricing_type = attrs.get('pricing_type', getattr(instance, 'pricing_type', None))
        fixed_price = attrs.get('fixed_price', getattr(instance, 'fixed_price', None))
        tiers = attrs.get('per_person_pricing', getattr(instance, 'per_person_pricing', None))

        if pricing_type == PRICING_FIXED and fixed_price is None:
            raise serializers.ValidationError({'fixedPrice': 'Required when pricingType is fixed'})
        if pricing_type == PRICING_PER_PERSON and not tiers:
            raise serializers.ValidationError(
                {'perPersonPricing': 'At least one tier is required when pricingType is perPerson'}
            )
        return attrs

    def create(self, validated_data):
        return Package.objects.create(**_plain(validated_data))

    def update(self, instance, validated_data):
        for attr, value in _plain(validated_data).items():
            if isinstance(value, dict):
                merged = dict(getattr(instance, attr) or {})
                merged.update(value)
                value = merged
            setattr(instance, attr, value)
        instance.save()
        return instance
