"""
Serializers for the venue contact record.
"""
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_serializer, OpenApiExample

from .models import Contact


class SocialMediaSerializer(serializers.Serializer):
    facebook = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    instagram = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)


@extend_schema_serializer(
    examples=[
        OpenApiExample(
            'Venue Contact',
            summary='Contact record',
            value={
                'phone': '8960306353',
                'location': 'Sanjarpur To Saraimir Mainroad, Sanjar Pur, Azamgarh',
                'socialMedia': {
                    'facebook': 'https://www.facebook.com/people/The-Heritage-Marriage-Hall-Hotel/61551881138942/',
                    'instagram': 'https://www.instagram.com/heritage.sanjarpur/'
                }
            },
            request_only=True,
        ),
    ]
)
class ContactSerializer(serializers.ModelSerializer):
    """
    Contact record in the site's camelCase format.
    On update, socialMedia links are merged into the stored ones.
    """
    phone = serializers.CharField(
        max_length=20,
        error_messages={
            'required': 'Phone is required',
            'blank': 'Phone cannot be blank'
        }
    )
    location = serializers.CharField(
        max_length=500,
        error_messages={
            'required': 'Location is required',
            'blank': 'Location cannot be blank'
        }
    )
    socialMedia = SocialMediaSerializer(source='social_media', required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Contact
        fields = ['id', 'phone', 'location', 'socialMedia', 'createdAt', 'updatedAt']
        read_only_fields = ['id']

    def create(self, validated_data):
        social_media = dict(validated_data.pop('social_media', {}))
        return Contact.objects.create(social_media=social_media, **validated_data)

    def update(self, instance, validated_data):
        if 'social_media' in validated_data:
            merged = dict(instance.social_media or {})
            merged.update(validated_data.pop('social_media'))
            instance.social_media = merged
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        return instance


class ContactListResponseSerializer(serializers.Serializer):
    contacts = ContactSerializer(many=True)
