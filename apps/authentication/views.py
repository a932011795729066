"""
Authentication views
"""
import logging

from django.contrib.auth import authenticate
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.core.permissions import IsVenueAdmin
from .serializers import (
    LoginSerializer,
    TokenResponseSerializer,
    UpdateCredentialsSerializer,
    MessageResponseSerializer,
)
from .services.credential_service import update_credentials

logger = logging.getLogger(__name__)


@extend_schema(
    summary="Admin login",
    description="Exchange administrator email and password for a bearer token",
    request=LoginSerializer,
    responses={
        200: TokenResponseSerializer,
        400: OpenApiResponse(description="Bad Request - Missing fields"),
        401: OpenApiResponse(description="Invalid credentials")
    },
    tags=['Authentication']
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password"""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate(
        request,
        email=serializer.validated_data['email'],
        password=serializer.validated_data['password'],
    )
    if user is None or not user.is_staff:
        logger.warning(f"Failed admin login for {serializer.validated_data['email']}")
        raise AuthenticationFailed('Invalid credentials')

    refresh = RefreshToken.for_user(user)
    refresh['email'] = user.email

    logger.info(f"Admin {user.id} logged in")
    return Response({
        'token': str(refresh.access_token),
        'refresh': str(refresh),
    })


@extend_schema(
    summary="Update admin credentials",
    description="Change the logged-in administrator's email and/or password",
    request=UpdateCredentialsSerializer,
    responses={
        200: MessageResponseSerializer,
        400: OpenApiResponse(description="Bad Request - Email already in use"),
        401: OpenApiResponse(description="Unauthorized"),
        403: OpenApiResponse(description="No token provided")
    },
    tags=['Authentication']
)
@api_view(['PUT'])
@permission_classes([IsVenueAdmin])
def update(request):
    """Update the current admin's email and password"""
    serializer = UpdateCredentialsSerializer(data=request.data, context={'user': request.user})
    serializer.is_valid(raise_exception=True)

    update_credentials(
        request.user,
        email=serializer.validated_data.get('email'),
        password=serializer.validated_data.get('password'),
    )

    return Response({'message': 'Admin updated successfully'})
