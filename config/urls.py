"""
URL configuration for the venue booking backend.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # Django admin
    path('django-admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # Bookings (public + admin workflow)
    path('api/', include('apps.bookings.urls')),

    # Admin authentication
    path('api/admin/', include('apps.authentication.urls')),

    # Venue content
    path('api/', include('apps.packages.urls')),
    path('api/admin/', include('apps.contact_us.urls')),
    path('api/admin/', include('apps.gallery.urls')),

    # Webhooks
    path('api/razorpay/', include('apps.payments.urls')),
]
