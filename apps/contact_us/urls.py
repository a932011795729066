"""
URL configuration for contact us app.
"""
from django.urls import path
from .views import ContactListView, ContactDetailView

urlpatterns = [
    path('contacts', ContactListView.as_view(), name='contact-list'),
    path('contacts/<str:pk>', ContactDetailView.as_view(), name='contact-detail'),
]
