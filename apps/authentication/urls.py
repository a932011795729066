"""
Authentication URL Configuration
"""
from django.urls import path
from . import views

urlpatterns = [
    path('login', views.login, name='admin-login'),
    path('update', views.update, name='admin-update'),
]
