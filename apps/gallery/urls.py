from django.urls import path
from . import views

urlpatterns = [
    path('gallery', views.GalleryListView.as_view(), name='gallery-list'),
    path('gallery/upload', views.GalleryUploadView.as_view(), name='gallery-upload'),
    path('gallery/<str:pk>', views.GalleryImageDetailView.as_view(), name='gallery-detail'),
]
