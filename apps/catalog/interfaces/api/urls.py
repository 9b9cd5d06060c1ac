"""
Catalog API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.catalog.interfaces.api.v1.urls')),
]
