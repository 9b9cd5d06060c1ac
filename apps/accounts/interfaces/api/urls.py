"""
Accounts API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.accounts.interfaces.api.v1.urls')),
]
