"""
Accounts API v1 URLs.
"""
from django.urls import path

from .views import RoleListCreateView, RoleDetailView, RolePermissionsView

urlpatterns = [
    path('roles/', RoleListCreateView.as_view(), name='role-list-create'),
    path('roles/permissions/', RolePermissionsView.as_view(), name='role-permissions'),
    path('roles/<str:role_id>/', RoleDetailView.as_view(), name='role-detail'),
]
