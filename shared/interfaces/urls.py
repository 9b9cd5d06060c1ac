"""
Health check URLs.
"""
from django.urls import path

from .health_views import HealthCheckView, ReadinessCheckView, LivenessCheckView

urlpatterns = [
    path('', HealthCheckView.as_view(), name='health'),
    path('ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('live/', LivenessCheckView.as_view(), name='health-live'),
]
