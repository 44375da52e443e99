"""
Core views for the Kunafa Kingdom POS backend.
"""

from django.conf import settings
from django.http import HttpResponse
from django.views.decorators.http import require_GET

from rest_framework import generics, permissions

from .models import Store
from .serializers import StoreSerializer


@require_GET
def welcome(request):
    """Root route: plain-text welcome banner."""
    return HttpResponse(settings.WELCOME_MESSAGE, content_type="text/plain; charset=utf-8")


class StoreListView(generics.ListAPIView):
    """
    API endpoint listing all stores.

    GET /api/stores
    Stores are returned sorted by name so the branch selector is stable.
    """

    serializer_class = StoreSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_queryset(self):
        return Store.objects.order_by("name")
