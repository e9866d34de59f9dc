"""
Portfolio app views

Read-only JSON view of the portfolio snapshot.
"""
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.client import get_data_service
from .serializers import PortfolioSnapshotSerializer
from .services import PortfolioService


class PortfolioSnapshotView(APIView):
    """
    GET /api/portfolio/ - profile, skills, journey and projects in one payload.

    A failed read is reported in ``error`` with a 502 status.
    """

    permission_classes = [AllowAny]

    def get(self, request):
        snapshot = PortfolioService.load_snapshot(get_data_service())
        serializer = PortfolioSnapshotSerializer(snapshot)
        response_status = status.HTTP_502_BAD_GATEWAY if snapshot.error else status.HTTP_200_OK
        return Response(serializer.data, status=response_status)
