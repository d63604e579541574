from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from src.accounts.permissions import IsOwnerRole
from .stats import dashboard_stats


class DashboardStatsView(APIView):
    permission_classes = [IsAuthenticated, IsOwnerRole]

    def get(self, request):
        return Response(dashboard_stats(request.user))
