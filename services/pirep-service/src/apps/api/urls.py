# services/pirep-service/src/apps/api/urls.py
"""
PIREP Service API URL Configuration
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.views import (
    PirepViewSet,
    AircraftViewSet,
    BidViewSet,
)

app_name = 'api'

router = DefaultRouter()
router.register(r'pireps', PirepViewSet, basename='pirep')
router.register(r'aircraft', AircraftViewSet, basename='aircraft')
router.register(r'bids', BidViewSet, basename='bid')

urlpatterns = [
    path('', include(router.urls)),
]

# =============================================================================
# API Endpoint Summary
# =============================================================================
#
# PIREPs (caller identified by X-Pilot-ID):
#   GET    /api/v1/pireps/                           - List own PIREPs (?state=)
#   POST   /api/v1/pireps/                           - Create PIREP
#   POST   /api/v1/pireps/prefile/                   - Prefile PIREP (in progress)
#   GET    /api/v1/pireps/{id}/                      - PIREP details
#   POST   /api/v1/pireps/{id}/file/                 - File
#   POST   /api/v1/pireps/{id}/submit/               - Submit for review
#   POST   /api/v1/pireps/{id}/accept/               - Accept
#   POST   /api/v1/pireps/{id}/reject/               - Reject
#   PUT    /api/v1/pireps/{id}/cancel/               - Cancel (also DELETE, POST)
#   GET    /api/v1/pireps/{id}/route/                - Stored route
#   POST   /api/v1/pireps/{id}/route/                - Replace route
#   GET    /api/v1/pireps/{id}/acars/position/       - Position reports
#   POST   /api/v1/pireps/{id}/acars/position/       - Add position reports
#
# Aircraft:
#   GET    /api/v1/aircraft/                         - List aircraft
#   GET    /api/v1/aircraft/{id}/                    - Aircraft details
#   POST   /api/v1/aircraft/recalculate_stats/       - Rebuild aircraft stats
#
# Bids:
#   GET    /api/v1/bids/                             - List own bids
#   POST   /api/v1/bids/                             - Bid on a flight
#   DELETE /api/v1/bids/{id}/                        - Remove bid
#
# =============================================================================
