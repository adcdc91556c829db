# ==================== SPOTSHARE_BACKEND/URLS.PY ====================
from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from users.views import UserViewSet
from spots.views import SpotViewSet
from bookings.views import BookingViewSet

# Create router and register viewsets
router = DefaultRouter()
router.register(r'spots', SpotViewSet, basename='spot')
router.register(r'bookings', BookingViewSet, basename='booking')

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API versioning
    path('api/v1/', include([
        # Authentication endpoints
        path('auth/', include([
            path('register/', UserViewSet.as_view({'post': 'register'}), name='register'),
            path('login/', UserViewSet.as_view({'post': 'login'}), name='login'),
            path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
            path('profile/', UserViewSet.as_view({'get': 'profile', 'put': 'profile'},
                                                permission_classes=[permissions.IsAuthenticated]), name='profile'),
        ])),

        # API routes
        path('', include(router.urls)),
    ])),
]
