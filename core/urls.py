from django.contrib import admin
from django.urls import path, include
from src.shared.views import setlang_get

urlpatterns = [
    path('admin/', admin.site.urls),
    path('lang/', setlang_get, name='setlang_get'),
    path('i18n/', include('django.conf.urls.i18n')),
    path('api/accounts/', include('src.accounts.urls')),
    path('api/properties/', include('src.properties.urls')),
    path('api/rooms/', include('src.rooms.urls')),
    path('api/bookings/', include('src.bookings.urls')),
    path('api/inquiries/', include('src.inquiries.urls')),
    path('api/analytics/', include('src.analytics.urls')),
]
