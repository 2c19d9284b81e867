from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.views.generic import RedirectView

urlpatterns = [
    path('administrators/', admin.site.urls),
    path('', RedirectView.as_view(pattern_name='inventaris:index'), name='home'),
    path('', include('petugas.urls')),
    path('', include('inventaris.urls')),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
