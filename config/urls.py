# config/urls.py

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Monitoramento
    path('', include('apps.core.urls')),

    # API JSON
    path('api/', include('apps.board.urls')),
    path('api/dashboard/', include('apps.relatorios.urls')),
]
