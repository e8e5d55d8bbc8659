"""
URL configuration for crimemap project.

Dashboard menerima filter kategori lewat query string: /?category=<slug>
"""
from django.conf import settings
from django.contrib import admin
from django.urls import path, re_path
from django.views.static import serve

from monitoring import views

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('api/dashboard/', views.dashboard_data, name='dashboard_data'),
    path('admin/', admin.site.urls),
]

# Serve media and static files explicitly
urlpatterns += [
    re_path(r'^static/(?P<path>.*)$', serve, {'document_root': settings.STATIC_ROOT}),
    re_path(r'^media/(?P<path>.*)$', serve, {'document_root': settings.MEDIA_ROOT}),
]
