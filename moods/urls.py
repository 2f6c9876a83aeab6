from django.urls import path
from . import views

app_name = "moods"

urlpatterns = [
    path("", views.dashboard_view, name="dashboard"),
    path("checkin/", views.checkin_view, name="checkin"),
    path("settings/", views.settings_view, name="settings"),
    path("admin/", views.admin_view, name="admin"),
]
