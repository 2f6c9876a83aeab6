from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.http import HttpResponse
from django.urls import path, include, reverse_lazy

from moods import views as mood_views

def health(_request):
    return HttpResponse("ok")

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("healthz/", health, name="health"),

    # Public auth routes
    path(
        "login/",
        auth_views.LoginView.as_view(redirect_authenticated_user=True),
        name="login",
    ),
    path("logout/", auth_views.LogoutView.as_view(), name="logout"),
    path("signup/", mood_views.signup_view, name="signup"),
    path(
        "forgot/",
        auth_views.PasswordResetView.as_view(
            template_name="registration/forgot.html",
            email_template_name="registration/reset_email.txt",
            subject_template_name="registration/reset_subject.txt",
            success_url=reverse_lazy("forgot_done"),
        ),
        name="forgot",
    ),
    path(
        "forgot/done/",
        auth_views.PasswordResetDoneView.as_view(template_name="registration/forgot_done.html"),
        name="forgot_done",
    ),
    path(
        "reset/<uidb64>/<token>/",
        auth_views.PasswordResetConfirmView.as_view(
            template_name="registration/reset.html",
            success_url=reverse_lazy("reset_done"),
        ),
        name="reset",
    ),
    path(
        "reset/done/",
        auth_views.PasswordResetCompleteView.as_view(template_name="registration/reset_done.html"),
        name="reset_done",
    ),

    # Protected pages (dashboard, check-in, settings, admin)
    path("", include("moods.urls")),
]
