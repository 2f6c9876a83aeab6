from django.contrib import admin

from .models import Mood, Profile

# The Django admin site is the out-of-band path for the admin flag:
# Profile.is_admin is editable here and nowhere in the app pages.
# Mood entries are read-only; the app never updates or deletes them.

admin.site.site_header = "MoodApp Admin"
admin.site.site_title = "MoodApp Admin"
admin.site.index_title = "Administration"


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "full_name", "email", "is_admin", "created_at"]
    list_filter = ["is_admin"]
    search_fields = ["user__username", "full_name", "email"]
    readonly_fields = ["created_at"]


@admin.register(Mood)
class MoodAdmin(admin.ModelAdmin):
    list_display = ["user", "mood", "created_at"]
    list_filter = ["mood"]
    search_fields = ["user__username", "note"]
    readonly_fields = ["user", "mood", "note", "created_at"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
