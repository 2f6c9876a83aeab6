from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import UserCreationForm
from django.utils.translation import gettext_lazy as _

from .models import Mood, Profile


class CheckInForm(forms.ModelForm):
    class Meta:
        model = Mood
        fields = ["mood", "note"]

        labels = {
            "mood": _("Select your mood"),
            "note": _("Add a note (optional)"),
        }

        widgets = {
            "mood": forms.RadioSelect(attrs={
                "class": "mood-field",
                "aria-label": _("Mood"),
            }),
            "note": forms.Textarea(attrs={
                "rows": 4,
                "placeholder": _(
                    "What's on your mind? Any specific thoughts or events affecting your mood..."
                ),
            }),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # Mood is required and restricted to the model choices (no blank option).
        self.fields["mood"].required = True
        self.fields["mood"].choices = list(Mood.Label.choices)
        self.fields["note"].required = False

    def clean_note(self):
        """Trim whitespace; an empty note is stored as NULL."""
        note = (self.cleaned_data.get("note") or "").strip()
        return note or None


class ProfileForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ["username", "full_name"]
        labels = {
            "username": _("Username"),
            "full_name": _("Display name"),
        }

    def clean_username(self):
        return (self.cleaned_data.get("username") or "").strip() or None

    def clean_full_name(self):
        return (self.cleaned_data.get("full_name") or "").strip() or None


class SignUpForm(UserCreationForm):
    email = forms.EmailField(label=_("Email"), required=True)
    full_name = forms.CharField(label=_("Full name"), max_length=200, required=False)

    class Meta(UserCreationForm.Meta):
        model = get_user_model()
        fields = ("username", "email")

    def save(self, commit=True):
        user = super().save(commit=False)
        user.email = self.cleaned_data["email"]
        if commit:
            user.save()
        return user
