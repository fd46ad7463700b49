# file: fanclub_app/forms.py
"""Forms for the public site and the admin console.

Highlights
----------
- :class:`VoteForm` – going / not going with an optional note.
- :class:`PlayerProfileForm` – self-service profile edit; a photo can be
  uploaded or given as a URL.
- :class:`PlayerAdminForm`, :class:`SiteSettingsAdminForm` – admin forms with
  image uploads stored through :mod:`fanclub_app.services.storage`.
- :class:`MatchStatInlineForm`, :class:`MatchStatInlineFormSet` – one row per
  player and a single MOTM per match inside the match admin.
"""

from __future__ import annotations

from typing import Any

from django import forms
from django.core.exceptions import ValidationError
from django.forms.models import BaseInlineFormSet

from fanclub_app.models import Match, MatchStat, Player, SiteSettings
from fanclub_app.services.storage import upload_public_file


# --- Public site -----------------------------------------------------------


class VoteForm(forms.Form):
    """Answer to the attendance poll."""

    is_going = forms.TypedChoiceField(
        choices=(("1", "Going"), ("0", "Can't make it")),
        coerce=lambda v: v == "1",
        widget=forms.RadioSelect,
        label="Are you coming?",
    )
    note = forms.CharField(max_length=255, required=False, label="Note")


class _ImageUploadMixin:
    """Store an uploaded image and copy its public URL into a URL field.

    Subclasses set ``upload_fields`` to ``{upload_field: (url_field, kind)}``.
    """

    upload_fields: dict[str, tuple[str, str]] = {}

    def _apply_uploads(self, instance: Any) -> Any:
        for upload_field, (url_field, kind) in self.upload_fields.items():
            upload = self.cleaned_data.get(upload_field)  # type: ignore[attr-defined]
            if upload:
                setattr(instance, url_field, upload_public_file(upload, kind))
        return instance


class PlayerProfileForm(_ImageUploadMixin, forms.ModelForm):
    """Fields a player may change on their own profile."""

    upload_fields = {"image_file": ("image", "avatar")}

    image_file = forms.ImageField(required=False, label="Upload photo")

    class Meta:
        model = Player
        fields = ("nickname", "image", "height", "weight", "dob")
        widgets = {"dob": forms.DateInput(attrs={"type": "date"})}

    def save(self, commit: bool = True) -> Player:  # type: ignore[override]
        player = self._apply_uploads(super().save(commit=False))
        if commit:
            player.save()
        return player


# --- Admin -----------------------------------------------------------------


class PlayerAdminForm(_ImageUploadMixin, forms.ModelForm):
    upload_fields = {"image_file": ("image", "avatar")}

    image_file = forms.ImageField(required=False, label="Upload photo")

    class Meta:
        model = Player
        fields = "__all__"

    def save(self, commit: bool = True) -> Player:  # type: ignore[override]
        player = self._apply_uploads(super().save(commit=False))
        if commit:
            player.save()
        return player


class SiteSettingsAdminForm(_ImageUploadMixin, forms.ModelForm):
    upload_fields = {
        "logo_file": ("logo_url", "logo"),
        "banner_file": ("banner_url", "banner"),
    }

    logo_file = forms.ImageField(required=False, label="Upload logo")
    banner_file = forms.ImageField(required=False, label="Upload banner")

    class Meta:
        model = SiteSettings
        fields = ("team_name", "logo_url", "logo_file", "banner_url", "banner_file", "contact_phone")

    def save(self, commit: bool = True) -> SiteSettings:  # type: ignore[override]
        obj = self._apply_uploads(super().save(commit=False))
        if commit:
            obj.save()
        return obj


class MatchAdminForm(forms.ModelForm):
    """Match form; scores of upcoming fixtures are reset by ``Match.clean``."""

    class Meta:
        model = Match
        fields = "__all__"


class MatchStatInlineForm(forms.ModelForm):
    """Stat row whose MOTM flag is checked across the whole formset."""

    class Meta:
        model = MatchStat
        fields = ("player", "goals", "assists", "own_goals", "is_motm")

    def _get_validation_exclusions(self) -> set[str]:
        # The stored MOTM row may be the one being unticked in this submit.
        exclude = super()._get_validation_exclusions()
        exclude.add("is_motm")
        return exclude


class MatchStatInlineFormSet(BaseInlineFormSet):
    """Validate the stat rows of one match together."""

    def save(self, commit: bool = True) -> list[Any]:
        if commit:
            self._release_motm()
        return super().save(commit=commit)

    def _release_motm(self) -> None:
        """Clear stored MOTM rows being unticked or deleted before any row sets it."""
        released = []
        for form in self.initial_forms:
            if form.instance.pk is None or not form.initial.get("is_motm"):
                continue
            data = getattr(form, "cleaned_data", None) or {}
            if self._should_delete_form(form) or not data.get("is_motm"):
                released.append(form.instance.pk)
        if released:
            MatchStat.objects.filter(pk__in=released).update(is_motm=False)

    def clean(self) -> None:
        super().clean()
        seen: set[int] = set()
        motm_forms = []
        for form in self.forms:
            data = getattr(form, "cleaned_data", None)
            if not data or data.get("DELETE"):
                continue
            player = data.get("player")
            if player is None:
                continue
            if player.pk in seen:
                form.add_error("player", f"{player.name} is listed more than once.")
            seen.add(player.pk)
            if data.get("is_motm"):
                motm_forms.append(form)

        if len(motm_forms) > 1:
            raise ValidationError("Only one man of the match per match.")
