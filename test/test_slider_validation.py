"""
Per-language completeness validation tests
"""

import pytest

from app.client.draft import SliderDraft
from app.exceptions import SliderValidationError
from app.i18n.locale import TrackSet
from app.services.slider_validation import (
    DESCRIPTION_REQUIRED,
    GENERAL,
    NO_CONTENT,
    PRIMARY_TEXT_REQUIRED,
    PRIMARY_URL_REQUIRED,
    SECONDARY_URL_REQUIRED,
    TITLE_REQUIRED,
    track_has_content,
    validate_slider,
)


def _complete_turkish(tracks: TrackSet) -> SliderDraft:
    draft = SliderDraft.blank(tracks)
    draft.title["tr"] = "Başlık"
    draft.description["tr"] = "Açıklama"
    draft.primary_button["tr"] = {"text": "Keşfet", "url": "/tr"}
    return draft


class TestTrackHasContent:
    def test_blank_track(self, tracks):
        assert track_has_content(SliderDraft.blank(tracks), "tr") is False

    @pytest.mark.parametrize("field", ["title", "description", "badge"])
    def test_text_fields_count(self, tracks, field):
        draft = SliderDraft.blank(tracks)
        getattr(draft, field)["en"] = "x"
        assert track_has_content(draft, "en") is True
        assert track_has_content(draft, "tr") is False

    def test_primary_button_text_counts(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.primary_button["en"]["text"] = "Go"
        assert track_has_content(draft, "en") is True

    def test_whitespace_counts_as_content(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.title["tr"] = "  "
        assert track_has_content(draft, "tr") is True

        result = validate_slider(draft, tracks)
        assert result.errors == {"tr": [DESCRIPTION_REQUIRED, PRIMARY_TEXT_REQUIRED], "en": []}

    def test_subtitle_and_statistics_do_not_count(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.subtitle["tr"] = "Alt başlık"
        draft.statistics[0]["tr"] = {"value": "10", "label": "Yıl"}
        assert track_has_content(draft, "tr") is False


class TestValidateSlider:
    def test_all_tracks_empty(self, tracks):
        result = validate_slider(SliderDraft.blank(tracks), tracks)
        assert result.is_valid is False
        assert result.errors == {GENERAL: [NO_CONTENT]}

    def test_default_complete_other_empty_is_valid(self, tracks):
        result = validate_slider(_complete_turkish(tracks), tracks)
        assert result.is_valid is True
        assert result.errors == {"tr": [], "en": []}

    def test_missing_title_on_track_with_content(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.description["tr"] = "x"
        draft.primary_button["tr"] = {"text": "Go", "url": "/go"}
        result = validate_slider(draft, tracks)
        assert result.is_valid is False
        assert result.errors["tr"] == [TITLE_REQUIRED]
        assert result.errors["en"] == []
        assert GENERAL not in result.errors

    def test_all_messages_collected(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.badge["en"] = "New"
        result = validate_slider(draft, tracks)
        assert result.errors["en"] == [TITLE_REQUIRED, DESCRIPTION_REQUIRED, PRIMARY_TEXT_REQUIRED]

    def test_primary_url_required_with_text(self, tracks):
        draft = _complete_turkish(tracks)
        draft.primary_button["tr"]["url"] = ""
        assert validate_slider(draft, tracks).errors["tr"] == [PRIMARY_URL_REQUIRED]

    def test_secondary_url_required_with_text(self, tracks):
        draft = _complete_turkish(tracks)
        draft.secondary_button["tr"]["text"] = "Daha fazla"
        assert validate_slider(draft, tracks).errors["tr"] == [SECONDARY_URL_REQUIRED]

    def test_secondary_url_alone_is_fine(self, tracks):
        draft = _complete_turkish(tracks)
        draft.secondary_button["tr"]["url"] = "/more"
        assert validate_slider(draft, tracks).is_valid is True

    def test_every_track_checked(self, tracks):
        draft = _complete_turkish(tracks)
        draft.title["en"] = "Title"
        result = validate_slider(draft, tracks)
        assert result.errors["tr"] == []
        assert result.errors["en"] == [DESCRIPTION_REQUIRED, PRIMARY_TEXT_REQUIRED]

    def test_messages_are_prefixed_with_track(self, tracks):
        draft = SliderDraft.blank(tracks)
        draft.title["en"] = "Title"
        messages = validate_slider(draft, tracks).messages()
        assert f"en: {DESCRIPTION_REQUIRED}" in messages

    def test_single_track(self):
        only_tr = TrackSet.from_codes(["tr"])
        result = validate_slider(_complete_turkish(only_tr), only_tr)
        assert result.is_valid is True
        assert list(result.errors) == ["tr"]


class TestSliderValidationError:
    def test_empty_lists_are_dropped(self):
        exc = SliderValidationError({"tr": [TITLE_REQUIRED], "en": []})
        assert exc.errors == {"tr": [TITLE_REQUIRED]}
        assert exc.status_code == 400
        assert exc.details == {"errors": {"tr": [TITLE_REQUIRED]}}
