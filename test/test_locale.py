"""
Language track and locale helper tests
"""

from app.i18n.locale import (
    LanguageTrack,
    TrackSet,
    get_language_info,
    is_rtl_locale,
    language_name,
    parse_accept_language,
)


class TestTrackSet:
    def test_default_comes_first(self):
        tracks = TrackSet.from_codes(["en", "fr", "tr"], default="tr")
        assert tracks.codes == ("tr", "en", "fr")
        assert tracks.default.code == "tr"

    def test_duplicates_are_dropped(self):
        tracks = TrackSet([LanguageTrack("tr", is_default=True), LanguageTrack("tr"), LanguageTrack("en")])
        assert tracks.codes == ("tr", "en")

    def test_first_track_promoted_when_no_default(self):
        tracks = TrackSet.from_codes(["tr", "en"])
        assert tracks.default.code == "tr"
        assert [t.is_default for t in tracks] == [True, False]

    def test_only_one_default(self):
        tracks = TrackSet([LanguageTrack("en", is_default=True), LanguageTrack("tr", is_default=True)])
        assert sum(t.is_default for t in tracks) == 1
        assert tracks.default.code == "en"

    def test_empty_set(self):
        tracks = TrackSet()
        assert len(tracks) == 0
        assert tracks.default is None
        assert tracks.codes == ()

    def test_from_languages_drops_inactive_rows(self):
        tracks = TrackSet.from_languages(
            [
                {"code": "tr", "isActive": True, "isDefault": True},
                {"code": "en", "isActive": True, "isDefault": False},
                {"code": "de", "isActive": False, "isDefault": False},
            ]
        )
        assert tracks.codes == ("tr", "en")

    def test_from_languages_accepts_snake_case(self):
        tracks = TrackSet.from_languages([{"code": "en", "is_active": True, "is_default": True}, {"code": "tr"}])
        assert tracks.default.code == "en"
        assert "tr" in tracks

    def test_names_filled_from_language_table(self):
        tracks = TrackSet.from_codes(["tr"])
        assert tracks.default.name == "Türkçe"

    def test_equality(self):
        assert TrackSet.from_codes(["tr", "en"], "tr") == TrackSet.from_codes(["en", "tr"], "tr")
        assert TrackSet.from_codes(["tr", "en"], "tr") != TrackSet.from_codes(["tr", "en"], "en")


class TestLocaleHelpers:
    def test_is_rtl(self):
        assert is_rtl_locale("ar") is True
        assert is_rtl_locale("ar-SA") is True
        assert is_rtl_locale("tr") is False

    def test_language_name_uses_base(self):
        assert language_name("en-GB") == "English"
        assert language_name("xx") == "xx"

    def test_language_info(self):
        assert get_language_info("he") == {"code": "he", "name": "he", "is_rtl": True}


class TestParseAcceptLanguage:
    def test_exact_match(self):
        assert parse_accept_language("en", ["tr", "en"]) == "en"

    def test_quality_order(self):
        assert parse_accept_language("fr;q=0.9,en;q=0.8,tr;q=0.95", ["tr", "en"]) == "tr"

    def test_base_language_match(self):
        assert parse_accept_language("tr-TR", ["tr", "en"]) == "tr"

    def test_no_match(self):
        assert parse_accept_language("de", ["tr", "en"]) is None

    def test_empty_header(self):
        assert parse_accept_language("", ["tr"]) is None
