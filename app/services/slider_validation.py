"""
Per-language completeness check for slider drafts

A language track "has content" when its title, description, primary
button text or badge is filled in. Tracks with content must carry a
title, a description and a primary button (text and URL); tracks without
content are skipped, so a slider may be published in only some of the
active languages. Only a slider with no content in any track fails as a
whole.

Every track is checked and all messages are collected, so a submitting
user sees every problem at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.client.draft import SliderDraft
from app.i18n.codec import has_content
from app.i18n.locale import TrackSet

GENERAL = "general"

NO_CONTENT = "At least one language must have content"
TITLE_REQUIRED = "Title is required"
DESCRIPTION_REQUIRED = "Description is required"
PRIMARY_TEXT_REQUIRED = "Primary button text is required"
PRIMARY_URL_REQUIRED = "Primary button URL is required when text is provided"
SECONDARY_URL_REQUIRED = "Secondary button URL is required when text is provided"


@dataclass
class ValidationResult:
    is_valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)

    def messages(self) -> list[str]:
        return [f"{key}: {message}" for key, messages in self.errors.items() for message in messages]


def _text(value: dict[str, str], code: str) -> str:
    return value.get(code, "")


def _button(value: dict, code: str, part: str) -> str:
    return (value.get(code) or {}).get(part, "")


def track_has_content(draft: SliderDraft, code: str) -> bool:
    return any(
        has_content(candidate)
        for candidate in (
            _text(draft.title, code),
            _text(draft.description, code),
            _button(draft.primary_button, code, "text"),
            _text(draft.badge, code),
        )
    )


def _track_errors(draft: SliderDraft, code: str) -> list[str]:
    errors = []
    if not has_content(_text(draft.title, code)):
        errors.append(TITLE_REQUIRED)
    if not has_content(_text(draft.description, code)):
        errors.append(DESCRIPTION_REQUIRED)

    primary_text = _button(draft.primary_button, code, "text")
    if not has_content(primary_text):
        errors.append(PRIMARY_TEXT_REQUIRED)
    elif not has_content(_button(draft.primary_button, code, "url")):
        errors.append(PRIMARY_URL_REQUIRED)

    if has_content(_button(draft.secondary_button, code, "text")) and not has_content(
        _button(draft.secondary_button, code, "url")
    ):
        errors.append(SECONDARY_URL_REQUIRED)
    return errors


def validate_slider(draft: SliderDraft, tracks: TrackSet) -> ValidationResult:
    """Check a draft against the active language tracks.

    ``errors`` holds one (possibly empty) list per track. The ``"general"``
    key is present only when no track has any content.
    """
    with_content = [code for code in tracks.codes if track_has_content(draft, code)]
    if not with_content:
        return ValidationResult(is_valid=False, errors={GENERAL: [NO_CONTENT]})

    errors = {code: _track_errors(draft, code) if code in with_content else [] for code in tracks.codes}
    return ValidationResult(is_valid=not any(errors.values()), errors=errors)
