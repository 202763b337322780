"""
Slider collection store

Owns the admin console's in-memory slider list and performs the network
side of every list operation:

- apply the change locally first (optimistic),
- persist it (one request per changed entry, issued together),
- on success keep the local state, on any failure reload the whole
  collection from the API.

Failures are never retried; the reload is the recovery. If the reload
fails too, the entries from before the rejected change are put back. An
action that is already in flight (same key) is ignored, which stands in for
a disabled button while a request is pending.

Different actions may overlap. Writes to the same slider are sent one at a
time, each carrying the version the previous one returned, so the client
never trips its own concurrency check.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from app.client.draft import SliderDraft
from app.client.gateway import SliderGateway
from app.client.reconcile import (
    Action,
    CollectionStatus,
    EntrySaved,
    Loaded,
    MoveEntry,
    PersistenceConfirmed,
    RemoveEntry,
    ResyncFailed,
    ResyncStarted,
    SliderCollection,
    SliderEntry,
    ToggleActive,
    changed_orders,
    join,
    reduce,
)
from app.exceptions import PersistenceError, SliderValidationError
from app.i18n.locale import TrackSet
from app.services.slider_validation import validate_slider

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]

_LEVELS = {"error": logging.ERROR, "warning": logging.WARNING}


def log_notifier(level: str, message: str) -> None:
    logger.log(_LEVELS.get(level, logging.INFO), message)


class SliderCollectionStore:
    def __init__(self, gateway: SliderGateway, tracks: TrackSet, notify: Notifier | None = None):
        self.gateway = gateway
        self.tracks = tracks
        self.state = SliderCollection()
        self._notify = notify or log_notifier
        self._in_flight: set[str] = set()
        self._write_locks: dict[int, asyncio.Lock] = {}

    @classmethod
    async def connect(cls, gateway: SliderGateway, notify: Notifier | None = None) -> SliderCollectionStore:
        """Fetch the active languages, build the store and load the collection."""
        tracks = TrackSet.from_languages(await gateway.fetch_languages())
        store = cls(gateway, tracks, notify)
        await store.load()
        return store

    # ── State ─────────────────────────────────────────────────────────────────

    @property
    def entries(self) -> tuple[SliderEntry, ...]:
        return self.state.entries

    @property
    def status(self) -> CollectionStatus:
        return self.state.status

    def is_busy(self, key: str) -> bool:
        return key in self._in_flight

    def dispatch(self, action: Action) -> SliderCollection:
        self.state = reduce(self.state, action)
        return self.state

    def _claim(self, key: str) -> bool:
        if key in self._in_flight:
            logger.debug("Ignoring %s, already in flight", key)
            return False
        self._in_flight.add(key)
        return True

    def _settled_status(self, finished: str | None = None) -> CollectionStatus:
        """Status once ``finished`` is done, given the operations still in flight."""
        pending = self._in_flight - {finished}
        if "reorder" in pending:
            return CollectionStatus.REORDERING
        if any(key.startswith(("toggle:", "remove:")) for key in pending):
            return CollectionStatus.PENDING
        return CollectionStatus.IDLE

    def _write_lock(self, slider_id: int) -> asyncio.Lock:
        return self._write_locks.setdefault(slider_id, asyncio.Lock())

    async def _save(self, slider_id: int, changes: dict[str, Any], version: int) -> dict[str, Any]:
        """Send one update, after any earlier write to the same slider.

        The version is read from the current state when the request goes
        out; ``version`` is used only if the entry is no longer listed.
        """
        async with self._write_lock(slider_id):
            entry = self.state.find(slider_id)
            current = entry.version if entry is not None else version
            record = await self.gateway.update_slider(slider_id, {**changes, "version": current})
            self.dispatch(EntrySaved(record))
            return record

    def _fail(self, message: str, errors: list[tuple[Any, Exception]]) -> None:
        for key, error in errors:
            logger.warning("%s (slider %s): %s", message, key, error)
        self._notify("error", message)

    # ── Reads ─────────────────────────────────────────────────────────────────

    async def load(
        self, fallback: tuple[SliderEntry, ...] | None = None, finished: str | None = None
    ) -> bool:
        """Replace the local collection with the store's. Returns False on failure.

        On failure the local entries are kept, or replaced by ``fallback``
        when one is given. ``finished`` names the operation that asked for
        the reload, so the status reflects only what is still in flight.
        """
        try:
            records = await self.gateway.fetch_sliders()
        except PersistenceError as e:
            logger.warning("Loading sliders failed: %s", e.message)
            self._notify("error", "Sliders could not be loaded")
            self.dispatch(ResyncFailed(fallback, self._settled_status(finished)))
            return False
        entries = tuple(SliderEntry.from_record(record) for record in records)
        self.dispatch(Loaded(entries, self._settled_status(finished)))
        return True

    async def resync(self, fallback: tuple[SliderEntry, ...] | None = None, finished: str | None = None) -> bool:
        """Discard local state and reload the authoritative collection."""
        logger.warning("Resynchronising slider collection")
        self.dispatch(ResyncStarted())
        return await self.load(fallback, finished)

    # ── List operations ───────────────────────────────────────────────────────

    async def move_entry(self, from_index: int, to_index: int) -> bool:
        """Move one slider and persist the new order of every shifted slider.

        Out-of-range indices are ignored. Returns True when the new order
        was saved, False when nothing happened or the collection had to be
        reloaded.
        """
        if not self._claim("reorder"):
            return False
        try:
            before = self.state
            if self.dispatch(MoveEntry(from_index, to_index)) is before:
                return False

            changes = changed_orders(before.entries, self.state.entries)
            result = await join(
                {change.id: self._save(change.id, {"order": change.order}, change.version) for change in changes}
            )
            if not result.all_ok:
                self._fail("Slider order could not be saved, reloading", list(result.failed))
                await self.resync(before.entries, "reorder")
                return False

            self.dispatch(PersistenceConfirmed(status=self._settled_status("reorder")))
            self._notify("success", "Slider order updated")
            return True
        finally:
            self._in_flight.discard("reorder")

    async def toggle_active(self, slider_id: int) -> bool:
        entry = self.state.find(slider_id)
        key = f"toggle:{slider_id}"
        if entry is None or not self._claim(key):
            return False
        try:
            before = self.state
            self.dispatch(ToggleActive(slider_id))
            try:
                record = await self._save(slider_id, {"isActive": not entry.is_active}, entry.version)
            except PersistenceError as e:
                self._fail("Slider status could not be changed, reloading", [(slider_id, e)])
                await self.resync(before.entries, key)
                return False

            self.dispatch(PersistenceConfirmed(status=self._settled_status(key)))
            self._notify("success", "Slider activated" if record.get("isActive") else "Slider deactivated")
            return True
        finally:
            self._in_flight.discard(key)

    async def remove(self, slider_id: int) -> bool:
        key = f"remove:{slider_id}"
        if self.state.find(slider_id) is None or not self._claim(key):
            return False
        try:
            before = self.state
            self.dispatch(RemoveEntry(slider_id))
            try:
                async with self._write_lock(slider_id):
                    await self.gateway.delete_slider(slider_id)
            except PersistenceError as e:
                self._fail("Slider could not be deleted, reloading", [(slider_id, e)])
                await self.resync(before.entries, key)
                return False

            self.dispatch(PersistenceConfirmed(status=self._settled_status(key)))
            self._notify("success", "Slider deleted")
            return True
        finally:
            self._in_flight.discard(key)

    # ── Form submissions ──────────────────────────────────────────────────────

    def validate(self, draft: SliderDraft) -> None:
        result = validate_slider(draft, self.tracks)
        if not result.is_valid:
            raise SliderValidationError(result.errors)

    async def create(self, draft: SliderDraft) -> dict[str, Any] | None:
        """Validate, encode and create a slider, then reload the collection.

        Raises:
            SliderValidationError: if the draft is incomplete; nothing is sent.
        """
        self.validate(draft)
        if not self._claim("create"):
            return None
        try:
            try:
                record = await self.gateway.create_slider(draft.to_payload())
            except PersistenceError as e:
                self._fail("Slider could not be created, reloading", [("new", e)])
                await self.resync(finished="create")
                return None

            self._notify("success", "Slider created")
            await self.load(finished="create")
            return record
        finally:
            self._in_flight.discard("create")

    async def submit_edit(self, slider_id: int, draft: SliderDraft) -> dict[str, Any] | None:
        """Validate and save an edited draft as a full field replace.

        Raises:
            SliderValidationError: if the draft is incomplete; nothing is sent.
        """
        self.validate(draft)
        entry = self.state.find(slider_id)
        key = f"edit:{slider_id}"
        if entry is None or not self._claim(key):
            return None
        try:
            try:
                record = await self._save(slider_id, draft.to_payload(), entry.version)
            except PersistenceError as e:
                self._fail("Slider could not be updated, reloading", [(slider_id, e)])
                await self.resync(finished=key)
                return None

            # The edit form sets order and active flag too, so its record wins
            self.dispatch(PersistenceConfirmed((record,), status=self._settled_status(key)))
            self._notify("success", "Slider updated")
            return record
        finally:
            self._in_flight.discard(key)

    def draft_for(self, slider_id: int) -> SliderDraft | None:
        """Decode a slider into an editable draft; None for an unknown id."""
        entry = self.state.find(slider_id)
        return SliderDraft.from_record(entry.record, self.tracks) if entry else None
