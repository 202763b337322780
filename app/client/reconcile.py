"""
Order reconciliation: pure state transitions

The slider list is an immutable ``SliderCollection``; every change goes
through ``reduce(state, action)``. Network effects live in
``app.client.store``, which dispatches actions before (optimistic) and
after (confirm / resync) talking to the store.

Collection lifecycle::

    IDLE ─MoveEntry─▶ REORDERING ─PersistenceConfirmed─▶ IDLE
    IDLE ─ToggleActive/RemoveEntry─▶ PENDING ─PersistenceConfirmed─▶ IDLE
    REORDERING/PENDING ─ResyncStarted─▶ RESYNCING ─Loaded/ResyncFailed─▶ IDLE

Operations may overlap, so confirmations and reloads carry the status the
store computes from what is still in flight. A toggle or remove started
during a reorder leaves the collection REORDERING.
"""

from __future__ import annotations

import asyncio
import enum
from collections.abc import Awaitable, Hashable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Union


class CollectionStatus(str, enum.Enum):
    IDLE = "idle"
    REORDERING = "reordering"
    PENDING = "pending"
    RESYNCING = "resyncing"


@dataclass(frozen=True)
class SliderEntry:
    id: int
    order: int
    is_active: bool = True
    version: int = 1
    record: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> SliderEntry:
        return cls(
            id=record["id"],
            order=int(record.get("order") or 0),
            is_active=bool(record.get("isActive", True)),
            version=int(record.get("version") or 1),
            record=dict(record),
        )

    def with_order(self, order: int) -> SliderEntry:
        return replace(self, order=order, record={**self.record, "order": order})

    def with_active(self, is_active: bool) -> SliderEntry:
        return replace(self, is_active=is_active, record={**self.record, "isActive": is_active})


@dataclass(frozen=True)
class SliderCollection:
    entries: tuple[SliderEntry, ...] = ()
    status: CollectionStatus = CollectionStatus.IDLE

    def find(self, slider_id: int) -> SliderEntry | None:
        return next((entry for entry in self.entries if entry.id == slider_id), None)

    @property
    def orders(self) -> list[int]:
        return [entry.order for entry in self.entries]


@dataclass(frozen=True)
class OrderChange:
    id: int
    order: int
    version: int


# ── Actions ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MoveEntry:
    from_index: int
    to_index: int


@dataclass(frozen=True)
class ToggleActive:
    slider_id: int


@dataclass(frozen=True)
class RemoveEntry:
    slider_id: int


@dataclass(frozen=True)
class EntrySaved:
    """One write was accepted; ``record`` is the row the store returned."""

    record: Mapping[str, Any]


@dataclass(frozen=True)
class PersistenceConfirmed:
    """An operation finished; ``records`` replace their entries wholesale."""

    records: tuple[Mapping[str, Any], ...] = ()
    status: CollectionStatus = CollectionStatus.IDLE


@dataclass(frozen=True)
class ResyncStarted:
    pass


@dataclass(frozen=True)
class ResyncFailed:
    """The reload failed; ``entries``, when given, replace the rejected local ones."""

    entries: tuple[SliderEntry, ...] | None = None
    status: CollectionStatus = CollectionStatus.IDLE


@dataclass(frozen=True)
class Loaded:
    entries: tuple[SliderEntry, ...]
    status: CollectionStatus = CollectionStatus.IDLE


Action = Union[
    MoveEntry, ToggleActive, RemoveEntry, EntrySaved, PersistenceConfirmed, ResyncStarted, ResyncFailed, Loaded
]


# ── Pure helpers ──────────────────────────────────────────────────────────────


def sort_entries(entries: Sequence[SliderEntry]) -> tuple[SliderEntry, ...]:
    # sorted() is stable, so equal orders keep their fetched sequence
    return tuple(sorted(entries, key=lambda entry: entry.order))


def move(entries: Sequence[SliderEntry], from_index: int, to_index: int) -> tuple[SliderEntry, ...] | None:
    """Move one entry and renumber every order to its 1-based position.

    Returns None when either index is out of range.
    """
    size = len(entries)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return None

    items = list(entries)
    moved = items.pop(from_index)
    items.insert(to_index, moved)
    return tuple(
        entry if entry.order == position else entry.with_order(position)
        for position, entry in enumerate(items, start=1)
    )


def changed_orders(before: Sequence[SliderEntry], after: Sequence[SliderEntry]) -> list[OrderChange]:
    previous = {entry.id: entry.order for entry in before}
    return [
        OrderChange(id=entry.id, order=entry.order, version=entry.version)
        for entry in after
        if previous.get(entry.id) != entry.order
    ]


def _merge(entries: Sequence[SliderEntry], records: Sequence[Mapping[str, Any]]) -> tuple[SliderEntry, ...]:
    confirmed = {record["id"]: SliderEntry.from_record(record) for record in records if "id" in record}
    merged = []
    for entry in entries:
        incoming = confirmed.get(entry.id)
        # A record older than what we already hold lost a race with a later write
        merged.append(incoming if incoming is not None and incoming.version >= entry.version else entry)
    return sort_entries(merged)


def _pending_status(state: SliderCollection) -> CollectionStatus:
    if state.status in (CollectionStatus.REORDERING, CollectionStatus.RESYNCING):
        return state.status
    return CollectionStatus.PENDING


def reduce(state: SliderCollection, action: Action) -> SliderCollection:
    """Return the collection after ``action``; invalid actions return ``state`` unchanged."""
    if isinstance(action, MoveEntry):
        moved = move(state.entries, action.from_index, action.to_index)
        if moved is None:
            return state
        return SliderCollection(moved, CollectionStatus.REORDERING)

    if isinstance(action, ToggleActive):
        entry = state.find(action.slider_id)
        if entry is None:
            return state
        toggled = entry.with_active(not entry.is_active)
        entries = tuple(toggled if e.id == entry.id else e for e in state.entries)
        return SliderCollection(entries, _pending_status(state))

    if isinstance(action, RemoveEntry):
        if state.find(action.slider_id) is None:
            return state
        # Remaining orders are not renumbered
        entries = tuple(e for e in state.entries if e.id != action.slider_id)
        return SliderCollection(entries, _pending_status(state))

    if isinstance(action, EntrySaved):
        entry = state.find(action.record.get("id"))
        if entry is None:
            return state
        saved = SliderEntry.from_record(action.record)
        if saved.version < entry.version:
            return state
        # Order and active flag stay local: they may already carry writes still in flight
        kept = replace(
            saved,
            order=entry.order,
            is_active=entry.is_active,
            record={**saved.record, "order": entry.order, "isActive": entry.is_active},
        )
        return replace(state, entries=tuple(kept if e.id == entry.id else e for e in state.entries))

    if isinstance(action, PersistenceConfirmed):
        # A reload already under way settles the status itself
        status = state.status if state.status is CollectionStatus.RESYNCING else action.status
        return SliderCollection(_merge(state.entries, action.records), status)

    if isinstance(action, ResyncStarted):
        return replace(state, status=CollectionStatus.RESYNCING)

    if isinstance(action, ResyncFailed):
        entries = state.entries if action.entries is None else sort_entries(action.entries)
        return SliderCollection(entries, action.status)

    if isinstance(action, Loaded):
        return SliderCollection(sort_entries(action.entries), action.status)

    raise TypeError(f"Unknown action: {action!r}")


# ── Batched writes ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BatchResult:
    succeeded: tuple[tuple[Hashable, Any], ...] = ()
    failed: tuple[tuple[Hashable, Exception], ...] = ()

    @property
    def all_ok(self) -> bool:
        return not self.failed


async def join(tasks: Mapping[Hashable, Awaitable[Any]]) -> BatchResult:
    """Run every awaitable concurrently and sort outcomes into ok / failed.

    Completion order is irrelevant; only the aggregate is reported.
    """
    keys = list(tasks)
    outcomes = await asyncio.gather(*tasks.values(), return_exceptions=True)

    succeeded, failed = [], []
    for key, outcome in zip(keys, outcomes):
        if isinstance(outcome, Exception):
            failed.append((key, outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            succeeded.append((key, outcome))
    return BatchResult(succeeded=tuple(succeeded), failed=tuple(failed))
