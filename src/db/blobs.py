"""Versioned JSON documents stored in the ``kv_store`` table."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from . import StoredBlob


LOGGER = logging.getLogger(__name__)

Migration = Callable[[Any], Any]
Merge = Callable[[Any, Any], Any]


class BlobMigrationError(RuntimeError):
    """Raised when a stored document cannot be brought up to date."""


@dataclass(frozen=True, slots=True)
class VersionedBlob:
    """Describes one stored document and how to upgrade older versions.

    ``migrations[n]`` converts a version ``n`` payload into version ``n + 1``.
    ``legacy_keys`` maps keys used by earlier releases to the version of the
    data found under them; such rows are moved to ``key`` on first load.
    When ``key`` already exists, ``merge(current, legacy)`` folds the legacy
    payload in; without it the legacy row is dropped.
    """

    key: str
    version: int
    migrations: Mapping[int, Migration] = field(default_factory=dict)
    legacy_keys: Mapping[str, int] = field(default_factory=dict)
    merge: Optional[Merge] = None

    def upgrade(self, payload: Any, from_version: int) -> Any:
        """Apply every pending migration in order."""
        for version in range(from_version, self.version):
            migration = self.migrations.get(version)
            if migration is None:
                raise BlobMigrationError(
                    f"No migration registered for {self.key} from version {version}."
                )
            payload = migration(payload)
        return payload


def _decode(row: StoredBlob) -> Any:
    try:
        return json.loads(row.value)
    except (TypeError, json.JSONDecodeError):
        LOGGER.warning("Stored document %s is not valid JSON; treating it as empty.", row.key)
        return None


def _encode(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def _upgrade_or_none(store: VersionedBlob, payload: Any, from_version: int) -> Optional[Any]:
    try:
        return store.upgrade(payload, from_version)
    except (BlobMigrationError, AttributeError, KeyError, TypeError, ValueError):
        LOGGER.warning(
            "Could not migrate %s from version %s; treating it as empty.",
            store.key,
            from_version,
            exc_info=True,
        )
        return None


async def _migrate_legacy(session: AsyncSession, store: VersionedBlob) -> Optional[Any]:
    for legacy_key, legacy_version in store.legacy_keys.items():
        legacy_row = await session.get(StoredBlob, legacy_key)
        if legacy_row is None:
            continue

        payload = _decode(legacy_row)
        if payload is not None:
            payload = _upgrade_or_none(store, payload, legacy_version)
        if payload is not None:
            session.add(StoredBlob(key=store.key, version=store.version, value=_encode(payload)))
        await session.delete(legacy_row)
        await session.flush()
        LOGGER.info("Moved %s to %s (version %s).", legacy_key, store.key, store.version)
        return payload
    return None


async def _absorb_legacy(
    session: AsyncSession, store: VersionedBlob, payload: Any
) -> Tuple[Any, bool]:
    absorbed = False
    for legacy_key, legacy_version in store.legacy_keys.items():
        legacy_row = await session.get(StoredBlob, legacy_key)
        if legacy_row is None:
            continue

        legacy = _decode(legacy_row)
        if legacy is not None:
            legacy = _upgrade_or_none(store, legacy, legacy_version)
        if legacy is not None and store.merge is not None:
            payload = store.merge(payload, legacy)
            LOGGER.info("Merged %s into %s.", legacy_key, store.key)
        else:
            LOGGER.warning("Dropping %s; %s already holds the current data.", legacy_key, store.key)
        await session.delete(legacy_row)
        absorbed = True
    return payload, absorbed


async def read_blob(session: AsyncSession, store: VersionedBlob) -> Optional[Any]:
    """Load the document described by ``store`` at its current version.

    Outdated documents are upgraded and written back once; malformed ones
    are reported as ``None`` instead of raising.
    """
    row = await session.get(StoredBlob, store.key)
    if row is None:
        return await _migrate_legacy(session, store)

    payload = _decode(row)
    if payload is None:
        return None

    if row.version > store.version:
        LOGGER.warning(
            "Stored document %s has version %s, newer than supported version %s.",
            store.key,
            row.version,
            store.version,
        )
        return payload

    if row.version < store.version:
        from_version = row.version
        payload = _upgrade_or_none(store, payload, from_version)
        if payload is None:
            return None
        LOGGER.info("Upgraded %s from version %s to %s.", store.key, from_version, store.version)
        changed = True
    else:
        changed = False

    payload, absorbed = await _absorb_legacy(session, store, payload)
    if changed or absorbed:
        row.value = _encode(payload)
        row.version = store.version
        await session.flush()

    return payload


async def write_blob(session: AsyncSession, store: VersionedBlob, payload: Any) -> None:
    """Replace the stored document; the last writer wins."""
    value = _encode(payload)
    row = await session.get(StoredBlob, store.key)
    if row is None:
        session.add(StoredBlob(key=store.key, version=store.version, value=value))
    else:
        row.value = value
        row.version = store.version
    await session.flush()


async def delete_blob(session: AsyncSession, store: VersionedBlob) -> None:
    """Remove the document and any leftover legacy copies."""
    for key in (store.key, *store.legacy_keys):
        row = await session.get(StoredBlob, key)
        if row is not None:
            await session.delete(row)
    await session.flush()
