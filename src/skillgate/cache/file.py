# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON file snapshot store.

The file holds ``{"timestamp": <epoch-ms>, "skills": [...]}``.  A
missing, unreadable or corrupt file is treated as "no cache".  Writes
are best-effort; at most one process is expected to write, and
concurrent writers simply race (last writer wins).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from skillgate.cache.base import ApprovedListStore
from skillgate.models.skill import ApprovedList

logger = logging.getLogger("skillgate.cache.file")


class FileApprovedListStore(ApprovedListStore):
    """Persist the approved-list snapshot to a JSON file.

    Args:
        path: Location of the cache file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def load(self) -> ApprovedList | None:
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as fh:
                raw = await fh.read()
        except FileNotFoundError:
            logger.debug("No cache file at %s", self.path)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read cache file %s: %s", self.path, exc)
            return None

        try:
            payload = json.loads(raw)
            if not isinstance(payload, dict):
                raise TypeError("cache root is not an object")
            return ApprovedList.from_cache_payload(payload)
        except (ValueError, KeyError, TypeError, OverflowError, ValidationError) as exc:
            logger.warning("Ignoring corrupt cache file %s: %s", self.path, exc)
            return None

    async def save(self, snapshot: ApprovedList) -> bool:
        text = json.dumps(snapshot.to_cache_payload(), indent=2)
        try:
            if not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as fh:
                await fh.write(text)
        except OSError as exc:
            logger.warning("Could not save skills cache to %s: %s", self.path, exc)
            return False
        logger.debug("Cached %d approved skills at %s", len(snapshot), self.path)
        return True

    async def clear(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Removed cache file %s", self.path)
        return True
