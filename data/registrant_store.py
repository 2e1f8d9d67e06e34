"""In-memory registrant store with create-or-replace-by-id semantics."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

from models.registrant import Registrant

logger = logging.getLogger(__name__)


class RegistrantStore:
    """Registrants keyed by id; snapshots are ordered by registration time."""

    def __init__(self, registrants: Optional[List[Registrant]] = None):
        self._by_id: Dict[str, Registrant] = {}
        self.revision = 0
        for r in registrants or []:
            self.upsert(r)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, registrant_id: str) -> bool:
        return registrant_id.strip() in self._by_id

    def get(self, registrant_id: str) -> Optional[Registrant]:
        return self._by_id.get(registrant_id.strip())

    def upsert(self, registrant: Registrant) -> Registrant:
        """Create or replace by trimmed id. A replacement keeps its original registration time."""
        key = registrant.id.strip()
        if not key:
            raise ValueError("Registrant id cannot be blank.")

        existing = self._by_id.get(key)
        created_at = registrant.created_at
        if existing is not None and existing.created_at is not None:
            created_at = existing.created_at
        stored = replace(registrant, id=key, created_at=created_at or datetime.now())

        self._by_id[key] = stored
        self.revision += 1
        logger.debug("%s registrant %r", "Replaced" if existing else "Added", key)
        return stored

    def delete(self, registrant_id: str) -> bool:
        removed = self._by_id.pop(registrant_id.strip(), None)
        if removed is None:
            return False
        self.revision += 1
        logger.debug("Deleted registrant %r", registrant_id)
        return True

    def clear(self) -> int:
        count = len(self._by_id)
        self._by_id.clear()
        self.revision += 1
        logger.info("Cleared %d registrants", count)
        return count

    def snapshot(self) -> List[Registrant]:
        """Current registrants, oldest registration first."""
        return sorted(self._by_id.values(), key=lambda r: r.created_at)
