"""Named lists of catalog ids such as favorites and the shopping list."""

import json
import logging
from dataclasses import dataclass

from foodcheck.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

LIST_KEYS = {
    "favorites": "foodcheck_favorites",
    "shopping": "foodcheck_shopping_list",
}


class UnknownListError(ValueError):
    """Raised for a list name outside LIST_KEYS."""


@dataclass
class UserListService:
    """Toggles catalog ids in per-device lists kept in the key-value store."""

    store: KeyValueStore

    def items(self, list_name: str) -> list[str]:
        """Return the ids in a list, oldest first."""
        key = _key_for(list_name)
        stored = self.store.get(key)
        if not stored:
            return []
        try:
            values = json.loads(stored)
        except json.JSONDecodeError:
            _logger.warning("List %s is unreadable; treating it as empty", list_name)
            return []
        if not isinstance(values, list):
            return []
        return [value for value in values if isinstance(value, str)]

    def contains(self, list_name: str, item_id: str) -> bool:
        """Check whether an id is in a list."""
        return item_id in self.items(list_name)

    def toggle(self, list_name: str, item_id: str) -> bool:
        """Add the id if absent, remove it otherwise; returns membership after."""
        current = self.items(list_name)
        if item_id in current:
            current.remove(item_id)
            added = False
        else:
            current.append(item_id)
            added = True
        self.store.set(_key_for(list_name), json.dumps(current))
        return added


def _key_for(list_name: str) -> str:
    key = LIST_KEYS.get(list_name)
    if key is None:
        raise UnknownListError(f"Unknown list: {list_name}")
    return key
