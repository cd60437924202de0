import copy
import logging
import os

import yaml

from adventure.errors import ConfigurationError
from adventure.world import ITEM_FIELDS, Item, ToolType

logger = logging.getLogger(__name__)

DEFAULT_ITEMS_PATH = os.path.join(os.path.dirname(__file__), "data", "items.yaml")


class ItemCatalog:
    """Item definitions by id. Lookups hand out fresh copies."""

    def __init__(self, items=None):
        self.items = {}
        for item in items or []:
            self.items[item.id] = item

    def __contains__(self, item_id):
        return item_id in self.items

    def __len__(self):
        return len(self.items)

    def get(self, item_id):
        item = self.items.get(item_id)
        return copy.deepcopy(item) if item else None

    def find(self, name):
        """Finds a definition by id or alias."""
        for item in self.items.values():
            if item.match_name(name):
                return copy.deepcopy(item)
        return None

    def make(self, item_ids):
        """Instantiates a list of ids; unknown ids are a configuration error."""
        result = []
        for item_id in item_ids:
            item = self.get(item_id)
            if item is None:
                raise ConfigurationError(f"Unknown item '{item_id}'")
            result.append(item)
        return result


def _build_item(item_id, data):
    unknown = set(data) - ITEM_FIELDS
    if unknown:
        raise ConfigurationError(f"Item '{item_id}' has unknown fields: {', '.join(sorted(unknown))}")

    data = dict(data)
    tool_type = data.get('tool_type')
    if tool_type is not None:
        try:
            data['tool_type'] = ToolType(str(tool_type).lower())
        except ValueError as e:
            raise ConfigurationError(f"Item '{item_id}' has unknown tool type '{tool_type}'") from e

    data['id'] = item_id
    return Item(**data)


def load_items(path=DEFAULT_ITEMS_PATH):
    """
    Loads the item catalogue from a YAML mapping of id -> fields.
    Missing or malformed files raise ConfigurationError.
    """
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"Item data not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Item data is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Item data in {path} must be a mapping")

    items = [_build_item(item_id, data or {}) for item_id, data in raw.items()]
    logger.info("Loaded %d item definitions from %s", len(items), path)
    return ItemCatalog(items)
