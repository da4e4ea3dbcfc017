# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttline import time
from ganttline.model.item import Item


class ItemFileError(ValueError):
    pass


class ItemRepository:
    """Read-only access to the items of one YAML item file."""

    def __init__(self, path: Path, tz: str = "local") -> None:
        self.path = path
        self.tz = tz
        self._items: Optional[list[Item]] = None

    @property
    def items(self) -> list[Item]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        try:
            raw_items = load(self.path.read_text(), Loader=Loader)
        except OSError as e:
            raise ItemFileError(f"Cannot read item file {self.path}: {e}") from e
        except YAMLError as e:
            raise ItemFileError(f"Invalid YAML in item file {self.path}: {e}") from e

        if raw_items is None:
            raw_items = []
        if isinstance(raw_items, dict) and "items" in raw_items:
            raw_items = raw_items["items"]
        if not isinstance(raw_items, list):
            raise ItemFileError(f"Item file {self.path} must contain a list of items")

        self._items = [
            self.__convert_item_for_deserialization(raw_item, index)
            for index, raw_item in enumerate(raw_items)
        ]

    def __convert_item_for_deserialization(self, raw_item: Any, index: int) -> Item:
        if not isinstance(raw_item, dict):
            raise ItemFileError(f"Item #{index} in {self.path} is not a mapping")

        for key in ("id", "priority", "name", "start", "end"):
            if raw_item.get(key) is None:
                raise ItemFileError(f"Item #{index} in {self.path} has no '{key}'")

        try:
            item: Item = {
                "id": raw_item["id"],
                "priority": float(raw_item["priority"]),
                "name": str(raw_item["name"]),
                "start": time.datetime_from_value(raw_item["start"], tz=self.tz),
                "end": time.datetime_from_value(raw_item["end"], tz=self.tz),
            }
            if raw_item.get("progress") is not None:
                item["progress"] = float(raw_item["progress"])
            if raw_item.get("item_list") is not None:
                item["item_list"] = [str(entry) for entry in raw_item["item_list"]]
            if raw_item.get("color") is not None:
                item["color"] = str(raw_item["color"])
        except (ValueError, TypeError) as e:
            raise ItemFileError(f"Item #{index} in {self.path} is invalid: {e}") from e
        return item

    def get_all_items(self) -> list[Item]:
        return list(self.items)
