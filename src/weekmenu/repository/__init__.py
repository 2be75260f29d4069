"""Persistence adapters for the menu record."""

from .json_store import JsonKeyValueStore, MenuRepository

__all__ = ["JsonKeyValueStore", "MenuRepository"]
