"""Core business logic."""

from .exporter import InventoryExporter, export_inventory

__all__ = ["InventoryExporter", "export_inventory"]
