"""Google Cloud interaction module."""

from .client import AssetClient

__all__ = ["AssetClient"]
