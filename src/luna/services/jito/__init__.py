"""Jito block engine client."""

from luna.services.jito.client import JitoClient

__all__ = ["JitoClient"]
