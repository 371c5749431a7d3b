"""Platform adapters for multi-source research."""

from .base import BaseAdapter
from .registry import PROVIDERS, build_adapters, get_provider

__all__ = ["BaseAdapter", "PROVIDERS", "build_adapters", "get_provider"]
