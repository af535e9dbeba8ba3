"""Source adapters that enumerate candidate symbols."""

from sources.base import SourceAdapter, discover_safely
from sources.custom_elements import CustomElementsAdapter
from sources.identify import build_adapters, identify_sources
from sources.local_files import LocalFileAdapter
from sources.manual import ManualAdapter, manual_overrides
from sources.package import PackageAdapter

__all__ = [
    "CustomElementsAdapter",
    "LocalFileAdapter",
    "ManualAdapter",
    "PackageAdapter",
    "SourceAdapter",
    "build_adapters",
    "discover_safely",
    "identify_sources",
    "manual_overrides",
]
