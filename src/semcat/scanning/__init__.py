"""Document discovery and sidecar metadata."""

from .sidecar import SidecarOverride, SidecarResult, read_sidecar
from .walker import CatalogError, DiscoveredDocument, InputOutsideRoot, RootNotFound, collect_documents

__all__ = [
    "CatalogError",
    "DiscoveredDocument",
    "InputOutsideRoot",
    "RootNotFound",
    "SidecarOverride",
    "SidecarResult",
    "collect_documents",
    "read_sidecar",
]
