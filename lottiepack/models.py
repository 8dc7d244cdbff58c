"""
Shared data shapes for the decode and encode pipelines.

Documents themselves stay plain parsed JSON (dicts and lists); these
dataclasses only carry what moves between pipeline stages.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ResolvedAnimation:
    """One animation produced by the decode pipeline."""
    original_path: str
    json_string: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary using the camelCase keys of the wire shape."""
        return {"originalPath": self.original_path, "jsonString": self.json_string}


@dataclass
class ScanResult:
    """
    Output of scanning a container.

    documents maps archive path -> parsed JSON tree, in archive order.
    asset_map maps bare asset filename -> data URI.
    """
    documents: Dict[str, Any] = field(default_factory=dict)
    asset_map: Dict[str, str] = field(default_factory=dict)


@dataclass
class ExtractedAsset:
    """An inlined asset pulled back out of a document."""
    filename: str
    base64_payload: str
    mime_type: str


def is_embedded(asset: Dict[str, Any]) -> bool:
    """True when an asset ref carries e == 1 (booleans do not count)."""
    e = asset.get("e")
    return not isinstance(e, bool) and e == 1


def has_version_marker(tree: Any, marker: str = "v") -> bool:
    """Heuristic: does this parsed document look like an animation payload?"""
    return isinstance(tree, dict) and bool(tree.get(marker))
