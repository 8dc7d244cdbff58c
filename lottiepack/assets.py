"""
Inline and extract image assets referenced by animation documents.

An asset ref looks like {"id": ..., "p": ..., "u": ..., "e": 0|1}. With
e == 1, "p" holds a data URI and "u" is empty; otherwise "p" is a bare
filename and "u" its folder prefix.

Both directions work on a deep copy and never touch the caller's tree.
"""

import base64
import binascii
import copy
import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote_to_bytes

from lottiepack.diagnostics import Diagnostics
from lottiepack.models import ExtractedAsset, is_embedded

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:"
FALLBACK_ASSET_NAME = "asset"
EXTRACTED_ASSET_FOLDER = "/images/"

_UNSAFE_NAME_CHARS = re.compile(r"[^\w.-]", re.ASCII)


def _asset_refs(tree: Any) -> List[Dict[str, Any]]:
    if not isinstance(tree, dict):
        return []
    assets = tree.get("assets")
    if not isinstance(assets, list):
        return []
    return [a for a in assets if isinstance(a, dict)]


def embed_assets(
    animation: Any,
    asset_map: Dict[str, str],
    diagnostics: Optional[Diagnostics] = None,
) -> Any:
    """
    Return a copy of the animation with every resolvable asset inlined.

    Args:
        animation: Parsed animation document
        asset_map: Bare filename -> data URI
        diagnostics: Collector for refs with no matching asset

    Returns:
        Deep-copied document. Refs already marked e == 1 are left alone,
        so embedding an embedded document is a no-op.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    result = copy.deepcopy(animation)
    for asset in _asset_refs(result):
        if is_embedded(asset):
            continue
        filename = asset.get("p")
        data_uri = asset_map.get(filename) if isinstance(filename, str) else None
        if data_uri:
            asset["u"] = ""
            asset["p"] = data_uri
            asset["e"] = 1
        else:
            diagnostics.warn(
                f"Asset {filename!r} referenced in animation JSON not found in the "
                f"archive's assets. It might be an external URL or missing."
            )
    return result


def parse_data_uri(uri: str) -> Tuple[str, str]:
    """
    Split a data URI into (mime_type, base64_payload).

    Payloads without the ;base64 flag are percent-decoded and
    re-encoded so the caller always gets base64.
    """
    header, _, payload = uri.partition(",")
    params = header[len(DATA_URI_PREFIX):].split(";")
    mime_type = params[0] or "text/plain"
    if "base64" in params[1:]:
        return mime_type, payload
    raw = unquote_to_bytes(payload)
    return mime_type, base64.b64encode(raw).decode("ascii")


def extension_for(mime_type: str) -> str:
    """File extension from a MIME subtype, image/svg+xml -> svg."""
    _, sep, subtype = mime_type.partition("/")
    if not sep or not subtype:
        return "bin"
    return sanitize_name(subtype.replace("+xml", "", 1))


def sanitize_name(name: Any) -> str:
    """Restrict a name to word characters, dots and hyphens."""
    return _UNSAFE_NAME_CHARS.sub("_", str(name))


def unique_filename(filename: str, taken: set) -> str:
    """Append _1, _2, ... before the extension until the name is unused."""
    if filename not in taken:
        return filename
    stem, dot, ext = filename.rpartition(".")
    if not dot:
        stem, ext = filename, ""
    n = 1
    while True:
        candidate = f"{stem}_{n}.{ext}" if dot else f"{stem}_{n}"
        if candidate not in taken:
            return candidate
        n += 1


def extract_assets(
    animation: Any,
    diagnostics: Optional[Diagnostics] = None,
) -> Tuple[Any, List[ExtractedAsset]]:
    """
    Pull inlined data-URI assets back out into discrete files.

    Args:
        animation: Parsed animation document (not modified)
        diagnostics: Collector for filename collisions

    Returns:
        Tuple of (rewritten document copy, extracted assets). Rewritten
        refs point at /images/<filename> with e = 0.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    result = copy.deepcopy(animation)
    extracted: List[ExtractedAsset] = []
    taken = set()

    for asset in _asset_refs(result):
        uri = asset.get("p")
        if not (is_embedded(asset) and isinstance(uri, str) and uri.startswith(DATA_URI_PREFIX)):
            continue

        mime_type, payload = parse_data_uri(uri)
        base_name = sanitize_name(asset.get("id") or FALLBACK_ASSET_NAME)
        wanted = f"{base_name}.{extension_for(mime_type)}"
        filename = unique_filename(wanted, taken)
        if filename != wanted:
            diagnostics.warn(f"Asset filename {wanted} already used, writing {filename}")
        taken.add(filename)

        extracted.append(ExtractedAsset(filename=filename, base64_payload=payload, mime_type=mime_type))
        asset["u"] = EXTRACTED_ASSET_FOLDER
        asset["p"] = filename
        asset["e"] = 0

    logger.debug("Extracted %d embedded assets", len(extracted))
    return result, extracted


def decode_payload(asset: ExtractedAsset) -> bytes:
    """Decode an extracted asset's base64 payload to raw bytes."""
    try:
        return base64.b64decode(asset.base64_payload, validate=False)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 data for asset {asset.filename}: {e}") from e
