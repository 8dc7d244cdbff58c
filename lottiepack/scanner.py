"""
Classify the entries of an opened .lottie container.

Every non-directory entry is either a structured document (parsed JSON)
or, when it lives under a recognised asset folder, an image asset that
is turned into a data URI keyed by its bare filename.
"""

import base64
import json
import logging
import posixpath
import zipfile
import zlib
from typing import Optional

from lottiepack.diagnostics import Diagnostics
from lottiepack.models import ScanResult

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSION = ".json"
ASSET_FOLDERS = ("assets/", "images/", "i/")

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

# What zipfile raises for a corrupt, encrypted or unsupported entry
ENTRY_READ_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, EOFError)


def get_mime_type(filename: str) -> str:
    """Guess an image MIME type from the filename extension."""
    ext = filename.rsplit(".", 1)[-1].lower()
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def make_data_uri(mime_type: str, data: bytes) -> str:
    """Build a base64 data URI."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def is_asset_path(path: str) -> bool:
    return path.startswith(ASSET_FOLDERS)


def scan_archive(
    zf: zipfile.ZipFile,
    diagnostics: Optional[Diagnostics] = None,
) -> ScanResult:
    """
    Scan every entry of an open container.

    Args:
        zf: Open ZipFile handle (read mode)
        diagnostics: Collector for non-fatal problems

    Returns:
        ScanResult with parsed documents and the asset map

    Entries that cannot be read and JSON entries that fail to parse are
    reported and skipped. Assets sharing a basename across folders
    shadow each other; the entry that comes later in the archive wins.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    result = ScanResult()
    asset_sources = {}

    for info in zf.infolist():
        if info.is_dir():
            continue
        path = info.filename
        is_document = path.endswith(DOCUMENT_EXTENSION)
        if not (is_document or is_asset_path(path)):
            logger.debug("Ignoring entry %s", path)
            continue

        try:
            data = zf.read(info)
        except ENTRY_READ_ERRORS as e:
            diagnostics.warn(f"Could not read entry: {path} ({e})")
            continue

        if is_document:
            try:
                text = data.decode("utf-8-sig")
                result.documents[path] = json.loads(text)
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                diagnostics.warn(f"Could not parse JSON file: {path} ({e})")
        else:
            name = posixpath.basename(path)
            if name in asset_sources:
                diagnostics.warn(
                    f"Asset {path} shadows {asset_sources[name]} (same name {name!r})"
                )
            asset_sources[name] = path
            result.asset_map[name] = make_data_uri(get_mime_type(path), data)

    logger.debug(
        "Scanned %d documents and %d assets",
        len(result.documents), len(result.asset_map),
    )
    return result
