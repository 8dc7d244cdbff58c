"""
Convert between .lottie containers and self-contained Lottie JSON.

.lottie files are ZIP archives holding animation JSON, a manifest.json
and image files. Decoding inlines the images into each animation as
data URIs; encoding pulls them back out and writes a fresh container.
"""

import zipfile
import json
import logging
import posixpath
from pathlib import Path
from typing import Dict, Union, Optional, List, Any, BinaryIO
from io import BytesIO

from lottiepack.assets import embed_assets, extract_assets, decode_payload
from lottiepack.diagnostics import Diagnostics
from lottiepack.imaging import probe_image_size, HAS_CV2
from lottiepack.manifest import Manifest, make_manifest
from lottiepack.models import ResolvedAnimation
from lottiepack.resolver import resolve_animations, get_manifest, MANIFEST_PATH, NoAnimationFoundError
from lottiepack.scanner import scan_archive, is_asset_path, DOCUMENT_EXTENSION, ENTRY_READ_ERRORS

logger = logging.getLogger(__name__)

ANIMATION_PATH = "animations/data.json"
IMAGES_FOLDER = "images/"

Source = Union[bytes, bytearray, str, Path, BinaryIO]


def dump_json(data: Any) -> str:
    """Compact JSON, non-ASCII kept as-is."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def read_source(source: Source) -> bytes:
    """
    Read a conversion input into memory.

    Args:
        source: Raw bytes, a filesystem path, or a binary file object

    Returns:
        File contents as bytes

    Raises:
        FileNotFoundError: If a path does not exist
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {source}")
        return path.read_bytes()
    if hasattr(source, "read"):
        return source.read()
    raise TypeError(f"Unsupported input type: {type(source).__name__}")


def open_container(source: Source) -> zipfile.ZipFile:
    """
    Open a .lottie container for reading.

    Raises:
        zipfile.BadZipFile: If the input is not a ZIP archive
    """
    return zipfile.ZipFile(BytesIO(read_source(source)), "r")


def pack_lottie(
    file_map: Dict[str, bytes],
    manifest: Union[Manifest, Dict],
    output_path: Optional[Union[str, Path]] = None,
) -> bytes:
    """
    Pack a .lottie container from a manifest and file contents.

    Args:
        file_map: Dict mapping archive paths to file bytes
                  e.g. {"animations/data.json": <bytes>, "images/img_0.png": <bytes>}
        manifest: Manifest object or dict
        output_path: Optional path to also write the container to

    Returns:
        The DEFLATE-compressed container as bytes

    Example:
        >>> files = {"animations/data.json": b'{"v":"5.7.4","assets":[]}'}
        >>> blob = pack_lottie(files, make_manifest(), "out.lottie")
    """
    if isinstance(manifest, Manifest):
        manifest_bytes = manifest.to_json().encode("utf-8")
    else:
        manifest_bytes = dump_json(manifest).encode("utf-8")

    all_files: Dict[str, bytes] = {MANIFEST_PATH: manifest_bytes}
    all_files.update(file_map)

    # manifest.json first, everything else in sorted order
    sorted_paths = sorted(p for p in all_files if p != MANIFEST_PATH)
    sorted_paths.insert(0, MANIFEST_PATH)

    buf = BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for path in sorted_paths:
            zf.writestr(path, all_files[path])
    data = buf.getvalue()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)

    return data


def convert_lottie_to_json(
    source: Source,
    diagnostics: Optional[Diagnostics] = None,
) -> List[ResolvedAnimation]:
    """
    Convert a .lottie container into self-contained Lottie JSON documents.

    Args:
        source: .lottie bytes, path or binary file object
        diagnostics: Collector for non-fatal problems (skipped manifest
                     entries, unparseable JSON, missing assets)

    Returns:
        One ResolvedAnimation per animation found, assets inlined

    Raises:
        NoAnimationFoundError: If no animation can be located
        zipfile.BadZipFile: If the input is not a ZIP archive
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    with open_container(source) as zf:
        scan = scan_archive(zf, diagnostics)

    animations = []
    for path, tree in resolve_animations(scan.documents, diagnostics):
        embedded = embed_assets(tree, scan.asset_map, diagnostics)
        animations.append(ResolvedAnimation(original_path=path, json_string=dump_json(embedded)))

    logger.info("Decoded %d animations", len(animations))
    return animations


def convert_json_to_lottie(
    source: Source,
    output_path: Optional[Union[str, Path]] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> bytes:
    """
    Convert a Lottie JSON document into a .lottie container.

    Embedded data-URI images are written to images/<name> and their refs
    rewritten to point there. The animation is stored at
    animations/data.json next to the canonical manifest.

    Args:
        source: JSON bytes, path or binary file object
        output_path: Optional path to also write the container to
        diagnostics: Collector for non-fatal problems

    Returns:
        The container as bytes

    Raises:
        ValueError: If the input is not a JSON object or holds bad base64
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    text = read_source(source).decode("utf-8-sig")
    animation = json.loads(text)
    if not isinstance(animation, dict):
        raise ValueError("Lottie JSON must be an object at the top level")

    rewritten, extracted = extract_assets(animation, diagnostics)

    file_map: Dict[str, bytes] = {ANIMATION_PATH: dump_json(rewritten).encode("utf-8")}
    for asset in extracted:
        file_map[IMAGES_FOLDER + asset.filename] = decode_payload(asset)

    return pack_lottie(file_map, make_manifest(), output_path)


def read_lottie_file(source: Source, internal_path: str) -> bytes:
    """
    Read a single file from a .lottie archive.

    Args:
        source: .lottie bytes, path or binary file object
        internal_path: Path within archive (e.g. "animations/data.json")

    Returns:
        File contents as bytes
    """
    with open_container(source) as zf:
        return zf.read(internal_path)


def list_lottie_contents(source: Source) -> List[str]:
    """List all entry paths in a .lottie archive."""
    with open_container(source) as zf:
        return zf.namelist()


def get_lottie_info(source: Source) -> Dict:
    """
    Get summary information about a .lottie file.

    Args:
        source: .lottie bytes, path or binary file object

    Returns:
        Dict with manifest (or None), file list and sizes, resolved
        animation paths, image dimensions and collected warnings
    """
    data = read_source(source)
    diagnostics = Diagnostics()

    with zipfile.ZipFile(BytesIO(data), "r") as zf:
        scan = scan_archive(zf, diagnostics)

        files = []
        images = []
        total_size = 0
        for info in zf.infolist():
            if info.is_dir():
                continue
            files.append({
                "path": info.filename,
                "compressed_size": info.compress_size,
                "uncompressed_size": info.file_size,
            })
            total_size += info.file_size

            if is_asset_path(info.filename) and not info.filename.endswith(DOCUMENT_EXTENSION):
                size = None
                if HAS_CV2:
                    try:
                        size = probe_image_size(zf.read(info))
                    except ENTRY_READ_ERRORS:
                        pass  # already reported by scan_archive
                images.append({
                    "path": info.filename,
                    "name": posixpath.basename(info.filename),
                    "width": size[0] if size else None,
                    "height": size[1] if size else None,
                })

    manifest = get_manifest(scan.documents)
    try:
        animations = [path for path, _ in resolve_animations(scan.documents, diagnostics)]
    except NoAnimationFoundError as e:
        diagnostics.warn(str(e))
        animations = []

    return {
        "manifest": Manifest.from_dict(manifest).to_dict() if isinstance(manifest, dict) else None,
        "files": files,
        "animations": animations,
        "images": images,
        "total_uncompressed_size": total_size,
        "archive_size": len(data),
        "warnings": list(diagnostics),
    }
