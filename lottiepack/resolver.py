"""
Decide which structured documents in a container are animations.

Resolution runs three tiers in order:

1. manifest-driven: entries of manifest.json "animations", by src or id
2. conventional: animation.json, data.json, then animations/ and a/
3. generic: the first document with a version marker

Each tier is a plain function over the parsed documents so it can be
exercised on its own. Trees are returned as-is; callers clone before
mutating.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from lottiepack.diagnostics import Diagnostics
from lottiepack.models import has_version_marker
from lottiepack.scanner import DOCUMENT_EXTENSION

logger = logging.getLogger(__name__)

MANIFEST_PATH = "manifest.json"
ROOT_FALLBACK_NAMES = ("animation.json", "data.json")
ANIMATION_FOLDERS = ("animations/", "a/")
VERSION_MARKER = "v"

Candidate = Tuple[str, Any]


class NoAnimationFoundError(ValueError):
    """Raised when no tier resolves a single animation."""


def get_manifest(documents: Dict[str, Any]) -> Optional[Any]:
    """Return the parsed manifest.json, or None when the container has none."""
    return documents.get(MANIFEST_PATH)


def _find_path_for_id(anim_id: str, documents: Dict[str, Any]) -> Optional[str]:
    for path in (f"animations/{anim_id}.json", f"{anim_id}.json"):
        if path in documents:
            return path
    # Loosest match: any document path mentioning the id
    for path in documents:
        if anim_id in path and path.endswith(DOCUMENT_EXTENSION):
            return path
    return None


def resolve_from_manifest(
    documents: Dict[str, Any],
    manifest: Optional[Any],
    diagnostics: Optional[Diagnostics] = None,
) -> List[Candidate]:
    """
    Resolve animations listed in the manifest.

    Entries whose document cannot be found are reported and skipped;
    whatever did resolve is kept.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    if not isinstance(manifest, dict):
        return []
    entries = manifest.get("animations")
    if not isinstance(entries, list) or not entries:
        return []

    resolved = []
    for entry in entries:
        if not isinstance(entry, dict):
            diagnostics.warn(f"Ignoring malformed manifest animation entry: {entry!r}")
            continue
        anim_id = entry.get("id")
        path = entry.get("src")
        if path is not None and not isinstance(path, str):
            diagnostics.warn(f"Ignoring non-string src {path!r} for animation {anim_id!r}")
            path = None
        if not path and anim_id:
            path = _find_path_for_id(str(anim_id), documents)

        if path and path in documents:
            resolved.append((path, documents[path]))
        else:
            diagnostics.warn(
                f"Animation with ID {anim_id!r} (path: {path or 'unknown'}) "
                f"mentioned in manifest not found or path is missing."
            )
    return resolved


def conventional_paths(documents: Dict[str, Any]) -> List[str]:
    """Candidate paths in probe order: root names first, then animation folders."""
    paths = list(ROOT_FALLBACK_NAMES)
    for path in documents:
        if path.startswith(ANIMATION_FOLDERS) and path not in paths:
            paths.append(path)
    return paths


def resolve_conventional(
    documents: Dict[str, Any],
    manifest: Optional[Any],
) -> List[Candidate]:
    """
    Probe conventional locations for versioned documents.

    Without a manifest the container is assumed to hold a single
    animation, so probing stops at the first hit.
    """
    resolved = []
    for path in conventional_paths(documents):
        if path not in documents:
            continue
        tree = documents[path]
        if not has_version_marker(tree, VERSION_MARKER):
            continue
        resolved.append((path, tree))
        if manifest is None:
            break
    return resolved


def resolve_generic(
    documents: Dict[str, Any],
    manifest: Optional[Any],
) -> List[Candidate]:
    """Take the first versioned document anywhere, only when there is no manifest."""
    if manifest is not None:
        return []
    for path, tree in documents.items():
        if has_version_marker(tree, VERSION_MARKER):
            return [(path, tree)]
    return []


def resolve_animations(
    documents: Dict[str, Any],
    diagnostics: Optional[Diagnostics] = None,
) -> List[Candidate]:
    """
    Run the resolution tiers in precedence order.

    Args:
        documents: Parsed documents keyed by archive path
        diagnostics: Collector for non-fatal problems

    Returns:
        List of (path, tree) pairs, in resolution order

    Raises:
        NoAnimationFoundError: If no tier finds an animation
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    manifest = get_manifest(documents)

    resolved = resolve_from_manifest(documents, manifest, diagnostics)
    if resolved:
        logger.debug("Resolved %d animations via manifest", len(resolved))
        return resolved

    diagnostics.warn(
        "No animations processed via manifest.json, or manifest not found/valid. "
        "Attempting fallback."
    )
    resolved = resolve_conventional(documents, manifest)
    if resolved:
        return resolved

    resolved = resolve_generic(documents, manifest)
    if resolved:
        diagnostics.warn(
            f"Used generic fallback: processed first valid JSON found at "
            f"{resolved[0][0]} as an animation."
        )
        return resolved

    raise NoAnimationFoundError(
        "Could not find any Lottie animation JSON data within the .lottie archive."
    )
