"""
lottiepack - Convert between .lottie containers and self-contained Lottie JSON.

.lottie files are ZIP containers with:
- manifest.json (optional on input, always written on output)
- animations/<id>.json (animation documents; other layouts are detected)
- images/<name> (image assets referenced by the animations)
"""

__version__ = "0.1.0"

from lottiepack.package import (
    convert_lottie_to_json,
    convert_json_to_lottie,
    pack_lottie,
    get_lottie_info,
    list_lottie_contents,
    read_lottie_file,
)
from lottiepack.manifest import make_manifest, Manifest, AnimationEntry
from lottiepack.models import ResolvedAnimation
from lottiepack.diagnostics import Diagnostics
from lottiepack.resolver import NoAnimationFoundError

__all__ = [
    "convert_lottie_to_json",
    "convert_json_to_lottie",
    "pack_lottie",
    "get_lottie_info",
    "list_lottie_contents",
    "read_lottie_file",
    "make_manifest",
    "Manifest",
    "AnimationEntry",
    "ResolvedAnimation",
    "Diagnostics",
    "NoAnimationFoundError",
]
