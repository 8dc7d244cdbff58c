"""
Manifest handling for .lottie containers.

Reading is deliberately loose: only animations[].id and animations[].src
are consulted. Writing always produces the same minimal manifest with a
single "data" animation.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json

MANIFEST_VERSION = "1"
GENERATOR = "lottiepack"
AUTHOR = "lottiepack"
DEFAULT_ANIMATION_ID = "data"


@dataclass
class AnimationEntry:
    """Reference to an animation within the container."""
    id: Optional[str] = None
    src: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in (("id", self.id), ("src", self.src)) if v is not None}


@dataclass
class Manifest:
    """
    manifest.json structure.

    Fields other than version, generator, author and the animation
    id/src pairs are not modelled and are dropped on re-encoding.
    """
    version: str = MANIFEST_VERSION
    generator: str = GENERATOR
    author: str = AUTHOR
    animations: List[AnimationEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "generator": self.generator,
            "author": self.author,
            "animations": [anim.to_dict() for anim in self.animations],
        }

    def to_json(self) -> str:
        """Serialize to compact JSON string."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Manifest":
        """Create Manifest from dictionary, ignoring malformed animation entries."""
        animations = []
        entries = d.get("animations")
        for entry in entries if isinstance(entries, list) else []:
            if isinstance(entry, dict):
                animations.append(AnimationEntry(id=entry.get("id"), src=entry.get("src")))
        return cls(
            version=str(d.get("version", MANIFEST_VERSION)),
            generator=d.get("generator", GENERATOR),
            author=d.get("author", AUTHOR),
            animations=animations,
        )

    @classmethod
    def from_json(cls, json_str: str) -> "Manifest":
        """Create Manifest from JSON string."""
        return cls.from_dict(json.loads(json_str))


def make_manifest() -> Manifest:
    """
    Create the canonical manifest written by the encoder.

    One animation entry {"id": "data"}, no src and no activeAnimationId,
    whatever the input document contained.
    """
    return Manifest(animations=[AnimationEntry(id=DEFAULT_ANIMATION_ID)])
