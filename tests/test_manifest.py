"""Tests for manifest.py - Manifest dataclass and canonical manifest."""

import json

from lottiepack.manifest import Manifest, AnimationEntry, make_manifest


class TestManifest:
    """Test Manifest dataclass."""

    def test_default_manifest(self):
        manifest = Manifest()

        assert manifest.version == "1"
        assert manifest.generator == "lottiepack"
        assert manifest.animations == []

    def test_entry_drops_missing_fields(self):
        assert AnimationEntry(id="a").to_dict() == {"id": "a"}
        assert AnimationEntry(id="a", src="a.json").to_dict() == {"id": "a", "src": "a.json"}

    def test_manifest_from_json(self):
        """Only id/src survive; unknown fields are dropped."""
        json_str = '''
        {
            "version": "1",
            "generator": "@dotlottie/dotlottie-js",
            "author": "someone",
            "activeAnimationId": "intro",
            "animations": [
                {"id": "intro", "autoplay": true, "loop": true},
                {"id": "outro", "src": "animations/outro.json"},
                "junk"
            ]
        }
        '''

        manifest = Manifest.from_json(json_str)

        assert manifest.generator == "@dotlottie/dotlottie-js"
        assert [a.id for a in manifest.animations] == ["intro", "outro"]
        assert manifest.animations[1].src == "animations/outro.json"
        assert "activeAnimationId" not in manifest.to_dict()

    def test_non_list_animations(self):
        assert Manifest.from_dict({"animations": 5}).animations == []
        assert Manifest.from_dict({"animations": {"id": "a"}}).animations == []


class TestMakeManifest:
    """Test the canonical manifest written on encode."""

    def test_exact_shape(self):
        manifest = make_manifest()

        assert manifest.to_json() == (
            '{"version":"1","generator":"lottiepack","author":"lottiepack",'
            '"animations":[{"id":"data"}]}'
        )

    def test_no_src_or_active_animation(self):
        parsed = json.loads(make_manifest().to_json())

        assert parsed["animations"] == [{"id": "data"}]
        assert "src" not in parsed["animations"][0]
        assert "activeAnimationId" not in parsed
