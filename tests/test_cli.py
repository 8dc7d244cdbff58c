"""Tests for cli.py - command-line entry points."""

import json
import zipfile

from lottiepack.cli import main


class TestCli:

    def test_to_lottie_then_to_json(self, tmp_path):
        src = tmp_path / "anim.json"
        src.write_text(json.dumps({"v": "5.7.4", "layers": []}), encoding="utf-8")
        out = tmp_path / "anim.lottie"

        assert main(["to-lottie", str(src), "-o", str(out)]) == 0
        assert zipfile.is_zipfile(out)

        out_dir = tmp_path / "json"
        assert main(["to-json", str(out), "-o", str(out_dir)]) == 0
        assert json.loads((out_dir / "data.json").read_text(encoding="utf-8"))["v"] == "5.7.4"

    def test_info(self, tmp_path, capsys):
        src = tmp_path / "anim.json"
        src.write_text('{"v": "5.7.4"}', encoding="utf-8")
        out = tmp_path / "anim.lottie"
        main(["to-lottie", str(src), "-o", str(out)])

        assert main(["info", str(out)]) == 0
        captured = capsys.readouterr()
        assert "animations/data.json" in captured.out

    def test_to_json_same_basename(self, tmp_path, build_lottie):
        """Animations from different folders with one basename both get written."""
        src = tmp_path / "multi.lottie"
        src.write_bytes(build_lottie({
            "manifest.json": {"animations": []},
            "animations/x.json": {"v": "5.7.4", "nm": "first"},
            "a/x.json": {"v": "5.7.4", "nm": "second"},
        }))
        out_dir = tmp_path / "json"

        assert main(["to-json", str(src), "-o", str(out_dir)]) == 0
        names = {p.name: json.loads(p.read_text(encoding="utf-8"))["nm"] for p in out_dir.iterdir()}
        assert names == {"x.json": "first", "x_1.json": "second"}

    def test_error_exit_code(self, tmp_path, capsys):
        assert main(["to-json", str(tmp_path / "missing.lottie")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 0
