"""
End-to-end build tests

Tests the full pipeline: command line → env check → feature parse →
skip list → tree build → report.

Validates exit statuses and the produced output tree.
"""

import tempfile
from pathlib import Path

import pytest

from featuregate.__main__ import main, features_split
from featuregate.config import AppSettings


SAMPLE_JS = """
// #if FEATURE_A
console.log("Feature A");
// #else
console.log("Fallback");
// #endif
"""


class TestFeatureArgument:
    """Test splitting of the comma-separated feature list"""

    def test_simple_list(self):
        assert features_split("FEATURE_CHAT,FEATURE_AUTH") == ["FEATURE_CHAT", "FEATURE_AUTH"]

    def test_trim_and_drop_empty(self):
        assert features_split(" A, ,B ,,") == ["A", "B"]

    def test_empty_argument(self):
        assert features_split("") == []


class TestCommandLine:
    """Test usage handling and exit statuses"""

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0
        assert "featuregate project dist FEATURE_CHAT,FEATURE_AUTH" in capsys.readouterr().out

    def test_short_help(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["-h"])
        assert excinfo.value.code == 0

    def test_missing_arguments_exit_one(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["src"])
        assert excinfo.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_no_arguments_exit_one(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1

    def test_missing_source_directory(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "nope"
            with pytest.raises(SystemExit) as excinfo:
                main([str(missing), str(Path(tmpdir) / "out"), "A"])
            assert excinfo.value.code == 1
            assert "not found" in capsys.readouterr().err

    def test_output_containing_source_rejected(self):
        """Removing the output directory must never remove the source"""
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            src.mkdir()
            (src / "keep.js").write_text("keep();\n")

            with pytest.raises(SystemExit) as excinfo:
                main([str(src), tmpdir, "A"])

            assert excinfo.value.code == 1
            assert (src / "keep.js").exists()


class TestBuild:
    """Test complete builds"""

    def test_build_with_feature(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            (src / "examples").mkdir(parents=True)
            (src / "examples" / "sample.js").write_text(SAMPLE_JS)

            main([str(src), str(out), "FEATURE_A"])

            result = (out / "examples" / "sample.js").read_text()
            assert 'console.log("Feature A");' in result
            assert 'console.log("Fallback");' not in result

    def test_build_without_features(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            src.mkdir()
            (src / "sample.js").write_text(SAMPLE_JS)

            main([str(src), str(out), ""])

            assert (out / "sample.js").read_text() == '\nconsole.log("Fallback");\n'

    def test_output_directory_recreated(self):
        """Stale files from a previous build are removed"""
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            src.mkdir()
            out.mkdir()
            (src / "app.js").write_text("app();\n")
            (out / "stale.js").write_text("old();\n")

            main([str(src), str(out), "A"])

            assert (out / "app.js").exists()
            assert not (out / "stale.js").exists()

    def test_ignore_file_respected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "build"
            (src / "private").mkdir(parents=True)
            (src / "private" / "keys.txt").write_text("secret\n")
            (src / "node_modules").mkdir()
            (src / "node_modules" / "dep.js").write_text("dep();\n")
            (src / "app.js").write_text("app();\n")
            (src / ".featuregateignore").write_text("# local only\nprivate\n")

            main([str(src), str(out), "A"])

            assert (out / "app.js").exists()
            assert not (out / "private").exists()
            assert not (out / "node_modules").exists()

    def test_directive_error_stops_build(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            src.mkdir()
            (src / "broken.ts").write_text("// #if FEATURE_A\nconst a = 1;\n")

            with pytest.raises(SystemExit) as excinfo:
                main([str(src), str(out), "FEATURE_A"])

            assert excinfo.value.code == 1
            err = capsys.readouterr().err
            assert "Preprocess error in" in err
            assert "broken.ts" in err
            assert "Missing #endif" in err

    def test_undecodable_file_stops_build(self, capsys):
        """A non-UTF-8 preprocessed file is reported, not a traceback"""
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            src.mkdir()
            (src / "notes.txt").write_bytes(b"caf\xe9\n")

            with pytest.raises(SystemExit) as excinfo:
                main([str(src), str(out), "A"])

            assert excinfo.value.code == 1
            err = capsys.readouterr().err
            assert "Build error:" in err
            assert "notes.txt" in err

    def test_failed_output_removal_reported(self, monkeypatch, capsys):
        """An output directory that cannot be removed stops the build"""
        def rmtree_denied(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(path))

        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "project"
            out = Path(tmpdir) / "dist"
            src.mkdir()
            out.mkdir()
            (src / "app.js").write_text("app();\n")
            (out / "stale.js").write_text("old();\n")

            with monkeypatch.context() as patch:
                patch.setattr("featuregate.__main__.shutil.rmtree", rmtree_denied)
                with pytest.raises(SystemExit) as excinfo:
                    main([str(src), str(out), "A"])

            assert excinfo.value.code == 1
            assert "Permission denied" in capsys.readouterr().err
            assert not (out / "app.js").exists()


class TestSettings:
    """Test environment-driven configuration"""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.ignore_filename == ".featuregateignore"
        assert settings.extensions == [".js", ".ts", ".jsx", ".py", ".txt", ".html", ".css"]
        assert "node_modules" in settings.default_skip

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FEATUREGATE_IGNORE_FILENAME", ".buildignore")
        monkeypatch.setenv("FEATUREGATE_DEFAULT_SKIP", '["vendor"]')
        settings = AppSettings()
        assert settings.ignore_filename == ".buildignore"
        assert settings.default_skip == ["vendor"]

    def test_extensions_normalized(self):
        settings = AppSettings(extensions=["js", ".vue"])
        assert settings.extensions == [".js", ".vue"]
