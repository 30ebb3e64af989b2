from pathlib import Path

from avilist.system.path_resolver import BUNDLED_DATA_DIR, PathResolver


class TestPathResolver:
    """Test PathResolver path precedence."""

    def test_bundled_data_by_default(self, monkeypatch):
        """Should point at the package data when nothing overrides it."""
        monkeypatch.delenv("AVILIST_DATA_DIR", raising=False)

        resolver = PathResolver()

        assert resolver.get_data_dir() == BUNDLED_DATA_DIR
        assert resolver.get_data_file_path("avilist_2025.csv").exists()

    def test_explicit_data_dir(self, monkeypatch, tmp_path):
        """Should use the directory passed in."""
        monkeypatch.delenv("AVILIST_DATA_DIR", raising=False)

        resolver = PathResolver(str(tmp_path))

        assert resolver.get_data_file_path("x.csv") == tmp_path / "x.csv"

    def test_environment_wins(self, monkeypatch, tmp_path):
        """Should prefer AVILIST_DATA_DIR over the argument."""
        monkeypatch.setenv("AVILIST_DATA_DIR", str(tmp_path / "env"))

        resolver = PathResolver(tmp_path / "arg")

        assert resolver.get_data_dir() == tmp_path / "env"

    def test_config_path_from_environment(self, monkeypatch, tmp_path):
        """Should honour AVILIST_CONFIG."""
        monkeypatch.setenv("AVILIST_CONFIG", str(tmp_path / "custom.yaml"))

        assert PathResolver().get_avilist_config_path() == tmp_path / "custom.yaml"

    def test_config_path_default(self, monkeypatch):
        """Should fall back to the user config directory."""
        monkeypatch.delenv("AVILIST_CONFIG", raising=False)

        expected = Path.home() / ".config" / "avilist" / "avilist.yaml"
        assert PathResolver().get_avilist_config_path() == expected
