import os
from pathlib import Path

# Directory holding the CSV bundle shipped inside the package.
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class PathResolver:
    """Central authority for file path resolution in avilist.

    Uses environment variables for configuration with sensible defaults.
    The bundled dataset directory is used unless ``AVILIST_DATA_DIR`` or an
    explicit override points elsewhere.
    """

    def __init__(self, data_dir: Path | str | None = None) -> None:
        """Initialize PathResolver with environment-based configuration.

        Args:
            data_dir: Optional override for the dataset directory. The
                ``AVILIST_DATA_DIR`` environment variable still takes precedence.
        """
        env_data_dir = os.getenv("AVILIST_DATA_DIR")
        if env_data_dir:
            self.data_dir = Path(env_data_dir)
        elif data_dir is not None:
            self.data_dir = Path(data_dir)
        else:
            self.data_dir = BUNDLED_DATA_DIR

    def get_avilist_config_path(self) -> Path:
        """Get the path to the configuration file.

        Checks AVILIST_CONFIG environment variable first, then falls back to
        ``~/.config/avilist/avilist.yaml``.
        """
        config_path = os.getenv("AVILIST_CONFIG")
        if config_path:
            return Path(config_path)

        return Path.home() / ".config" / "avilist" / "avilist.yaml"

    def get_data_dir(self) -> Path:
        """Get the directory holding the dataset bundle."""
        return self.data_dir

    def get_data_file_path(self, filename: str) -> Path:
        """Get the path to one file of the dataset bundle."""
        return self.data_dir / filename
