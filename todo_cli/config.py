import json
from pathlib import Path
from typing import Any, Dict, Optional

from .storage import home_dir


class Config:
    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = config_file or home_dir() / ".todo_cli" / "config.json"
        self.load_error: Optional[Exception] = None

        self.default_config = {
            "data_dir": None,  # None means the home directory
            "todos_file": ".todos.json",
            "categories_file": ".todo_categories.json",
            "verbose": False
        }

        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults"""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("expected a JSON object")
                return {**self.default_config, **loaded}
            except (ValueError, OSError) as e:
                self.load_error = e
        return self.default_config.copy()

    def get(self, key: str, default=None):
        """Get configuration value"""
        return self.config.get(key, default)

    @property
    def data_dir(self) -> Path:
        data_dir = self.get("data_dir")
        if data_dir:
            return Path(data_dir).expanduser()
        return home_dir()

    @property
    def todos_path(self) -> Path:
        return self.data_dir / (self.get("todos_file") or self.default_config["todos_file"])

    @property
    def categories_path(self) -> Path:
        return self.data_dir / (self.get("categories_file") or self.default_config["categories_file"])

    @property
    def verbose(self) -> bool:
        return bool(self.get("verbose"))
