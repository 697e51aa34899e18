"""
File-based Golden Store

One pretty-printed UTF-8 JSON file per golden document.
Human-readable, reviewable in diffs, no external dependencies.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from core.errors import GoldenFileError
from golden.store import GoldenStore

logger = logging.getLogger(__name__)


class FileGoldenStore(GoldenStore):
    """
    Directory of golden JSON files.

    The directory is created on the first write, not on construction,
    so read-only runs leave the tree untouched.
    """

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        if not name or Path(name).name != name or name in (".", ".."):
            raise ValueError(f"Golden file name must be a plain file name, got {name!r}")
        return self._directory / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> Dict[str, Any]:
        path = self.path_for(name)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GoldenFileError(f"Failed to read golden file {path}: {e}", path=path) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise GoldenFileError(f"Golden file {path} is not valid JSON: {e}", path=path) from e

        if not isinstance(data, dict):
            raise GoldenFileError(
                f"Golden file {path} must hold a JSON object, got {type(data).__name__}",
                path=path,
            )
        return data

    def write(self, name: str, data: Dict[str, Any]) -> Path:
        path = self.path_for(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise GoldenFileError(f"Failed to write golden file {path}: {e}", path=path) from e
        logger.debug(f"Wrote golden file {path}")
        return path
