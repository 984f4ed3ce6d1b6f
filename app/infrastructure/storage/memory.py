"""In-memory content store for embedded bundles and tests."""

from typing import Dict, List, Mapping, Optional, Union

from infrastructure.storage.base import ContentStore, normalize_path
from infrastructure.storage.exceptions import ContentNotFoundError


class InMemoryContentStore(ContentStore):
    """Content store holding its files in a dict.

    Text values are stored UTF-8 encoded.

    Example:
        store = InMemoryContentStore({"templates/index.html": "Hello"})
        store.read_file("templates/index.html")  # b"Hello"
    """

    def __init__(self, files: Optional[Mapping[str, Union[str, bytes]]] = None):
        self._files: Dict[str, bytes] = {}
        self.reads: Dict[str, int] = {}
        for path, content in (files or {}).items():
            self.put(path, content)

    def put(self, path: str, content: Union[str, bytes]) -> None:
        """Store ``content`` at ``path``, replacing any existing file."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[normalize_path(path)] = content

    def remove(self, path: str) -> None:
        """Remove the file at ``path`` if present."""
        self._files.pop(normalize_path(path), None)

    def read_file(self, path: str) -> bytes:
        key = normalize_path(path)
        if key not in self._files:
            raise ContentNotFoundError(path)
        self.reads[key] = self.reads.get(key, 0) + 1
        return self._files[key]

    def list_files(self) -> List[str]:
        return sorted(self._files)

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self._files
