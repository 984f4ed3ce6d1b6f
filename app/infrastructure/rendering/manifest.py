"""Fingerprinted asset path resolution.

The asset manifest is a flat JSON object mapping logical asset paths to
their fingerprinted names::

    {"application.css": "application.aabbc123.css"}

It is loaded once, on first use, and the outcome (mapping or error) is
cached for the lifetime of the process.
"""

import json
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from infrastructure.logging import get_module_logger
from infrastructure.rendering.exceptions import ManifestCorruptError
from infrastructure.storage import ContentNotFoundError, ContentStore, ContentStoreError

logger = get_module_logger()

DEFAULT_ASSET_PREFIX = "/assets/"


@dataclass(frozen=True)
class _ManifestState:
    """Single load outcome: a mapping or the error that replaced it."""

    mapping: Dict[str, str] = field(default_factory=dict)
    error: Optional[ManifestCorruptError] = None


class AssetManifest:
    """Resolves logical asset paths through a lazily loaded manifest.

    A missing manifest is not an error: every path then resolves to itself.
    A manifest that cannot be parsed makes every later ``resolve`` call raise
    the same ManifestCorruptError, until ``invalidate`` is called.

    Attributes:
        store: Content store holding the manifest.
        manifest_path: Store path of the manifest, None to disable it.
        prefix: Public mount prefix prepended by ``asset_path``.
    """

    def __init__(
        self,
        store: ContentStore,
        manifest_path: Optional[str] = "manifest.json",
        prefix: str = DEFAULT_ASSET_PREFIX,
    ):
        self.store = store
        self.manifest_path = manifest_path
        self.prefix = prefix
        self._lock = threading.Lock()
        self._state: Optional[_ManifestState] = None

    def resolve(self, logical_path: str) -> str:
        """Fingerprinted path for ``logical_path``.

        A leading ``/`` is ignored. Paths not listed in the manifest are
        returned as they are.

        Raises:
            ManifestCorruptError: If the manifest failed to load.
        """
        state = self._load()
        if state.error is not None:
            # Same instance every time; drop the frames of earlier raises
            raise state.error.with_traceback(None)
        key = logical_path.lstrip("/")
        return state.mapping.get(key, key)

    def asset_path(self, logical_path: str) -> str:
        """Public URL path: the mount prefix plus the resolved path."""
        return f"{self.prefix}{self.resolve(logical_path)}"

    def invalidate(self) -> None:
        """Drop the cached outcome; the next lookup reloads the manifest."""
        with self._lock:
            self._state = None
        logger.info("asset_manifest_invalidated", manifest=self.manifest_path)

    @property
    def loaded(self) -> bool:
        return self._state is not None

    def _load(self) -> _ManifestState:
        state = self._state
        if state is None:
            with self._lock:
                # Double-check: another thread may have loaded it meanwhile
                if self._state is None:
                    self._state = self._read_manifest()
                state = self._state
        return state

    def _read_manifest(self) -> _ManifestState:
        if not self.manifest_path:
            return _ManifestState()

        path = self.manifest_path
        try:
            raw = self.store.read_file(path)
        except ContentNotFoundError:
            logger.info("asset_manifest_not_found", manifest=path)
            return _ManifestState()
        except ContentStoreError as e:
            return self._corrupt(path, str(e))

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return self._corrupt(path, str(e))

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            return self._corrupt(path, "expected a flat JSON object of strings")

        mapping = {k.lstrip("/"): v.lstrip("/") for k, v in data.items()}
        logger.info("asset_manifest_loaded", manifest=path, entries=len(mapping))
        return _ManifestState(mapping=mapping)

    @staticmethod
    def _corrupt(path: str, reason: str) -> _ManifestState:
        logger.error("asset_manifest_corrupt", manifest=path, error=reason)
        return _ManifestState(error=ManifestCorruptError(path, reason))
