"""Locale catalog loading.

Reads every locale message file from a content store and indexes the
parsed messages by Locale. The catalog is built once at startup and is
read-only afterwards.
"""

import posixpath
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from infrastructure.i18n.exceptions import CatalogLoadError, ConfigError
from infrastructure.i18n.models import (
    PLURAL_CATEGORIES,
    Locale,
    MessageEntry,
    MessageSet,
    PluralForms,
)
from infrastructure.logging import get_module_logger
from infrastructure.storage import ContentStore, ContentStoreError

logger = get_module_logger()

LOCALE_FILE_EXTENSIONS = (".yml", ".yaml", ".json")


class LocaleCatalog:
    """Read-only index of MessageSets by Locale.

    Attributes:
        default_locale: Locale used as last-resort fallback; always present.
    """

    def __init__(self, message_sets: Mapping[Locale, MessageSet], default_locale: Locale):
        """Initialize the catalog.

        Args:
            message_sets: Messages per locale.
            default_locale: Fallback locale, must be a key of ``message_sets``.

        Raises:
            ConfigError: If the default locale has no messages.
        """
        if default_locale not in message_sets:
            raise ConfigError(
                f"Default locale {default_locale.tag} has no message file"
            )
        self._message_sets = MappingProxyType(dict(message_sets))
        self.default_locale = default_locale

    def lookup(self, locale: Locale) -> Optional[MessageSet]:
        """Exact-tag lookup; no fallback."""
        return self._message_sets.get(locale)

    @property
    def default_messages(self) -> MessageSet:
        return self._message_sets[self.default_locale]

    @property
    def available_locales(self) -> Tuple[Locale, ...]:
        """Loaded locales in catalog order (sorted by tag)."""
        return tuple(self._message_sets)

    def __contains__(self, locale: object) -> bool:
        return locale in self._message_sets

    def __len__(self) -> int:
        return len(self._message_sets)

    def __iter__(self) -> Iterator[Locale]:
        return iter(self._message_sets)


def locale_from_filename(path: str) -> Optional[Locale]:
    """Extract the Locale a message file belongs to.

    Accepts ``<tag>.<ext>`` and ``<domain>.<tag>.<ext>`` names
    (e.g., "fr.yml", "all.en-US.yaml").

    Returns:
        The parsed Locale, or None if the name does not encode one.
    """
    stem, ext = posixpath.splitext(posixpath.basename(path))
    if ext.lower() not in LOCALE_FILE_EXTENSIONS or not stem:
        return None
    return Locale.try_parse(stem.split(".")[-1])


def _is_plural_mapping(value: Mapping[Any, Any]) -> bool:
    return bool(value) and all(
        isinstance(k, str) and k in PLURAL_CATEGORIES for k in value
    )


def _to_entry(value: Any, key: str, source: str) -> MessageEntry:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, dict) and _is_plural_mapping(value):
        try:
            return PluralForms.from_mapping(value)
        except ValueError as e:
            raise CatalogLoadError(source, f"key {key!r}: {e}") from e
    raise CatalogLoadError(
        source, f"key {key!r} must be a string or a plural mapping"
    )


def _flatten(
    data: Mapping[Any, Any],
    prefix: str,
    out: Dict[str, MessageEntry],
    source: str,
) -> None:
    for name, value in data.items():
        key = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(value, dict) and not _is_plural_mapping(value):
            _flatten(value, key, out, source)
        else:
            out[key] = _to_entry(value, key, source)


def parse_messages(data: Any, source: str) -> Dict[str, MessageEntry]:
    """Convert parsed file content to flat message entries.

    Two shapes are accepted:

    Mapping, with optional nested namespaces::

        greeting: "Hello, World!"
        people:
          one: "one person"
          other: "{count} people"
        users:
          title: "Users"

    List of messages::

        - id: greeting
          translation: "Hello, World!"

    Args:
        data: Output of the YAML parser.
        source: Store path, used in error messages.

    Raises:
        CatalogLoadError: If the content has an unsupported shape.
    """
    messages: Dict[str, MessageEntry] = {}
    if data is None:
        return messages

    if isinstance(data, dict):
        _flatten(data, "", messages, source)
        return messages

    if isinstance(data, list):
        for index, item in enumerate(data):
            if not isinstance(item, dict) or "id" not in item or "translation" not in item:
                raise CatalogLoadError(
                    source, f"entry {index} must have 'id' and 'translation'"
                )
            key = str(item["id"])
            messages[key] = _to_entry(item["translation"], key, source)
        return messages

    raise CatalogLoadError(source, "expected a mapping or a list of messages")


def _read_locale_file(store: ContentStore, path: str) -> Dict[str, MessageEntry]:
    try:
        raw = store.read_file(path)
        data = yaml.safe_load(raw.decode("utf-8"))
    except ContentStoreError as e:
        logger.error("locale_file_unreadable", file=path, error=str(e))
        raise CatalogLoadError(path, str(e)) from e
    except UnicodeDecodeError as e:
        logger.error("locale_file_not_utf8", file=path, error=str(e))
        raise CatalogLoadError(path, "file is not valid UTF-8") from e
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=path, error=str(e))
        raise CatalogLoadError(path, str(e)) from e
    return parse_messages(data, path)


def _locale_files(store: ContentStore, directory: str) -> List[str]:
    prefix = directory.strip("/")
    prefix = f"{prefix}/" if prefix else ""
    try:
        paths = store.list_files()
    except ContentStoreError as e:
        raise CatalogLoadError(directory or "/", str(e)) from e
    return [p for p in paths if p.startswith(prefix)]


def load_catalog(
    store: ContentStore,
    default_locale: Union[Locale, str],
    directory: str = "locales",
) -> LocaleCatalog:
    """Load every locale message file below ``directory``.

    Several files for the same locale are merged in sorted path order;
    later files win on key clashes. Files whose name does not encode a
    locale are skipped.

    Args:
        store: Content store holding the message files.
        default_locale: Fallback locale (Locale or tag string).
        directory: Store directory to scan.

    Returns:
        The loaded LocaleCatalog.

    Raises:
        ConfigError: If the default locale is invalid or has no messages.
        CatalogLoadError: If the store cannot be read or a file is invalid.
    """
    if isinstance(default_locale, str):
        try:
            default_locale = Locale.parse(default_locale)
        except ValueError as e:
            raise ConfigError(f"Invalid default locale: {e}") from e

    merged: Dict[Locale, Dict[str, MessageEntry]] = {}
    sources: Dict[Locale, List[str]] = {}

    for path in _locale_files(store, directory):
        ext = posixpath.splitext(path)[1].lower()
        if ext not in LOCALE_FILE_EXTENSIONS:
            continue
        locale = locale_from_filename(path)
        if locale is None:
            logger.warning("skipped_locale_file", file=path, reason="no locale tag")
            continue
        merged.setdefault(locale, {}).update(_read_locale_file(store, path))
        sources.setdefault(locale, []).append(path)

    if not merged:
        raise ConfigError(f"No locale files found in {directory!r}")

    message_sets = {
        locale: MessageSet.build(locale, merged[locale], tuple(sources[locale]))
        for locale in sorted(merged, key=lambda loc: loc.tag)
    }
    catalog = LocaleCatalog(message_sets, default_locale)

    logger.info(
        "catalog_loaded",
        directory=directory,
        locales=[locale.tag for locale in catalog.available_locales],
        default_locale=default_locale.tag,
    )
    return catalog
