"""Template lookup in the content store.

Resolves template names to content, applying suffix overrides, localized
variants and the underscore convention for partials.
"""

import posixpath
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.rendering.exceptions import TemplateNotFoundError, TemplateRenderError
from infrastructure.storage import ContentNotFoundError, ContentStore, normalize_path

logger = get_module_logger()


@dataclass(frozen=True)
class TemplateKey:
    """A template name with ordered suffix candidates.

    Attributes:
        name: Template name (e.g., "page.html").
        suffixes: Suffix tags tried before the bare name (e.g., ("alt",)).
    """

    name: str
    suffixes: Tuple[str, ...] = ()

    def candidates(self) -> List[str]:
        """Names to try, in order: each suffixed variant, then the bare name."""
        names = [with_suffix(self.name, suffix) for suffix in self.suffixes if suffix]
        names.append(self.name)
        return names


def with_suffix(name: str, suffix: str) -> str:
    """Insert ``_<suffix>`` before the extension ("page.html" -> "page_alt.html")."""
    stem, ext = posixpath.splitext(name)
    return f"{stem}_{suffix}{ext}"


class TemplateResolver:
    """Finds template and partial content in a content store.

    The store listing used to find partials stored under other extensions
    is read once; call ``invalidate`` after adding files to the store.

    Attributes:
        store: Content store holding the templates.
        templates_dir: Store directory templates are relative to.
        partial_extension: Extension assumed for partial references
            given without one.
    """

    def __init__(
        self,
        store: ContentStore,
        templates_dir: str = "templates",
        partial_extension: str = ".html",
    ):
        self.store = store
        self.templates_dir = normalize_path(templates_dir)
        self.partial_extension = partial_extension
        self._files: Optional[Tuple[str, ...]] = None

    def invalidate(self) -> None:
        """Forget the cached store listing used for partial lookups."""
        self._files = None

    def resolve(
        self,
        name: str,
        suffix_candidates: Sequence[str] = (),
        localized_name: Optional[str] = None,
    ) -> str:
        """Content of the first existing candidate for ``name``.

        Candidates are tried in order: the localized proposal with each
        suffix then bare, followed by ``name`` with each suffix then bare.

        Raises:
            TemplateNotFoundError: If no candidate exists.
        """
        return self.find(name, suffix_candidates, localized_name)[1]

    def find(
        self,
        name: str,
        suffix_candidates: Sequence[str] = (),
        localized_name: Optional[str] = None,
    ) -> Tuple[str, str]:
        """Like ``resolve`` but also returns the template name that matched.

        Returns:
            ``(resolved_name, content)``
        """
        suffixes = tuple(suffix_candidates or ())
        names: List[str] = []
        if localized_name and localized_name != name:
            names.extend(TemplateKey(localized_name, suffixes).candidates())
        names.extend(TemplateKey(name, suffixes).candidates())

        tried = []
        for candidate in names:
            path = self._path(candidate)
            content = self._read(candidate, path)
            if content is not None:
                logger.debug("template_resolved", template=name, resolved=candidate)
                return candidate, content
            tried.append(path)

        logger.warning("template_not_found", template=name, tried=tried)
        raise TemplateNotFoundError(name, tried)

    def resolve_partial(self, reference: str) -> str:
        """Content of the partial ``reference`` names.

        Partials live in files whose base name starts with an underscore;
        the reference may omit both the underscore and the extension:
        "foo", "foo.html" and "_foo.html" all resolve to "_foo.html", and
        "users/card" resolves to "users/_card.html".

        Raises:
            TemplateNotFoundError: If the partial does not exist.
        """
        return self.find_partial(reference)[1]

    def find_partial(self, reference: str) -> Tuple[str, str]:
        """Like ``resolve_partial`` but also returns the matched name."""
        tried = []
        for candidate in self._partial_candidates(reference):
            path = self._path(candidate)
            content = self._read(candidate, path)
            if content is not None:
                return candidate, content
            tried.append(path)

        logger.warning("partial_not_found", partial=reference, tried=tried)
        raise TemplateNotFoundError(reference, tried, partial=True)

    def _partial_candidates(self, reference: str) -> Iterable[str]:
        directory, base = posixpath.split(normalize_path(reference))
        if not base.startswith("_"):
            base = f"_{base}"

        if posixpath.splitext(base)[1]:
            yield posixpath.join(directory, base)
            return

        default = posixpath.join(directory, f"{base}{self.partial_extension}")
        yield default

        # Any other extension stored for the same partial, e.g. "_foo.txt"
        prefix = self._path(posixpath.join(directory, f"{base}."))
        for path in self._listing():
            rest = path[len(prefix):]
            if path.startswith(prefix) and rest and "/" not in rest:
                if path != self._path(default):
                    yield self._relative(path)

    def _path(self, name: str) -> str:
        name = normalize_path(name)
        if not self.templates_dir:
            return name
        return f"{self.templates_dir}/{name}"

    def _relative(self, path: str) -> str:
        if not self.templates_dir:
            return path
        return path[len(self.templates_dir) + 1:]

    def _listing(self) -> Tuple[str, ...]:
        if self._files is None:
            self._files = tuple(self.store.list_files())
        return self._files

    def _read(self, name: str, path: str) -> Optional[str]:
        try:
            return self.store.read_text(path)
        except ContentNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.error("template_not_utf8", template=name, path=path, error=str(e))
            raise TemplateRenderError(name, "not valid UTF-8") from e
