"""Custom exceptions for template rendering.

All rendering failures are per-request: the render fails and the error is
reported to the caller, it never produces empty output.
"""

from typing import Optional, Sequence


class RenderingError(Exception):
    """Base exception for all rendering errors.

    Example:
        try:
            renderer.render("index.html", data)
        except RenderingError as e:
            logger.error("render_failed", error=str(e))
    """

    pass


class TemplateNotFoundError(RenderingError):
    """Raised when no candidate for a template or partial exists.

    Attributes:
        name: Requested template or partial reference.
        tried: Store paths that were looked up.
        partial: Whether a partial reference failed.
    """

    def __init__(self, name: str, tried: Sequence[str] = (), partial: bool = False):
        self.name = name
        self.tried = tuple(tried)
        self.partial = partial
        kind = "Partial" if partial else "Template"
        message = f"{kind} not found: {name}"
        if self.tried:
            message = f"{message} (tried: {', '.join(self.tried)})"
        super().__init__(message)


class ManifestCorruptError(RenderingError):
    """Raised when the asset manifest exists but cannot be used.

    Once raised, the same error is reported for every asset lookup until
    the manifest is invalidated.

    Attributes:
        path: Store path of the manifest.
        reason: Parser message.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"{path} is not correct"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TemplateRenderError(RenderingError):
    """Raised when the template engine fails to execute a template."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to render {name}: {reason}")
