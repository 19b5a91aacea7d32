"""Error taxonomy for the uninstall pipeline.

Every error raised here is fatal to a run. The only locally recovered case is
``NotFoundError`` for the control-plane namespace, handled by the resolver.
"""

from __future__ import annotations


class UninstallError(Exception):
    """Base class for all pipeline failures."""

    def __init__(self, message: str, *, operation: str = "", cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.cause = cause


class ConfigError(UninstallError):
    """Raised when configuration is invalid or the cluster config cannot be loaded."""


class ApiError(UninstallError):
    """Raised on any cluster API failure (connectivity, auth, server error)."""

    def __init__(
        self,
        message: str,
        *,
        operation: str = "",
        cause: BaseException | None = None,
        status: int | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(message, operation=operation, cause=cause)
        self.status = status
        self.detail = detail or message  # failure without the operation prefix


class NotFoundError(ApiError):
    """Raised when the requested object does not exist (HTTP 404)."""


class RenderError(UninstallError):
    """Raised when a resource cannot be serialised or written to the sink."""
