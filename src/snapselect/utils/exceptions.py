"""
Exceções customizadas para o snapselect.

Hierarquia de exceções:

    SnapSelectError (base)
    ├── SelectError
    │   ├── InvalidElementTypeError
    │   ├── UnsupportedOperationError
    │   └── NoSuchElementError
    └── ElementInteractionError
        ├── ElementTimeoutError
        └── ElementDetachedError

``SelectError`` subclasses are raised by the selection logic itself, always
before any click reaches the page. ``ElementInteractionError`` subclasses
come from the element/driver layer and are never reinterpreted as selection
errors. Every exception exposes ``kind`` so callers can branch on a
``SelectErrorKind`` instead of parsing messages.

Exemplo:
    >>> try:
    ...     await select.select_by_value("two")
    ... except SnapSelectError as e:
    ...     if e.kind is SelectErrorKind.NO_SUCH_ELEMENT:
    ...         ...
"""

from __future__ import annotations

from enum import Enum

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class SelectErrorKind(str, Enum):
    INVALID_ELEMENT_TYPE = "invalid_element_type"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    NO_SUCH_ELEMENT = "no_such_element"
    COLLABORATOR_FAILURE = "collaborator_failure"


class SnapSelectError(Exception):
    """
    Exceção base para todas as exceções do projeto.

    Todas as exceções customizadas devem herdar desta classe
    para permitir captura genérica quando necessário.
    """

    kind: SelectErrorKind | None = None

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __reduce__(self):
        """Support for pickle serialization."""
        return (self.__class__, (self.message, self.details))


# =============================================================================
# SELECTION ERRORS
# =============================================================================


class SelectError(SnapSelectError):
    """Erros da lógica de seleção (validação, modo, opção inexistente)."""

    pass


class InvalidElementTypeError(SelectError):
    """
    O elemento embrulhado não é um <select>.

    Levantada na construção, antes de qualquer outra operação.
    """

    kind = SelectErrorKind.INVALID_ELEMENT_TYPE


class UnsupportedOperationError(SelectError):
    """
    Operação ilegal para o estado atual do controle.

    Select desabilitado, opção desabilitada, ou deseleção
    em um select de seleção única.
    """

    kind = SelectErrorKind.UNSUPPORTED_OPERATION


class NoSuchElementError(SelectError):
    """Nenhuma opção satisfaz o seletor informado."""

    kind = SelectErrorKind.NO_SUCH_ELEMENT


# =============================================================================
# ELEMENT / DRIVER ERRORS
# =============================================================================


class ElementInteractionError(SnapSelectError):
    """Falha na camada de elemento/driver (Playwright)."""

    kind = SelectErrorKind.COLLABORATOR_FAILURE


class ElementTimeoutError(ElementInteractionError):
    """
    Timeout em operação sobre o elemento.

    Não confundir com builtins.TimeoutError.
    """

    def __init__(self, operation: str, timeout_ms: int = 0):
        message = f"Timeout after {timeout_ms}ms in: {operation}"
        super().__init__(message, details={"operation": operation, "timeout_ms": timeout_ms})
        self.operation = operation
        self.timeout_ms = timeout_ms

    def __reduce__(self):
        """Support for pickle serialization."""
        return (self.__class__, (self.operation, self.timeout_ms))


class ElementDetachedError(ElementInteractionError):
    """
    O elemento saiu do DOM entre a localização e a interação.

    Equivalente a uma referência "stale" em outros drivers.
    """

    def __init__(self, operation: str):
        super().__init__(f"Element detached from the DOM during: {operation}", details={"operation": operation})
        self.operation = operation

    def __reduce__(self):
        """Support for pickle serialization."""
        return (self.__class__, (self.operation,))


# =============================================================================
# HELPER: Converter exceções Playwright
# =============================================================================


def wrap_playwright_error(
    error: Exception, context: str = "", timeout_ms: int = 0
) -> ElementInteractionError:
    """
    Converte exceções do Playwright para exceções do projeto.

    Args:
        error: Exceção original do Playwright.
        context: Operação em andamento, usada na mensagem.
        timeout_ms: Timeout aplicado à operação, quando houver.

    Returns:
        Exceção apropriada do projeto. O chamador deve usar
        ``raise ... from error`` para preservar a causa.

    Example:
        >>> try:
        ...     await locator.click(timeout=5000)
        ... except PlaywrightError as e:
        ...     raise wrap_playwright_error(e, "click", 5000) from e
    """
    operation = context or "Playwright operation"
    if isinstance(error, PlaywrightTimeoutError):
        return ElementTimeoutError(operation, timeout_ms=timeout_ms)

    error_str = str(error).lower()
    if "detached" in error_str or "not attached" in error_str:
        return ElementDetachedError(operation)
    if isinstance(error, PlaywrightError) and "timeout" in error_str:
        return ElementTimeoutError(operation, timeout_ms=timeout_ms)

    return ElementInteractionError(f"{operation}: {error}" if context else str(error))
