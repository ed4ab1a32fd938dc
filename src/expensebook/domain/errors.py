"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ProtectedEntryError(DomainError):
    """Operation refused because the entry is part of the default set."""


class SinkError(DomainError):
    """The remote sink did not accept an expense."""


class SinkNotConfiguredError(SinkError):
    """No remote sink URL is configured."""


class SinkTransportError(SinkError):
    """The remote sink could not be reached or answered with a failure."""


def invalid_category_name(name: str) -> str:
    """Return message for a rejected category name."""
    return (
        f"Invalid category name '{name}': category name must be at least 3 characters "
        "long and contain only letters, numbers, spaces, and hyphens"
    )


def invalid_subcategory_name(name: str) -> str:
    """Return message for a rejected subcategory name."""
    return (
        f"Invalid subcategory name '{name}': subcategory name must be at least 2 characters "
        "long and contain only letters, numbers, spaces, and hyphens"
    )


def default_category_protected(name: str) -> str:
    """Return message when removing a default category."""
    return f"Cannot remove default category '{name}'"


def default_subcategory_protected(category: str, subcategory: str) -> str:
    """Return message when removing an original default subcategory."""
    return f"Cannot remove default subcategory '{subcategory}' of '{category}'"


def sink_not_configured() -> str:
    """Return message for a missing sink URL."""
    return "Remote sink URL is not configured. Use 'expensebook settings set-url' first"


def sink_failed(detail: str) -> str:
    """Return message for a failed sink send."""
    return f"Failed to save to remote sink: {detail}"
