"""Validation helpers for Quoth configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Turn a pydantic ValidationError into one readable line per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages such as
        ``Field 'link_style': Input should be 'wikilink' or 'plain' (received: 'html')``
    """
    messages: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")

        if "input" in error and error.get("type") != "missing":
            messages.append(
                f"Field '{field_path}': {msg} (received: {error['input']!r})"
            )
        else:
            messages.append(f"Field '{field_path}': {msg}")

    return messages or ["Validation failed with unknown error"]
