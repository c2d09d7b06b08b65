"""Asynchronous slug suggestions validated by the deterministic pipeline."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from .models import WARNING_FELL_BACK, SlugOptions, SuggestionContext
from .pipeline import build_slug, resolve_options

__all__ = ["Suggester", "slug_async"]

logger = logging.getLogger(__name__)

Suggester = Callable[[SuggestionContext], Awaitable[str | None]]


async def slug_async(
    text: str,
    options: SlugOptions | None = None,
    *,
    suggester: Suggester,
    **overrides: Any,
) -> str:
    """Return a suggester-proposed slug, sanitized like any other input.

    The deterministic slug is computed first and handed to ``suggester``
    inside a :class:`SuggestionContext`. Its answer is treated as untrusted
    text: it goes through the same pipeline, and when it yields nothing usable
    the deterministic slug is returned instead. Exceptions raised by the
    suggester propagate to the caller.
    """

    resolved = resolve_options(options, **overrides)
    deterministic = build_slug(text, resolved)[0]

    context = SuggestionContext(
        input=text,
        deterministic=deterministic,
        locale=resolved.locale,
        max_length=resolved.effective_max_length,
        separator=resolved.separator,
        alphabet=resolved.alphabet,
        mode=resolved.mode,
    )
    try:
        candidate = await suggester(context)
    except Exception:
        logger.warning("Slug suggester failed for %r", text, exc_info=True)
        raise

    if candidate is not None and not isinstance(candidate, str):
        raise TypeError(f"Slug suggester must return a string, got {type(candidate).__name__}")
    if not candidate or not candidate.strip():
        logger.debug("Suggester returned an empty candidate; keeping %r", deterministic)
        return deterministic

    sanitized, _tokens, warnings = build_slug(candidate, resolved)
    if WARNING_FELL_BACK in warnings:
        logger.debug("Suggested slug %r sanitized to nothing; keeping %r", candidate, deterministic)
        return deterministic
    return sanitized
