"""Slug pipeline orchestration."""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from . import segmentation
from .fallback import generate_fallback, resolve_fallback
from .models import (
    WARNING_FELL_BACK,
    WARNING_HEX_ENCODED,
    WARNING_SEGMENTER_UNAVAILABLE,
    SlugOptions,
    SlugResult,
    SlugStep,
)
from .normalization import normalize_input, rewrite_emoji, rewrite_symbols, rewrite_tech
from .sanitize import collapse_separators, neutralize_slashes, sanitize_strict, truncate_at_boundary
from .tables import STOPWORDS_EN, is_reserved
from .transliteration import to_ascii_tokens

__all__ = [
    "StepRecorder",
    "build_slug",
    "create_slugger",
    "resolve_options",
    "slug",
    "slug_detailed",
]

logger = logging.getLogger(__name__)

_DOT_SENTINELS = frozenset({"", ".", ".."})


class StepRecorder:
    """Collects :class:`SlugStep` records for a single pipeline run."""

    def __init__(self) -> None:
        self._steps: list[SlugStep] = []

    def record(self, op: str, before: str, after: str, **meta: Any) -> None:
        self._steps.append(SlugStep(op=op, before=before, after=after, meta=meta))

    @property
    def steps(self) -> tuple[SlugStep, ...]:
        return tuple(self._steps)


def resolve_options(options: SlugOptions | None = None, **overrides: Any) -> SlugOptions:
    """Layer keyword ``overrides`` on top of ``options`` (or the defaults)."""

    return (options or SlugOptions()).merged(**overrides)


def _is_ascii_digits(token: str) -> bool:
    return bool(token) and token.isascii() and token.isdigit()


def _resolve_stopwords(options: SlugOptions) -> frozenset[str] | None:
    policy = options.stopwords
    if policy is None:
        return None
    if policy == "auto":
        if options.locale.lower().startswith("en"):
            return STOPWORDS_EN
        return None
    return frozenset(word.lower() for word in policy)


def _collapse_stutter(tokens: Sequence[str]) -> list[str]:
    collapsed: list[str] = []
    for token in tokens:
        if not collapsed or collapsed[-1] != token:
            collapsed.append(token)
    return collapsed


def _numbered(candidate: str, separator: str, counter: int, max_length: int | None) -> str:
    # The counter suffix is kept whole; the base gives way when space is short.
    suffix = f"{separator}{counter}"
    if max_length is None or len(candidate) + len(suffix) <= max_length:
        return f"{candidate}{suffix}"
    base = candidate[: max_length - len(suffix)].rstrip(separator) if max_length > len(suffix) else ""
    if base:
        return f"{base}{suffix}"
    digits = str(counter)
    if len(digits) <= max_length:
        return f"{candidate[: max_length - len(digits)]}{digits}"
    return f"{candidate}{suffix}"


def _disambiguate_reserved(
    candidate: str,
    separator: str,
    reserved: frozenset[str],
    max_length: int | None = None,
) -> str:
    counter = 1
    resolved = _numbered(candidate, separator, counter, max_length)
    while is_reserved(resolved, reserved):
        counter += 1
        resolved = _numbered(candidate, separator, counter, max_length)
    return resolved


def build_slug(
    text: str,
    options: SlugOptions,
    recorder: StepRecorder | None = None,
) -> tuple[str, tuple[str, ...], tuple[str, ...]]:
    """Run the full pipeline and return ``(slug, tokens, warnings)``."""

    warnings: list[str] = []
    separator = options.separator
    locale = options.locale
    raw = "" if text is None else str(text)

    normalized = normalize_input(raw)
    tech = rewrite_tech(normalized, options.tech)
    symbols = rewrite_symbols(tech, options.symbols)
    emoji_text, emoji_used = rewrite_emoji(symbols, options.emoji, options.alphabet)
    if recorder is not None:
        recorder.record("normalize:input", "", raw)
        recorder.record("normalize", raw, normalized)
        recorder.record("tech", normalized, tech, enabled=options.tech)
        recorder.record("symbols", tech, symbols, mode=options.symbols)
        recorder.record("emoji", symbols, emoji_text, mode=emoji_used)

    segmenter = segmentation.default_segmenter()
    tokens = segmenter.segment(emoji_text, locale)
    if not segmenter.locale_aware:
        warnings.append(WARNING_SEGMENTER_UNAVAILABLE)
    if recorder is not None:
        recorder.record(
            "segment",
            emoji_text,
            " | ".join(tokens),
            segmenter=segmenter.name,
            used_segmenter=segmenter.locale_aware,
            token_count=len(tokens),
        )

    if options.lowercase:
        before = " ".join(tokens)
        tokens = [segmenter.lower(token, locale) for token in tokens]
        if recorder is not None:
            recorder.record("lowercase", before, " ".join(tokens), locale=locale)

    if not options.keep_numbers:
        before = " ".join(tokens)
        tokens = [token for token in tokens if not _is_ascii_digits(token)]
        if recorder is not None:
            recorder.record("keep_numbers", before, " ".join(tokens), keep_numbers=False)

    if options.mode == "semantic":
        before = " ".join(tokens)
        stopwords = _resolve_stopwords(options)
        if stopwords:
            tokens = [token for token in tokens if token.lower() not in stopwords]
        tokens = _collapse_stutter(tokens)
        if recorder is not None:
            recorder.record("semantic", before, " ".join(tokens), stopwords=bool(stopwords))

    if options.alphabet == "ascii":
        before = " ".join(tokens)
        ascii_tokens: list[str] = []
        encoded: list[str] = []
        for token in tokens:
            ascii_tokens.extend(
                to_ascii_tokens(token, options.unknown, lowercase=options.lowercase, on_hex=encoded.append)
            )
        tokens = ascii_tokens
        if encoded:
            warnings.append(WARNING_HEX_ENCODED)
            logger.debug("Encoded unmappable characters as hex for input %r", raw)
        if recorder is not None:
            recorder.record("ascii", before, " ".join(tokens), unknown=options.unknown)

    slug_value = separator.join(token for token in tokens if token)
    if recorder is not None:
        recorder.record("join", " ".join(tokens), slug_value, separator=separator)

    slug_value = neutralize_slashes(slug_value, separator)
    if options.strict:
        before = slug_value
        slug_value = collapse_separators(sanitize_strict(slug_value, separator, options.alphabet), separator)
        if recorder is not None:
            recorder.record("strict", before, slug_value, alphabet=options.alphabet)
    else:
        slug_value = collapse_separators(slug_value, separator)

    strategy = resolve_fallback(options.fallback)
    if slug_value in _DOT_SENTINELS:
        warnings.append(WARNING_FELL_BACK)
        logger.debug("No usable slug for %r; generating fallback", raw)
        fallback_value = generate_fallback(normalized, separator, tokens, strategy)
        if recorder is not None:
            recorder.record("fallback", slug_value, fallback_value)
        slug_value = fallback_value

    reserved = frozenset(name.casefold() for name in options.reserved)
    max_length = options.effective_max_length
    if is_reserved(slug_value, reserved):
        before = slug_value
        slug_value = _disambiguate_reserved(slug_value, separator, reserved, max_length)
        if recorder is not None:
            recorder.record("reserved", before, slug_value)

    if max_length is not None:
        before = slug_value
        slug_value = truncate_at_boundary(slug_value, separator, max_length)
        if recorder is not None and slug_value != before:
            recorder.record("truncate", before, slug_value, max_length=max_length)

    slug_value = collapse_separators(slug_value, separator)
    if slug_value in _DOT_SENTINELS:
        warnings.append(WARNING_FELL_BACK)
        slug_value = generate_fallback(normalized, separator, tokens, strategy)
        if recorder is not None:
            recorder.record("fallback-final", "", slug_value)

    if "/" in slug_value or "\\" in slug_value:
        before = slug_value
        slug_value = collapse_separators(neutralize_slashes(slug_value, separator), separator)
        if recorder is not None:
            recorder.record("no-slash", before, slug_value)

    # Truncation can cut a numbered name back to a reserved one.
    if is_reserved(slug_value, reserved):
        before = slug_value
        slug_value = _disambiguate_reserved(slug_value, separator, reserved, max_length)
        if recorder is not None:
            recorder.record("reserved", before, slug_value, after_truncation=True)

    return slug_value, tuple(tokens), tuple(warnings)


def slug(text: str, options: SlugOptions | None = None, **overrides: Any) -> str:
    """Return the slug for ``text``.

    Never raises for odd text input; invalid options raise
    :class:`~slugline.models.SlugConfigError`.

    >>> slug("Hello, world!")
    'hello-world'
    """

    resolved = resolve_options(options, **overrides)
    return build_slug(text, resolved)[0]


def slug_detailed(text: str, options: SlugOptions | None = None, **overrides: Any) -> SlugResult:
    """Return the slug for ``text`` along with tokens, warnings and the step trace."""

    resolved = resolve_options(options, **overrides)
    recorder = StepRecorder()
    value, tokens, warnings = build_slug(text, resolved, recorder)
    return SlugResult(input=text, slug=value, tokens=tokens, warnings=warnings, steps=recorder.steps)


def create_slugger(defaults: SlugOptions | None = None, **default_overrides: Any) -> Callable[..., str]:
    """Return a ``slug`` function bound to fixed defaults.

    Keyword overrides given per call are layered on top of the defaults.
    """

    base = resolve_options(defaults, **default_overrides)

    def slugger(text: str, **overrides: Any) -> str:
        return build_slug(text, base.merged(**overrides))[0]

    return slugger
