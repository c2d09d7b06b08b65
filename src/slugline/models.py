"""Core data models for the slug pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Sequence, Union

__all__ = [
    "ALPHABETS",
    "EMOJI_POLICIES",
    "MODES",
    "SEPARATORS",
    "SYMBOL_POLICIES",
    "UNKNOWN_POLICIES",
    "WARNING_FELL_BACK",
    "WARNING_HEX_ENCODED",
    "WARNING_SEGMENTER_UNAVAILABLE",
    "FallbackContext",
    "FallbackSpec",
    "SlugConfigError",
    "SlugOptions",
    "SlugResult",
    "SlugStep",
    "SuggestionContext",
]

SEPARATORS = ("-", "_", ".")
ALPHABETS = ("unicode", "ascii")
MODES = ("classic", "semantic")
EMOJI_POLICIES = ("remove", "keep", "name")
SYMBOL_POLICIES = ("basic", "extended")
UNKNOWN_POLICIES = ("drop", "hex")

WARNING_SEGMENTER_UNAVAILABLE = "segmenter-unavailable"
WARNING_HEX_ENCODED = "unknown-script-hex-encoded"
WARNING_FELL_BACK = "fell-back"


class SlugConfigError(ValueError):
    """Raised when slug options contain an unsupported value."""


@dataclass(frozen=True, slots=True)
class FallbackContext:
    """Token context handed to callable fallback strategies."""

    tokens: tuple[str, ...]
    separator: str


FallbackSpec = Union[str, Callable[[str, FallbackContext], str], None]


@dataclass(frozen=True, slots=True)
class SlugOptions:
    """Immutable per-call configuration for the slug pipeline."""

    separator: str = "-"
    lowercase: bool = True
    locale: str = "en"
    max_length: int | None = 80
    alphabet: str = "unicode"
    mode: str = "classic"
    strict: bool = True
    emoji: str = "remove"
    symbols: str | None = "basic"
    tech: bool = False
    stopwords: str | Sequence[str] | None = None
    keep_numbers: bool = True
    reserved: Sequence[str] = ()
    unknown: str = "hex"
    fallback: FallbackSpec = None

    def __post_init__(self) -> None:
        if self.separator not in SEPARATORS:
            raise SlugConfigError(
                f"separator must be one of {', '.join(repr(sep) for sep in SEPARATORS)}, got {self.separator!r}"
            )
        if self.alphabet not in ALPHABETS:
            raise SlugConfigError(f"Unsupported alphabet: {self.alphabet!r}")
        if self.mode not in MODES:
            raise SlugConfigError(f"Unsupported mode: {self.mode!r}")
        if self.emoji not in EMOJI_POLICIES:
            raise SlugConfigError(f"Unsupported emoji policy: {self.emoji!r}")
        if self.unknown not in UNKNOWN_POLICIES:
            raise SlugConfigError(f"Unsupported unknown-character policy: {self.unknown!r}")

        symbols = self.symbols or None
        if symbols is not None and symbols not in SYMBOL_POLICIES:
            raise SlugConfigError(f"Unsupported symbols policy: {self.symbols!r}")
        object.__setattr__(self, "symbols", symbols)

        object.__setattr__(self, "stopwords", _normalize_stopwords(self.stopwords))

        if self.max_length is not None:
            if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
                raise SlugConfigError(f"max_length must be an integer, got {self.max_length!r}")
            if self.max_length < 0:
                raise SlugConfigError("max_length cannot be negative")

        if isinstance(self.reserved, str):
            raise SlugConfigError("reserved must be a sequence of names, not a string")
        object.__setattr__(self, "reserved", tuple(str(name) for name in self.reserved))
        object.__setattr__(self, "locale", self.locale or "en")

    def merged(self, **overrides: Any) -> "SlugOptions":
        """Return a validated copy with ``overrides`` applied."""

        if not overrides:
            return self
        _reject_unknown_fields(overrides)
        return replace(self, **overrides)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any], *, base: "SlugOptions | None" = None) -> "SlugOptions":
        """Build options from a plain mapping such as a parsed YAML document."""

        if not isinstance(payload, Mapping):
            raise SlugConfigError("Slug options must be a mapping.")
        values = {str(key).strip(): value for key, value in payload.items()}
        _reject_unknown_fields(values)
        if "fallback" in values and values["fallback"] is not None and not isinstance(values["fallback"], str):
            raise SlugConfigError("fallback loaded from a mapping must be a string")
        return (base or cls()).merged(**values)

    @property
    def effective_max_length(self) -> int | None:
        """Positive truncation limit, or ``None`` when truncation is disabled."""

        if self.max_length and self.max_length > 0:
            return self.max_length
        return None


def _normalize_stopwords(value: Any) -> str | tuple[str, ...] | None:
    if value is None or value is False:
        return None
    if isinstance(value, str):
        if value != "auto":
            raise SlugConfigError(f"Unsupported stopwords policy: {value!r}")
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(str(word) for word in value)
    raise SlugConfigError(f"Unsupported stopwords policy: {value!r}")


def _reject_unknown_fields(values: Mapping[str, Any]) -> None:
    known = {item.name for item in fields(SlugOptions)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise SlugConfigError(f"Unknown slug options: {', '.join(unknown)}")


@dataclass(frozen=True, slots=True)
class SlugStep:
    """Diagnostic record of one executed pipeline stage."""

    op: str
    before: str
    after: str
    meta: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", dict(self.meta))


@dataclass(frozen=True, slots=True)
class SlugResult:
    """Detailed outcome of a slug computation."""

    input: str
    slug: str
    tokens: Sequence[str] = field(default_factory=tuple)
    warnings: Sequence[str] = field(default_factory=tuple)
    steps: Sequence[SlugStep] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def used_fallback(self) -> bool:
        return WARNING_FELL_BACK in self.warnings

    def to_dict(self) -> dict[str, Any]:
        return {
            "input": self.input,
            "slug": self.slug,
            "tokens": list(self.tokens),
            "warnings": list(self.warnings),
            "steps": [
                {"op": step.op, "before": step.before, "after": step.after, "meta": dict(step.meta)}
                for step in self.steps
            ],
        }


@dataclass(frozen=True, slots=True)
class SuggestionContext:
    """Context passed to an asynchronous slug suggester."""

    input: str
    deterministic: str
    locale: str
    max_length: int | None
    separator: str
    alphabet: str
    mode: str
