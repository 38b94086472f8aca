"""
Translation stage and bilingual content wrapper.

:class:`PlaceholderTranslator` is a deterministic stand-in for a translation
API: whole-word dictionary substitutions into Danish followed by a handful of
orthographic digraph rewrites.  Anything implementing :class:`Translator` can
replace it without touching the rest of the pipeline.
"""
from __future__ import annotations

import re
from typing import Final, Optional, Protocol, Sequence

from toolscout.models import BilingualContent

__all__: Sequence[str] = (
    "Translator",
    "PlaceholderTranslator",
    "BilingualWrapper",
    "translate",
    "wrap",
)

# Order matters: "AI" must be rewritten before the single-letter article "A".
_DANISH_WORDS: Final[tuple[tuple[str, str], ...]] = (
    ("AI", "KI"),
    ("The", "Den"),
    ("A", "En"),
    ("An", "En"),
    ("This", "Denne"),
    ("These", "Disse"),
    ("That", "Den"),
    ("Those", "De"),
    ("is", "er"),
    ("are", "er"),
    ("was", "var"),
    ("were", "var"),
    ("will", "vil"),
    ("can", "kan"),
    ("could", "kunne"),
    ("should", "burde"),
    ("would", "ville"),
    ("may", "må"),
    ("might", "kunne"),
    ("must", "skal"),
    ("has", "har"),
    ("have", "har"),
    ("had", "havde"),
)

_DIGRAPHS: Final[tuple[tuple[str, str], ...]] = (
    ("oo", "ø"),
    ("aa", "å"),
    ("ae", "æ"),
)


class Translator(Protocol):
    """Anything that turns source text into *target_language* text."""

    target_language: str

    def translate(self, text: str) -> str: ...


class PlaceholderTranslator:
    """Deterministic English -> Danish approximation."""

    target_language = "da"

    def __init__(self) -> None:
        self._patterns = [
            (re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE), replacement)
            for word, replacement in _DANISH_WORDS
        ]

    def translate(self, text: str) -> str:
        if not text:
            return ""
        translated = text
        for pattern, replacement in self._patterns:
            translated = pattern.sub(replacement, translated)
        for digraph, letter in _DIGRAPHS:
            translated = translated.replace(digraph, letter)
        return translated


class BilingualWrapper:
    """Callable that wraps text into :class:`BilingualContent`.

    Empty text is never translated.  When the target language equals the
    source language the result carries no secondary value.
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        source_language: str = "en",
        target_language: Optional[str] = None,
    ) -> None:
        self.translator: Translator = translator or PlaceholderTranslator()
        self.source_language = source_language
        self.target_language = target_language or self.translator.target_language

    @property
    def translates(self) -> bool:
        return self.target_language.lower() != self.source_language.lower()

    def __call__(self, text: str) -> BilingualContent:
        if not text or not self.translates:
            return BilingualContent(original=text or "")
        return BilingualContent(original=text, secondary=self.translator.translate(text))


_default_translator = PlaceholderTranslator()
_default_wrapper = BilingualWrapper(_default_translator)


def translate(text: str) -> str:
    """Translate *text* with the default placeholder translator."""
    return _default_translator.translate(text)


def wrap(text: str) -> BilingualContent:
    """Wrap *text* with the default bilingual wrapper."""
    return _default_wrapper(text)
