"""Synthetic filler text composed word → sentence → paragraph.

Word choice and the word/sentence counts go through a single
:class:`~randkit.rand.source.RandomnessSource` chosen per call from
``GenerationRequest.secure``.  Comma placement is cosmetic and draws from a
separate :class:`random.Random` (``punctuation_rng``) that never touches the
main source, so the fast/secure choice only governs selection.

Given the same source stream and the same punctuation stream the output is
identical, which makes the generator a pure mapping from
``(request, streams)`` to text.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from randkit.config.schema import ConfigModel, GenerationSettings, Unit
from randkit.utils.logging import get_logger

from .lexicon import DEFAULT_LEXICON
from .selection import pick_one
from .source import RandomnessSource, next_int, source_for

__all__ = [
    "GenerationRequest",
    "GenerationSettings",
    "word",
    "sentence",
    "paragraph",
    "generate_text",
    "random_text",
]

logger = get_logger(__name__)


class GenerationRequest(BaseModel):
    """Parameters of a single :func:`generate_text` call."""

    length: int = 5
    unit: Unit = "paragraph"
    secure: bool = Field(
        default=False,
        validation_alias=AliasChoices("secure", "is_crypto", "isCrypto"),
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_config(cls, cfg: ConfigModel, **overrides: object) -> GenerationRequest:
        """Build a request from ``cfg.generation`` with non-``None`` overrides."""

        data: dict[str, object] = {
            "length": cfg.generation.length,
            "unit": cfg.generation.unit,
            "secure": cfg.generation.secure,
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)


def word(lexicon: Sequence[str], *, source: RandomnessSource) -> str:
    """Return one word of ``lexicon``."""

    return pick_one(lexicon, source=source)


def sentence(
    lexicon: Sequence[str],
    *,
    source: RandomnessSource,
    punctuation_rng: random.Random,
    settings: GenerationSettings,
) -> str:
    """Return a capitalized sentence terminated by a period."""

    low, high = settings.sentence_words
    count = next_int(low, high, source=source)
    tokens: list[str] = []
    for idx in range(count):
        token = word(lexicon, source=source)
        if idx < count - 1 and punctuation_rng.random() < settings.comma_probability:
            token += ","
        tokens.append(token)
    text = " ".join(tokens)
    return text[:1].upper() + text[1:] + "."


def paragraph(
    lexicon: Sequence[str],
    *,
    source: RandomnessSource,
    punctuation_rng: random.Random,
    settings: GenerationSettings,
) -> str:
    """Return several sentences separated by single spaces."""

    low, high = settings.paragraph_sentences
    count = next_int(low, high, source=source)
    return " ".join(
        sentence(lexicon, source=source, punctuation_rng=punctuation_rng, settings=settings)
        for _ in range(count)
    )


def generate_text(
    request: GenerationRequest | None = None,
    lexicon: Sequence[str] | None = None,
    *,
    settings: GenerationSettings | None = None,
    source: RandomnessSource | None = None,
    punctuation_rng: random.Random | None = None,
) -> str:
    """Return ``request.length`` units of filler text.

    Words are joined with spaces; sentences and paragraphs with newlines.  A
    zero or negative length yields ``""``.  An empty ``lexicon`` raises
    :class:`~randkit.utils.errors.EmptySequenceError`.

    ``source`` and ``punctuation_rng`` replace the per-call defaults, which
    lets callers replay an exact output.
    """

    req = request if request is not None else GenerationRequest()
    count = max(0, req.length)
    if count == 0:
        return ""

    words = tuple(DEFAULT_LEXICON if lexicon is None else lexicon)
    shape = settings if settings is not None else GenerationSettings()
    src = source if source is not None else source_for(req.secure)
    punct = punctuation_rng if punctuation_rng is not None else random.Random()

    if req.unit == "word":
        text = " ".join(word(words, source=src) for _ in range(count))
    elif req.unit == "sentence":
        text = "\n".join(
            sentence(words, source=src, punctuation_rng=punct, settings=shape)
            for _ in range(count)
        )
    else:
        text = "\n".join(
            paragraph(words, source=src, punctuation_rng=punct, settings=shape)
            for _ in range(count)
        )

    logger.debug("generated %d %s unit(s), %d chars", count, req.unit, len(text))
    return text


def random_text(
    length: int = 5,
    unit: Unit = "paragraph",
    secure: bool = False,
    lexicon: Sequence[str] | None = None,
) -> str:
    """Shorthand for :func:`generate_text` with keyword request fields."""

    return generate_text(GenerationRequest(length=length, unit=unit, secure=secure), lexicon)
