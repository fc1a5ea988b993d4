from __future__ import annotations

import random
import re

import pytest
from pydantic import ValidationError

from randkit.config import GenerationSettings, load_config
from randkit.rand import DEFAULT_LEXICON, FastSource, GenerationRequest, generate_text, random_text
from randkit.rand.lorem import paragraph, sentence
from randkit.utils.errors import EmptySequenceError


class ScriptedSource:
    def __init__(self, values: list[int]) -> None:
        self.values = list(values)

    def randbelow(self, bound: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < bound
        return value


class NeverComma(random.Random):
    def random(self) -> float:
        return 0.99


class AlwaysComma(random.Random):
    def random(self) -> float:
        return 0.0


def test_request_defaults() -> None:
    req = GenerationRequest()
    assert (req.length, req.unit, req.secure) == (5, "paragraph", False)


def test_request_is_frozen() -> None:
    req = GenerationRequest()
    with pytest.raises(ValidationError):
        req.length = 3  # type: ignore[misc]


def test_request_accepts_is_crypto_alias() -> None:
    assert GenerationRequest.model_validate({"isCrypto": True}).secure is True
    assert GenerationRequest(is_crypto=True).secure is True  # type: ignore[call-arg]


def test_request_rejects_unknown_fields_and_units() -> None:
    with pytest.raises(ValidationError):
        GenerationRequest(colour="red")  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        GenerationRequest(unit="chapter")  # type: ignore[arg-type]


def test_request_from_config_ignores_none_overrides() -> None:
    cfg = load_config(env={})
    req = GenerationRequest.from_config(cfg, length=2, unit=None, secure=None)
    assert (req.length, req.unit, req.secure) == (2, "paragraph", False)


@pytest.mark.parametrize("unit", ["word", "sentence", "paragraph"])
@pytest.mark.parametrize("length", [0, -1, -20])
def test_zero_or_negative_length_is_empty(unit: str, length: int) -> None:
    assert generate_text(GenerationRequest(length=length, unit=unit)) == ""


def test_zero_length_with_empty_lexicon_is_empty() -> None:
    assert generate_text(GenerationRequest(length=0, unit="word"), []) == ""


@pytest.mark.parametrize("secure", [False, True])
def test_words(secure: bool) -> None:
    out = generate_text(GenerationRequest(length=3, unit="word", secure=secure))
    tokens = out.split(" ")
    assert len(tokens) == 3
    assert all(token in DEFAULT_LEXICON for token in tokens)


def test_single_word_from_custom_lexicon() -> None:
    req = GenerationRequest(length=1, unit="word", secure=False)
    for _ in range(50):
        assert generate_text(req, ["alpha", "beta"]) in {"alpha", "beta"}


def test_sentences() -> None:
    out = generate_text(GenerationRequest(length=2, unit="sentence"))
    lines = out.split("\n")
    assert len(lines) == 2
    for line in lines:
        assert line.endswith(".")
        assert line[0].isupper()
        words = line[:-1].split(" ")
        assert 5 <= len(words) < 15
        assert all(w.rstrip(",").lower() in DEFAULT_LEXICON for w in words)
        assert not words[-1].endswith(",")


def test_paragraphs() -> None:
    out = generate_text(GenerationRequest(length=4, unit="paragraph"))
    paragraphs = out.split("\n")
    assert len(paragraphs) == 4
    for para in paragraphs:
        sentences = re.findall(r"[A-Z][^.]*\.", para)
        assert 3 <= len(sentences) < 7
        assert " ".join(sentences) == para


def test_default_request_is_five_paragraphs() -> None:
    assert len(generate_text().split("\n")) == 5


def test_empty_lexicon_propagates() -> None:
    with pytest.raises(EmptySequenceError):
        generate_text(GenerationRequest(length=1, unit="word"), [])


def test_sentence_is_built_from_scripted_draws() -> None:
    # word count 5 + 0 = 5, then word indices
    src = ScriptedSource([0, 1, 0, 2, 0, 1])
    out = sentence(
        ["x", "y", "z"],
        source=src,
        punctuation_rng=NeverComma(),
        settings=GenerationSettings(),
    )
    assert out == "Y x z x y."


def test_commas_only_after_non_final_words() -> None:
    out = sentence(
        ["word"],
        source=FastSource(seed=5),
        punctuation_rng=AlwaysComma(),
        settings=GenerationSettings(),
    )
    words = out[:-1].split(" ")
    assert all(w == "word," for w in words[1:-1])
    assert words[0] == "Word,"
    assert words[-1] == "word"


def test_comma_probability_zero_means_no_commas() -> None:
    out = generate_text(
        GenerationRequest(length=3, unit="paragraph"),
        settings=GenerationSettings(comma_probability=0.0),
        punctuation_rng=AlwaysComma(),
    )
    assert "," not in out


def test_settings_shape_output() -> None:
    settings = GenerationSettings(sentence_words=(2, 3), paragraph_sentences=(1, 2))
    out = paragraph(
        ["a"],
        source=FastSource(seed=0),
        punctuation_rng=NeverComma(),
        settings=settings,
    )
    assert out == "A a."


def test_punctuation_stream_is_independent_of_source() -> None:
    req = GenerationRequest(length=2, unit="sentence")
    plain = generate_text(req, source=FastSource(seed=9), punctuation_rng=NeverComma())
    jittered = generate_text(req, source=FastSource(seed=9), punctuation_rng=AlwaysComma())
    assert plain.replace(",", "") == jittered.replace(",", "")


def test_identical_streams_give_identical_output() -> None:
    req = GenerationRequest(length=3, unit="paragraph")
    first = generate_text(req, source=FastSource(seed=42), punctuation_rng=random.Random(7))
    second = generate_text(req, source=FastSource(seed=42), punctuation_rng=random.Random(7))
    assert first == second


def test_random_text_shorthand() -> None:
    out = random_text(length=3, unit="word", lexicon=["only"])
    assert out == "only only only"
    assert random_text(length=0) == ""
