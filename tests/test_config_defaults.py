from randkit.config import GenerationSettings, load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.generation.length == 5
    assert cfg.generation.unit == "paragraph"
    assert cfg.generation.secure is False
    assert cfg.generation.text == GenerationSettings()
    assert cfg.generation.text.sentence_words == (5, 15)
    assert cfg.generation.text.paragraph_sentences == (3, 7)
    assert cfg.random.charset == ""
    assert cfg.lexicon.path is None
    assert cfg.dates.locale == "fr"
    assert cfg.dates.separator == ", "
    assert cfg.logging.level == "WARNING"
