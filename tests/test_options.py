import dataclasses
import json

import pytest
from pydantic import ValidationError

from pinyin_parser.options import ParserOptions, load_options


def test_defaults_are_loose():
    opts = ParserOptions()
    assert opts == ParserOptions(False, False, False, False)


def test_builders_return_new_values():
    base = ParserOptions()
    strict = base.with_strict(True)
    assert strict.strict is True
    assert base.strict is False


def test_options_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ParserOptions().strict = True  # type: ignore[misc]


def test_punctuation_setter_only_sets_punctuation():
    opts = ParserOptions().with_preserve_punctuations(True)
    assert opts.preserve_punctuations is True
    assert opts.preserve_spaces is False


def test_space_setter_only_sets_spaces():
    opts = ParserOptions().with_preserve_spaces(True)
    assert opts.preserve_spaces is True
    assert opts.preserve_punctuations is False


def test_british_spelling_alias():
    assert ParserOptions().with_preserve_capitalisation(True) == ParserOptions().with_preserve_capitalization(True)


def test_config_round_trip():
    opts = ParserOptions(strict=True, preserve_punctuations=True)
    assert ParserOptions.from_config(opts.to_config()) == opts


def test_load_yaml(tmp_path):
    p = tmp_path / "opts.yaml"
    p.write_text("strict: true\npreserve_capitalisation: true\n", encoding="utf-8")
    opts = load_options(p)
    assert opts.strict is True
    assert opts.preserve_capitalization is True
    assert opts.preserve_spaces is False


def test_load_json(tmp_path):
    p = tmp_path / "opts.json"
    p.write_text(json.dumps({"preserve_spaces": True}), encoding="utf-8")
    assert load_options(p) == ParserOptions(preserve_spaces=True)


def test_load_empty_yaml_gives_defaults(tmp_path):
    p = tmp_path / "opts.yml"
    p.write_text("", encoding="utf-8")
    assert load_options(p) == ParserOptions()


def test_load_rejects_unknown_keys(tmp_path):
    p = tmp_path / "opts.yaml"
    p.write_text("preserve_tones: true\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_options(p)


def test_load_rejects_non_mapping(tmp_path):
    p = tmp_path / "opts.yaml"
    p.write_text("- strict\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(p)


def test_load_rejects_unknown_suffix(tmp_path):
    p = tmp_path / "opts.toml"
    p.write_text("strict = true\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_options(p)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "nope.yaml")
