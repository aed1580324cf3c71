from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from .schemas import ParserConfig


@dataclass(frozen=True)
class ParserOptions:
    strict: bool = False
    preserve_spaces: bool = False
    preserve_capitalization: bool = False
    preserve_punctuations: bool = False

    def with_strict(self, b: bool) -> ParserOptions:
        return replace(self, strict=b)

    def with_preserve_spaces(self, b: bool) -> ParserOptions:
        return replace(self, preserve_spaces=b)

    def with_preserve_capitalization(self, b: bool) -> ParserOptions:
        return replace(self, preserve_capitalization=b)

    def with_preserve_capitalisation(self, b: bool) -> ParserOptions:
        return self.with_preserve_capitalization(b)

    def with_preserve_punctuations(self, b: bool) -> ParserOptions:
        # Only touches the punctuation flag; older builds toggled preserve_spaces here.
        return replace(self, preserve_punctuations=b)

    def to_config(self) -> ParserConfig:
        return ParserConfig(
            strict=self.strict,
            preserve_spaces=self.preserve_spaces,
            preserve_capitalization=self.preserve_capitalization,
            preserve_punctuations=self.preserve_punctuations,
        )

    @classmethod
    def from_config(cls, config: ParserConfig) -> ParserOptions:
        return cls(
            strict=config.strict,
            preserve_spaces=config.preserve_spaces,
            preserve_capitalization=config.preserve_capitalization,
            preserve_punctuations=config.preserve_punctuations,
        )


def load_options(path: str | Path) -> ParserOptions:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    if p.suffix.lower() in {".yml", ".yaml"}:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    elif p.suffix.lower() == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
    else:
        raise ValueError("Config must be .yml/.yaml or .json")
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping of option -> bool")
    return ParserOptions.from_config(ParserConfig.model_validate(data))
