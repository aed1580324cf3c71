from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .errors import CursorError, UnimplementedPathError
from .initials import ZCS, SpellingInitial
from .options import ParserOptions
from .pinyin_token import (
    Alphabet,
    AlphabeticToken,
    Diacritic,
    PinyinToken,
    PunctuationToken,
    SpaceToken,
    tokenize,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TokenCursor(Generic[T]):
    """
    Read position over a fully materialized token list.

    `read_next` advances; `backtrack` undoes the last advance and may not be
    called twice in a row.
    """

    def __init__(self, tokens: list[T]) -> None:
        self._tokens = tokens
        self._next_pos = 0
        self._can_backtrack = False

    @property
    def position(self) -> int:
        return self._next_pos

    @property
    def at_end(self) -> bool:
        return self._next_pos >= len(self._tokens)

    @property
    def remaining(self) -> list[T]:
        return self._tokens[self._next_pos :]

    def peek(self) -> Optional[T]:
        if self.at_end:
            return None
        return self._tokens[self._next_pos]

    def read_next(self) -> Optional[T]:
        if self.at_end:
            self._can_backtrack = False
            return None
        tok = self._tokens[self._next_pos]
        self._next_pos += 1
        self._can_backtrack = True
        return tok

    def backtrack(self) -> None:
        if not self._can_backtrack:
            raise CursorError("backtrack is limited to one step after a successful read")
        self._next_pos -= 1
        self._can_backtrack = False


@dataclass(frozen=True)
class BeforeWordInitial:
    pass


@dataclass(frozen=True)
class InitialParsed:
    initial: SpellingInitial


@dataclass(frozen=True)
class ZCSParsed:
    zcs: ZCS


ParserState = Union[BeforeWordInitial, InitialParsed, ZCSParsed]


_DIRECT_INITIALS = {
    Alphabet.B: SpellingInitial.B,
    Alphabet.P: SpellingInitial.P,
    Alphabet.F: SpellingInitial.F,
    Alphabet.D: SpellingInitial.D,
    Alphabet.T: SpellingInitial.T,
    Alphabet.L: SpellingInitial.L,
    Alphabet.G: SpellingInitial.G,
    Alphabet.K: SpellingInitial.K,
    Alphabet.H: SpellingInitial.H,
    Alphabet.J: SpellingInitial.J,
    Alphabet.Q: SpellingInitial.Q,
    Alphabet.X: SpellingInitial.X,
    Alphabet.R: SpellingInitial.R,
    Alphabet.Y: SpellingInitial.Y,
    Alphabet.W: SpellingInitial.W,
}
_NASALS = {Alphabet.M: SpellingInitial.M, Alphabet.N: SpellingInitial.N}
_SIBILANTS = {Alphabet.Z: ZCS.Z, Alphabet.C: ZCS.C, Alphabet.S: ZCS.S}
_ZERO_INITIAL_VOWELS = {Alphabet.A, Alphabet.E, Alphabet.O}
_UNHANDLED_OPENERS = {Alphabet.I, Alphabet.U, Alphabet.NG}


class PinyinParserIter:
    """
    Pull-based segmentation of one input string.

    Each `step()` performs one state transition and returns the unit it
    emits, if any. Iterating yields only the emitted units: passthrough
    punctuation/space strings and standalone tone-bearing letters rendered
    on the spot. The iterator is single-pass.
    """

    def __init__(self, options: ParserOptions, tokens: list[PinyinToken]) -> None:
        self.options = options
        self.cursor: TokenCursor[PinyinToken] = TokenCursor(tokens)
        self.state: ParserState = BeforeWordInitial()

    def __iter__(self) -> PinyinParserIter:
        return self

    def __next__(self) -> str:
        while True:
            if self.finished:
                raise StopIteration
            unit = self.step()
            if unit is not None:
                return unit

    @property
    def finished(self) -> bool:
        return isinstance(self.state, BeforeWordInitial) and self.cursor.at_end

    def step(self) -> Optional[str]:
        state = self.state
        if isinstance(state, BeforeWordInitial):
            return self._step_before_initial()
        if isinstance(state, ZCSParsed):
            self._step_zcs(state.zcs)
            return None
        if isinstance(state, InitialParsed):
            raise UnimplementedPathError(
                f"final parsing after initial {state.initial.name} is not implemented",
                state=state,
                token=self.cursor.peek(),
            )
        raise UnimplementedPathError(f"unknown parser state {state!r}", state=state)

    def _commit(self, initial: SpellingInitial) -> None:
        logger.debug("initial %s committed at position %d", initial.name, self.cursor.position)
        self.state = InitialParsed(initial)

    def _render(self, token: AlphabeticToken) -> str:
        out = token.to_str(self.options.preserve_capitalization, self.options.strict)
        logger.debug("standalone token %r rendered as %r", token.text, out)
        return out

    def _step_before_initial(self) -> Optional[str]:
        token = self.cursor.read_next()
        if token is None:
            return None

        if isinstance(token, PunctuationToken):
            return token.text if self.options.preserve_punctuations else None
        if isinstance(token, SpaceToken):
            return token.text if self.options.preserve_spaces else None
        if not isinstance(token, AlphabeticToken):
            raise UnimplementedPathError(f"unknown token {token!r}", state=self.state, token=token)

        letter = token.letter
        if letter in _DIRECT_INITIALS:
            self._commit(_DIRECT_INITIALS[letter])
            return None

        if letter in _NASALS:
            if not token.diacritics:
                self._commit(_NASALS[letter])
                return None
            # A tone-marked m/n is a whole syllable.
            return self._render(token)

        if letter in _SIBILANTS:
            zcs = _SIBILANTS[letter]
            if not token.diacritics:
                self.state = ZCSParsed(zcs)
                return None
            if token.diacritics == (Diacritic.CIRCUMFLEX,):
                self._commit(zcs.retroflex)
                return None
            return self._render(token)

        if letter in _ZERO_INITIAL_VOWELS:
            # The vowel belongs to the final.
            self.cursor.backtrack()
            self._commit(SpellingInitial.ZERO_AEO)
            return None

        if letter in _UNHANDLED_OPENERS:
            self.cursor.backtrack()
            raise UnimplementedPathError(
                f"syllable opening on {letter.value!r} is not implemented",
                state=self.state,
                token=token,
            )

        raise UnimplementedPathError(f"unhandled letter {letter!r}", state=self.state, token=token)

    def _step_zcs(self, zcs: ZCS) -> None:
        token = self.cursor.read_next()
        if token is None:
            self._commit(zcs.plain)
            return
        if isinstance(token, AlphabeticToken) and token.letter is Alphabet.H and not token.diacritics:
            self._commit(zcs.retroflex)
            return
        self.cursor.backtrack()
        self._commit(zcs.plain)


class PinyinParser:
    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options or ParserOptions()

    def parse(self, text: str) -> PinyinParserIter:
        return PinyinParserIter(self.options, tokenize(text))

    @classmethod
    def strict(cls, text: str) -> PinyinParserIter:
        return cls(ParserOptions().with_strict(True)).parse(text)

    @classmethod
    def loose(cls, text: str) -> PinyinParserIter:
        return cls().parse(text)


class PinyinAmbiguousParserIter:
    def __init__(self, options: ParserOptions, tokens: list[PinyinToken]) -> None:
        self.options = options
        self.cursor: TokenCursor[PinyinToken] = TokenCursor(tokens)
        self.state: ParserState = BeforeWordInitial()

    def __iter__(self) -> PinyinAmbiguousParserIter:
        return self

    def __next__(self) -> list[str]:
        raise UnimplementedPathError(
            "ambiguous segmentation is not implemented",
            state=self.state,
            token=self.cursor.peek(),
        )


class PinyinAmbiguousParser:
    """
    Enumerates the possible splits of unspaced pinyin. Shares the option set
    of PinyinParser; `strict` is not consulted.
    """

    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options or ParserOptions()

    def parse(self, text: str) -> PinyinAmbiguousParserIter:
        return PinyinAmbiguousParserIter(self.options, tokenize(text))
