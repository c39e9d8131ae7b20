from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    # Names the input in messages, like "attribute list" or a filename.
    context: str | None = None


DEFAULT_PARSE_CONFIG = ParseConfig()


class Stream:
    """
    A read-only view over some text.
    Parsers never hold a Stream's position themselves;
    they're handed the Stream and a starting index,
    and report back the index they stopped at.
    """

    __slots__ = ("_chars", "_len", "config")

    def __init__(self, chars: str, config: ParseConfig | None = None) -> None:
        if not isinstance(chars, str):
            msg = f"Can only parse text, got a {type(chars).__name__}."
            raise TypeError(msg)
        self._chars = chars
        self._len = len(chars)
        self.config = config if config is not None else DEFAULT_PARSE_CONFIG

    def __getitem__(self, key: int) -> str:
        if key < 0 or key >= self._len:
            return ""
        return self._chars[key]

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"Stream({self._chars!r})"

    def slice(self, start: int | None, stop: int | None) -> str:
        if start is not None and start < 0:
            start = 0
        if stop is not None and stop < 0:
            stop = 0
        return self._chars[start:stop]

    def rest(self, start: int) -> str:
        # Everything not yet consumed, starting at `start`.
        return self.slice(start, None)

    def startswith(self, text: str, start: int) -> bool:
        return self._chars.startswith(text, start)

    def eof(self, index: int) -> bool:
        return index >= self._len

    @property
    def context(self) -> str | None:
        return self.config.context
