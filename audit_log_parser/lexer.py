# audit_log_parser/lexer.py
#
# Токенизатор тела записи. Режет по пробелам, но учитывает:
#   "..."   — пробелы внутри не режут токен, кавычки остаются в токене
#   '...'   — то же самое, дальше такое значение разбирается как вложенная запись
#   KEY={   — открывает блок до отдельного токена "}" (без вложенности)
#   saddr=0100SADDR={ — склеенное поле, режется перед SADDR

import re
from enum import Enum, auto
from typing import Iterator, NamedTuple

from .errors import InvalidBody

# 'saddr=100000SADDR=' -> ('saddr=', '100000', 'SADDR')
GLUED_FIELD_RE = re.compile(r"([^=\s]+=)(.*?)([A-Z_]+)=")

# ключи, которые auditd приклеивает к предыдущему значению
KNOWN_GLUED_KEYS = ("SADDR",)

BRACE_CLOSE = "}"


def split_glued(word: str):
    """
    'saddr=0100SADDR=' -> ('saddr=0100', 'SADDR'), иначе None.

    Значение перед ключом может быть пустым: 'a=SADDR=' -> ('a=', 'SADDR').
    saddr пишется заглавным hex, поэтому для известных ключей граница
    ставится по самому ключу:
      'saddr=6C6F636BSADDR=' -> ('saddr=6C6F636B', 'SADDR')
    Для прочих ключом считается вся серия [A-Z_] перед '='.
    """
    match = GLUED_FIELD_RE.fullmatch(word)
    if not match:
        return None
    head, value, key = match.groups()

    for known in KNOWN_GLUED_KEYS:
        if key.endswith(known):
            return head + value + key[:-len(known)], known

    return head + value, key


class TokenKind(Enum):
    WORD = auto()          # обычный токен: key=value, key="...", key='...', слово
    BRACE_OPEN = auto()    # KEY={ (текст токена — 'KEY={')
    BRACE_CLOSE = auto()   # отдельная '}' внутри блока


class Token(NamedTuple):
    kind: TokenKind
    text: str


class _State(Enum):
    PLAIN = auto()
    DOUBLE_QUOTE = auto()
    SINGLE_QUOTE = auto()


class Lexer:
    """
    Ленивая последовательность токенов тела записи.

    Каждый вызов iter() начинает разбор заново, так что один и тот же
    Lexer можно пройти несколько раз.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return self._tokens()

    def _tokens(self) -> Iterator[Token]:
        state = _State.PLAIN
        in_brace = False
        buf = []

        def flush():
            nonlocal in_brace
            word = "".join(buf)
            buf.clear()
            if not word:
                return None
            if in_brace and word == BRACE_CLOSE:
                in_brace = False
                return Token(TokenKind.BRACE_CLOSE, word)
            return Token(TokenKind.WORD, word)

        for ch in self.text:
            # токен никогда не переходит через перевод строки
            if ch == "\n":
                if state is not _State.PLAIN:
                    raise InvalidBody(self.text, "unterminated quote")
                token = flush()
                if token:
                    yield token
                continue

            if state is _State.DOUBLE_QUOTE:
                buf.append(ch)
                if ch == '"':
                    state = _State.PLAIN
                continue

            if state is _State.SINGLE_QUOTE:
                buf.append(ch)
                if ch == "'":
                    state = _State.PLAIN
                continue

            if ch.isspace():
                token = flush()
                if token:
                    yield token
                continue

            if ch == '"':
                state = _State.DOUBLE_QUOTE
                buf.append(ch)
                continue

            if ch == "'":
                state = _State.SINGLE_QUOTE
                buf.append(ch)
                continue

            if ch == "{" and not in_brace and buf and buf[-1] == "=":
                word = "".join(buf)
                buf.clear()
                glued = split_glued(word)
                if glued:
                    yield Token(TokenKind.WORD, glued[0])
                    word = glued[1] + "="
                in_brace = True
                yield Token(TokenKind.BRACE_OPEN, word + ch)
                continue

            buf.append(ch)

        if state is not _State.PLAIN:
            raise InvalidBody(self.text, "unterminated quote")

        token = flush()
        if token:
            yield token


def tokenize(text: str):
    return list(Lexer(text))
