# audit_log_parser/body.py

import re
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .errors import InvalidBody
from .lexer import Lexer, Token, TokenKind
from .models import Value

MESSAGE_KEY = "_message"

# key=value; ключ без пробелов, кавычек и '='
PAIR_RE = re.compile(r"([^=\s\"']+)=(.*)", re.DOTALL)


def split_pair(token: Token) -> Optional[Tuple[str, str]]:
    """('key', 'value') для токена key=value, иначе None."""
    if token.kind is TokenKind.BRACE_CLOSE:
        return None
    match = PAIR_RE.match(token.text)
    if not match:
        return None
    return match.group(1), match.group(2)


def resolve_leading_text(text: str, tokens: Iterator[Token], message_key: str = MESSAGE_KEY):
    """
    Разбирает слова перед первым key=value:

      'auditd start, ver=2.2'  -> _message='auditd start', дальше ver
      'user pid=3280'          -> ключ 'user pid'
      'ver=2.2'                -> ничего

    Возвращает (message, first_token, first_key):
      message     — None или готовая пара (message_key, строка)
      first_token — первый токен key=value (уже вынут из tokens) или None
      first_key   — ключ, под которым этот токен надо сохранить
    """
    words = []
    for token in tokens:
        pair = split_pair(token)
        if pair is None:
            words.append(token.text)
            continue

        key = pair[0]
        if not words:
            return None, token, key
        if len(words) == 1 and key == "pid":
            return None, token, f"{words[0]} pid"

        message = " ".join(words)
        if message.endswith(","):
            message = message[:-1]
        return (message_key, message), token, key

    if words:
        # одни слова и ни одного key=value
        raise InvalidBody(text, "no key=value pairs")
    return None, None, None


def parse_body(text: str, message_key: str = MESSAGE_KEY) -> Dict[str, Value]:
    """Разбор тела записи (всё после 'msg=audit(...):') в словарь."""
    return _build(text, Lexer(text), message_key, leading=True)


def _build(text: str, tokens: Iterable[Token], message_key: str, leading: bool) -> Dict[str, Value]:
    body: Dict[str, Value] = {}
    tokens = iter(tokens)

    if leading:
        message, first, first_key = resolve_leading_text(text, tokens, message_key)
        if message:
            body[message[0]] = message[1]
        if first is not None:
            _store(body, first_key, first, tokens, text, message_key)

    for token in tokens:
        pair = split_pair(token)
        if pair is None:
            raise InvalidBody(text, f"unexpected token {token.text!r}")
        _store(body, pair[0], token, tokens, text, message_key)

    return body


def _store(body, key, token, tokens, text, message_key):
    # повторный ключ перезаписывает предыдущий
    if token.kind is TokenKind.BRACE_OPEN:
        inner = []
        for t in tokens:
            if t.kind is TokenKind.BRACE_CLOSE:
                break
            inner.append(t)
        else:
            raise InvalidBody(text, f"unclosed brace after {key}=")
        body[key] = _build(text, inner, message_key, leading=False)
        return

    value = split_pair(token)[1]
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        # msg='op=PAM:authentication acct="root" ...' — вложенная запись
        body[key] = parse_body(value[1:-1], message_key)
    else:
        body[key] = value
