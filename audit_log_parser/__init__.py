from .config import ParserOptions, load_options
from .errors import AuditLogParserError, InvalidBody, InvalidHeader
from .flatten import flatten
from .lexer import Lexer, Token, TokenKind
from .models import AuditEvent, Header, Record, Value
from .parser import group_events, parse, parse_header, parse_line

__all__ = [
    "AuditEvent",
    "AuditLogParserError",
    "Header",
    "InvalidBody",
    "InvalidHeader",
    "Lexer",
    "ParserOptions",
    "Record",
    "Token",
    "TokenKind",
    "Value",
    "flatten",
    "group_events",
    "load_options",
    "parse",
    "parse_header",
    "parse_line",
]
