import re
from typing import Iterable, List, Optional, Tuple

from .body import MESSAGE_KEY, parse_body
from .config import ParserOptions
from .errors import AuditLogParserError, InvalidHeader
from .flatten import DEFAULT_SEPARATOR
from .log import get_logger
from .models import AuditEvent, Header, Record

logger = get_logger(__name__)

# пример: type=SYSCALL msg=audit(1364481363.243:24287):
HEADER_RE = re.compile(r"type=(\S+) msg=(audit\([^)]*\)):")


def parse_header(line: str) -> Tuple[Header, str]:
    """
    Отделяет заголовок от тела:
      'type=CWD msg=audit(1364481363.243:24287):  cwd="/home"'
        -> Header('CWD', 'audit(1364481363.243:24287)'), ' cwd="/home"'
    """
    match = HEADER_RE.match(line)
    if not match:
        raise InvalidHeader(line)

    body = line[match.end():]
    if body.startswith(" "):
        body = body[1:]
    return Header(type=match.group(1), msg=match.group(2)), body


def parse_line(line: str, flatten: bool = False, separator: str = DEFAULT_SEPARATOR,
               message_key: str = MESSAGE_KEY):
    """
    Разбор одной строки из /var/log/audit/audit.log.
    Возвращает Record, а при flatten=True — плоский словарь
    вида {'header.type': ..., 'body.arch': ...}.

    Бросает InvalidHeader или InvalidBody.
    """
    try:
        header, body_text = parse_header(line)
        record = Record(header=header, body=parse_body(body_text, message_key))
    except AuditLogParserError as exc:
        logger.debug("audit_line_rejected", error=type(exc).__name__, audit_line=line)
        raise

    logger.debug("audit_line_parsed", record_type=header.type, audit_msg=header.msg, fields=len(record.body))
    if flatten:
        return record.flatten(separator)
    return record


def parse(text: str, flatten: Optional[bool] = None, options: Optional[ParserOptions] = None) -> List:
    """
    Разбор нескольких строк лога. Пустые строки пропускаются,
    порядок сохраняется. Первая же битая строка прерывает разбор.

    Файл настроек здесь не читается: options = load_options() вызывающий
    загружает сам и передаёт сюда.
    """
    if options is None:
        options = ParserOptions()
    if flatten is None:
        flatten = options.flatten

    records = [
        parse_line(line, flatten=flatten, separator=options.separator, message_key=options.message_key)
        for line in text.splitlines()
        if line.strip()
    ]
    logger.debug("audit_batch_parsed", records=len(records), flatten=flatten)
    return records


def group_events(records: Iterable[Record]) -> List[AuditEvent]:
    """
    Собирает записи с одним audit(...) id в события:
      SYSCALL + CWD + PATH + EOE -> один AuditEvent
    Порядок — по первому появлению id.
    """
    events = {}
    for rec in records:
        aid = rec.header.audit_id or rec.header.msg
        ev = events.get(aid)
        if ev is None:
            ev = AuditEvent(audit_id=aid, timestamp=rec.header.timestamp, records=[])
            events[aid] = ev
        ev.records.append(rec)
    return list(events.values())
