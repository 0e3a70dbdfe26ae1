import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from .flatten import flatten as flatten_mapping

# значение поля: либо строка (как в логе, с кавычками), либо вложенный словарь
Value = Union[str, Mapping[str, "Value"]]

# пример: audit(1364481363.243:24287)
AUDIT_ID_RE = re.compile(r"audit\((\d+)\.(\d+):(\d+)\)")


@dataclass(frozen=True)
class Header:
    type: str
    msg: str        # audit(...) целиком, как в строке лога

    @property
    def audit_id(self) -> Optional[str]:
        """'sec.ms:serial' или None, если msg не разбирается."""
        match = AUDIT_ID_RE.fullmatch(self.msg)
        if not match:
            return None
        sec, frac, serial = match.groups()
        return f"{sec}.{frac}:{serial}"

    @property
    def serial(self) -> Optional[int]:
        match = AUDIT_ID_RE.fullmatch(self.msg)
        return int(match.group(3)) if match else None

    @property
    def timestamp(self) -> Optional[datetime]:
        match = AUDIT_ID_RE.fullmatch(self.msg)
        if not match:
            return None
        sec, frac, _ = match.groups()
        try:
            return datetime.fromtimestamp(float(f"{sec}.{frac}"), tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            # секунды вне диапазона платформы
            return None

    def to_dict(self):
        return {"type": self.type, "msg": self.msg}


@dataclass(frozen=True)
class Record:
    """
    Одна разобранная строка audit.log:
      {
        'header': {'type': 'SYSCALL', 'msg': 'audit(...)'},
        'body': {'arch': 'c000003e', 'msg': {...}, ...}
      }
    """
    header: Header
    body: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self):
        # тело только для чтения, включая вложенные словари
        object.__setattr__(self, "body", _freeze(self.body))

    def to_dict(self):
        return {"header": self.header.to_dict(), "body": _thaw(self.body)}

    def flatten(self, separator: str = "."):
        return flatten_mapping(self.to_dict(), separator)


@dataclass(frozen=True)
class AuditEvent:
    """Все записи с одинаковым audit(...) id: SYSCALL, CWD, PATH, EOE..."""
    audit_id: str
    timestamp: Optional[datetime]
    records: List[Record] = field(default_factory=list)

    def by_type(self, record_type: str) -> List[Record]:
        return [r for r in self.records if r.header.type == record_type]

    @property
    def types(self) -> List[str]:
        return [r.header.type for r in self.records]


def _freeze(mapping) -> Mapping[str, Value]:
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, Mapping) else value
        for key, value in mapping.items()
    })


def _thaw(mapping) -> Dict[str, Value]:
    return {
        key: _thaw(value) if isinstance(value, Mapping) else value
        for key, value in mapping.items()
    }
