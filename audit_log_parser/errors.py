# audit_log_parser/errors.py


class AuditLogParserError(ValueError):
    """Базовая ошибка разбора строки audit.log."""


class InvalidHeader(AuditLogParserError):
    """Начало строки не похоже на `type=... msg=audit(...):`."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid audit log header: {line!r}")


class InvalidBody(AuditLogParserError):
    """Тело записи содержит токен, который не удалось разобрать."""

    def __init__(self, body: str, reason: str = ""):
        self.body = body
        self.reason = reason
        message = f"Invalid audit log body: {body!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
