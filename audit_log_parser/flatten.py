from typing import Any, Dict, Mapping

DEFAULT_SEPARATOR = "."


def flatten(mapping: Mapping[str, Any], separator: str = DEFAULT_SEPARATOR) -> Dict[str, Any]:
    """
    Превращает вложенный словарь в одноуровневый:
      {'body': {'msg': {'op': 'x'}}} -> {'body.msg.op': 'x'}

    Уже плоский словарь возвращается без изменений (копией).
    Ключи с разделителем внутри не экранируются; при совпадении путей
    побеждает последний.
    """
    result: Dict[str, Any] = {}
    _walk(mapping, "", separator, result)
    return result


def _walk(mapping, prefix, separator, result):
    for key, value in mapping.items():
        path = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, Mapping):
            _walk(value, path, separator, result)
        else:
            result[path] = value
