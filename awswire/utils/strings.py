from typing import Union

from awswire.config import DEFAULT_ENCODING


def to_str(obj: Union[str, bytes], encoding: str = DEFAULT_ENCODING, errors="strict") -> str:
    """If ``obj`` is an instance of ``binary_type``, return
    ``obj.decode(encoding, errors)``, otherwise return ``obj``"""
    return obj.decode(encoding, errors) if isinstance(obj, bytes) else obj


def to_bytes(obj: Union[str, bytes], encoding: str = DEFAULT_ENCODING, errors="strict") -> bytes:
    """If ``obj`` is an instance of ``text_type``, return
    ``obj.encode(encoding, errors)``, otherwise return ``obj``"""
    return obj.encode(encoding, errors) if isinstance(obj, str) else obj


def format_bytes(count: float, default: str = "n/a") -> str:
    """Format a bytes number as a human-readable unit, e.g., 1.3GB or 21.53MB"""
    if not isinstance(count, (int, float)):
        return default
    cnt = float(count)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if cnt < 1000 or unit == "TB":
            return f"{int(cnt)}{unit}" if unit == "B" else f"{cnt:.2f}{unit}"
        cnt /= 1000.0
    return default
