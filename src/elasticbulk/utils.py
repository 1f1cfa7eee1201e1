"""Elastic Bulk 工具函数模块.

提供 ES 时间格式校验和 JSON 字符串编码功能。
"""

import json
import re


# ES 时间格式正则：数字 + 时间单位（nanos, micros, ms, s, m, h, d）
_TIME_PATTERN = re.compile(r"^(\d+)(nanos|micros|ms|s|m|h|d)$")


def validate_time_format(value: str) -> bool:
    """校验值是否符合 ES 请求超时时间格式.

    支持的时间单位：nanos（纳秒）、micros（微秒）、ms（毫秒）、
    s（秒）、m（分钟）、h（小时）、d（天）。

    Args:
        value: 待校验的时间格式字符串，如 "30s", "1m", "500ms"

    Returns:
        True 表示格式合法，False 表示格式不合法

    Examples:
        >>> validate_time_format("30s")
        True
        >>> validate_time_format("1m")
        True
        >>> validate_time_format("abc")
        False
        >>> validate_time_format("")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return _TIME_PATTERN.match(value) is not None


def quote_json_string(value: str) -> str:
    """将字符串编码为 JSON 字符串字面量.

    非 ASCII 字符原样保留，与文档行的编码方式一致。

    Examples:
        >>> quote_json_string("test")
        '"test"'
        >>> quote_json_string('a"b')
        '"a\\\\"b"'
    """
    return json.dumps(value, ensure_ascii=False)
