"""批量请求数据模型定义模块.

提供批量请求相关的数据模型，包括：
- BulkAction: 批量操作类型枚举
- VersionType: 版本类型枚举
- RawBytes / PreEncodedText / Structured: 文档体的三种形态
- BulkBodyConfig: 批量请求体配置
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..utils import validate_time_format
from .exceptions import BulkConfigError


class BulkAction(Enum):
    """批量操作类型枚举."""

    INDEX = "index"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class VersionType(Enum):
    """版本类型枚举.

    决定 ES 如何解释请求中的 version 字段。

    Attributes:
        INTERNAL: 由 ES 内部维护版本号
        EXTERNAL: 外部版本号，必须大于当前版本
        EXTERNAL_GTE: 外部版本号，大于等于当前版本即可
        FORCE: 强制使用给定版本号
    """

    INTERNAL = "internal"
    EXTERNAL = "external"
    EXTERNAL_GTE = "external_gte"
    FORCE = "force"


@dataclass(frozen=True)
class RawBytes:
    """已序列化的原始字节文档，渲染时原样输出.

    Attributes:
        data: UTF-8 编码的 JSON 字节
    """

    data: bytes


@dataclass(frozen=True)
class PreEncodedText:
    """已序列化的 JSON 文本文档，渲染时原样输出.

    Attributes:
        text: JSON 文本
    """

    text: str


@dataclass(frozen=True)
class Structured:
    """结构化文档，渲染时进行 JSON 编码.

    对字符串使用 Structured 包装可以强制将其编码为 JSON 字符串，
    而不是当作预编码文本原样输出。

    Attributes:
        value: 任意可序列化的值
    """

    value: Any


DocumentBody = RawBytes | PreEncodedText | Structured


def as_document_body(value: Any) -> DocumentBody | None:
    """将文档值归一化为文档体形态.

    Args:
        value: 文档值，可以是 None、字节、字符串、已包装的文档体或任意结构化值

    Returns:
        对应的文档体形态，value 为 None 时返回 None

    Examples:
        >>> as_document_body(b'{"a":1}')
        RawBytes(data=b'{"a":1}')
        >>> as_document_body('{"a":1}')
        PreEncodedText(text='{"a":1}')
        >>> as_document_body({"a": 1})
        Structured(value={'a': 1})
    """
    if value is None:
        return None
    if isinstance(value, (RawBytes, PreEncodedText, Structured)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawBytes(bytes(value))
    if isinstance(value, str):
        return PreEncodedText(value)
    return Structured(value)


_REFRESH_VALUES = ("true", "false", "wait_for")


@dataclass
class BulkBodyConfig:
    """批量请求体配置模型.

    定义整个批量请求级别的参数，在交给传输层时作为
    Elasticsearch.bulk 的关键字参数使用。单个请求未指定索引时，
    由服务端使用这里的默认索引。

    Attributes:
        index: 默认索引名称
        pipeline: 默认 ingest pipeline
        routing: 默认路由值
        refresh: 刷新策略，可选 "true"、"false"、"wait_for"
        timeout: 请求超时时间，ES 时间格式，如 "30s"
        wait_for_active_shards: 需要等待的活跃分片数，"all" 或非负整数

    Raises:
        BulkConfigError: 当参数不合法时抛出

    Examples:
        >>> config = BulkBodyConfig(index="users", refresh="wait_for", timeout="1m")
    """

    index: str | None = None
    pipeline: str | None = None
    routing: str | None = None
    refresh: str | None = None
    timeout: str | None = None
    wait_for_active_shards: int | str | None = None

    def __post_init__(self) -> None:
        """校验批量请求体配置参数合法性."""
        if self.refresh is not None and self.refresh not in _REFRESH_VALUES:
            raise BulkConfigError(
                f"refresh 必须是 {', '.join(_REFRESH_VALUES)} 之一，当前值: {self.refresh}"
            )
        if self.timeout is not None and not validate_time_format(self.timeout):
            raise BulkConfigError(f"timeout 格式不合法，当前值: {self.timeout}")
        shards = self.wait_for_active_shards
        if shards is not None and shards != "all":
            if isinstance(shards, bool) or not isinstance(shards, int) or shards < 0:
                raise BulkConfigError(
                    f"wait_for_active_shards 必须是 'all' 或 >= 0 的整数，当前值: {shards}"
                )

    def to_request_kwargs(self) -> dict[str, Any]:
        """转换为 Elasticsearch.bulk 的关键字参数，仅包含已设置的项."""
        kwargs: dict[str, Any] = {}
        if self.index:
            kwargs["index"] = self.index
        if self.pipeline:
            kwargs["pipeline"] = self.pipeline
        if self.routing:
            kwargs["routing"] = self.routing
        if self.refresh is not None:
            kwargs["refresh"] = self.refresh
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.wait_for_active_shards is not None:
            kwargs["wait_for_active_shards"] = self.wait_for_active_shards
        return kwargs
