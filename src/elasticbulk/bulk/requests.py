"""批量请求构建器模块.

每个请求对象描述批量写入中的一个文档变更，并渲染为 bulk 接口所需的
换行分隔线格式：一行元数据，可选地跟随一行文档体。

    {"index":{"_id":"1","_index":"test","_type":"type1"}}
    {"field1":"value1"}

所有 setter 都会清空渲染缓存并返回自身，以支持链式调用。
请求对象不是线程安全的，并发场景下每个任务应使用各自的实例。

参考文档: https://www.elastic.co/guide/en/elasticsearch/reference/current/docs-bulk.html
"""

from abc import ABC, abstractmethod
from typing import Any, Self

from ..typing import DocumentValue, RenderedLines
from .encoding import DocumentEncoder, MetadataLineWriter, default_encoder
from .exceptions import BulkEncodingError
from .models import BulkAction, DocumentBody, VersionType, as_document_body


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, (BulkAction, VersionType)) else value


class BulkableRequest(ABC):
    """批量请求基类.

    持有所有操作类型共享的定位和版本字段，并负责渲染缓存。
    子类实现 _render() 生成线格式行。

    Args:
        encoder: 文档体编码器，默认使用模块级共享实例
    """

    def __init__(self, encoder: DocumentEncoder | None = None) -> None:
        self._encoder = encoder or default_encoder
        self._index: str | None = None
        self._type: str | None = None
        self._id: str | None = None
        self._routing: str | None = None
        self._parent: str | None = None
        self._refresh: bool | None = None
        self._version: int | None = None
        self._version_type: str | None = None
        self._source: RenderedLines | None = None

    def _invalidate(self) -> Self:
        self._source = None
        return self

    def index(self, index: str | None) -> Self:
        """设置目标索引，未设置时使用批量请求级别的默认索引."""
        self._index = index
        return self._invalidate()

    def type(self, type: str | None) -> Self:
        """设置目标文档类型（旧版多类型索引），未设置时使用批量请求级别的默认类型."""
        self._type = type
        return self._invalidate()

    def id(self, id: str | None) -> Self:
        """设置文档 ID，未设置时由服务端生成."""
        self._id = id
        return self._invalidate()

    def routing(self, routing: str | None) -> Self:
        """设置分片路由值."""
        self._routing = routing
        return self._invalidate()

    def parent(self, parent: str | None) -> Self:
        """设置父文档 ID."""
        self._parent = parent
        return self._invalidate()

    def refresh(self, refresh: bool | None) -> Self:
        """设置请求完成后是否立即刷新分片，None 表示不设置."""
        self._refresh = refresh
        return self._invalidate()

    def version(self, version: int | None) -> Self:
        """设置乐观并发控制的期望版本号，<= 0 视为未设置."""
        self._version = version
        return self._invalidate()

    def version_type(self, version_type: str | VersionType | None) -> Self:
        """设置版本号的解释方式: internal、external、external_gte 或 force."""
        self._version_type = _enum_value(version_type)
        return self._invalidate()

    @abstractmethod
    def _render(self) -> RenderedLines:
        """生成线格式行，文档编码失败时抛出 BulkEncodingError."""

    def source(self) -> RenderedLines:
        """返回请求的线格式表示.

        第一次调用时渲染并缓存，此后在任何 setter 被调用前都直接返回缓存。

        Returns:
            线格式行元组

        Raises:
            BulkEncodingError: 文档体无法编码时抛出，此时不会写入缓存
        """
        if self._source is not None:
            return self._source
        lines = self._render()
        self._source = lines
        return lines

    def __str__(self) -> str:
        """返回以换行连接的线格式表示，仅用于调试和日志."""
        try:
            lines = self.source()
        except BulkEncodingError as e:
            return f"error: {e}"
        return "\n".join(lines)


class BulkIndexRequest(BulkableRequest):
    """批量索引请求.

    默认操作类型为 "index"（存在则覆盖），可通过 op_type("create")
    切换为仅创建（已存在时失败）。

    Examples:
        >>> request = (
        ...     BulkIndexRequest()
        ...     .index("test")
        ...     .type("type1")
        ...     .id("1")
        ...     .doc({"field1": "value1"})
        ... )
        >>> request.source()
        ('{"index":{"_id":"1","_index":"test","_type":"type1"}}', '{"field1":"value1"}')
    """

    def __init__(self, encoder: DocumentEncoder | None = None) -> None:
        super().__init__(encoder)
        self._op_type: str = BulkAction.INDEX.value
        self._timestamp: str | None = None
        self._ttl: int | None = None
        self._doc: DocumentBody | None = None

    def op_type(self, op_type: str | BulkAction | None) -> Self:
        """设置操作类型: "index"（upsert）或 "create"（仅创建）.

        只接受 BulkAction.INDEX 和 BulkAction.CREATE（或对应的字符串），
        更新和删除请求请使用 BulkUpdateRequest 和 BulkDeleteRequest，
        否则元数据行与文档行的配对会被破坏。传入空值时恢复为默认的 "index"。
        """
        self._op_type = _enum_value(op_type) or BulkAction.INDEX.value
        return self._invalidate()

    def timestamp(self, timestamp: str | None) -> Self:
        """设置文档时间戳（已废弃，建议使用普通日期字段）."""
        self._timestamp = timestamp
        return self._invalidate()

    def ttl(self, ttl: int | None) -> Self:
        """设置文档存活时间（秒，已废弃），<= 0 视为未设置."""
        self._ttl = ttl
        return self._invalidate()

    def doc(self, doc: DocumentValue) -> Self:
        """设置要索引的文档.

        Args:
            doc: 字节或字符串视为已序列化的 JSON 原样输出，
                其他值在渲染时进行 JSON 编码，None 渲染为 {}
        """
        self._doc = as_document_body(doc)
        return self._invalidate()

    def _render(self) -> RenderedLines:
        # 保持按键名排序，便于与序列化器的输出逐字节比较
        writer = MetadataLineWriter()
        writer.add_string("_id", self._id)
        writer.add_string("_index", self._index)
        writer.add_string("_parent", self._parent)
        writer.add_string("_routing", self._routing)
        writer.add_string("_timestamp", self._timestamp)
        writer.add_positive_int("_ttl", self._ttl)
        writer.add_string("_type", self._type)
        writer.add_positive_int("_version", self._version)
        writer.add_string("_version_type", self._version_type)
        writer.add_bool("refresh", self._refresh)
        return writer.render(self._op_type), self._encoder.encode(self._doc)


class BulkDeleteRequest(BulkableRequest):
    """批量删除请求，只有元数据行.

    Examples:
        >>> BulkDeleteRequest().index("test").id("1").source()
        ('{"delete":{"_id":"1","_index":"test"}}',)
    """

    def _render(self) -> RenderedLines:
        writer = MetadataLineWriter()
        writer.add_string("_id", self._id)
        writer.add_string("_index", self._index)
        writer.add_string("_parent", self._parent)
        writer.add_string("_routing", self._routing)
        writer.add_string("_type", self._type)
        writer.add_positive_int("_version", self._version)
        writer.add_string("_version_type", self._version_type)
        writer.add_bool("refresh", self._refresh)
        return (writer.render(BulkAction.DELETE.value),)


class BulkUpdateRequest(BulkableRequest):
    """批量更新请求.

    支持局部文档更新、doc_as_upsert、脚本更新和 upsert 文档。
    doc 和 upsert 与索引请求的文档遵循相同的规则：字节或字符串原样嵌入，
    其他值进行 JSON 编码。

    Examples:
        >>> request = (
        ...     BulkUpdateRequest()
        ...     .index("index1")
        ...     .id("1")
        ...     .doc({"counter": 42})
        ...     .doc_as_upsert(True)
        ... )
        >>> request.source()
        ('{"update":{"_id":"1","_index":"index1"}}', '{"doc":{"counter":42},"doc_as_upsert":true}')
    """

    def __init__(self, encoder: DocumentEncoder | None = None) -> None:
        super().__init__(encoder)
        self._timestamp: str | None = None
        self._ttl: int | None = None
        self._retry_on_conflict: int | None = None
        self._doc: DocumentBody | None = None
        self._doc_as_upsert: bool | None = None
        self._detect_noop: bool | None = None
        self._script: Any = None
        self._scripted_upsert: bool | None = None
        self._upsert: DocumentBody | None = None

    def timestamp(self, timestamp: str | None) -> Self:
        """设置文档时间戳（已废弃）."""
        self._timestamp = timestamp
        return self._invalidate()

    def ttl(self, ttl: int | None) -> Self:
        """设置文档存活时间（秒，已废弃），<= 0 视为未设置."""
        self._ttl = ttl
        return self._invalidate()

    def retry_on_conflict(self, retry_on_conflict: int | None) -> Self:
        """设置版本冲突时服务端的重试次数，0 也会输出."""
        self._retry_on_conflict = retry_on_conflict
        return self._invalidate()

    def doc(self, doc: DocumentValue) -> Self:
        """设置要合并到现有文档的局部文档."""
        self._doc = as_document_body(doc)
        return self._invalidate()

    def doc_as_upsert(self, doc_as_upsert: bool | None) -> Self:
        """设置文档不存在时是否以 doc 作为新文档."""
        self._doc_as_upsert = doc_as_upsert
        return self._invalidate()

    def detect_noop(self, detect_noop: bool | None) -> Self:
        """设置文档无变化时是否跳过写入."""
        self._detect_noop = detect_noop
        return self._invalidate()

    def script(self, script: Any) -> Self:
        """设置更新脚本，如 {"source": "ctx._source.counter += 1"}."""
        self._script = script
        return self._invalidate()

    def scripted_upsert(self, scripted_upsert: bool | None) -> Self:
        """设置文档不存在时是否仍然执行脚本."""
        self._scripted_upsert = scripted_upsert
        return self._invalidate()

    def upsert(self, upsert: DocumentValue) -> Self:
        """设置文档不存在时插入的文档."""
        self._upsert = as_document_body(upsert)
        return self._invalidate()

    def _embed(self, writer: MetadataLineWriter, key: str, body: DocumentBody | None) -> None:
        # 空的预编码文档视为未设置
        if body is None:
            return
        encoded = self._encoder.encode(body)
        if encoded.strip():
            writer.add_raw(key, encoded)

    def _render_body(self) -> str:
        writer = MetadataLineWriter()
        writer.add_bool("detect_noop", self._detect_noop)
        self._embed(writer, "doc", self._doc)
        writer.add_bool("doc_as_upsert", self._doc_as_upsert)
        if self._script is not None:
            writer.add_raw("script", self._encoder.encode_value(self._script))
        writer.add_bool("scripted_upsert", self._scripted_upsert)
        self._embed(writer, "upsert", self._upsert)
        return writer.render_object()

    def _render(self) -> RenderedLines:
        writer = MetadataLineWriter()
        writer.add_string("_id", self._id)
        writer.add_string("_index", self._index)
        writer.add_string("_parent", self._parent)
        writer.add_int("_retry_on_conflict", self._retry_on_conflict)
        writer.add_string("_routing", self._routing)
        writer.add_string("_timestamp", self._timestamp)
        writer.add_positive_int("_ttl", self._ttl)
        writer.add_string("_type", self._type)
        writer.add_positive_int("_version", self._version)
        writer.add_string("_version_type", self._version_type)
        writer.add_bool("refresh", self._refresh)
        return writer.render(BulkAction.UPDATE.value), self._render_body()
