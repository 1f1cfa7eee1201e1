"""批量请求构建模块.

该模块将单个文档变更渲染为 Elasticsearch bulk 接口的线格式，包括：
- 索引/创建请求（BulkIndexRequest）
- 更新请求（BulkUpdateRequest）
- 删除请求（BulkDeleteRequest）
- 渲染结果缓存，任一 setter 调用后自动失效
- 多个请求拼接为 NDJSON 请求体（BulkBody）

示例用法:
    >>> from elasticbulk.bulk import BulkIndexRequest
    >>> request = BulkIndexRequest().index("test").type("type1").id("1")
    >>> request = request.doc({"field1": "value1"})
    >>> meta, doc = request.source()
"""

from .body import BulkBody
from .encoding import DocumentEncoder, MetadataLineWriter
from .exceptions import (
    BulkConfigError,
    BulkEncodingError,
    BulkRequestError,
)
from .models import (
    BulkAction,
    BulkBodyConfig,
    PreEncodedText,
    RawBytes,
    Structured,
    VersionType,
    as_document_body,
)
from .requests import (
    BulkableRequest,
    BulkDeleteRequest,
    BulkIndexRequest,
    BulkUpdateRequest,
)

__all__ = [
    "BulkAction",
    "BulkBody",
    "BulkBodyConfig",
    "BulkableRequest",
    "BulkDeleteRequest",
    "BulkIndexRequest",
    "BulkUpdateRequest",
    "DocumentEncoder",
    "MetadataLineWriter",
    "PreEncodedText",
    "RawBytes",
    "Structured",
    "VersionType",
    "as_document_body",
    "BulkRequestError",
    "BulkEncodingError",
    "BulkConfigError",
]
