"""Elastic Bulk - Elasticsearch Bulk Request Building and Serialization.

这是一个用于构建 Elasticsearch 批量写入请求并将其序列化为线格式的 Python 库。

主要功能:
    - BulkIndexRequest: 构建索引/创建请求
    - BulkUpdateRequest: 构建更新请求
    - BulkDeleteRequest: 构建删除请求
    - BulkBody: 拼接多个请求为 NDJSON 请求体

使用示例:
    from elasticbulk import BulkIndexRequest

    request = BulkIndexRequest().index("test").id("1").doc({"field1": "value1"})
    meta_line, doc_line = request.source()
"""

__version__ = "0.1.0"

# 导出请求构建器
from elasticbulk.bulk import (
    BulkAction,
    BulkBody,
    BulkBodyConfig,
    BulkableRequest,
    BulkDeleteRequest,
    BulkIndexRequest,
    BulkUpdateRequest,
    DocumentEncoder,
    PreEncodedText,
    RawBytes,
    Structured,
    VersionType,
)

# 导出异常
from elasticbulk.bulk.exceptions import (
    BulkConfigError,
    BulkEncodingError,
    BulkRequestError,
)
from elasticbulk.exceptions import ElasticBulkError

__all__ = [
    # 版本
    "__version__",
    # 请求构建器
    "BulkableRequest",
    "BulkIndexRequest",
    "BulkUpdateRequest",
    "BulkDeleteRequest",
    "BulkBody",
    # 模型和枚举
    "BulkAction",
    "VersionType",
    "BulkBodyConfig",
    "RawBytes",
    "PreEncodedText",
    "Structured",
    "DocumentEncoder",
    # 异常
    "ElasticBulkError",
    "BulkRequestError",
    "BulkEncodingError",
    "BulkConfigError",
]
