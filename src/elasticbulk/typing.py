"""Elastic Bulk 类型定义模块."""

from typing import Any

# 文档值类型（字节、预编码字符串或任意可序列化的结构化值）
DocumentValue = Any

# 渲染后的线格式行
# 格式: (元数据行,) 或 (元数据行, 文档行)
RenderedLines = tuple[str, ...]

# 传递给 Elasticsearch.bulk 的关键字参数
BulkRequestKwargs = dict[str, Any]
