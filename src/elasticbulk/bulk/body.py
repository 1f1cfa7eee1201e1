"""批量请求体组装模块.

BulkBody 收集多个批量请求，将它们渲染后的行拼接为 bulk 接口所需的
NDJSON 请求体。发送请求、分批和重试由调用方的传输层负责。

使用示例:
    from elasticsearch import Elasticsearch
    from elasticbulk.bulk import BulkBody, BulkBodyConfig, BulkIndexRequest

    body = BulkBody(BulkBodyConfig(index="users", refresh="wait_for"))
    body.add(BulkIndexRequest().id("1").doc({"name": "Alice"}))
    es_client.bulk(**body.to_request_kwargs())
"""

import logging
from typing import Self

from ..typing import BulkRequestKwargs
from .models import BulkBodyConfig
from .requests import BulkableRequest

logger = logging.getLogger(__name__)


class BulkBody:
    """批量请求体.

    Args:
        config: 批量请求级别的配置，默认不设置任何参数

    Examples:
        >>> body = BulkBody().add(BulkIndexRequest().index("test").id("1").doc({"a": 1}))
        >>> print(body.body_as_string(), end="")
        {"index":{"_id":"1","_index":"test"}}
        {"a":1}
    """

    def __init__(self, config: BulkBodyConfig | None = None) -> None:
        self.config = config or BulkBodyConfig()
        self._requests: list[BulkableRequest] = []

    def add(self, *requests: BulkableRequest) -> Self:
        """添加一个或多个批量请求."""
        self._requests.extend(requests)
        logger.debug(f"添加 {len(requests)} 个批量请求，当前共 {len(self._requests)} 个")
        return self

    def number_of_actions(self) -> int:
        """返回已添加的请求数量."""
        return len(self._requests)

    def __len__(self) -> int:
        return len(self._requests)

    def estimated_size_in_bytes(self) -> int:
        """估算请求体大小（字节）.

        每行按 UTF-8 编码长度计算，并加上行尾换行符。

        Raises:
            BulkEncodingError: 任一请求的文档无法编码时抛出
        """
        size = 0
        for request in self._requests:
            for line in request.source():
                size += len(line.encode("utf-8")) + 1
        return size

    def body_as_string(self) -> str:
        """返回 NDJSON 请求体，每一行都以换行符结尾.

        Raises:
            BulkEncodingError: 任一请求的文档无法编码时抛出
        """
        parts: list[str] = []
        for request in self._requests:
            for line in request.source():
                parts.append(line)
                parts.append("\n")
        return "".join(parts)

    def reset(self) -> None:
        """清空已添加的请求."""
        logger.debug(f"清空批量请求体，丢弃 {len(self._requests)} 个请求")
        self._requests.clear()

    def to_request_kwargs(self) -> BulkRequestKwargs:
        """转换为 Elasticsearch.bulk 的关键字参数.

        Returns:
            包含 operations 请求体以及已设置配置项的字典

        Raises:
            BulkEncodingError: 任一请求的文档无法编码时抛出
        """
        kwargs: BulkRequestKwargs = {"operations": self.body_as_string()}
        kwargs.update(self.config.to_request_kwargs())
        return kwargs
