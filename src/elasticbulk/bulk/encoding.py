"""批量请求线格式编码模块.

提供元数据行拼接（MetadataLineWriter）和文档体编码（DocumentEncoder）。
元数据行直接拼接字符串而不经过通用 JSON 序列化，这是批量写入的热点路径。
"""

import json
import logging
from typing import Any

from elasticsearch.exceptions import SerializationError
from elasticsearch.serializer import JSONSerializer

from ..utils import quote_json_string
from .exceptions import BulkEncodingError
from .models import DocumentBody, PreEncodedText, RawBytes, Structured

logger = logging.getLogger(__name__)


class MetadataLineWriter:
    """元数据行拼接器.

    按调用顺序收集已设置的字段，最终输出 {"<op_type>":{...}}。
    空字符串、None、非正整数均视为未设置，不会出现在输出中。
    更新请求的文档行也通过 render_object() 以同样的方式拼接。

    Examples:
        >>> writer = MetadataLineWriter()
        >>> writer.add_string("_id", "1")
        >>> writer.add_positive_int("_version", 0)
        >>> writer.add_bool("refresh", True)
        >>> writer.render("index")
        '{"index":{"_id":"1","refresh":true}}'
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add_raw(self, key: str, encoded_value: str) -> None:
        """添加已编码的字段值，值原样写入."""
        self._parts.append(f"{quote_json_string(key)}:{encoded_value}")

    def add_string(self, key: str, value: str | None) -> None:
        """添加字符串字段，None 或空字符串时忽略."""
        if value:
            self.add_raw(key, quote_json_string(value))

    def add_positive_int(self, key: str, value: int | None) -> None:
        """添加正整数字段，None 或 <= 0 时忽略."""
        if value is not None and value > 0:
            self.add_raw(key, str(int(value)))

    def add_int(self, key: str, value: int | None) -> None:
        """添加整数字段，仅 None 时忽略."""
        if value is not None:
            self.add_raw(key, str(int(value)))

    def add_bool(self, key: str, value: bool | None) -> None:
        """添加三态布尔字段，None 时忽略."""
        if value is not None:
            self.add_raw(key, "true" if value else "false")

    def render_object(self) -> str:
        """输出内层对象，如 {"_id":"1"}."""
        return "{" + ",".join(self._parts) + "}"

    def render(self, op_type: str) -> str:
        """输出完整的元数据行."""
        return "{" + quote_json_string(op_type) + ":" + self.render_object() + "}"


class DocumentEncoder:
    """文档体编码器.

    将文档体的三种形态编码为文档行文本：
    - RawBytes: 按 UTF-8 解码后原样输出
    - PreEncodedText: 原样输出
    - Structured: 使用 elasticsearch 客户端序列化器的 default 钩子进行 JSON 编码，
      支持 datetime、UUID、Decimal 等类型

    Args:
        serializer: elasticsearch JSONSerializer 实例，默认新建一个
    """

    def __init__(self, serializer: JSONSerializer | None = None) -> None:
        self.serializer = serializer or JSONSerializer()

    def encode_value(self, value: Any) -> str:
        """将结构化值编码为紧凑 JSON.

        Args:
            value: 任意结构化值

        Returns:
            JSON 文本

        Raises:
            BulkEncodingError: 值无法编码时抛出（不支持的类型、循环引用、嵌套过深、NaN 等）
        """
        try:
            return json.dumps(
                value,
                default=self.serializer.default,
                ensure_ascii=False,
                separators=(",", ":"),
                allow_nan=False,
            )
        except (SerializationError, TypeError, ValueError, RecursionError) as e:
            logger.error(f"文档序列化失败: {str(e)}")
            raise BulkEncodingError(f"文档序列化失败: {str(e)}") from e

    def encode(self, body: DocumentBody | None) -> str:
        """将文档体编码为文档行.

        Args:
            body: 文档体，None 表示没有文档

        Returns:
            文档行文本，body 为 None 时返回 "{}"

        Raises:
            BulkEncodingError: 文档无法编码时抛出
        """
        match body:
            case None:
                return "{}"
            case RawBytes(data=data):
                try:
                    return data.decode("utf-8")
                except UnicodeDecodeError as e:
                    logger.error(f"原始字节文档不是合法的 UTF-8: {str(e)}")
                    raise BulkEncodingError(
                        f"原始字节文档不是合法的 UTF-8: {str(e)}"
                    ) from e
            case PreEncodedText(text=text):
                return text
            case Structured(value=value):
                return self.encode_value(value)
        raise BulkEncodingError(f"不支持的文档体类型: {type(body).__name__}")


default_encoder = DocumentEncoder()
