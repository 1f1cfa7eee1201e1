"""批量请求异常定义模块."""

from ..exceptions import ElasticBulkError


class BulkRequestError(ElasticBulkError):
    """批量请求基础异常类."""

    pass


class BulkEncodingError(BulkRequestError):
    """文档序列化异常.

    当文档无法转换为线格式时抛出，例如不支持的值类型、循环引用、
    NaN/Infinity 浮点数或无法按 UTF-8 解码的原始字节。
    """

    pass


class BulkConfigError(BulkRequestError):
    """批量请求体配置校验异常."""

    pass
