"""Elastic Bulk 异常定义模块."""


class ElasticBulkError(Exception):
    """Elastic Bulk 基础异常类."""

    pass
