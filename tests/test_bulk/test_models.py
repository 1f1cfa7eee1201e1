"""数据模型（BulkAction、VersionType、文档体、BulkBodyConfig）单元测试."""

import pytest

from elasticbulk.bulk import (
    BulkAction,
    BulkBodyConfig,
    BulkConfigError,
    PreEncodedText,
    RawBytes,
    Structured,
    VersionType,
    as_document_body,
)


class TestEnums:
    """枚举测试."""

    def test_bulk_action_values(self) -> None:
        """测试操作类型的值."""
        assert [action.value for action in BulkAction] == [
            "index",
            "create",
            "update",
            "delete",
        ]

    def test_version_type_values(self) -> None:
        """测试版本类型的值."""
        assert [version_type.value for version_type in VersionType] == [
            "internal",
            "external",
            "external_gte",
            "force",
        ]


class TestAsDocumentBody:
    """文档体归一化测试."""

    def test_none(self) -> None:
        """测试 None 保持为 None."""
        assert as_document_body(None) is None

    def test_bytes_like(self) -> None:
        """测试字节类值归一化为 RawBytes."""
        assert as_document_body(b"{}") == RawBytes(b"{}")
        assert as_document_body(bytearray(b"{}")) == RawBytes(b"{}")
        assert as_document_body(memoryview(b"{}")) == RawBytes(b"{}")

    def test_string(self) -> None:
        """测试字符串归一化为 PreEncodedText."""
        assert as_document_body("{}") == PreEncodedText("{}")

    def test_structured(self) -> None:
        """测试其他值归一化为 Structured."""
        assert as_document_body({"a": 1}) == Structured({"a": 1})
        assert as_document_body(0) == Structured(0)
        assert as_document_body(False) == Structured(False)

    def test_wrapped_values_are_kept(self) -> None:
        """测试已包装的值保持不变."""
        body = Structured("text")
        assert as_document_body(body) is body


class TestBulkBodyConfig:
    """BulkBodyConfig 数据模型测试."""

    # --- 正常创建 ---

    def test_defaults(self) -> None:
        """测试默认配置."""
        config = BulkBodyConfig()
        assert config.index is None
        assert config.to_request_kwargs() == {}

    def test_full_config(self) -> None:
        """测试所有配置项."""
        config = BulkBodyConfig(
            index="users",
            pipeline="ingest-users",
            routing="tenant-1",
            refresh="wait_for",
            timeout="1m",
            wait_for_active_shards="all",
        )
        assert config.to_request_kwargs() == {
            "index": "users",
            "pipeline": "ingest-users",
            "routing": "tenant-1",
            "refresh": "wait_for",
            "timeout": "1m",
            "wait_for_active_shards": "all",
        }

    @pytest.mark.parametrize("refresh", ["true", "false", "wait_for"])
    def test_valid_refresh(self, refresh) -> None:
        """测试合法的刷新策略."""
        assert BulkBodyConfig(refresh=refresh).refresh == refresh

    def test_zero_active_shards(self) -> None:
        """测试等待分片数为 0."""
        config = BulkBodyConfig(wait_for_active_shards=0)
        assert config.to_request_kwargs() == {"wait_for_active_shards": 0}

    # --- 非法值 ---

    def test_invalid_refresh(self) -> None:
        """测试非法的刷新策略."""
        with pytest.raises(BulkConfigError, match="refresh"):
            BulkBodyConfig(refresh="yes")

    @pytest.mark.parametrize("timeout", ["", "abc", "30", "1y"])
    def test_invalid_timeout(self, timeout) -> None:
        """测试非法的超时时间."""
        with pytest.raises(BulkConfigError, match="timeout"):
            BulkBodyConfig(timeout=timeout)

    @pytest.mark.parametrize("shards", [-1, "two", True])
    def test_invalid_active_shards(self, shards) -> None:
        """测试非法的等待分片数."""
        with pytest.raises(BulkConfigError, match="wait_for_active_shards"):
            BulkBodyConfig(wait_for_active_shards=shards)
