"""BulkDeleteRequest 单元测试."""

from elasticbulk.bulk import BulkDeleteRequest, VersionType


class TestBulkDeleteRequest:
    """删除请求测试."""

    def test_single_meta_line(self) -> None:
        """测试删除请求只有元数据行."""
        request = BulkDeleteRequest().index("index1").type("tweet").id("1")
        assert request.source() == (
            '{"delete":{"_id":"1","_index":"index1","_type":"tweet"}}',
        )

    def test_empty_delete(self) -> None:
        """测试未设置任何字段的删除请求."""
        assert BulkDeleteRequest().source() == ('{"delete":{}}',)

    def test_versioned_delete(self) -> None:
        """测试带版本号的删除请求."""
        request = (
            BulkDeleteRequest()
            .index("index1")
            .id("1")
            .version(5)
            .version_type(VersionType.EXTERNAL)
        )
        assert request.source()[0] == (
            '{"delete":{"_id":"1","_index":"index1","_version":5,'
            '"_version_type":"external"}}'
        )

    def test_all_fields_in_fixed_order(self) -> None:
        """测试所有字段按固定顺序输出."""
        request = (
            BulkDeleteRequest()
            .refresh(True)
            .version(1)
            .type("t")
            .routing("r")
            .parent("p")
            .index("i")
            .id("1")
        )
        assert request.source()[0] == (
            '{"delete":{"_id":"1","_index":"i","_parent":"p","_routing":"r",'
            '"_type":"t","_version":1,"refresh":true}}'
        )

    def test_zero_version_is_omitted(self) -> None:
        """测试版本号为 0 时不输出."""
        assert BulkDeleteRequest().version(0).source() == ('{"delete":{}}',)

    def test_cache_and_invalidation(self) -> None:
        """测试缓存与失效."""
        request = BulkDeleteRequest().id("1")
        first = request.source()
        assert request.source() is first
        request.routing("shard-1")
        assert request.source() == ('{"delete":{"_id":"1","_routing":"shard-1"}}',)

    def test_str(self) -> None:
        """测试字符串表示."""
        assert str(BulkDeleteRequest().id("1")) == '{"delete":{"_id":"1"}}'
