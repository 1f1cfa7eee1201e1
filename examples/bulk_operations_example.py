"""批量请求构建使用示例.

本文件展示了如何构建批量请求、渲染线格式，并把拼接好的请求体交给
Elasticsearch 客户端发送。
"""

from datetime import datetime

from elasticsearch import Elasticsearch

from elasticbulk.bulk import (
    BulkAction,
    BulkBody,
    BulkBodyConfig,
    BulkDeleteRequest,
    BulkEncodingError,
    BulkIndexRequest,
    BulkUpdateRequest,
    VersionType,
)


# ==================== 示例1：索引请求 ====================
def example_index_request():
    """构建索引请求并查看线格式."""
    request = (
        BulkIndexRequest()
        .index("users")
        .id("1")
        .doc({"name": "张三", "age": 25, "created": datetime(2024, 1, 1, 8, 0, 0)})
    )

    meta_line, doc_line = request.source()
    print("索引请求:")
    print(f"  元数据行: {meta_line}")
    print(f"  文档行: {doc_line}")
    return request


# ==================== 示例2：仅创建 + 外部版本号 ====================
def example_create_request():
    """构建仅创建请求，文档已序列化时原样输出."""
    request = (
        BulkIndexRequest()
        .op_type(BulkAction.CREATE)
        .index("users")
        .id("2")
        .version(1700000000)
        .version_type(VersionType.EXTERNAL)
        .doc('{"name":"李四","age":30}')
    )
    print(f"创建请求:\n{request}")
    return request


# ==================== 示例3：更新和删除 ====================
def example_update_and_delete():
    """构建 upsert 更新请求和删除请求."""
    update = (
        BulkUpdateRequest()
        .index("users")
        .id("3")
        .doc({"city": "广州"})
        .doc_as_upsert(True)
        .retry_on_conflict(3)
    )
    delete = BulkDeleteRequest().index("users").id("4")
    print(f"更新请求:\n{update}")
    print(f"删除请求:\n{delete}")
    return update, delete


# ==================== 示例4：编码失败 ====================
def example_encoding_error():
    """文档无法序列化时，source() 抛出 BulkEncodingError."""
    doc: dict = {"name": "王五"}
    doc["self"] = doc
    request = BulkIndexRequest().index("users").doc(doc)

    try:
        request.source()
    except BulkEncodingError as e:
        print(f"编码失败: {e}")
        # 修正文档后可以重新渲染
        request.doc({"name": "王五"})
        print(f"修正后:\n{request}")
    return request


# ==================== 示例5：拼接请求体并发送 ====================
def example_send_body(es_client: Elasticsearch):
    """拼接多个请求并交给客户端发送."""
    body = BulkBody(BulkBodyConfig(index="users", refresh="wait_for", timeout="30s"))
    body.add(
        example_index_request(),
        example_create_request(),
        *example_update_and_delete(),
    )
    print(f"请求数: {body.number_of_actions()}")
    print(f"估算大小: {body.estimated_size_in_bytes()} 字节")

    return es_client.bulk(**body.to_request_kwargs())


if __name__ == "__main__":
    example_index_request()
    example_create_request()
    example_update_and_delete()
    example_encoding_error()
    example_send_body(Elasticsearch(["http://localhost:9200"]))
