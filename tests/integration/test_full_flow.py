"""端到端集成测试

使用本地 JSON 存储走完整的 撰写 -> 审核 -> 发布 -> 归档 流程，
并验证重新打开存储后数据仍然一致。
"""

from pathlib import Path

import pytest

from editorial_workflow.application.gateways import (
    AddEditorialCommentRequest,
    ApproveArticleRequest,
    ArchiveArticleRequest,
    AutoSaveArticleRequest,
    CreateArticleRequest,
    GetArticleRequest,
    ListArticlesRequest,
    ListEditorialCommentsRequest,
    PublishArticleRequest,
    RejectArticleRequest,
    SubmitForReviewRequest,
)
from editorial_workflow.infrastructure.config import AppSettings, Container, StorageSettings
from editorial_workflow.infrastructure.config.container import reset_container

REVIEWER_ID = "22222222-2222-4222-8222-222222222222"
AUTHOR_ID = "11111111-1111-4111-8111-111111111111"


@pytest.fixture(autouse=True)
def cleanup():
    """每个测试后重置容器"""
    yield
    reset_container()


def _json_container(data_dir: Path, clock=None) -> Container:
    settings = AppSettings(storage=StorageSettings(backend="json", data_dir=data_dir))
    if clock is None:
        return Container(settings=settings)
    return Container(settings=settings, clock=clock)


@pytest.mark.integration
class TestFullFlow:
    """完整编辑流程"""

    def test_write_review_publish_archive(self, tmp_path: Path, clock) -> None:
        container = _json_container(tmp_path, clock)

        created = container.gateway("create")(
            CreateArticleRequest(
                title="集成测试文章 Integration",
                content="这是集成测试文章的正文内容，包含多个句子。",
                author_id=AUTHOR_ID,
            )
        ).data()
        article_id = created["articleId"]
        assert created["slug"] == "integration"

        clock.advance(60)
        container.gateway("autosave")(
            AutoSaveArticleRequest(
                article_id=article_id,
                title="集成测试文章 Integration",
                content="正文经过修改，补充了更多细节和数据来源。",
            )
        )

        clock.advance(60)
        container.gateway("submit")(SubmitForReviewRequest(article_id=article_id, author_id=AUTHOR_ID))
        container.gateway("comment.add")(
            AddEditorialCommentRequest(
                article_id=article_id,
                reviewer_id=REVIEWER_ID,
                comment="数据来源需要链接",
                selected_text="数据来源",
                position_start=15,
                position_end=19,
            )
        )
        clock.advance(60)
        rejected = container.gateway("reject")(
            RejectArticleRequest(article_id=article_id, reviewer_id=REVIEWER_ID, reason="请补充链接")
        ).data()
        assert rejected["status"] == "rejected"

        clock.advance(60)
        container.gateway("submit")(SubmitForReviewRequest(article_id=article_id))
        container.gateway("approve")(ApproveArticleRequest(article_id=article_id, reviewer_id=REVIEWER_ID))
        published = container.gateway("publish")(PublishArticleRequest(article_id=article_id)).data()
        assert published["status"] == "published"

        # 重新打开存储，数据保持一致
        reopened = _json_container(tmp_path)
        view = reopened.gateway("get")(GetArticleRequest(article_id=article_id)).data()
        assert view["status"] == "published"
        assert view["authorId"] == AUTHOR_ID
        assert view["reviewerId"] == REVIEWER_ID
        assert view["rejectionReason"] is None
        assert view["publishedAt"] == published["publishedAt"]

        comments = reopened.gateway("comment.list")(ListEditorialCommentsRequest(article_id=article_id)).data()
        assert comments["total"] == 1

        listed = reopened.gateway("list")(ListArticlesRequest(status="published")).data()
        assert [a["articleId"] for a in listed["articles"]] == [article_id]

        archived = reopened.gateway("archive")(ArchiveArticleRequest(article_id=article_id)).data()
        assert archived["status"] == "archived"
        assert reopened.gateway("get")(GetArticleRequest(article_id=article_id)).data()["publishedAt"] is None
