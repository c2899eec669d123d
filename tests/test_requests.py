"""请求/响应契约测试"""

from datetime import datetime, timezone
from uuid import UUID

import pytest

from editorial_workflow.application.gateways import (
    AddEditorialCommentRequest,
    ApproveArticleRequest,
    CreateArticleRequest,
    GetArticleResponse,
    ListArticlesRequest,
    RejectArticleRequest,
    SubmitForReviewRequest,
    SubmitForReviewResponse,
)
from editorial_workflow.domain.value_objects import ArticleStatus
from editorial_workflow.shared.exceptions import ValidationError

ARTICLE_ID = "33333333-3333-4333-8333-333333333333"


def _fields(exc_info) -> list[str]:
    return [v.field for v in exc_info.value.violations]


@pytest.mark.unit
class TestRequestShape:
    """构造时的形态检查"""

    def test_valid_request(self):
        request = ApproveArticleRequest(article_id=ARTICLE_ID, reviewer_id=ARTICLE_ID)
        assert request.reason is None

    def test_missing_required_field(self):
        with pytest.raises(ValidationError) as exc_info:
            SubmitForReviewRequest.from_data({})
        assert _fields(exc_info) == ["articleId"]
        assert exc_info.value.violations[0].message == "必填字段缺失"

    def test_wrong_primitive_type(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateArticleRequest(title=123, content="0123456789")  # type: ignore[arg-type]
        assert _fields(exc_info) == ["title"]

    def test_invalid_uuid(self):
        with pytest.raises(ValidationError) as exc_info:
            SubmitForReviewRequest(article_id="not-a-uuid")
        assert _fields(exc_info) == ["articleId"]

    @pytest.mark.parametrize(
        "value",
        [
            "33333333333343338333333333333333",
            "{33333333-3333-4333-8333-333333333333}",
            "urn:uuid:33333333-3333-4333-8333-333333333333",
            " 33333333-3333-4333-8333-333333333333",
        ],
    )
    def test_non_canonical_uuid_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            SubmitForReviewRequest(article_id=value)
        assert _fields(exc_info) == ["articleId"]

    def test_upper_case_uuid_accepted(self):
        assert SubmitForReviewRequest(article_id=ARTICLE_ID.upper()).article_id == ARTICLE_ID.upper()

    def test_violations_are_aggregated(self):
        with pytest.raises(ValidationError) as exc_info:
            ApproveArticleRequest.from_data({"articleId": "x", "reviewerId": "y"})
        assert _fields(exc_info) == ["articleId", "reviewerId"]
        assert "articleId" in str(exc_info.value)
        assert "reviewerId" in str(exc_info.value)

    def test_bool_is_not_int(self):
        with pytest.raises(ValidationError) as exc_info:
            ListArticlesRequest(page=True)
        assert _fields(exc_info) == ["page"]

    def test_optional_int_accepts_none(self):
        request = AddEditorialCommentRequest(article_id=ARTICLE_ID, reviewer_id=ARTICLE_ID, comment="批注")
        assert request.position_start is None

    def test_empty_reason_passes_shape_check(self):
        # 空理由是内容规则，由校验中间件处理
        request = RejectArticleRequest(article_id=ARTICLE_ID, reviewer_id=ARTICLE_ID, reason="")
        assert request.reason == ""

    def test_non_mapping_payload(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateArticleRequest.from_data("title")  # type: ignore[arg-type]
        assert _fields(exc_info) == ["request"]

    def test_immutable(self):
        request = SubmitForReviewRequest(article_id=ARTICLE_ID)
        with pytest.raises(AttributeError):
            request.article_id = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestWireFormat:
    """camelCase 线上格式"""

    def test_from_data_camel_case(self):
        request = CreateArticleRequest.from_data(
            {
                "title": "Valid Title Five",
                "content": "0123456789",
                "authorId": ARTICLE_ID,
                "createdAt": "2025-07-13T17:25:51Z",
                "unknown": "ignored",
            }
        )
        assert request.author_id == ARTICLE_ID
        assert request.created_at == "2025-07-13T17:25:51Z"
        assert request.status == "draft"

    def test_from_data_accepts_snake_case(self):
        request = SubmitForReviewRequest.from_data({"article_id": ARTICLE_ID})
        assert request.article_id == ARTICLE_ID

    def test_request_data(self):
        request = CreateArticleRequest(title="Valid Title Five", content="0123456789", slug="valid-title-five")
        assert request.data() == {
            "title": "Valid Title Five",
            "content": "0123456789",
            "slug": "valid-title-five",
            "status": "draft",
            "createdAt": None,
            "authorId": None,
        }

    def test_response_data_is_plain(self):
        submitted_at = datetime(2025, 7, 13, 17, 25, 51, tzinfo=timezone.utc)
        response = SubmitForReviewResponse(
            article_id=UUID(ARTICLE_ID),
            status=ArticleStatus.PENDING_REVIEW,
            submitted_at=submitted_at,
        )
        assert response.data() == {
            "articleId": ARTICLE_ID,
            "status": "pending_review",
            "submittedAt": "2025-07-13T17:25:51+00:00",
        }

    def test_get_response_data_is_article_view(self):
        response = GetArticleResponse(article={"articleId": ARTICLE_ID, "status": "draft"})
        assert response.data() == {"articleId": ARTICLE_ID, "status": "draft"}
