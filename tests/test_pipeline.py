"""网关流水线测试

验证 Logger → ErrorHandler → Validation → Processor 的组合行为。
"""

from dataclasses import dataclass
from unittest.mock import Mock

import pytest

from editorial_workflow.application.gateways import (
    CreateArticleGateway,
    CreateArticleRequest,
    PublishArticleGateway,
    PublishArticleRequest,
    RejectArticleGateway,
    RejectArticleRequest,
    SubmitForReviewRequest,
)
from editorial_workflow.application.pipeline import (
    GatewayInstrumentation,
    GatewayResponse,
    Middleware,
    Pipeline,
    Processor,
)
from editorial_workflow.shared.exceptions import (
    ArticleNotFoundError,
    ErrorKind,
    GatewayError,
    ValidationError,
)
from editorial_workflow.shared.utils import get_request_id, set_request_id

ARTICLE_ID = "33333333-3333-4333-8333-333333333333"
REVIEWER_ID = "22222222-2222-4222-8222-222222222222"


@dataclass(frozen=True)
class EchoResponse(GatewayResponse):
    value: str = "ok"


class Recording(Middleware):
    def __init__(self, name: str, calls: list[str]):
        self.name = name
        self.calls = calls

    def __call__(self, request, next_):
        self.calls.append(f"{self.name}:before")
        response = next_(request)
        self.calls.append(f"{self.name}:after")
        return response


class RecordingProcessor(Processor):
    def __init__(self, calls: list[str]):
        self.calls = calls
        self.request_ids: list[str | None] = []

    def __call__(self, request):
        self.calls.append("processor")
        self.request_ids.append(get_request_id())
        return EchoResponse()


class FailingProcessor(Processor):
    def __init__(self, error: Exception):
        self.error = error

    def __call__(self, request):
        raise self.error


def _instrumentation() -> Mock:
    instrumentation = Mock(spec=GatewayInstrumentation)
    instrumentation.name = "BlogContext.Article.test"
    return instrumentation


@pytest.mark.unit
class TestPipeline:
    def test_stages_run_in_order(self):
        calls: list[str] = []
        pipeline = Pipeline([Recording("a", calls), Recording("b", calls)], RecordingProcessor(calls))

        response = pipeline(PublishArticleRequest(article_id=ARTICLE_ID))

        assert response == EchoResponse()
        assert calls == ["a:before", "b:before", "processor", "b:after", "a:after"]

    def test_no_middlewares(self):
        calls: list[str] = []
        assert Pipeline([], RecordingProcessor(calls))(PublishArticleRequest(article_id=ARTICLE_ID)) == EchoResponse()


@pytest.mark.unit
class TestGateway:
    def test_success_is_recorded(self):
        instrumentation = _instrumentation()
        processor = RecordingProcessor([])
        gateway = PublishArticleGateway(processor, instrumentation=instrumentation)
        request = PublishArticleRequest(article_id=ARTICLE_ID)

        response = gateway(request)

        assert response == EchoResponse()
        instrumentation.start.assert_called_once_with(request)
        instrumentation.success.assert_called_once_with(response)
        instrumentation.error.assert_not_called()

    def test_processor_failure_is_wrapped_once(self):
        instrumentation = _instrumentation()
        original = RuntimeError("boom")
        gateway = PublishArticleGateway(FailingProcessor(original), instrumentation=instrumentation)
        request = PublishArticleRequest(article_id=ARTICLE_ID)

        with pytest.raises(GatewayError) as exc_info:
            gateway(request)

        err = exc_info.value
        assert err.cause is original
        assert err.__cause__ is original
        assert not isinstance(err.cause, GatewayError)
        assert err.kind is ErrorKind.INFRASTRUCTURE
        assert str(err) == "[9001] Error during publish process for BlogContext Article"

        instrumentation.start.assert_called_once_with(request)
        instrumentation.error.assert_called_once_with(request, "boom")
        instrumentation.success.assert_not_called()

    def test_error_kind_comes_from_cause(self):
        gateway = PublishArticleGateway(FailingProcessor(ArticleNotFoundError(ARTICLE_ID)))
        with pytest.raises(GatewayError) as exc_info:
            gateway(PublishArticleRequest(article_id=ARTICLE_ID))
        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_validation_aggregates_and_skips_processor(self):
        processor = Mock()
        gateway = CreateArticleGateway(processor, instrumentation=_instrumentation())

        with pytest.raises(GatewayError) as exc_info:
            gateway(CreateArticleRequest(title="abc", content="short", slug="Bad Slug"))

        cause = exc_info.value.cause
        assert isinstance(cause, ValidationError)
        assert {v.field for v in cause.violations} == {"title", "content", "slug"}
        assert exc_info.value.kind is ErrorKind.VALIDATION
        processor.assert_not_called()

    def test_empty_reject_reason_never_reaches_processor(self):
        processor = Mock()
        gateway = RejectArticleGateway(processor, instrumentation=_instrumentation())

        with pytest.raises(GatewayError) as exc_info:
            gateway(RejectArticleRequest(article_id=ARTICLE_ID, reviewer_id=REVIEWER_ID, reason="   "))

        assert [v.field for v in exc_info.value.cause.violations] == ["reason"]
        processor.assert_not_called()

    def test_wrong_request_type(self):
        processor = Mock()
        gateway = CreateArticleGateway(processor, instrumentation=_instrumentation())

        with pytest.raises(GatewayError) as exc_info:
            gateway(SubmitForReviewRequest(article_id=ARTICLE_ID))

        assert [v.field for v in exc_info.value.cause.violations] == ["request"]
        processor.assert_not_called()

    @pytest.mark.parametrize("payload", [{"articleId": ARTICLE_ID}, None, "publish"])
    def test_non_request_is_gateway_error(self, payload):
        instrumentation = _instrumentation()
        processor = Mock()
        gateway = PublishArticleGateway(processor, instrumentation=instrumentation)

        with pytest.raises(GatewayError) as exc_info:
            gateway(payload)

        err = exc_info.value
        assert err.kind is ErrorKind.VALIDATION
        assert isinstance(err.cause, ValidationError)
        assert [v.field for v in err.cause.violations] == ["request"]
        assert err.operation == "publish"
        processor.assert_not_called()
        instrumentation.start.assert_not_called()
        instrumentation.error.assert_called_once()

    def test_extra_middlewares_run_after_validation(self):
        calls: list[str] = []
        gateway = PublishArticleGateway(
            RecordingProcessor(calls),
            instrumentation=_instrumentation(),
            extra_middlewares=[Recording("audit", calls)],
        )
        gateway(PublishArticleRequest(article_id=ARTICLE_ID))
        assert calls == ["audit:before", "processor", "audit:after"]

    def test_request_id_scoped_to_call(self):
        processor = RecordingProcessor([])
        gateway = PublishArticleGateway(processor, instrumentation=_instrumentation())

        gateway(PublishArticleRequest(article_id=ARTICLE_ID))

        assert processor.request_ids[0] is not None
        assert get_request_id() is None

    def test_existing_request_id_is_kept(self):
        set_request_id("outer-id")
        processor = RecordingProcessor([])
        gateway = PublishArticleGateway(processor, instrumentation=_instrumentation())

        gateway(PublishArticleRequest(article_id=ARTICLE_ID))

        assert processor.request_ids == ["outer-id"]
        assert get_request_id() == "outer-id"

    def test_repr(self):
        gateway = PublishArticleGateway(RecordingProcessor([]))
        assert repr(gateway) == "PublishArticleGateway(BlogContext.Article.publish)"


@pytest.mark.unit
class TestInstrumentation:
    """loguru 结构化日志"""

    def test_success_logs(self, log_records):
        gateway = PublishArticleGateway(RecordingProcessor([]), context="NewsContext")
        gateway(PublishArticleRequest(article_id=ARTICLE_ID))

        records = [r for r in log_records if "event" in r["extra"]]
        assert [r["extra"]["event"] for r in records] == [
            "NewsContext.Article.publish",
            "NewsContext.Article.publish.success",
        ]
        assert records[0]["extra"]["payload"] == {"articleId": ARTICLE_ID}
        assert "request_id" in records[0]["extra"]

    def test_failure_logs_error_without_success(self, log_records):
        gateway = PublishArticleGateway(FailingProcessor(RuntimeError("disk full")))
        with pytest.raises(GatewayError):
            gateway(PublishArticleRequest(article_id=ARTICLE_ID))

        by_event = {r["extra"]["event"]: r for r in log_records if "event" in r["extra"]}
        assert set(by_event) == {"BlogContext.Article.publish", "BlogContext.Article.publish.error"}
        error = by_event["BlogContext.Article.publish.error"]
        assert error["level"].name == "ERROR"
        assert error["extra"]["reason"] == "disk full"

    def test_non_request_logs_type_name(self, log_records):
        gateway = PublishArticleGateway(RecordingProcessor([]))
        with pytest.raises(GatewayError):
            gateway({"articleId": ARTICLE_ID})

        errors = [r for r in log_records if r["extra"].get("event") == "BlogContext.Article.publish.error"]
        assert len(errors) == 1
        assert errors[0]["extra"]["payload"] == {"requestType": "dict"}

    def test_long_text_is_replaced_by_length(self, log_records):
        instrumentation = GatewayInstrumentation("BlogContext", "Article", "create")
        instrumentation.start(CreateArticleRequest(title="Valid Title Five", content="x" * 500))

        payload = log_records[-1]["extra"]["payload"]
        assert payload["content"] == "<500 chars>"
        assert payload["title"] == "Valid Title Five"
