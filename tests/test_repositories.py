"""仓储契约测试

同一组用例分别运行在内存存储和本地 JSON 存储上。
"""

from dataclasses import replace
from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from conftest import T0
from editorial_workflow.domain.entities import Article, EditorialCommentRecord
from editorial_workflow.domain.value_objects import ArticleStatus, EditorialComment, ReviewDecision
from editorial_workflow.infrastructure.adapters import (
    InMemoryArticleRepository,
    InMemoryEditorialCommentRepository,
    LocalJsonArticleRepository,
    LocalJsonEditorialCommentRepository,
)


@pytest.fixture(params=["memory", "json"])
def repos(request, tmp_path):
    if request.param == "memory":
        return InMemoryArticleRepository(), InMemoryEditorialCommentRepository()
    return LocalJsonArticleRepository(tmp_path), LocalJsonEditorialCommentRepository(tmp_path)


def _article(title: str, minutes: int = 0, **kwargs) -> Article:
    return Article.create(
        article_id=uuid4(),
        title=title,
        content=f"{title} body text",
        created_at=T0 + timedelta(minutes=minutes),
        **kwargs,
    )


def _comment(article_id: UUID, minutes: int = 0) -> EditorialCommentRecord:
    return EditorialCommentRecord(
        id=uuid4(),
        article_id=article_id,
        reviewer_id=uuid4(),
        comment=EditorialComment("批注内容"),
        created_at=T0 + timedelta(minutes=minutes),
    )


@pytest.mark.integration
class TestArticleRepository:
    def test_save_and_find(self, repos, pending_article, reviewer_id):
        articles, _ = repos
        reviewed = pending_article.reject(reviewer_id, ReviewDecision.reject("补充引用"), T0 + timedelta(minutes=5))

        articles.save(reviewed)

        assert articles.find_by_id(reviewed.id) == reviewed
        assert articles.find_by_id(uuid4()) is None

    def test_save_overwrites(self, repos, draft_article):
        articles, _ = repos
        articles.save(draft_article)
        articles.save(draft_article.submit_for_review(T0 + timedelta(minutes=1)))

        assert articles.find_by_id(draft_article.id).status is ArticleStatus.PENDING_REVIEW
        assert articles.count_by_criteria() == 1

    def test_exists_by_slug(self, repos, draft_article):
        articles, _ = repos
        articles.save(draft_article)

        assert articles.exists_by_slug("valid-title-five")
        assert not articles.exists_by_slug("valid-title-five", exclude_id=draft_article.id)
        assert not articles.exists_by_slug("other-slug")

    def test_slug_change_releases_old_slug(self, repos, draft_article):
        articles, _ = repos
        articles.save(draft_article)
        articles.save(replace(draft_article, slug="renamed"))

        assert not articles.exists_by_slug("valid-title-five")
        assert articles.exists_by_slug("renamed")

    def test_remove(self, repos, draft_article):
        articles, _ = repos
        articles.save(draft_article)

        articles.remove(draft_article.id)
        articles.remove(draft_article.id)

        assert articles.find_by_id(draft_article.id) is None
        assert not articles.exists_by_slug(draft_article.slug)

    def test_criteria(self, repos, author_id):
        articles, _ = repos
        first = _article("Alpha Article", 0, author_id=author_id)
        second = _article("Beta Article", 1, status=ArticleStatus.PUBLISHED)
        third = _article("Gamma Article", 2, author_id=author_id)
        for article in (first, second, third):
            articles.save(article)

        assert [a.id for a in articles.find_by_criteria()] == [third.id, second.id, first.id]
        assert [a.id for a in articles.find_by_criteria(limit=1, offset=1)] == [second.id]
        assert [a.id for a in articles.find_by_criteria(author_id=author_id)] == [third.id, first.id]
        assert [a.id for a in articles.find_by_criteria(status=ArticleStatus.PUBLISHED)] == [second.id]
        assert [a.id for a in articles.find_by_criteria(search="gamma")] == [third.id]
        assert articles.count_by_criteria(author_id=author_id) == 2
        assert articles.count_by_criteria(search="article") == 3


@pytest.mark.integration
class TestCommentRepository:
    def test_save_find_remove(self, repos, draft_article):
        _, comments = repos
        later = _comment(draft_article.id, 5)
        earlier = _comment(draft_article.id, 1)
        other = _comment(uuid4())
        for record in (later, earlier, other):
            comments.save(record)

        assert comments.find_by_id(earlier.id) == earlier
        assert comments.find_by_article(draft_article.id) == [earlier, later]

        comments.remove(earlier.id)
        assert comments.find_by_id(earlier.id) is None

        assert comments.remove_by_article(draft_article.id) == 1
        assert comments.find_by_article(draft_article.id) == []
        assert comments.find_by_id(other.id) == other

    def test_selection_round_trip(self, repos, draft_article):
        _, comments = repos
        record = replace(
            _comment(draft_article.id),
            comment=EditorialComment("措辞", selected_text="0123", position_start=0, position_end=4),
        )
        comments.save(record)
        assert comments.find_by_id(record.id).comment.has_selection
