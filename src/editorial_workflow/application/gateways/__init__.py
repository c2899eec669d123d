"""操作网关

每个模块对应一个操作，包含 Request / Response / 约束模型 / Processor / Gateway。
"""

from .add_editorial_comment import (
    AddEditorialCommentGateway,
    AddEditorialCommentProcessor,
    AddEditorialCommentRequest,
    AddEditorialCommentResponse,
)
from .approve_article import (
    ApproveArticleGateway,
    ApproveArticleProcessor,
    ApproveArticleRequest,
    ApproveArticleResponse,
)
from .archive_article import (
    ArchiveArticleGateway,
    ArchiveArticleProcessor,
    ArchiveArticleRequest,
    ArchiveArticleResponse,
)
from .auto_save_article import (
    AutoSaveArticleGateway,
    AutoSaveArticleProcessor,
    AutoSaveArticleRequest,
    AutoSaveArticleResponse,
)
from .create_article import (
    CreateArticleGateway,
    CreateArticleProcessor,
    CreateArticleRequest,
    CreateArticleResponse,
)
from .delete_article import (
    DeleteArticleGateway,
    DeleteArticleProcessor,
    DeleteArticleRequest,
    DeleteArticleResponse,
)
from .delete_editorial_comment import (
    DeleteEditorialCommentGateway,
    DeleteEditorialCommentProcessor,
    DeleteEditorialCommentRequest,
    DeleteEditorialCommentResponse,
)
from .get_article import GetArticleGateway, GetArticleProcessor, GetArticleRequest, GetArticleResponse
from .get_editorial_comment import (
    GetEditorialCommentGateway,
    GetEditorialCommentProcessor,
    GetEditorialCommentRequest,
    GetEditorialCommentResponse,
)
from .list_articles import ListArticlesGateway, ListArticlesProcessor, ListArticlesRequest, ListArticlesResponse
from .list_editorial_comments import (
    ListEditorialCommentsGateway,
    ListEditorialCommentsProcessor,
    ListEditorialCommentsRequest,
    ListEditorialCommentsResponse,
)
from .publish_article import (
    PublishArticleGateway,
    PublishArticleProcessor,
    PublishArticleRequest,
    PublishArticleResponse,
)
from .reject_article import (
    RejectArticleGateway,
    RejectArticleProcessor,
    RejectArticleRequest,
    RejectArticleResponse,
)
from .submit_for_review import (
    SubmitForReviewGateway,
    SubmitForReviewProcessor,
    SubmitForReviewRequest,
    SubmitForReviewResponse,
)
from .update_article import (
    UpdateArticleGateway,
    UpdateArticleProcessor,
    UpdateArticleRequest,
    UpdateArticleResponse,
)
from .update_editorial_comment import (
    UpdateEditorialCommentGateway,
    UpdateEditorialCommentProcessor,
    UpdateEditorialCommentRequest,
    UpdateEditorialCommentResponse,
)

__all__ = [
    # Article lifecycle
    "CreateArticleGateway",
    "CreateArticleProcessor",
    "CreateArticleRequest",
    "CreateArticleResponse",
    "SubmitForReviewGateway",
    "SubmitForReviewProcessor",
    "SubmitForReviewRequest",
    "SubmitForReviewResponse",
    "ApproveArticleGateway",
    "ApproveArticleProcessor",
    "ApproveArticleRequest",
    "ApproveArticleResponse",
    "RejectArticleGateway",
    "RejectArticleProcessor",
    "RejectArticleRequest",
    "RejectArticleResponse",
    "PublishArticleGateway",
    "PublishArticleProcessor",
    "PublishArticleRequest",
    "PublishArticleResponse",
    "AutoSaveArticleGateway",
    "AutoSaveArticleProcessor",
    "AutoSaveArticleRequest",
    "AutoSaveArticleResponse",
    "UpdateArticleGateway",
    "UpdateArticleProcessor",
    "UpdateArticleRequest",
    "UpdateArticleResponse",
    "ArchiveArticleGateway",
    "ArchiveArticleProcessor",
    "ArchiveArticleRequest",
    "ArchiveArticleResponse",
    # Queries / admin
    "GetArticleGateway",
    "GetArticleProcessor",
    "GetArticleRequest",
    "GetArticleResponse",
    "ListArticlesGateway",
    "ListArticlesProcessor",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "DeleteArticleGateway",
    "DeleteArticleProcessor",
    "DeleteArticleRequest",
    "DeleteArticleResponse",
    # Editorial comments
    "AddEditorialCommentGateway",
    "AddEditorialCommentProcessor",
    "AddEditorialCommentRequest",
    "AddEditorialCommentResponse",
    "ListEditorialCommentsGateway",
    "ListEditorialCommentsProcessor",
    "ListEditorialCommentsRequest",
    "ListEditorialCommentsResponse",
    "GetEditorialCommentGateway",
    "GetEditorialCommentProcessor",
    "GetEditorialCommentRequest",
    "GetEditorialCommentResponse",
    "UpdateEditorialCommentGateway",
    "UpdateEditorialCommentProcessor",
    "UpdateEditorialCommentRequest",
    "UpdateEditorialCommentResponse",
    "DeleteEditorialCommentGateway",
    "DeleteEditorialCommentProcessor",
    "DeleteEditorialCommentRequest",
    "DeleteEditorialCommentResponse",
]
