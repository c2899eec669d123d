"""全局常量"""

# 版本信息
VERSION = "1.0.0"
APP_NAME = "Editorial Workflow"

# 目录与文件
DATA_DIR_NAME = "data"
LOG_FILE_NAME = "editorial_workflow.log"

# 网关上下文
DEFAULT_BOUNDED_CONTEXT = "BlogContext"
ARTICLE_ENTITY = "Article"
EDITORIAL_COMMENT_ENTITY = "EditorialComment"

# 文章字段限制
TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
SLUG_MAX_LENGTH = 250
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# 审核与批注限制
REVIEW_REASON_MAX_LENGTH = 1000
EDITORIAL_COMMENT_MAX_LENGTH = 2000

# 列表分页
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# 事件总线保留的最近事件数
EVENT_HISTORY_LIMIT = 1000
