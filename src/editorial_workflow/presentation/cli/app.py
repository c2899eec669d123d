"""CLI主应用 - 基于Click和Rich"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...application import gateways as gw
from ...application.pipeline import GatewayRequest, GatewayResponse
from ...infrastructure.config import get_container, get_log_dir, get_settings
from ...shared.constants import LOG_FILE_NAME, VERSION
from ...shared.exceptions import EditorialWorkflowError, ErrorKind, GatewayError, ValidationError
from ...shared.utils import setup_logger

console = Console()

# 错误类别 → 进程退出码（2 留给 click 的用法错误）
EXIT_CODES = {
    ErrorKind.INFRASTRUCTURE: 1,
    ErrorKind.VALIDATION: 3,
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.CONFLICT: 5,
    ErrorKind.INVALID_TRANSITION: 6,
}

STATUS_STYLES = {
    "draft": "dim",
    "pending_review": "yellow",
    "approved": "cyan",
    "rejected": "red",
    "published": "green",
    "archived": "magenta",
}


def _execute(gateway_name: str, build_request: Callable[[], GatewayRequest]) -> GatewayResponse:
    """构造请求并执行网关；失败时打印错误并按错误类别退出"""
    try:
        request = build_request()
        return get_container().gateway(gateway_name)(request)
    except GatewayError as e:
        _print_error(e.cause or e, operation=e.operation)
        sys.exit(EXIT_CODES[e.kind])
    except EditorialWorkflowError as e:
        # 请求在构造阶段就被拒绝（形态错误）或配置错误
        _print_error(e)
        sys.exit(EXIT_CODES[e.kind])


def _print_error(error: BaseException, operation: str | None = None) -> None:
    prefix = f"{operation} 失败" if operation else "失败"
    if isinstance(error, ValidationError) and error.violations:
        console.print(f"[red]{prefix}: 请求参数校验失败[/red]")
        for violation in error.violations:
            console.print(f"  [red]•[/red] {escape(str(violation))}")
        return

    message = error.user_message if isinstance(error, EditorialWorkflowError) else str(error)
    console.print(f"[red]{prefix}: {escape(message)}[/red]")


def _output(ctx: click.Context, response: GatewayResponse, title: str) -> None:
    data = response.data()
    if ctx.obj.get("json"):
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return
    _display_mapping(data, title)


def _display_mapping(data: dict[str, Any], title: str) -> None:
    """以键值表格显示响应"""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("字段", style="bold")
    table.add_column("值")

    for key, value in data.items():
        if value is None:
            rendered = "[dim]-[/dim]"
        elif key == "status":
            rendered = f"[{STATUS_STYLES.get(value, 'white')}]{value}[/]"
        else:
            rendered = escape(str(value))
        table.add_row(key, rendered)

    console.print(Panel(table, title=title, border_style="blue"))


@click.group()
@click.version_option(VERSION, prog_name="editorial")
@click.option("--debug", is_flag=True, help="启用调试模式")
@click.option("--json", "as_json", is_flag=True, help="以 JSON 输出结果")
@click.pass_context
def cli(ctx: click.Context, debug: bool, as_json: bool):
    """编辑工作流 - 文章撰写、审核与发布"""
    settings = get_settings()
    log_level = "DEBUG" if debug or settings.debug else settings.log_level
    log_file = None
    if settings.logging.to_file:
        log_file = (settings.logging.log_dir or get_log_dir()) / LOG_FILE_NAME
    setup_logger(
        log_level,
        json_format=settings.logging.json_format,
        log_file=log_file,
        rotation=settings.logging.rotation,
        retention=settings.logging.retention,
    )

    ctx.ensure_object(dict)
    ctx.obj["json"] = as_json


# ---------------- 文章生命周期 ----------------


@cli.command()
@click.option("--title", "-t", required=True, help="标题（5-200 个字符）")
@click.option("--content", "-c", help="正文（至少 10 个字符）")
@click.option("--content-file", type=click.File("r", encoding="utf-8"), help="从文件读取正文")
@click.option("--slug", "-s", help="slug，省略时从标题生成")
@click.option(
    "--status",
    type=click.Choice(["draft", "published", "archived"]),
    default="draft",
    show_default=True,
    help="初始状态",
)
@click.option("--author-id", help="作者 ID (UUID)")
@click.option("--created-at", help="创建时间 (ISO-8601，带时区)")
@click.pass_context
def create(
    ctx: click.Context,
    title: str,
    content: str | None,
    content_file,
    slug: str | None,
    status: str,
    author_id: str | None,
    created_at: str | None,
):
    """
    创建文章

    示例:
        editorial create -t "Valid Title Five" -c "0123456789"
        editorial create -t "Imported Post" --content-file post.md --status published
    """
    if content_file is not None:
        content = content_file.read()
    if content is None:
        raise click.UsageError("必须提供 --content 或 --content-file")

    response = _execute(
        "create",
        lambda: gw.CreateArticleRequest(
            title=title,
            content=content,
            slug=slug,
            status=status,
            created_at=created_at,
            author_id=author_id,
        ),
    )
    _output(ctx, response, "文章已创建")


@cli.command()
@click.argument("article_id")
@click.option("--author-id", help="提交人 ID (UUID)")
@click.pass_context
def submit(ctx: click.Context, article_id: str, author_id: str | None):
    """提交审核（draft / rejected → pending_review）"""
    response = _execute(
        "submit",
        lambda: gw.SubmitForReviewRequest(article_id=article_id, author_id=author_id),
    )
    _output(ctx, response, "已提交审核")


@cli.command()
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人 ID (UUID)")
@click.option("--reason", help="通过理由（可选）")
@click.pass_context
def approve(ctx: click.Context, article_id: str, reviewer_id: str, reason: str | None):
    """审核通过（pending_review → approved）"""
    response = _execute(
        "approve",
        lambda: gw.ApproveArticleRequest(article_id=article_id, reviewer_id=reviewer_id, reason=reason),
    )
    _output(ctx, response, "审核通过")


@cli.command()
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人 ID (UUID)")
@click.option("--reason", required=True, help="驳回理由（必填）")
@click.pass_context
def reject(ctx: click.Context, article_id: str, reviewer_id: str, reason: str):
    """审核驳回（pending_review → rejected）"""
    response = _execute(
        "reject",
        lambda: gw.RejectArticleRequest(article_id=article_id, reviewer_id=reviewer_id, reason=reason),
    )
    _output(ctx, response, "已驳回")


@cli.command()
@click.argument("article_id")
@click.pass_context
def publish(ctx: click.Context, article_id: str):
    """发布（approved → published）"""
    response = _execute("publish", lambda: gw.PublishArticleRequest(article_id=article_id))
    _output(ctx, response, "已发布")


@cli.command()
@click.argument("article_id")
@click.option("--title", "-t", required=True, help="标题")
@click.option("--content", "-c", required=True, help="正文")
@click.option("--slug", "-s", help="新的 slug，省略时保持不变")
@click.pass_context
def autosave(ctx: click.Context, article_id: str, title: str, content: str, slug: str | None):
    """自动保存标题/正文（不改变状态，已发布的文章不可用）"""
    response = _execute(
        "autosave",
        lambda: gw.AutoSaveArticleRequest(article_id=article_id, title=title, content=content, slug=slug),
    )
    _output(ctx, response, "已保存")


@cli.command()
@click.argument("article_id")
@click.option("--title", "-t", help="新标题（只改标题时 slug 随之重新生成）")
@click.option("--content", "-c", help="新正文")
@click.option("--slug", "-s", help="新的 slug")
@click.pass_context
def update(ctx: click.Context, article_id: str, title: str | None, content: str | None, slug: str | None):
    """更新文章（省略的字段保持不变，已发布的文章不可用）"""
    response = _execute(
        "update",
        lambda: gw.UpdateArticleRequest(article_id=article_id, title=title, content=content, slug=slug),
    )
    _output(ctx, response, "文章已更新")


@cli.command()
@click.argument("article_id")
@click.pass_context
def archive(ctx: click.Context, article_id: str):
    """归档文章"""
    response = _execute("archive", lambda: gw.ArchiveArticleRequest(article_id=article_id))
    _output(ctx, response, "已归档")


# ---------------- 查询与管理 ----------------


@cli.command()
@click.argument("article_id")
@click.pass_context
def show(ctx: click.Context, article_id: str):
    """显示文章详情"""
    response = _execute("get", lambda: gw.GetArticleRequest(article_id=article_id))
    if ctx.obj.get("json"):
        _output(ctx, response, "")
        return

    data = response.data()
    content = data.pop("content")
    _display_mapping(data, "📰 文章信息")

    preview = content[:500] + "..." if len(content) > 500 else content
    console.print(Panel(escape(preview), title="📄 内容预览", border_style="dim"))


@cli.command(name="list")
@click.option("--page", "-p", type=int, default=1, show_default=True, help="页码")
@click.option("--limit", "-l", type=int, default=20, show_default=True, help="每页数量 (1-100)")
@click.option(
    "--status",
    type=click.Choice(["draft", "pending_review", "approved", "rejected", "published", "archived"]),
    help="按状态过滤",
)
@click.option("--author-id", help="按作者过滤 (UUID)")
@click.option("--search", "-q", help="标题/正文关键字")
@click.pass_context
def list_articles(
    ctx: click.Context,
    page: int,
    limit: int,
    status: str | None,
    author_id: str | None,
    search: str | None,
):
    """分页列出文章（按创建时间倒序）"""
    response = _execute(
        "list",
        lambda: gw.ListArticlesRequest(
            page=page,
            limit=limit,
            status=status,
            author_id=author_id,
            search=search,
        ),
    )
    if ctx.obj.get("json"):
        _output(ctx, response, "")
        return

    data = response.data()
    table = Table(title=f"文章列表（第 {data['page']} 页，共 {data['total']} 篇）")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("标题")
    table.add_column("slug", style="cyan")
    table.add_column("状态")
    table.add_column("创建时间", style="dim")

    for article in data["articles"]:
        status_value = article["status"]
        table.add_row(
            article["articleId"],
            escape(article["title"]),
            article["slug"],
            f"[{STATUS_STYLES.get(status_value, 'white')}]{status_value}[/]",
            article["createdAt"],
        )

    console.print(table)
    if data["hasNextPage"]:
        console.print(f"[dim]下一页: editorial list --page {data['page'] + 1}[/dim]")


@cli.command()
@click.argument("article_id")
@click.confirmation_option(prompt="确定删除该文章及其全部批注？")
@click.pass_context
def delete(ctx: click.Context, article_id: str):
    """删除文章及其全部编辑批注"""
    response = _execute("delete", lambda: gw.DeleteArticleRequest(article_id=article_id))
    _output(ctx, response, "已删除")


# ---------------- 编辑批注 ----------------


@cli.group()
def comment():
    """编辑批注"""


@comment.command(name="add")
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人 ID (UUID)")
@click.option("--comment", "-m", "text", required=True, help="批注内容（1-2000 个字符）")
@click.option("--selected-text", help="锚定的原文片段")
@click.option("--start", "position_start", type=int, help="选区起始位置")
@click.option("--end", "position_end", type=int, help="选区结束位置")
@click.pass_context
def comment_add(
    ctx: click.Context,
    article_id: str,
    reviewer_id: str,
    text: str,
    selected_text: str | None,
    position_start: int | None,
    position_end: int | None,
):
    """为文章添加批注"""
    response = _execute(
        "comment.add",
        lambda: gw.AddEditorialCommentRequest(
            article_id=article_id,
            reviewer_id=reviewer_id,
            comment=text,
            selected_text=selected_text,
            position_start=position_start,
            position_end=position_end,
        ),
    )
    _output(ctx, response, "批注已添加")


@comment.command(name="list")
@click.argument("article_id")
@click.pass_context
def comment_list(ctx: click.Context, article_id: str):
    """列出文章的全部批注"""
    response = _execute("comment.list", lambda: gw.ListEditorialCommentsRequest(article_id=article_id))
    if ctx.obj.get("json"):
        _output(ctx, response, "")
        return

    data = response.data()
    table = Table(title=f"批注（共 {data['total']} 条）")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("审核人", style="dim")
    table.add_column("批注")
    table.add_column("选区", style="cyan")

    for item in data["comments"]:
        selection = (
            f"{item['positionStart']}-{item['positionEnd']}: {escape(item['selectedText'])}"
            if item["selectedText"] is not None
            else "-"
        )
        table.add_row(item["commentId"], item["reviewerId"], escape(item["comment"]), selection)

    console.print(table)


@comment.command(name="show")
@click.argument("comment_id")
@click.pass_context
def comment_show(ctx: click.Context, comment_id: str):
    """显示批注"""
    response = _execute("comment.get", lambda: gw.GetEditorialCommentRequest(comment_id=comment_id))
    _output(ctx, response, "批注")


@comment.command(name="update")
@click.argument("comment_id")
@click.option("--comment", "-m", "text", required=True, help="新的批注内容（1-2000 个字符）")
@click.pass_context
def comment_update(ctx: click.Context, comment_id: str, text: str):
    """修改批注内容（选区不变）"""
    response = _execute(
        "comment.update",
        lambda: gw.UpdateEditorialCommentRequest(comment_id=comment_id, comment=text),
    )
    _output(ctx, response, "批注已修改")


@comment.command(name="delete")
@click.argument("comment_id")
@click.pass_context
def comment_delete(ctx: click.Context, comment_id: str):
    """删除批注"""
    response = _execute("comment.delete", lambda: gw.DeleteEditorialCommentRequest(comment_id=comment_id))
    _output(ctx, response, "批注已删除")


def run_cli():
    """运行CLI"""
    cli()


if __name__ == "__main__":
    run_cli()
