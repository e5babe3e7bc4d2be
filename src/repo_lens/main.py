"""CLI 엔트리포인트."""

import asyncio
import logging
from typing import Annotated

import typer
import uvicorn
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from repo_lens.age import format_age
from repo_lens.backends import ProxyBackend, create_backend
from repo_lens.client import RepositoryClient
from repo_lens.config import settings
from repo_lens.exceptions import (
    FetchError,
    InvalidRepositoryInputError,
    RepositoryNotFoundError,
)
from repo_lens.lookup import RepositoryLookup
from repo_lens.models import LookupResult

console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="repo-lens",
    help="GitHub 저장소의 나이, 스타 수, 설명과 README를 보여줍니다.",
    no_args_is_help=True,
)


def _render_result(result: LookupResult, show_readme: bool) -> None:
    """조회 결과를 Rich로 렌더링한다."""
    repo = result.info.repo
    age = result.info.age

    console.print()
    console.rule(f"[bold blue]📦 {repo.full_name}[/bold blue]")
    console.print()

    table = Table(show_header=False, box=None, expand=False)
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("설명", repo.description or "[dim]-[/dim]")
    table.add_row("URL", f"[link={repo.html_url}]{repo.html_url}[/link]")
    table.add_row("언어", repo.language or "-")
    table.add_row("⭐ Stars", f"{repo.stargazers_count:,}")
    table.add_row("포크", f"{repo.forks_count:,}")
    table.add_row("열린 이슈", f"{repo.open_issues_count:,}")
    table.add_row("기본 브랜치", repo.default_branch)
    table.add_row("나이", f"{format_age(age)} [dim]({age.total_days:,}일)[/dim]")
    table.add_row("생성", repo.created_at.strftime("%Y-%m-%d"))
    table.add_row("수정", repo.updated_at.strftime("%Y-%m-%d"))
    table.add_row(
        "마지막 push",
        repo.pushed_at.strftime("%Y-%m-%d") if repo.pushed_at else "-",
    )
    table.add_row(
        "소유자",
        f"[link={repo.owner.html_url}]{repo.owner.login}[/link]",
    )

    console.print(table)
    console.print()

    if not show_readme:
        return

    if result.readme:
        console.print(
            Panel(Markdown(result.readme), title="[cyan]README[/cyan]", border_style="dim")
        )
    else:
        console.print("[dim]  README가 없습니다.[/dim]")


async def _run(text: str, proxy: str | None) -> LookupResult | None:
    """조회를 실행한다."""
    backend = ProxyBackend(base_url=proxy) if proxy else create_backend(settings)
    lookup = RepositoryLookup(RepositoryClient(backend))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("저장소 정보 조회 중...", total=None)
        return await lookup.lookup(text)


@app.command()
def show(
    repository: Annotated[
        str,
        typer.Argument(help="저장소 이름 또는 URL (예: owner/repo)"),
    ],
    proxy: Annotated[
        str | None,
        typer.Option(
            "--proxy",
            "-p",
            help="프록시 서버 주소. 지정하면 GitHub API 대신 프록시를 호출",
        ),
    ] = None,
    readme: Annotated[
        bool,
        typer.Option("--readme/--no-readme", help="README 출력 여부"),
    ] = True,
) -> None:
    """GitHub 저장소 정보를 조회합니다."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        result = asyncio.run(_run(repository, proxy))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except InvalidRepositoryInputError as e:
        console.print(
            f"[red]잘못된 입력입니다. owner/repo 또는 GitHub URL을 입력하세요: {e.text!r}[/red]"
        )
        raise typer.Exit(1) from e
    except RepositoryNotFoundError as e:
        console.print(f"[red]저장소를 찾을 수 없습니다: {e.full_name}[/red]")
        raise typer.Exit(1) from e
    except FetchError as e:
        console.print(f"[red]조회 실패 ({e.status_code}): {e.message}[/red]")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    if result is not None:
        _render_result(result, show_readme=readme)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="바인드 주소")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="포트")] = 8000,
) -> None:
    """GitHub API 프록시 서버를 실행합니다."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not settings.github_token:
        logger.warning("GITHUB_TOKEN not configured, requests will be unauthenticated")

    uvicorn.run("repo_lens.server:app", host=host, port=port)


if __name__ == "__main__":
    app()
