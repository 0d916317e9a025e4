import json
import logging
from typing import Any

import click
from dotenv import load_dotenv

__version__ = "0.3.0"

from .client import BitbucketClient
from .config import BitbucketConfig
from .constants import DEFAULT_ISSUES_LIMIT
from .controllers import RepositoryController
from .exceptions import BitbucketError
from .logging_config import log_operation, setup_logger

logger = logging.getLogger("bitbucket-v1")


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _repository(ctx: click.Context, owner: str, slug: str) -> RepositoryController:
    try:
        client: BitbucketClient = ctx.obj["client_factory"]()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    ctx.call_on_close(client.close)
    return client.repository(owner, slug)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option("--url", help="Bitbucket v1 API root (default: BITBUCKET_URL)")
@click.pass_context
def main(
    ctx: click.Context, verbose: int, env_file: str | None, url: str | None
) -> None:
    """Bitbucket v1 command line client.

    Credentials are read from BITBUCKET_USERNAME and BITBUCKET_PASSWORD.
    """
    # -v wins over LOG_LEVEL, which may come from the .env file
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"
    setup_logger(level=logging_level)
    logger.debug(f"Loaded environment from {env_file or 'default .env file'}")

    def client_factory() -> BitbucketClient:
        config = BitbucketConfig.from_env()
        if url:
            config.url = url.rstrip("/")
        return BitbucketClient(config)

    ctx.ensure_object(dict)
    ctx.obj.setdefault("client_factory", client_factory)


@main.command()
@click.argument("owner")
@click.argument("slug")
@click.option("--start", default=0, show_default=True, help="Index of first issue")
@click.option(
    "--limit", default=DEFAULT_ISSUES_LIMIT, show_default=True, help="Issues per page"
)
@click.option("--search", help="Only list issues matching this text")
@click.pass_context
def issues(
    ctx: click.Context,
    owner: str,
    slug: str,
    start: int,
    limit: int,
    search: str | None,
) -> None:
    """List the issues of OWNER/SLUG."""
    repository = _repository(ctx, owner, slug)
    with log_operation(logger, "list_issues", repository=f"{owner}/{slug}"):
        try:
            if search:
                result = repository.issues.search(search)
            else:
                result = repository.issues.get_issues(start=start, limit=limit)
        except BitbucketError as e:
            raise click.ClickException(str(e)) from e
    _echo_json(result.to_simplified_dict())


@main.command()
@click.argument("owner")
@click.argument("slug")
@click.argument("issue_id", type=int)
@click.option("--followers", is_flag=True, help="Show the issue followers instead")
@click.pass_context
def issue(
    ctx: click.Context, owner: str, slug: str, issue_id: int, followers: bool
) -> None:
    """Show issue ISSUE_ID of OWNER/SLUG."""
    controller = _repository(ctx, owner, slug).issues[issue_id]
    try:
        if followers:
            result = controller.get_issue_followers()
        else:
            result = controller.get_issue()
    except BitbucketError as e:
        raise click.ClickException(str(e)) from e
    _echo_json(result.to_simplified_dict())


@main.command()
@click.argument("owner")
@click.argument("slug")
@click.argument("issue_id", type=int)
@click.pass_context
def comments(ctx: click.Context, owner: str, slug: str, issue_id: int) -> None:
    """List the comments on issue ISSUE_ID of OWNER/SLUG."""
    controller = _repository(ctx, owner, slug).issues[issue_id].comments
    try:
        result = controller.get_comments()
    except BitbucketError as e:
        raise click.ClickException(str(e)) from e
    _echo_json([c.to_simplified_dict() for c in result])


@main.command()
@click.argument("owner")
@click.argument("slug")
@click.argument("issue_id", type=int)
@click.argument("text")
@click.pass_context
def comment(
    ctx: click.Context, owner: str, slug: str, issue_id: int, text: str
) -> None:
    """Add a comment with TEXT to issue ISSUE_ID of OWNER/SLUG."""
    controller = _repository(ctx, owner, slug).issues[issue_id].comments
    with log_operation(logger, "create_comment", uri=controller.uri):
        try:
            result = controller.create({"content": text})
        except BitbucketError as e:
            raise click.ClickException(str(e)) from e
    _echo_json(result.to_simplified_dict())


@main.command()
@click.argument("owner")
@click.argument("slug")
@click.pass_context
def repository(ctx: click.Context, owner: str, slug: str) -> None:
    """Show the details of OWNER/SLUG."""
    try:
        result = _repository(ctx, owner, slug).get_info()
    except BitbucketError as e:
        raise click.ClickException(str(e)) from e
    _echo_json(result.to_simplified_dict())


__all__ = [
    "main",
    "__version__",
    "BitbucketClient",
    "BitbucketConfig",
    "setup_logger",
    "log_operation",
]

if __name__ == "__main__":
    main()
