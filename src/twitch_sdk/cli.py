"""
Command-line interface for Twitch SDK.

A thin layer over TwitchClient for quick checks from a shell. Credentials come
from the environment (or a .env file) through TwitchAPISettings:

    export TWITCH_API_CLIENT_ID=...
    export TWITCH_API_CLIENT_SECRET=...

Available commands:
- streams: List the top live streams
- users: Look up users by login
- top-games: List the most watched games
- token: Fetch an app token and show what Twitch reports about it
- clear-token-cache: Remove the persisted token
"""

import asyncio
import logging

import click
from pydantic import ValidationError

from twitch_sdk.client import TwitchClient
from twitch_sdk.config import TwitchAPISettings
from twitch_sdk.exceptions import TwitchAPIError
from twitch_sdk.logging_middleware import LoggingMiddleware
from twitch_sdk.token_store import FileTokenStore

logger = logging.getLogger("twitch_sdk.cli")


def _load_settings() -> TwitchAPISettings:
    try:
        return TwitchAPISettings()
    except ValidationError as err:
        raise click.ClickException(
            "Missing configuration: set TWITCH_API_CLIENT_ID (and TWITCH_API_CLIENT_SECRET)"
        ) from err


def _run(ctx: click.Context, action):
    """Run `action(client)` on a fresh client and turn SDK errors into CLI errors."""

    async def _main():
        middlewares = [LoggingMiddleware(level=logging.DEBUG)] if ctx.obj["verbose"] else []
        client = TwitchClient(_load_settings(), middlewares=middlewares)
        try:
            return await action(client)
        finally:
            await client.aclose()

    try:
        return asyncio.run(_main())
    except TwitchAPIError as exc:
        logger.debug("Command failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every request and response")
@click.pass_context
def cli(ctx, verbose):
    """Twitch Helix SDK CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("--count", default=3, show_default=True, type=click.IntRange(1, 100))
@click.option("--game-id", "game_ids", multiple=True, help="Only streams of this game (repeatable)")
@click.option("--language", "languages", multiple=True, help="Only streams in this language (repeatable)")
@click.pass_context
def streams(ctx, count, game_ids, languages):
    """List the top live streams."""
    result = _run(
        ctx,
        lambda client: client.get_streams(
            first=count, game_ids=list(game_ids) or None, language=list(languages) or None
        ),
    )
    for stream in result.data:
        click.echo(
            f"{stream.viewer_count:>8}  {stream.user_name:<25} {stream.game_name}: {stream.title}"
        )


@cli.command()
@click.option("--login", "logins", multiple=True, required=True, help="User login (repeatable)")
@click.pass_context
def users(ctx, logins):
    """Look up users by login."""
    result = _run(ctx, lambda client: client.get_users(logins=list(logins)))
    for user in result.data:
        kind = user.broadcaster_type or "-"
        click.echo(f"{user.id:>12}  {user.login:<25} {kind:<10} {user.created_at:%Y-%m-%d}")


@cli.command("top-games")
@click.option("--count", default=10, show_default=True, type=click.IntRange(1, 100))
@click.pass_context
def top_games(ctx, count):
    """List the most watched games."""
    result = _run(ctx, lambda client: client.get_top_games(first=count))
    for position, game in enumerate(result.data, start=1):
        click.echo(f"{position:>3}. {game.name} ({game.id})")


@cli.command()
@click.pass_context
def token(ctx):
    """Fetch an app token and show what Twitch reports about it."""
    validation = _run(ctx, lambda client: client.validate_token())
    click.echo(f"Client id:  {validation.client_id}")
    click.echo(f"Expires in: {validation.expires_in}s")
    click.echo(f"Scopes:     {', '.join(validation.scopes) or '-'}")


@cli.command("clear-token-cache")
def clear_token_cache():
    """Remove the persisted token, if token caching is configured."""
    settings = _load_settings()
    if settings.token_cache_path is None:
        click.echo("Token caching is not configured (TWITCH_API_TOKEN_CACHE_PATH)")
        return
    asyncio.run(FileTokenStore(settings.token_cache_path).clear())
    click.echo("Token cache cleared successfully")


if __name__ == "__main__":
    cli()
