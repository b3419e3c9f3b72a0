"""CLI entry point for posts-client."""

from pathlib import Path
from typing import Optional

import typer

from posts_client import __version__
from posts_client.config import config
from posts_client.main import PostsClient, Result, setup_logging

app = typer.Typer(
    name="posts-client",
    help="List, create, edit and delete posts and comments on a REST server.",
    no_args_is_help=True,
)


def version_callback(value: bool):
    if value:
        typer.echo(f"posts-client {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    base_url: Optional[str] = typer.Option(None, "--base-url", help="REST server root URL"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for the rendered page"),
    log_level: str = typer.Option(config.log.log_level, "--log-level", help="Console log level"),
    log_file: bool = typer.Option(True, "--log-file/--no-log-file", help="Also log to the log file"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """posts-client: a command-line front end for the posts page."""
    if base_url:
        config.api.base_url = base_url.rstrip("/")
    if output_dir:
        config.file.output_directory = output_dir
    setup_logging(log_level, log_to_file=log_file)


def _client() -> PostsClient:
    return PostsClient()


def _finish(result: Result, message: str) -> None:
    if not result.ok:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(message)


@app.command("list")
def list_posts():
    """Fetch posts and comments and print them."""
    from posts_client.view import render_text

    result = _client().refresh()
    _finish(result, render_text(result.value) if result.ok else "")


@app.command()
def render():
    """Fetch posts and comments and write the HTML page."""
    client = _client()
    result = client.refresh()
    _finish(result, f"Page written to {client.files.get_page_path()}")


@app.command()
def create(
    title: str = typer.Option(..., "--title", help="Post title"),
    author: str = typer.Option(..., "--author", help="Post author"),
):
    """Create a new post."""
    client = _client()
    form = client.form.with_values(title=title, author=author)
    result = client.submit(form)
    _finish(result, f"Created post {result.value.id}" if result.ok else "")


@app.command()
def edit(
    post_id: str = typer.Argument(..., help="Id of the post to edit"),
    title: Optional[str] = typer.Option(None, "--title", help="New title"),
    author: Optional[str] = typer.Option(None, "--author", help="New author"),
):
    """Edit a post; fields not given keep their current value."""
    client = _client()
    loaded = client.begin_edit(post_id)
    if not loaded.ok:
        _finish(loaded, "")

    form = loaded.value.with_values(title=title, author=author)
    result = client.submit(form)
    _finish(result, f"Updated post {result.value.id}" if result.ok else "")


@app.command()
def delete(
    post_id: str = typer.Argument(..., help="Id of the post to delete"),
):
    """Delete a post."""
    _finish(_client().delete_post(post_id), f"Deleted post {post_id}")


@app.command()
def comment(
    post_id: str = typer.Argument(..., help="Id of the post to comment on"),
    text: str = typer.Argument(..., help="Comment text"),
):
    """Add a comment to a post."""
    result = _client().add_comment(post_id, text)
    _finish(result, f"Added comment {result.value.id} to post {post_id}" if result.ok else "")


@app.command("delete-comment")
def delete_comment(
    comment_id: str = typer.Argument(..., help="Id of the comment to delete"),
):
    """Delete a comment."""
    _finish(_client().delete_comment(comment_id), f"Deleted comment {comment_id}")


@app.command()
def status():
    """Check the API connection and show the output location."""
    client = _client()
    connected = client.api.test_connection()
    summary = client.files.get_summary()

    typer.echo(f"API: {client.api.base_url} ({'reachable' if connected else 'unreachable'})")
    typer.echo(f"Page: {summary['page_path']} ({'exists' if summary['page_exists'] else 'not written'})")
    if not connected:
        raise typer.Exit(code=1)
