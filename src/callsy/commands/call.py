"""The call pipeline: request file in, response file out."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..interactive import confirm_overwrites
from ..request import (
    CallsyHttpClient,
    RequestDescriptor,
    ResponseDescriptor,
    load_request,
    resolve_headers,
    write_body,
    write_response,
)

console = Console()

STATUS_COLORS = {2: "green", 3: "cyan", 4: "yellow", 5: "red"}


def run_call(
    request_file: Path,
    output_file: Path,
    body_output_file: Optional[Path] = None,
    *,
    indent: Optional[int] = 2,
    confirm_overwrite: bool = False,
    quiet: bool = False,
    client: Optional[CallsyHttpClient] = None,
) -> ResponseDescriptor:
    """Load, resolve, send and write one request.

    Every step completes or raises a CallsyError before the next begins,
    so nothing is sent if the request is invalid and nothing is written
    if the request fails.
    """
    if confirm_overwrite:
        confirm_overwrites([output_file, body_output_file])

    request = load_request(request_file)
    headers = resolve_headers(request.headers, request.body)

    if client is None:
        client = CallsyHttpClient()
    response = client.send(request.method, request.url, headers, request.body)

    write_response(response, output_file, indent=indent)
    if body_output_file is not None:
        write_body(response.body, body_output_file)

    if not quiet:
        _display_summary(request, response, output_file)

    return response


def _display_summary(
    request: RequestDescriptor,
    response: ResponseDescriptor,
    output_file: Path,
) -> None:
    """Print a one-line summary of the exchange."""
    color = STATUS_COLORS.get(response.status // 100, "white")
    console.print(
        f"[{color}]{response.status}[/{color}] "
        f"[bold]{request.method}[/bold] {escape(request.url)} "
        f"[dim]->[/dim] {escape(str(output_file))} "
        f"[dim]({response.elapsed_ms:.0f}ms)[/dim]",
        highlight=False,
    )
