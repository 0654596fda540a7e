"""callsy CLI entry point."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .commands import config, run_call
from .config import load_config
from .errors import CallsyError

err_console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.option("--request", "-r", "request_file", default=None,
              help="Request description file (default: request.json)")
@click.option("--output", "-o", "output_file", default=None,
              help="Response description file (default: response.json)")
@click.option("--body-output", "-b", "body_output_file", default=None,
              help="Also write the raw response body to this file")
@click.option("--config", "-c", "config_path", default=None,
              help="Config file path (callsy.yaml)")
@click.option("--confirm-overwrite", is_flag=True,
              help="Ask before overwriting existing output files")
@click.option("--quiet", "-q", is_flag=True, help="Don't print the response summary")
@click.version_option(__version__, prog_name="callsy")
@click.pass_context
def main(ctx, request_file, output_file, body_output_file, config_path,
         confirm_overwrite, quiet):
    """callsy - perform an HTTP request described by a JSON file.

    Reads the request (url, method, headers, body) from a JSON file, sends
    it, and writes the response (status, headers, body) as JSON.

    \b
    Examples:
        callsy
        callsy -r login.json -o login-response.json
        callsy -r upload.json -b body.txt
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        cfg = load_config(config_path)
        run_call(
            Path(request_file or cfg.request),
            Path(output_file or cfg.output),
            _optional_path(body_output_file or cfg.body_output),
            indent=cfg.indent or None,
            confirm_overwrite=confirm_overwrite or cfg.confirm_overwrite,
            quiet=quiet,
        )
    except CallsyError as e:
        err_console.print(f"[red]Error:[/red] {e.kind}: {escape(str(e))}", highlight=False)
        sys.exit(1)


def _optional_path(value):
    return Path(value) if value else None


main.add_command(config)


if __name__ == "__main__":
    main()
