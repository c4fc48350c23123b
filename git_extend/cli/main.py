"""Command-line entry point for git-list"""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_extend.cli.args import parse_args
from git_extend.config import Config, resolve_base_dir
from git_extend.core import RepoLister
from git_extend.exceptions import GitExtendError
from git_extend.logging_config import setup_logging

error_console = Console(stderr=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            base_dir=resolve_base_dir(parsed_args.dir),
            output_format=parsed_args.output,
            color=not parsed_args.no_color,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            sequential=parsed_args.sequential,
            workers=parsed_args.workers,
        )

        if config.debug:
            error_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                error_console.print(f"  {key}: {value}", highlight=False)

        RepoLister(config).run()
        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (GitExtendError, ValueError) as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        if parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
