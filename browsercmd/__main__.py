"""
__main__ provides the console-script entrypoint for the browsercmd package.
"""
from __future__ import annotations

import sys
import traceback

from rich.markup import escape

from browsercmd.cli import CLI, PROG, USAGE, EmitCommand, ShowUsage, ShowVersion
from browsercmd.console import logger


def main(argv: list[str] | None = None) -> None:
    """
    main is the entrypoint for the `browsercmd` console script.
    """
    cli = CLI()
    try:
        invocation = cli.parse(sys.argv[1:] if argv is None else argv)

        match invocation:
            case ShowUsage(requested=requested):
                print(USAGE, end="")
                if not requested:
                    sys.exit(1)
            case ShowVersion():
                print(cli.version())
            case EmitCommand(command=command, options=options):
                if options.json_output:
                    print(command.to_json())
                    return
                logger.header(command.action.value, command.id)
                logger.key_value(cli.compiler.planner.rows(command))
            case _:
                raise TypeError(f"Invalid invocation payload: {type(invocation)!r}")
    except ValueError as e:
        logger.error(escape(str(e)))
        print(f"Run '{PROG} --help' for usage.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
