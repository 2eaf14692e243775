from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from psi import __version__
from psi.config import load_config
from psi.errors import PsiConfigError
from psi.repl import Repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="psi", description="psi expression REPL")
    parser.add_argument("--prompt", help="prompt written before each line (default: $PSI_PROMPT or 'psi> ')")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="logging level for stderr diagnostics")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except PsiConfigError as ex:
        print(f"psi: {ex}", file=sys.stderr)
        return 2
    if args.prompt is not None:
        config = dataclasses.replace(config, prompt=args.prompt)
    if args.log_level is not None:
        config = dataclasses.replace(config, log_level=args.log_level)

    # Diagnostics go to stderr so the transcript on stdout stays exact
    logging.basicConfig(level=config.log_level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    Repl(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
