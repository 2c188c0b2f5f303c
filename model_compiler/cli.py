"""CLI entrypoint for the model compiler."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import CompileError
from .logging import configure_logging
from .orchestrator import ModelCompiler


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="model-compiler",
        description="Compile YANG config models into model plugins.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser(
        "compile",
        help="Generate bindings, schema tree and plugin artifacts for a model.",
    )
    _add_verbose_option(compile_parser, suppress_default=True)
    compile_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the model directory (defaults to current directory).",
    )
    compile_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Compiler settings file (defaults to .model-compiler.yml in the model directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for model-compiler commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "compile":
        model_path = Path(args.path)
        try:
            config = load_config(args.config or model_path)
        except ConfigError as exc:
            parser.exit(1, f"model-compiler: {exc}\n")
        compiler = ModelCompiler(config)
        try:
            result = compiler.compile(model_path)
        except CompileError as exc:
            parser.exit(1, f"model-compiler compile failed at {exc.stage.value}: {exc}\n")
        print(f"Model {result.dictionary.name}:{result.dictionary.version} compiled at {result.path}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
