"""CLI entrypoints for scngen commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ScnConfig, load_config
from .errors import ConfigError, GraphError, ProviderError
from .ids import IdStyle
from .logging import configure_logging, get_logger
from .providers import discover_providers, load_graph
from .serializer import RenderOptions, serialize_graph


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
        prog="scngen",
        description="Render resolved code graphs as Symbolic Context Notation.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Serialize a graph document to SCN text.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument(
        "graph",
        help="Path to a graph document (.json, .yml or .yaml).",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write SCN output to this path instead of stdout.",
    )
    render_parser.add_argument(
        "-c",
        "--config",
        default=".",
        help="Path to .scn.yml or the directory containing it (defaults to current directory).",
    )
    render_parser.add_argument(
        "--id-style",
        choices=[style.value for style in IdStyle],
        default=None,
        help="Print node ids verbatim or as compact hierarchical numbers.",
    )
    render_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors to stderr.",
    )
    render_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Render file blocks on this many threads.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scngen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "render":
        try:
            config = load_config(Path(args.config))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        try:
            configure_logging(
                verbose=bool(args.verbose),
                quiet=args.quiet,
                command="render",
                log_file=config.log_file,
            )
        except OSError as exc:
            parser.exit(1, f"scngen render failed: cannot open log file: {exc}\n")
        _run_render(parser, args, config)
    elif args.command == "serve":
        configure_logging(verbose=bool(args.verbose), command="serve")
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_render(parser: argparse.ArgumentParser, args: argparse.Namespace, config: ScnConfig) -> None:
    logger = get_logger("cli")
    options = _resolve_options(parser, args, config)
    output = Path(args.output) if args.output else config.output

    try:
        providers = discover_providers(config.providers.enabled)
        graph = load_graph(Path(args.graph), providers)
        scn = serialize_graph(graph, options)
    except ValueError as exc:
        # GraphError and unknown provider names both land here.
        label = "invalid graph" if isinstance(exc, GraphError) else "configuration error"
        parser.exit(1, f"scngen render failed: {label}: {exc}\n")
    except ProviderError as exc:
        parser.exit(1, f"scngen render failed: {exc}\n")

    if output is None:
        sys.stdout.write(scn)
        if scn:
            sys.stdout.write("\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(scn, encoding="utf-8")
    logger.info("SCN map written to %s", _relativize(output))


def _resolve_options(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: ScnConfig
) -> RenderOptions:
    options = config.render.to_options()
    if args.id_style:
        options = replace(options, id_style=IdStyle(args.id_style))
    if args.workers is not None:
        if args.workers < 1:
            parser.error("--workers must be a positive integer")
        options = replace(options, max_workers=args.workers)
    return options


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
