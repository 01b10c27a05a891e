"""
HueMatch — CLI entry points
Usage:
    huematch [--host HOST] [--port PORT] [--reload] [--log-level LEVEL]
    huematch-build [--output PATH] [--vocabulary FILE] [--model NAME]
"""

import argparse
import logging
import sys

from . import config


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="huematch",
        description="HueMatch color server — start the API.",
    )
    parser.add_argument("--host", default=config.HOST, help=f"Bind host (default: {config.HOST})")
    parser.add_argument("--port", type=int, default=config.PORT, help=f"Bind port (default: {config.PORT})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (dev mode)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args()

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not found. Run: pip install huematch", file=sys.stderr)
        sys.exit(1)

    uvicorn.run(
        "huematch.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


def build_main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="huematch-build",
        description="Embed the reference vocabulary and write the reference store.",
    )
    parser.add_argument(
        "--output",
        default=config.REFERENCE_PATH,
        help=f"Reference store path (default: {config.REFERENCE_PATH})",
    )
    parser.add_argument("--vocabulary", default=None, help="JSON vocabulary file (default: built-in list)")
    parser.add_argument("--model", default=None, help=f"Embedding model (default: {config.EMBED_MODEL})")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("huematch.build")

    from .builder import build_and_save
    from .embedder import SentenceTransformerEmbedder
    from .errors import BuildError
    from .vocabulary import DEFAULT_VOCABULARY, load_vocabulary

    try:
        vocabulary = load_vocabulary(args.vocabulary) if args.vocabulary else list(DEFAULT_VOCABULARY)
        log.info("Generating reference embeddings for %d words", len(vocabulary))
        store = build_and_save(vocabulary, SentenceTransformerEmbedder(model_name=args.model), args.output)
    except BuildError as exc:
        log.error("Build failed, nothing written: %s", exc)
        sys.exit(1)

    log.info("Saved %d reference embeddings (dim=%d) to %s", len(store), store.dimensions, args.output)


if __name__ == "__main__":
    main()
