"""Command-line interface for CommentPulse."""

import argparse
import json
import logging
import sys
from functools import lru_cache

from .core.config import settings
from .core.constants import FileConstants
from .core.errors import ConfigurationError
from .services.language_client import create_language_client
from .services.pipeline import build_pipeline, validate_request
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_serve(args):
    """Serve command."""
    import uvicorn

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info(f"Server is listening on port: {port}")
    uvicorn.run("commentpulse.api:app", host=host, port=port)


def cmd_analyze(args):
    """Analyze a single video and print or export the result."""
    run_settings = settings
    if args.max_comments:
        run_settings = settings.model_copy(update={"max_comments": args.max_comments})

    @lru_cache(maxsize=1)
    def language_client():
        try:
            return create_language_client(run_settings)
        except ConfigurationError as e:
            logger.error(str(e))
            return None

    result = validate_request(args.video_id, run_settings.youtube_api_key, language_client)
    if result is None:
        print(f"Analyzing comments for video {args.video_id}...")
        result = build_pipeline(run_settings, language_client()).run(args.video_id, args.page_token)

    body = result.body

    if args.out:
        export_to_json(prepare_export(args.video_id, body, args.page_token), args.out)
        print(f"Results exported to {args.out}")

    if args.pretty:
        print(json.dumps(body, indent=2, ensure_ascii=False))

    print(f"\nStatus: {result.status_code}")
    print(f"Message: {body.get('message')}")
    print(f"Category: {body.get('category')}")

    themes = body.get("themes") or []
    if themes:
        print("\nTop themes:")
        for i, theme in enumerate(themes, 1):
            print(
                f"  {i}. {theme['name']}: {theme['occurrences']} mentions, "
                f"avg sentiment {theme['averageSentiment']:.2f} ({theme['sentimentCategory']})"
            )

    if result.status_code >= 400:
        sys.exit(1)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="CommentPulse - YouTube comment sentiment and themes")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', help='Interface to bind')
    serve_parser.add_argument('--port', type=int, help='Port to listen on')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze comments of one video')
    analyze_parser.add_argument('video_id', help='YouTube video ID')
    analyze_parser.add_argument('--page-token', help='Cursor to start paging from')
    analyze_parser.add_argument('--max-comments', type=int, help='Override the comment cap')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--pretty', action='store_true', help='Pretty print JSON to stdout')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'serve':
            cmd_serve(args)
        elif args.command == 'analyze':
            cmd_analyze(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
