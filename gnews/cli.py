"""
Command-line interface for gnews.
"""
import sys
import argparse
import asyncio
import logging
from typing import Callable, List, Optional

from gnews.config import get_config, load_config
from gnews.core.article import FilterType
from gnews.fetchers.google_news import FeedSource, GoogleNewsClient
from gnews.formatters.console import ConsoleView, format_categories
from gnews.core.view_model import NewsViewModel

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_args(argv: Optional[List[str]] = None):
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Google News (Japan) RSS reader")
    parser.add_argument("--category", default="top",
                        help="Category to show: " + ", ".join(f.name.lower() for f in FilterType))
    parser.add_argument("--list-categories", action="store_true", help="List categories and exit")
    parser.add_argument("--interactive", action="store_true",
                        help="Prompt for categories; 'r' reloads, 'q' quits")
    parser.add_argument("--config", help="Path to a YAML or JSON config file")
    parser.add_argument("--no-links", action="store_true", help="Do not print article links")
    parser.add_argument("--log-level", help="Logging level (overrides logging.level)")
    return parser.parse_args(argv)


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Configure root logging to stderr and, optionally, a file.
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


async def interactive_loop(view_model: NewsViewModel,
                           prompt: Callable[[str], str] = input) -> None:
    """
    Read commands until 'q': a category number selects it, 'r' reloads.
    """
    filter_types = list(FilterType)
    loop = asyncio.get_running_loop()
    print(format_categories(filter_types))
    while True:
        try:
            # input() blocks, so it runs in the default executor
            line = await loop.run_in_executor(None, prompt, "category number, r=reload, q=quit> ")
            command = line.strip().lower()
        except EOFError:
            return
        if command == "q":
            return
        if command == "r":
            await view_model.reload()
        elif command.isdigit() and 1 <= int(command) <= len(filter_types):
            await view_model.load(filter_types[int(command) - 1])
        else:
            print(format_categories(filter_types))


async def async_main(args, source: Optional[FeedSource] = None) -> int:
    """
    Main entry point for the application.
    """
    if args.config:
        load_config(args.config)

    setup_logging(args.log_level or get_config('logging.level', 'INFO'),
                  get_config('logging.file'))

    if args.list_categories:
        print(format_categories())
        return 0

    try:
        filter_type = FilterType.from_name(args.category)
    except ValueError as e:
        logger.error(str(e))
        return 2

    view_model = NewsViewModel(source or GoogleNewsClient())
    show_links = not args.no_links and bool(get_config('display.show_links', True))
    view = ConsoleView(view_model, show_links=show_links)
    try:
        await view_model.load(filter_type)
        if args.interactive:
            await interactive_loop(view_model)
    finally:
        view.close()

    state = view_model.state
    return 1 if state is not None and state.is_error else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the command-line script.
    """
    args = parse_args(argv)
    try:
        return asyncio.run(async_main(args))
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"An error occurred: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
