# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Console front end: request inline completions for a file position.

Usage:
    python -m codeium_inline path/to/file.py --line 10 --character 4

Lines and characters are 0-based; characters are counted in UTF-16 code
units, as editors do. Ctrl+C while waiting cancels the request.
"""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax

from codeium_inline.completion import (
    CancellationToken,
    CodeiumCompletionProvider,
    FormattingOptions,
    InlineCompletionList,
    Position,
    Status,
    TextDocument,
    document_info,
)
from codeium_inline.config import CompletionSettings

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    Status.IDLE: "dim",
    Status.PROCESSING: "bold cyan",
    Status.SUCCESS: "bold green",
    Status.ERROR: "bold red",
}


class ConsoleStatus:
    """Status and message callbacks that print to a rich console."""

    def __init__(self, console: Console):
        self.console = console
        self.status = Status.IDLE

    def on_status_change(self, status: Status) -> None:
        self.status = status

    def on_message_change(self, message: str) -> None:
        style = STATUS_STYLES[self.status]
        self.console.print(f"[{style}]{self.status.value}[/] {message}")


def render_completions(
    console: Console,
    result: InlineCompletionList,
    language_id: str,
) -> None:
    """Print each completion with its replacement range."""
    for index, item in enumerate(result.items, start=1):
        start, end = item.range.start, item.range.end
        title = (
            f"#{index} [{start.line}:{start.character} - {end.line}:{end.character}] "
            f"{item.completion_id}"
        )
        console.print(
            Panel(
                Syntax(item.insert_text, language_id, line_numbers=False, word_wrap=True),
                title=title,
                title_align="left",
            )
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeium_inline",
        description="Request inline completions for a position in a file.",
    )
    parser.add_argument("file", type=Path, help="File to complete in")
    parser.add_argument("--line", type=int, required=True, help="0-based line")
    parser.add_argument("--character", type=int, required=True, help="0-based character")
    parser.add_argument("--language", help="Editor language id (detected if omitted)")
    parser.add_argument("--tab-size", type=int, default=4)
    parser.add_argument("--tabs", action="store_true", help="Indent with tabs")
    parser.add_argument(
        "--context",
        type=Path,
        nargs="*",
        default=[],
        help="Other files to send as context (at most 10 are used)",
    )
    parser.add_argument("--api-key", help="API key (default: $CODEIUM_API_KEY)")
    parser.add_argument("--api-url", help="API URL (default: $CODEIUM_API_URL)")
    parser.add_argument("--multiline-threshold", type=float)
    parser.add_argument(
        "--accept",
        action="store_true",
        help="Report the first completion as accepted",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


async def run(args: argparse.Namespace, console: Console) -> int:
    overrides = {}
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.api_url:
        overrides["api_url"] = args.api_url
    if args.multiline_threshold is not None:
        overrides["multiline_model_threshold"] = args.multiline_threshold
    settings = CompletionSettings.from_env(**overrides)

    formatting = FormattingOptions(tab_size=args.tab_size, insert_spaces=not args.tabs)
    document = TextDocument.from_file(args.file, args.language, formatting)

    status = ConsoleStatus(console)
    provider = CodeiumCompletionProvider.from_settings(
        settings,
        on_status_change=status.on_status_change,
        on_message_change=status.on_message_change,
    )
    for path in args.context:
        other = TextDocument.from_file(path)
        provider.other_documents.append(document_info(other, absolute_path=str(path.resolve())))

    token = CancellationToken()
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, token.cancel)
    except (NotImplementedError, RuntimeError):
        logger.debug("SIGINT cancellation not supported on this platform")

    try:
        result = await provider.provide_inline_completions(
            document,
            Position(line=args.line, character=args.character),
            token,
        )
        if token.is_cancellation_requested:
            console.print("[yellow]Cancelled[/]")
            return 130
        if result is None:
            return 1 if provider.status is Status.ERROR else 0

        render_completions(console, result, document.language_id)
        if args.accept and result.items:
            task = provider.accepted_last_completion(result.items[0].completion_id)
            if task is not None:
                await task
        return 0
    finally:
        try:
            loop.remove_signal_handler(signal.SIGINT)
        except (NotImplementedError, RuntimeError):
            pass
        await provider.aclose()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    if not args.file.is_file():
        console.print(f"[bold red]No such file:[/] {args.file}")
        return 2
    return asyncio.run(run(args, console))


if __name__ == "__main__":
    sys.exit(main())
