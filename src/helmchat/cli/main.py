#!/usr/bin/env python3
"""
HELMCHAT CLI - Conversational Transport
---------------------------------------
Terminal front-end for the engine: one-shot questions (`ask`), parser
diagnostics (`parse`) and an interactive session (`chat`). The CLI only
moves text in and out; all decisions live in the engine.

Author: HelmChat Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from helmchat.cli.formatter import ChatFormatter
from helmchat.core.config import HelmChatConfig
from helmchat.core.engine import HelmChatEngine
from helmchat.core.parser import IntentParser
from helmchat.helm.cli import HelmCLI

__version__ = "0.1.0"

# Global console for consistent styling across the application
console = Console()

EXIT_WORDS = {"exit", "quit", "bye"}


def configure_logging(level: str):
    """Root logging goes through rich; library modules only get loggers."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


class HelmChatCLI:
    """
    CLI wrapper that translates user commands into engine calls and
    renders the single response string each one produces.
    """

    def __init__(self, formatter: Optional[ChatFormatter] = None):
        self.formatter = formatter or ChatFormatter(console)
        self.parser = argparse.ArgumentParser(
            prog="helmchat",
            description="HelmChat - natural-language Helm chart scaffolding and release management",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='Example: helmchat ask "create a helm chart for my-app with 3 replicas"'
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the global flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=f"helmchat v{__version__}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--workspace", help="Directory charts are scaffolded into (default: .)")
        self.parser.add_argument("--helm-binary", help="Path or name of the helm executable")
        self.parser.add_argument("--timeout", type=float, help="Seconds allowed per helm invocation")

        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        ask_parser = subparsers.add_parser("ask", help="Handle a single request")
        ask_parser.add_argument("message", nargs="+", help="The request, e.g. 'check chart web'")
        ask_parser.add_argument("--release", help="Release name for status, uninstall and upgrade requests")

        parse_parser = subparsers.add_parser("parse", help="Show how a request is understood (no helm needed)")
        parse_parser.add_argument("message", nargs="+", help="The request to parse")
        parse_parser.add_argument("--json", action="store_true", help="Emit the parsed command as JSON")

        subparsers.add_parser("chat", help="Start an interactive session")

    def print_header(self, subtitle: str):
        console.print(Panel.fit(
            f"[bold cyan]HelmChat v{__version__}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def build_config(self, args: argparse.Namespace) -> HelmChatConfig:
        config = HelmChatConfig.from_env().override(
            workspace=args.workspace,
            helm_binary=args.helm_binary,
            helm_timeout=args.timeout,
        )
        if args.verbose:
            config = config.override(log_level="DEBUG")
        return config

    def build_engine(self, config: HelmChatConfig) -> HelmChatEngine:
        logger = logging.getLogger("helmchat.engine")
        helm = HelmCLI(binary=config.helm_binary, timeout=config.helm_timeout,
                       logger=logging.getLogger("helmchat.helm"))
        return HelmChatEngine(str(config.workspace), helm=helm, logger=logger)

    def _run_chat(self, engine: HelmChatEngine):
        self.print_header("Interactive Session")
        console.print("[dim]Type 'exit' to leave.[/dim]")
        while True:
            try:
                message = console.input("[bold green]you> [/bold green]").strip()
            except EOFError:
                console.print()
                return
            if not message:
                continue
            if message.lower() in EXIT_WORDS:
                return
            self.formatter.show_response(engine.handle(message))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.print_header("Helm Assistant")
            self.parser.print_help()
            return 0

        config = self.build_config(args)
        configure_logging(config.log_level)

        if args.command == "parse":
            parsed = IntentParser().parse(" ".join(args.message))
            if args.json:
                self.formatter.show_json(parsed)
            else:
                self.formatter.show_parsed(parsed)
            return 0

        engine = self.build_engine(config)
        if args.command == "ask":
            self.formatter.show_response(engine.handle(" ".join(args.message), release_name=args.release))
        elif args.command == "chat":
            self._run_chat(engine)
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(HelmChatCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
