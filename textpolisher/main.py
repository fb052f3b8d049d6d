"""Command-line entry point wiring configuration, credentials and the orchestrator."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

if __package__:
    from .config_manager import ConfigManager
    from .credentials import ConfigCredentialStore, StaticCredentialStore
    from .logger import PolisherLogger, get_logger
    from .openai_corrector import PROMPT_PRESETS, get_preset_options, get_system_instruction
    from .orchestrator import CorrectionOrchestrator
    from .process_text import ProcessTextHandler, ProcessTextStatus
else:
    # Allow running as a script (python textpolisher/main.py) by fixing sys.path
    package_root = Path(__file__).resolve().parent.parent
    if str(package_root) not in sys.path:
        sys.path.append(str(package_root))

    from textpolisher.config_manager import ConfigManager  # type: ignore[import-not-found]
    from textpolisher.credentials import ConfigCredentialStore, StaticCredentialStore  # type: ignore[import-not-found]
    from textpolisher.logger import PolisherLogger, get_logger  # type: ignore[import-not-found]
    from textpolisher.openai_corrector import PROMPT_PRESETS, get_preset_options, get_system_instruction  # type: ignore[import-not-found]
    from textpolisher.orchestrator import CorrectionOrchestrator  # type: ignore[import-not-found]
    from textpolisher.process_text import ProcessTextHandler, ProcessTextStatus  # type: ignore[import-not-found]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TextPolisher - grammar and spelling correction with a local fallback")
    parser.add_argument("text", nargs="?", default=None, help="Text to correct (read from stdin when omitted)")
    parser.add_argument("--api-key", type=str, default=None, help="OpenAI API key (overrides the saved key and OPENAI_API_KEY)")
    parser.add_argument("--model", type=str, default=None, help="Chat-completion model to use")
    parser.add_argument("--preset", choices=sorted(PROMPT_PRESETS), default=None, help="Correction prompt preset")
    parser.add_argument("--read-only", action="store_true", help="Treat the source as read-only: display the text, do not correct it")
    parser.add_argument("--set-api-key", type=str, default=None, metavar="KEY", help="Save an API key to the configuration and exit")
    parser.add_argument("--clear-api-key", action="store_true", help="Remove the saved API key and exit")
    parser.add_argument("--list-presets", action="store_true", help="List available prompt presets and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose debug output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress all log output except errors")
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to specified file")
    return parser.parse_args(argv)


def _display(text: str) -> None:
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def main(argv: Optional[List[str]] = None, config: Optional[ConfigManager] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = parse_args(argv)

    log_level = logging.ERROR if args.quiet else (logging.DEBUG if args.verbose else logging.INFO)
    log_file = Path(args.log_file) if args.log_file else None
    PolisherLogger.setup(level=log_level, log_file=log_file, console=True)
    logger = get_logger("main")

    if args.list_presets:
        for option in get_preset_options():
            _display(f"{option['key']:10s} {option['label']} - {option['description']}")
        return 0

    config = config or ConfigManager()
    logger.debug(f"Configuration loaded from: {config.config_file}")

    if args.set_api_key is not None:
        config.set_api_key(args.set_api_key)
        logger.info("API key saved")
        return 0

    if args.clear_api_key:
        config.clear_api_key()
        logger.info("API key removed")
        return 0

    text = args.text if args.text is not None else sys.stdin.read()

    credentials = StaticCredentialStore(args.api_key) if args.api_key else ConfigCredentialStore(config)
    if not credentials.is_present():
        logger.info("No API key found - corrections use local normalization only")

    settings = config.get_remote_settings()
    if args.model:
        settings = replace(settings, model_name=args.model)

    instruction = get_system_instruction(args.preset or config.get_prompt_preset())

    with CorrectionOrchestrator(credentials, system_instruction=instruction, settings=settings) as orchestrator:
        handler = ProcessTextHandler(orchestrator, viewer=_display)
        result = handler.handle(text, read_only=args.read_only)

    if result.status is ProcessTextStatus.CANCELLED:
        return 1

    _display(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
