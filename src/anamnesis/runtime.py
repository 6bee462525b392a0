"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.flashcard_parser import FlashcardParser
from .adapters.markdown_renderer import MarkdownItRenderer
from .config import AnamnesisConfig, load_config


@dataclass
class Runtime:
    """Container for all wired components."""
    parser: FlashcardParser
    config: AnamnesisConfig


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """Build and wire all components for a vault."""
    # Load configuration
    config = load_config(config_path=config_path, vault_path=vault_path)

    # Grammar errors surface here, before any note is read
    parser = FlashcardParser(config.parser_settings(), MarkdownItRenderer())

    return Runtime(
        parser=parser,
        config=config,
    )
