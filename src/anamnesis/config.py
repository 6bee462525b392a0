"""Configuration loader for anamnesis.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .core.settings import ParserSettings

CONFIG_NAME = "anamnesis.toml"


class ConfigError(ValueError):
    """A config value has the wrong type."""


@dataclass
class VaultConfig:
    """Vault-specific configuration."""
    root: Path
    name: str


@dataclass
class CardsConfig:
    """Card notation configuration."""
    tag: str = "card"
    inline_separator: str = "::"
    inline_separator_reverse: str = ":::"
    inline_id: bool = False
    default_deck: str = "Default"
    default_tag: str = "obsidian"
    source_support: bool = False


@dataclass
class ContextConfig:
    """Heading context configuration."""
    enabled: bool = True
    separator: str = " > "


@dataclass
class AnamnesisConfig:
    """Complete anamnesis configuration."""
    vault: VaultConfig
    cards: CardsConfig
    context: ContextConfig

    def parser_settings(self) -> ParserSettings:
        return ParserSettings(
            flashcards_tag=self.cards.tag,
            inline_separator=self.cards.inline_separator,
            inline_separator_reverse=self.cards.inline_separator_reverse,
            inline_id=self.cards.inline_id,
            context_aware_mode=self.context.enabled,
            context_separator=self.context.separator,
            default_anki_tag=self.cards.default_tag,
            source_support=self.cards.source_support,
            vault_name=self.vault.name,
            default_deck=self.cards.default_deck,
        )


def _get(table: dict[str, Any], key: str, default: Any, section: str) -> Any:
    value = table.get(key, default)
    if not isinstance(value, type(default)):
        raise ConfigError(
            f"[{section}] {key} must be {type(default).__name__}, got {value!r}"
        )
    return value


def load_config(config_path: Path | None = None, vault_path: Path | None = None) -> AnamnesisConfig:
    """
    Load configuration from anamnesis.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/anamnesis.toml
    3. vault_path/anamnesis.toml

    Args:
        config_path: Explicit path to config file
        vault_path: Vault root path for fallback search

    Returns:
        AnamnesisConfig with resolved settings

    Raises:
        ConfigError: if a known key holds a value of the wrong type
    """
    toml_data: dict[str, Any] = {}

    # Search for config file
    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)
    if vault_path:
        search_paths.append(vault_path / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    # Parse vault config
    vault_data = toml_data.get("vault", {})
    vault_root = Path(vault_data.get("root", vault_path or Path(".")))
    vault_name = _get(vault_data, "name", "", "vault") or vault_root.resolve().name

    vault_config = VaultConfig(
        root=vault_root,
        name=vault_name,
    )

    # Parse card notation config
    cards_data = toml_data.get("cards", {})
    defaults = CardsConfig()
    cards_config = CardsConfig(
        tag=_get(cards_data, "tag", defaults.tag, "cards"),
        inline_separator=_get(
            cards_data, "inline_separator", defaults.inline_separator, "cards"
        ),
        inline_separator_reverse=_get(
            cards_data, "inline_separator_reverse", defaults.inline_separator_reverse, "cards"
        ),
        inline_id=_get(cards_data, "inline_id", defaults.inline_id, "cards"),
        default_deck=_get(cards_data, "default_deck", defaults.default_deck, "cards"),
        default_tag=_get(cards_data, "default_tag", defaults.default_tag, "cards"),
        source_support=_get(cards_data, "source_support", defaults.source_support, "cards"),
    )

    # Parse context config
    context_data = toml_data.get("context", {})
    context_config = ContextConfig(
        enabled=_get(context_data, "enabled", True, "context"),
        separator=_get(context_data, "separator", " > ", "context"),
    )

    return AnamnesisConfig(
        vault=vault_config,
        cards=cards_config,
        context=context_config,
    )
