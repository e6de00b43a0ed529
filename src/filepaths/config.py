"""Configuration for the filepaths command line."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .core.errors import InvalidVariant
from .core.models import VARIANTS, PathVariant

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in {'1', 'true', 'yes', 'on'}


@dataclass
class Config:
    """Configuration settings for the filepaths CLI."""

    variant: str = field(default_factory=lambda: os.getenv('FILEPATHS_VARIANT', 'native'))
    theme: str = field(default_factory=lambda: os.getenv('FILEPATHS_THEME', 'manhattan'))
    debug: bool = field(default_factory=lambda: _env_flag('FILEPATHS_DEBUG'))

    def path_variant(self) -> PathVariant:
        """Look up the configured variant by name."""
        try:
            return VARIANTS[self.variant.lower()]
        except KeyError:
            raise InvalidVariant(
                f"unknown path variant {self.variant!r}; expected one of {', '.join(VARIANTS)}"
            ) from None
