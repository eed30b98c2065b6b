import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bloomcheck.errors import ConstructionError, SettingsError

DEFAULT_FALSE_POSITIVE_PROBABILITY = 0.0001
DEFAULT_FORMAT_VERSION = 1


@dataclass
class BloomSettings:
    false_positive_probability: float = DEFAULT_FALSE_POSITIVE_PROBABILITY
    format_version: int = DEFAULT_FORMAT_VERSION
    encoding: str = "utf-8"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> BloomSettings:
    """Build settings from defaults overridden by ``BLOOMCHECK_*`` variables."""
    env = os.environ if environ is None else environ
    settings = BloomSettings()
    raw_fpp = env.get("BLOOMCHECK_FPP")
    if raw_fpp:
        try:
            fpp = float(raw_fpp)
        except ValueError:
            raise ConstructionError(
                f"BLOOMCHECK_FPP is not a number: {raw_fpp!r}"
            ) from None
        if not 0.0 < fpp < 1.0:
            raise ConstructionError(
                f"BLOOMCHECK_FPP must be in (0, 1), got {fpp}"
            )
        settings.false_positive_probability = fpp
    raw_version = env.get("BLOOMCHECK_VERSION")
    if raw_version:
        try:
            version = int(raw_version)
        except ValueError:
            raise SettingsError(
                f"BLOOMCHECK_VERSION is not an integer: {raw_version!r}"
            ) from None
        if not 0 <= version <= 0xFFFF:
            raise SettingsError(
                f"BLOOMCHECK_VERSION must fit in 16 bits, got {version}"
            )
        settings.format_version = version
    raw_encoding = env.get("BLOOMCHECK_ENCODING")
    if raw_encoding:
        settings.encoding = raw_encoding
    return settings


SETTINGS = load_settings()
