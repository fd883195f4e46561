from dataclasses import dataclass, asdict, replace
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """configuration for the collection engine"""
    coerce_numeric_strings: bool = True  # loose equality: '1' == 1
    path_separator: str = '.'
    children_field: str = 'children'
    json_indent: int = 4
    numpy_fast_path: bool = True


settings = Settings()


def configure(**changes) -> Settings:
    """replace one or more settings; unknown names raise TypeError"""
    global settings
    settings = replace(settings, **changes)
    logger.debug(f"settings: {asdict(settings)}")
    return settings


def reset() -> Settings:
    """restore the defaults"""
    global settings
    settings = Settings()
    return settings


def current() -> Settings:
    return settings
