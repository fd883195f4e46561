r"""
'     _
'    | | _____ _   _  __ _
'    | |/ / _ \ | | |/ _` |
'    |   <  __/ |_| | (_| |
'    |_|\_\___|\__, |\__, |
'              |___/    |_|
"""
import logging

# expose the main classes
from .collection import Collection
from .shared import SharedCollection

# expose the factory functions
from .factories import (
    of,
    of_element,
    of_empty,
    of_shared,
    empty,
    Q
)

# expose the adapters
from .adapters import property_selector, matches, Path, Function, Template

# expose the equality tiers
from .equality import loose_equals, strict_equals

# expose configuration
from .config import Settings, configure

# expose supporting data classes and errors
from .types import Maybe
from .errors import (
    KeyqError,
    InvalidArgumentKind,
    FieldAccessError,
    NoRootFound,
    EmptyCollectionAccess
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Collection",
    "SharedCollection",
    "of",
    "of_element",
    "of_empty",
    "of_shared",
    "empty",
    "Q",
    "property_selector",
    "matches",
    "Path",
    "Function",
    "Template",
    "loose_equals",
    "strict_equals",
    "Settings",
    "configure",
    "Maybe",
    "KeyqError",
    "InvalidArgumentKind",
    "FieldAccessError",
    "NoRootFound",
    "EmptyCollectionAccess"
]
