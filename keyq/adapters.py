"""
turns shorthand arguments into callables.

a selector-like argument is a callable or a property path ('a.b.c').
a predicate-like argument may also be a match template ({'field': value}).
each argument is classified once into a tagged variant (Path, Function,
Template) and compiled into a uniform callable taking (element, key).
"""
from __future__ import annotations
import inspect
import logging
from typing import NamedTuple
from . import config
from .equality import loose_equals
from .errors import FieldAccessError, InvalidArgumentKind
from .types import *

logger = logging.getLogger(__name__)

_MISSING = object()


# --- field access ---

def read_field(element: Any, field: Any, default: Any = _MISSING) -> Any:
    """read one field of a record: mapping key, collection key, sequence index or attribute"""
    from .collection import Collection

    if isinstance(element, (Mapping, Collection)):
        if field in element.keys():
            return element[field]
        # path segments are strings, integer keys are looked up by their digits
        if isinstance(field, str) and field.lstrip("-").isdigit() and int(field) in element.keys():
            return element[int(field)]
    elif isinstance(element, (list, tuple)):
        try:
            return element[int(field)]
        except (ValueError, TypeError, IndexError):
            pass
    elif element is not None and isinstance(field, str) and hasattr(element, field):
        return getattr(element, field)

    if default is _MISSING:
        raise FieldAccessError(str(field), str(field), element)
    return default


def assign_field(element: Any, field: str, value: Any) -> None:
    """write one field of a record in place"""
    if isinstance(element, MutableMapping):
        element[field] = value
    else:
        setattr(element, field, value)


def property_selector(path: str) -> Callable[[Any], Any]:
    """a function returning the value at path of a given element"""
    segments = path.split(config.settings.path_separator) if path else [path]

    def select(element: Any) -> Any:
        value = element
        for segment in segments:
            try:
                value = read_field(value, segment)
            except FieldAccessError as e:
                raise FieldAccessError(path, segment, e.value) from None
        return value

    select.__name__ = f"property({path!r})"
    return select


def matches(template: Mapping[str, Any]) -> Callable[[Any], bool]:
    """a predicate doing a partial, loose comparison of an element against template"""
    expected = list(template.items())

    def predicate(element: Any) -> bool:
        for field, value in expected:
            actual = read_field(element, field, _MISSING)
            # a missing field never matches
            if actual is _MISSING or not loose_equals(actual, value):
                return False
        return True

    return predicate


# --- tagged variants ---

class Path(NamedTuple):
    path: str

    def compile(self) -> Callable[[Any, Key], Any]:
        select = property_selector(self.path)
        return lambda element, key=None: select(element)


class Function(NamedTuple):
    func: Callable[..., Any]

    def compile(self) -> Callable[[Any, Key], Any]:
        return fit_arity(self.func, 2)


class Template(NamedTuple):
    template: Mapping[str, Any]

    def compile(self) -> Callable[[Any, Key], bool]:
        predicate = matches(self.template)
        return lambda element, key=None: predicate(element)


def classify(argument: Any, allow_template: bool = False) -> Union[Path, Function, Template]:
    if isinstance(argument, (Path, Function, Template)):
        return argument
    if isinstance(argument, str):
        return Path(argument)
    if allow_template and isinstance(argument, Mapping):
        return Template(argument)
    if callable(argument):
        return Function(argument)
    expected = "callable, property path or match template" if allow_template else "callable or property path"
    raise InvalidArgumentKind(argument, expected)


def selector(argument: SelectorLike) -> Callable[[Any, Key], Any]:
    """resolve a selector-like argument into a callable taking (element, key)"""
    return classify(argument).compile()


def predicate(argument: PredicateLike) -> Callable[[Any, Key], bool]:
    """resolve a predicate-like argument into a callable taking (element, key)"""
    return classify(argument, allow_template=True).compile()


# --- arity ---

def _positional_capacity(func: Callable[..., Any]) -> Optional[int]:
    """how many positional arguments func accepts, none for unlimited"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def fit_arity(func: Callable[..., Any], max_args: int) -> Callable[..., Any]:
    """
    wrap func so it can always be called with max_args positional arguments.
    extra arguments (the key, for example) are dropped when func takes fewer.
    """
    # types and builtins (int, str, len) get the element only
    if inspect.isclass(func) or inspect.isbuiltin(func) or not _has_signature(func):
        logger.debug(f"calling {func!r} with one argument")
        return lambda *args: func(*args[:1])
    capacity = _positional_capacity(func)
    if capacity is None:
        return func
    if capacity >= max_args:
        return func
    return lambda *args: func(*args[:capacity])


def _has_signature(func: Callable[..., Any]) -> bool:
    try:
        inspect.signature(func)
        return True
    except (TypeError, ValueError):
        return False
