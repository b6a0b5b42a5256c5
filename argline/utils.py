"""
Argline utilities shared by the node, engine and fault layers.

- Unset: "not given" sentinel, distinct from None (falsey, sealed, singleton).
- coalesce(value, default): materialize Unset without touching None/0/"".
- rename(...): give generated functions a readable __name__/__qualname__.
- mirror("attr"): read-only property over self._attr; containers come back as
  immutable copies, so callers cannot edit a node's bookkeeping.
- ordinal(n): "first", "second", ..., "11th" for position-first messages.
- isargument(word) / isflag(word): token shapes the engine dispatches on; value
  consumption uses them too (a value may not look like an argument).

    >>> coalesce(Unset, "argline")
    'argline'
    >>> isargument("--output"), isflag("-vf"), isflag("--output")
    (True, True, False)
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Type of the Unset sentinel.

    Keyword defaults use it where None is a value a caller may pass on purpose
    (for example an Option default). Works in PEP 604 unions, so
    isinstance(name, str | Unset) is a valid check.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return object, or default when object is Unset.

    coalesce(None, "x") is None: only the sentinel is replaced.
    """
    return default if object is Unset else object


def rename(*parameters):
    """
    rename(function, name) -> function
    @rename(name)

    Set __name__ and __qualname__ so tracebacks and reprs of generated
    functions (mirrored getters, metaclass __repr__) read like hand-written ones.
    """
    if len(parameters) == 1:
        name, = parameters
        if not isinstance(name, str):
            raise TypeError("@rename() argument must be a string")

        def decorator(function):
            return rename(function, name)

        return decorator

    if len(parameters) != 2:
        raise TypeError("rename() takes 1 or 2 arguments but %d were given" % len(parameters))

    function, name = parameters
    if not builtins.callable(function):
        raise TypeError("rename() first argument must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() second argument must be a string")
    try:
        function.__name__ = function.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() cannot update %r" % function) from None
    return function


def _freeze(object):
    # Lists become tuples and sets frozensets, recursively; mappings are copied.
    if isinstance(object, Mapping):
        return {key: _freeze(value) for key, value in object.items()}
    if isinstance(object, Set):
        return frozenset(map(_freeze, object))
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(map(_freeze, object))
    return object


def mirror(name, /):
    """
    Property exposing self._<name> read-only.

        names = mirror("names")     # node.names -> tuple copy of node._names
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(rename(getter, name))


def ordinal(number, /):
    """
    Ordinal label of a 1-based position: words up to ten, then "11th", "22nd"...
    """
    if 1 <= number <= 10:
        return (
            "first", "second", "third", "fourth", "fifth",
            "sixth", "seventh", "eighth", "ninth", "tenth",
        )[number - 1]
    if 10 < number % 100 < 20:
        return "%dth" % number
    return "%d%s" % (number, {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th"))


def isargument(word, /):
    """
    True for the long argument shape ("--name"); a lone "--" is a bare word.
    """
    return word.startswith("--") and len(word) > 2


def isflag(word, /):
    """
    True for the short flag or combo shape ("-v", "-abc"); a lone "-" is a bare word.
    """
    return word.startswith("-") and not word.startswith("--") and len(word) > 1


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "ordinal",
    "isargument",
    "isflag",
    "UnsetType",
    "Unset",
)
