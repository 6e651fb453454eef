"""The four quantifier variants: All, Any, One, None."""

from .existential import AnyJunction, NoneJunction
from .unique import OneJunction
from .universal import AllJunction

__all__ = ["AllJunction", "AnyJunction", "NoneJunction", "OneJunction"]
