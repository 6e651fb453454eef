"""
Example scenario catalog.

Loads worked comparisons from `scenarios.yaml` (shipped with the package)
and evaluates them. Each scenario compares two sides, either of which may
be a junction, and states the boolean it must collapse to.

The catalog covers the classic uses: testing several variables at once,
testing whole containers, iterator-style ranges, string elements and
mapping a junction to a new element type.
"""

import warnings
from dataclasses import dataclass
from importlib import resources
from typing import Any, Callable, Dict, List, Optional

import yaml

from junctions.junction import Junction
from junctions.operators import ComparisonOperator
from junctions.quantifiers import AllJunction, AnyJunction, NoneJunction, OneJunction
from junctions.reverse import compare


class ScenarioError(ValueError):
    """Raised when a catalog entry is malformed."""
    pass


QUANTIFIERS: Dict[str, type] = {
    "all": AllJunction,
    "any": AnyJunction,
    "one": OneJunction,
    "none": NoneJunction,
}

TRANSFORMS: Dict[str, Callable[[Any], Any]] = {
    "len": len,
    "increment": lambda n: n + 1,
    "decrement": lambda n: n - 1,
    "negate": lambda n: -n,
    "upper": str.upper,
}


@dataclass(frozen=True, eq=False)
class Scenario:
    """
    One worked comparison.

    Properties:
        name: Short identifier
        left: Left operand (junction or plain value)
        operator: Comparison operator
        right: Right operand (junction or plain value)
        expected: Boolean the comparison must collapse to
        description: Optional explanation
    """

    name: str
    left: Any
    operator: ComparisonOperator
    right: Any
    expected: bool
    description: Optional[str] = None

    def evaluate(self) -> bool:
        return compare(self.left, self.operator, self.right)


def build_junction(spec: Dict[str, Any]) -> Junction:
    """
    Build a junction from a catalog mapping.

    Keys:
        quantifier: all | any | one | none
        elements: list of elements
        storage: copy (default) | ref | range | sorted
        start, stop: positions, for storage: range
        map: name of a transform from TRANSFORMS

    Raises:
        ScenarioError: If a key holds an unknown value or elements is not a list
    """
    try:
        cls = QUANTIFIERS[spec["quantifier"]]
    except KeyError:
        raise ScenarioError(f"Unknown or missing quantifier in {spec!r}") from None

    elements = spec.get("elements", [])
    if not isinstance(elements, list):
        raise ScenarioError(f"elements must be a list, got {elements!r}")
    storage = spec.get("storage", "copy")

    if storage == "copy":
        junction = cls.copy(elements)
    elif storage == "ref":
        junction = cls.borrow(elements)
    elif storage == "range":
        junction = cls.from_range(elements, spec.get("start", 0), spec.get("stop"))
    elif storage == "sorted":
        junction = cls.from_sorted(elements)
    else:
        raise ScenarioError(f"Unknown storage: {storage!r}")

    transform = spec.get("map")
    if transform is not None:
        if transform not in TRANSFORMS:
            raise ScenarioError(f"Unknown transform: {transform!r}")
        junction = junction.map(TRANSFORMS[transform])

    return junction


def _build_operand(value: Any) -> Any:
    if isinstance(value, dict):
        return build_junction(value)
    return value


def scenarios_from_dict(data: Dict[str, Any]) -> List[Scenario]:
    """
    Build scenarios from a parsed catalog.

    Entries with no `expected` result are skipped with a UserWarning.

    Raises:
        ScenarioError: If the catalog or an entry is malformed
    """
    if not isinstance(data, dict):
        raise ScenarioError(f"Catalog must be a mapping, got {type(data).__name__}")
    entries = data.get("scenarios", [])
    if not isinstance(entries, list):
        raise ScenarioError("'scenarios' must be a list")

    scenarios = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ScenarioError(f"Scenario entry must be a mapping, got {entry!r}")
        name = entry.get("name", "<unnamed>")
        if "expected" not in entry:
            warnings.warn(f"Scenario {name!r} has no expected result; skipped", UserWarning)
            continue
        for key in ("left", "operator", "right"):
            if key not in entry:
                raise ScenarioError(f"Scenario {name!r} is missing {key!r}")
        if not isinstance(entry["expected"], bool):
            raise ScenarioError(f"Scenario {name!r}: expected must be true or false")
        try:
            op = ComparisonOperator.from_symbol(str(entry["operator"]))
        except ValueError as e:
            raise ScenarioError(f"Scenario {name!r}: {e}") from e

        scenarios.append(
            Scenario(
                name=name,
                left=_build_operand(entry["left"]),
                operator=op,
                right=_build_operand(entry["right"]),
                expected=entry["expected"],
                description=entry.get("description"),
            )
        )
    return scenarios


def load_scenarios(text: Optional[str] = None) -> List[Scenario]:
    """
    Load the scenario catalog.

    Args:
        text: YAML source; defaults to the catalog shipped with the package

    Returns:
        List of Scenario objects
    """
    if text is None:
        text = resources.files("junctions").joinpath("scenarios.yaml").read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    return scenarios_from_dict(data)
