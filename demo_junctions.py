#!/usr/bin/env python3
"""
Demo: Evaluate the worked junction scenarios.

Prints every catalog comparison with its result and whether it matches
the expected answer.
"""

from junctions import describe
from junctions.examples import load_scenarios


def main():
    scenarios = load_scenarios()

    print("=" * 80)
    print("JUNCTION SCENARIOS")
    print("=" * 80)

    failures = 0
    for scenario in scenarios:
        result = scenario.evaluate()
        status = "ok" if result == scenario.expected else "MISMATCH"
        if status != "ok":
            failures += 1

        print(f"\n{scenario.name}:")
        print(f"  {scenario.left!r} {scenario.operator.symbol} {scenario.right!r}  ->  {result}  [{status}]")
        if scenario.description:
            print(f"  ({scenario.description})")
        for side in (scenario.left, scenario.right):
            try:
                info = describe(side)
            except TypeError:
                continue
            print(f"  {info.junction_type.value}: {info.size} elements, {info.storage} store")

    print("\n" + "=" * 80)
    print(f"{len(scenarios) - failures}/{len(scenarios)} scenarios matched")
    print("=" * 80)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
