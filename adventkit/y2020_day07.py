"""Luggage rules: which bags can hold a given bag, and how many bags one holds."""

from __future__ import annotations

from typing import Mapping

TARGET = "shiny gold"

Rules = dict[str, dict[str, int]]


def parse_rules(text: str) -> Rules:
    """Parse lines like ``light red bags contain 1 bright white bag, 2 muted yellow bags.``

    Each bag is named by its two words, e.g. ``"light red"``.
    """
    rules: Rules = {}
    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 4:
            raise ValueError(f"malformed rule: {line!r}")
        source = f"{tokens[0]} {tokens[1]}"
        contents: dict[str, int] = {}
        groups = zip(*[iter(tokens[4:])] * 4)
        for amount, adjective, colour, _bag_word in groups:
            if not amount.isdigit():
                break
            contents[f"{adjective} {colour}"] = int(amount)
        rules[source] = contents
    return rules


def _contents(rules: Mapping[str, Mapping[str, int]], bag: str) -> Mapping[str, int]:
    try:
        return rules[bag]
    except KeyError:
        raise ValueError(f"no rule for bag {bag!r}") from None


def bags_reaching(rules: Mapping[str, Mapping[str, int]], target: str = TARGET) -> set[str]:
    """Return the bags that eventually contain ``target``, not counting ``target`` itself."""
    reaches: dict[str, bool] = {target: True}

    def visit(bag: str) -> bool:
        if bag in reaches:
            return reaches[bag]
        reaches[bag] = False
        result = False
        for child in _contents(rules, bag):
            if visit(child):
                result = True
        reaches[bag] = result
        return result

    for bag in rules:
        visit(bag)
    return {bag for bag, hit in reaches.items() if hit and bag != target}


def contained_counts(rules: Mapping[str, Mapping[str, int]]) -> dict[str, int]:
    """Map each bag to the number of bags it amounts to, itself included."""
    totals: dict[str, int] = {}

    def visit(bag: str) -> None:
        if bag in totals:
            return
        totals[bag] = 1
        for child, amount in _contents(rules, bag).items():
            visit(child)
            totals[bag] += totals[child] * amount

    for bag in rules:
        visit(bag)
    return totals


def part_one(text: str) -> int:
    return len(bags_reaching(parse_rules(text), TARGET))


def part_two(text: str) -> int:
    counts = contained_counts(parse_rules(text))
    if TARGET not in counts:
        raise ValueError(f"no rule for bag {TARGET!r}")
    return counts[TARGET] - 1