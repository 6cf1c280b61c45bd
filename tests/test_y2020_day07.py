import pytest

from adventkit.y2020_day07 import (
    bags_reaching,
    contained_counts,
    parse_rules,
    part_one,
    part_two,
)

EXAMPLE = """\
light red bags contain 1 bright white bag, 2 muted yellow bags.
dark orange bags contain 3 bright white bags, 4 muted yellow bags.
bright white bags contain 1 shiny gold bag.
muted yellow bags contain 2 shiny gold bags, 9 faded blue bags.
shiny gold bags contain 1 dark olive bag, 2 vibrant plum bags.
dark olive bags contain 3 faded blue bags, 4 dotted black bags.
vibrant plum bags contain 5 faded blue bags, 6 dotted black bags.
faded blue bags contain no other bags.
dotted black bags contain no other bags.
"""


def test_parse_rules_reads_contents():
    rules = parse_rules(EXAMPLE)
    assert rules["light red"] == {"bright white": 1, "muted yellow": 2}
    assert rules["faded blue"] == {}
    assert len(rules) == len(EXAMPLE.splitlines())


def test_parse_rules_skips_blank_lines():
    rules = parse_rules("\n\nfaded blue bags contain no other bags.\n\n")
    assert rules == {"faded blue": {}}


def test_bags_reaching_excludes_target():
    reaching = bags_reaching(parse_rules(EXAMPLE), "shiny gold")
    assert "shiny gold" not in reaching
    assert {"bright white", "muted yellow"} <= reaching
    assert "dotted black" not in reaching


def test_part_one_example():
    assert part_one(EXAMPLE) == 4


def test_part_two_example():
    assert part_two(EXAMPLE) == 32


def test_empty_bag_counts_only_itself():
    counts = contained_counts(parse_rules(EXAMPLE))
    assert counts["faded blue"] == counts["dotted black"] == 1


def test_missing_rule_raises():
    with pytest.raises(ValueError):
        contained_counts(parse_rules("light red bags contain 1 bright white bag."))


def test_cycle_does_not_reach_unrelated_target():
    rules = parse_rules("a b bags contain 1 c d bag.\nc d bags contain 1 a b bag.\n")
    assert bags_reaching(rules, "x y") == set()


def test_part_two_without_target_rule_raises():
    with pytest.raises(ValueError):
        part_two("faded blue bags contain no other bags.")