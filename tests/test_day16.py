import io

import pytest

from advent2020.day16 import TicketRule, main, parse_input, part_1, part_2

EXAMPLE = """\
class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

EXAMPLE_2 = """\
departure class: 0-1 or 4-19
departure row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


def test_part_1():
    rules, _, nearby = parse_input(EXAMPLE)
    assert part_1(rules, nearby) == 71


def test_parse_input():
    rules, my_ticket, nearby = parse_input(EXAMPLE)
    assert rules["row"] == TicketRule((6, 11), (33, 44))
    assert list(rules) == ["class", "row", "seat"]
    assert my_ticket == [7, 1, 14]
    assert nearby == [[7, 3, 47], [40, 4, 50], [55, 2, 20], [38, 6, 12]]


@pytest.mark.parametrize(
    ("number", "expected"), [(0, False), (1, True), (3, True), (4, False), (7, True), (8, False)]
)
def test_rule_matches(number, expected):
    assert TicketRule((1, 3), (5, 7)).matches(number) is expected


def test_part_2_multiplies_departure_fields():
    rules, my_ticket, nearby = parse_input(EXAMPLE_2)
    assert part_2(rules, my_ticket, nearby) == 11 * 12


def test_part_2_without_departure_fields():
    text = EXAMPLE_2.replace("departure ", "")
    rules, my_ticket, nearby = parse_input(text)
    assert part_2(rules, my_ticket, nearby) == 1


def test_duplicate_rule():
    with pytest.raises(ValueError, match="defined twice"):
        parse_input("row: 1-2 or 3-4\nrow: 5-6 or 7-8\n")


def test_invalid_rule_line():
    with pytest.raises(ValueError, match="Couldn't parse input"):
        parse_input("row: 1-2\n")


def test_too_many_own_ticket_lines():
    with pytest.raises(ValueError, match="too many lines"):
        parse_input("row: 1-2 or 3-4\n\nyour ticket:\n1\n2\n")


def test_too_many_sections():
    with pytest.raises(ValueError, match="Invalid input"):
        parse_input("row: 1-2 or 3-4\n\nyour ticket:\n1\n\nnearby tickets:\n1\n\nextra\n")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE_2))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Part 1 : 0" in out
    assert "Part 2 : 132" in out