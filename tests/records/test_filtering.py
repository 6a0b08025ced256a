from __future__ import annotations

from dataclasses import dataclass

from src.admin_dashboard.admin_dashboard.core.enums import MenuItem
from src.admin_dashboard.admin_dashboard.records.filtering import filter_records, matches


@dataclass(frozen=True)
class Person:
    key: str
    name: str


@dataclass(frozen=True)
class Basket:
    key: str
    items: tuple


def test_search_is_case_insensitive():
    people = [Person("1", "John")]

    assert filter_records(people, "john", ("name",)) == people
    assert filter_records(people, "x", ("name",)) == []


def test_empty_term_keeps_everything_in_order():
    people = [Person("2", "B"), Person("1", "A")]

    assert filter_records(people, "", ("name",)) == people
    assert filter_records(people, None, ("name",)) == people


def test_whitespace_is_part_of_the_term():
    john, john_doe = Person("1", "John"), Person("2", "John Doe")

    assert filter_records([john, john_doe], " ", ("name",)) == [john_doe]
    assert filter_records([john], "john ", ("name",)) == []


def test_every_match_contains_term_and_every_miss_does_not():
    people = [Person("1", "Anna"), Person("2", "Bob"), Person("3", "Hannah")]

    kept = filter_records(people, "AN", ("name",))

    assert kept == [people[0], people[2]]
    assert all("an" not in p.name.lower() for p in people if p not in kept)


def test_any_of_several_fields_matches():
    people = [Person("12", "Ann"), Person("3", "Bob")]

    assert filter_records(people, "12", ("name", "key")) == [people[0]]


def test_callable_accessor_over_many_values():
    baskets = [Basket("1", ("Kunafa", "Mandi")), Basket("2", ())]

    found = filter_records(baskets, "mand", (lambda b: list(b.items),))

    assert found == [baskets[0]]


def test_str_enum_values_are_searched_by_value():
    basket = Basket("1", (MenuItem.PIZZA,))

    assert matches(basket, "pizz", (lambda b: b.items,))
    assert not matches(basket, "menuitem", (lambda b: b.items,))


def test_missing_attribute_never_matches():
    assert not matches(Person("1", "John"), "john", ("email",))
