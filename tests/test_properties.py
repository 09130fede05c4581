"""Tests for stored() and computed() declarations."""

from collections import Counter

import pytest

from stalwart import ViewModel, ComputedProperty, StoredProperty, computed, stored


class Person(ViewModel):
    first = stored("J")
    last = stored("D")

    @computed
    def full_name(self):
        return f"{self.first} {self.last}"


class Order(ViewModel):
    qty = stored(2)
    price = stored(5)
    tax_rate = stored(0.5)

    @computed
    def total(self):
        return self.qty * self.price

    @computed
    def total_with_tax(self):
        return self.total * (1 + self.tax_rate)


def _record(vm):
    log = []
    vm.subscribe(lambda source, name: log.append(name))
    return log


class TestStored:
    def test_default(self):
        assert Person().first == "J"

    def test_set_notifies(self):
        p = Person()
        log = _record(p)
        p.first = "K"
        assert p.first == "K"
        assert log == ["first"]

    def test_dedup(self):
        """Assigning an equal value raises no signal."""
        p = Person()
        log = _record(p)
        p.first = "J"
        assert log == []

    def test_per_instance_values(self):
        a = Person()
        b = Person()
        a.first = "K"
        assert b.first == "J"

    def test_class_access(self):
        assert isinstance(Person.first, StoredProperty)
        assert Person.first.name == "first"


class TestComputed:
    def test_scenario(self):
        p = Person()
        assert p.full_name == "J D"
        assert p.supporters_of("full_name") == {"first", "last"}
        log = _record(p)
        p.last = "S"
        assert log == ["last", "full_name"]
        assert p.full_name == "J S"

    def test_read_only(self):
        p = Person()
        with pytest.raises(AttributeError, match="read-only"):
            p.full_name = "X"

    def test_class_access(self):
        assert isinstance(Person.full_name, ComputedProperty)
        assert Person.full_name.name == "full_name"

    def test_chained(self):
        o = Order()
        assert o.total_with_tax == 15
        assert o.supporters_of("total_with_tax") == {"total", "tax_rate"}
        assert o.supporters_of("total") == {"qty", "price"}
        log = _record(o)
        o.qty = 4
        assert log == ["qty", "total", "total_with_tax"]
        assert o.total_with_tax == 30

    def test_configured_inner_wires_outer_directly(self):
        """Reading the inner property first credits its supporters to the outer too."""
        o = Order()
        o.total
        o.total_with_tax
        assert o.supporters_of("total_with_tax") == {"total", "qty", "price", "tax_rate"}
        log = _record(o)
        o.price = 6
        assert Counter(log) == {"price": 1, "total": 1, "total_with_tax": 2}

    def test_explicit_dependency(self):
        class Cart(ViewModel):
            def __init__(self):
                super().__init__()
                self.items = []

            @computed
            def count(self):
                self.depends_upon("items")
                return len(self.items)

        c = Cart()
        assert c.count == 0
        log = _record(c)
        c.items.append("apple")
        c.notify_changed("items")
        assert log == ["items", "count"]
        assert c.count == 1
