import pytest

from kotapenduduk.linkedlist import (
    MAX_NAME_LENGTH,
    EmptyListError,
    LinkedList,
    ValueNotFoundError,
)


def test_insert_last_keeps_order():
    items = LinkedList()
    for name in ["Ani", "Budi", "Citra"]:
        items.insert_last(name)
    assert list(items) == ["Ani", "Budi", "Citra"]
    assert len(items) == 3


def test_insert_first_prepends():
    items = LinkedList(["Budi"])
    items.insert_first("Ani")
    assert list(items) == ["Ani", "Budi"]


def test_insert_after_places_after_match():
    items = LinkedList(["Ani", "Citra"])
    items.insert_after("Budi", "Ani")
    assert list(items) == ["Ani", "Budi", "Citra"]


def test_insert_after_at_end():
    items = LinkedList(["Ani"])
    items.insert_after("Budi", "Ani")
    assert list(items) == ["Ani", "Budi"]


def test_insert_after_missing_raises_and_leaves_list():
    items = LinkedList(["Ani"])
    with pytest.raises(ValueNotFoundError) as info:
        items.insert_after("Budi", "Zed")
    assert "Zed" in str(info.value)
    assert list(items) == ["Ani"]


def test_delete_first_and_last():
    items = LinkedList(["Ani", "Budi", "Citra"])
    assert items.delete_first() == "Ani"
    assert items.delete_last() == "Citra"
    assert list(items) == ["Budi"]
    assert items.delete_last() == "Budi"
    assert not items


@pytest.mark.parametrize("operation", ["delete_first", "delete_last"])
def test_delete_on_empty_raises(operation):
    with pytest.raises(EmptyListError):
        getattr(LinkedList(), operation)()


def test_delete_value():
    items = LinkedList(["Ani", "Budi", "Ani"])
    items.delete("Ani")
    assert list(items) == ["Budi", "Ani"]


def test_delete_missing_value_raises():
    items = LinkedList(["Ani"])
    with pytest.raises(ValueNotFoundError):
        items.delete("Budi")
    assert list(items) == ["Ani"]


def test_delete_value_on_empty_raises():
    with pytest.raises(EmptyListError):
        LinkedList().delete("Ani")


def test_str_joins_with_arrows():
    assert str(LinkedList(["Ani", "Budi"])) == "Ani -> Budi"
    assert str(LinkedList(["Ani"])) == "Ani"
    assert str(LinkedList()) == ""


def test_values_are_clipped():
    items = LinkedList()
    items.insert_last("x" * 80)
    (stored,) = list(items)
    assert len(stored) == MAX_NAME_LENGTH - 1


def test_contains_and_clear():
    items = LinkedList(["Ani", "Budi"])
    assert "Budi" in items
    assert "budi" not in items
    items.clear()
    assert len(items) == 0
    assert not items