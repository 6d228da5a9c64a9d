import pytest

from catalog.utils.ids import MAX_ID, MIN_ID, coerce_id

@pytest.mark.parametrize("value, expected", [
    (5, 5),
    ("5", 5),
    (" 42 ", 42),
    ("+7", 7),
    ("-3", -3),
    (8.0, 8),
    (str(MAX_ID), MAX_ID),
    (MIN_ID, MIN_ID),
])
def test_valid_ids(value, expected):
    assert coerce_id(value) == expected

@pytest.mark.parametrize("value", [
    None, True, False, "", " ", "abc", "5.5", 5.5, "1_000", "1e3",
    "\u0661\u0662", "\uff15", "+", "--1", "5 5",
    MAX_ID + 1, MIN_ID - 1, str(MAX_ID + 1), "99999999999999999999",
    [5], {"id": 5},
])
def test_invalid_ids(value):
    assert coerce_id(value) is None
