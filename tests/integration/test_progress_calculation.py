import pytest

from coursex.services.course_progress import calculate_progress
from coursex.utils.money import split_amount, to_cents
from coursex.utils.slug import slugify


def test_zero_lessons_is_zero_progress():
    assert calculate_progress(0, 0) == 0


@pytest.mark.parametrize("completed,total,expected", [
    (1, 4, 25),
    (4, 4, 100),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),
    (1, 200, 1),
    (0, 5, 0),
])
def test_progress_rounds_half_up(completed, total, expected):
    assert calculate_progress(completed, total) == expected


def test_progress_is_monotonic_and_reaches_100():
    total = 7
    values = [calculate_progress(done, total) for done in range(total + 1)]
    assert values == sorted(values)
    assert values[-1] == 100
    assert all(v < 100 for v in values[:-1])


def test_split_sums_back_to_amount():
    fee, earnings = split_amount(49.99, 10)
    assert fee == 5.0
    assert earnings == 44.99

    fee, earnings = split_amount(19.95, 10)
    assert fee == 2.0
    assert round(fee + earnings, 2) == 19.95


def test_amount_in_cents():
    assert to_cents(49.99) == 4999
    assert to_cents(0.1) == 10


def test_slugify():
    assert slugify("Intro to Python!") == "intro-to-python"
    assert slugify("  Café  & Crème  ") == "cafe-creme"
    assert slugify("!!!") == "course"
