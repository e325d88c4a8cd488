import pytest

from pim_app.pagination import clamp_page, page_numbers, page_range, page_slice, total_pages


def test_total_pages_minimum_one():
    assert total_pages(0, 5) == 1
    assert total_pages(5, 5) == 1
    assert total_pages(6, 5) == 2
    assert total_pages(22, 5) == 5


def test_invalid_page_size():
    with pytest.raises(ValueError):
        total_pages(3, 0)


def test_pages_reconstruct_sequence():
    items = list(range(23))
    for size in (1, 5, 10, 20, 50):
        pages = total_pages(len(items), size)
        joined = [x for page in range(1, pages + 1) for x in page_slice(items, page, size)]
        assert joined == items


def test_page_number_window_scenario():
    assert page_numbers(1, 5) == [1, 2, 3]
    assert page_numbers(4, 5) == [2, 3, 4]
    assert page_numbers(5, 5) == [3, 4, 5]
    assert page_numbers(2, 3) == [1, 2, 3]
    assert page_numbers(1, 1) == [1]


def test_clamp_and_range():
    assert clamp_page(0, 4) == 1
    assert clamp_page(9, 4) == 4
    assert clamp_page(3, 0) == 1
    assert page_range(22, 5, 5) == (21, 22)
    assert page_range(22, 1, 5) == (1, 5)
    assert page_range(0, 1, 5) == (0, 0)
