"""Tests for page normalization and pagination metadata."""

from dpr_api.data.pagination import calculate_pagination_info, normalize_page_params


def test_normalize_defaults_for_missing_values():
    assert normalize_page_params(None, None, 25) == (1, 25, 0)


def test_normalize_parses_strings():
    assert normalize_page_params("3", "10") == (3, 10, 20)


def test_normalize_replaces_non_positive_and_garbage():
    assert normalize_page_params(0, -5, 25) == (1, 25, 0)
    assert normalize_page_params("abc", "xyz", 10) == (1, 10, 0)


def test_normalize_does_not_cap_limit():
    assert normalize_page_params(1, 5000) == (1, 5000, 0)


def test_pagination_info_middle_page():
    info = calculate_pagination_info(2, 10, 25)
    assert info == {
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 25,
        "itemsPerPage": 10,
        "hasNext": True,
        "hasPrev": True,
    }


def test_pagination_info_exact_multiple_and_last_page():
    info = calculate_pagination_info(3, 10, 30)
    assert info["totalPages"] == 3
    assert info["hasNext"] is False
    assert info["hasPrev"] is True


def test_pagination_info_empty_result():
    info = calculate_pagination_info(1, 25, 0)
    assert info["totalPages"] == 0
    assert info["hasNext"] is False
    assert info["hasPrev"] is False


def test_pagination_info_page_beyond_end():
    info = calculate_pagination_info(9, 10, 15)
    assert info["totalPages"] == 2
    assert info["hasNext"] is False
    assert info["hasPrev"] is True
