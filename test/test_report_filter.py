import pytest

from src.domain.dto.report.report_search_dto import RequestReportSearchDTO
from src.service.report.report_filter import resolve_status_ids, resolve_pagination, resolve_include, \
    build_search_filter, parse_tags, MAX_PAGE


class TestResolveStatusIds:
    def test_groups(self):
        assert resolve_status_ids("active") == [1, 2]
        assert resolve_status_ids("completed") == [3, 4]

    def test_numeric_string(self):
        assert resolve_status_ids("3") == [3]

    def test_status_names(self):
        assert resolve_status_ids("pending") == [1]
        assert resolve_status_ids("in-review") == [2]
        assert resolve_status_ids("Approved") == [3]

    @pytest.mark.parametrize("value", [None, "", "   ", "whatever"])
    def test_unknown_means_no_filter(self, value):
        assert resolve_status_ids(value) is None


class TestResolvePagination:
    def test_defaults(self):
        assert resolve_pagination() == (1, 20, 0)

    def test_limit_clamped_to_100(self):
        assert resolve_pagination(1, 500) == (1, 100, 0)

    @pytest.mark.parametrize("limit", [0, -5, None])
    def test_non_positive_limit_uses_default(self, limit):
        assert resolve_pagination(2, limit) == (2, 20, 20)

    @pytest.mark.parametrize("page", [0, -1, None])
    def test_non_positive_page_is_first(self, page):
        assert resolve_pagination(page, 10) == (1, 10, 0)

    def test_offset(self):
        assert resolve_pagination(3, 15) == (3, 15, 30)

    def test_huge_page_clamped(self):
        page, limit, offset = resolve_pagination(10 ** 19, 5)

        assert page == MAX_PAGE
        assert offset == (MAX_PAGE - 1) * 5
        assert offset < 2 ** 31


def test_resolve_include_accepts_repeated_and_comma_separated():
    assert resolve_include(["status,tags", "USER", " "]) == {"status", "tags", "user"}


def test_build_search_filter():
    filters = build_search_filter(
        RequestReportSearchDTO(
            status="active",
            user_id=7,
            url="  https://a.example.com ",
            sort="popular",
            include=["tags,category"],
            page=2,
            limit=1000,
        )
    )

    assert filters.status_ids == [1, 2]
    assert filters.user_id == 7
    assert filters.url == "https://a.example.com"
    assert filters.sort == "popular"
    assert filters.include_tags and filters.include_category
    assert not filters.include_status and not filters.include_user
    assert (filters.limit, filters.offset) == (100, 100)


def test_build_search_filter_drops_unknown_sort():
    assert build_search_filter(RequestReportSearchDTO(sort="random")).sort is None


class TestParseTags:
    def test_left_join_null_entry_becomes_empty(self):
        assert parse_tags('[{"id": null, "name": null}]') == []

    def test_json_string(self):
        assert parse_tags('[{"id": 2, "name": "bank"}, {"id": 2, "name": "bank"}, {"id": 5, "name": "sms"}]') == [
            {"id": 2, "name": "bank"},
            {"id": 5, "name": "sms"},
        ]

    def test_bytes_and_list(self):
        assert parse_tags(b'[{"id": 1, "name": "a"}]') == [{"id": 1, "name": "a"}]
        assert parse_tags([{"id": "3", "name": "b"}]) == [{"id": 3, "name": "b"}]

    @pytest.mark.parametrize("raw", [None, "", "not json", "{}", '"text"', "[1, 2]"])
    def test_malformed_values(self, raw):
        assert parse_tags(raw) == []
