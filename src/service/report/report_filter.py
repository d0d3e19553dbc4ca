import json

from src.domain.dto.report.report_search_dto import RequestReportSearchDTO, ReportSearchFilter, SORT_POPULAR, \
    SORT_RECENT, INCLUDE_STATUS, INCLUDE_CATEGORY, INCLUDE_USER, INCLUDE_TAGS

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
#   offset 이 DB 정수 범위를 넘지 않도록 (MAX_PAGE * MAX_LIMIT < 2^31)
MAX_PAGE = 10_000_000

#   status_id 규칙: 1=pending, 2=in_review, 3=approved, 4=rejected
STATUS_GROUPS = {
    "active": [1, 2],
    "completed": [3, 4],
}
STATUS_NAMES = {
    "pending": 1,
    "in_review": 2,
    "in-review": 2,
    "approved": 3,
    "rejected": 4,
}


def resolve_status_ids(status):
    """
        "active" -> [1, 2], "completed" -> [3, 4], "3" -> [3], "approved" -> [3]
        모르는 값 / 빈 값 -> None (조건 없음)
    """
    if status is None:
        return None

    value = str(status).strip().lower()
    if not value:
        return None

    if value in STATUS_GROUPS:
        return list(STATUS_GROUPS[value])

    if value in STATUS_NAMES:
        return [STATUS_NAMES[value]]

    try:
        return [int(value)]
    except ValueError:
        return None


def resolve_pagination(page=None, limit=None) -> tuple:
    """
        return (page, limit, offset)
        page <= 0 / 없음 -> 1, page > MAX_PAGE -> MAX_PAGE
        limit <= 0 / 없음 -> 20, limit > 100 -> 100
    """
    valid_page = min(page, MAX_PAGE) if page and page > 0 else DEFAULT_PAGE
    valid_limit = min(limit, MAX_LIMIT) if limit and limit > 0 else DEFAULT_LIMIT

    return valid_page, valid_limit, (valid_page - 1) * valid_limit


def resolve_include(include) -> set:
    #   ?include=status&include=tags 와 ?include=status,tags 둘 다 허용
    values = set()
    for item in include or []:
        for part in str(item).split(","):
            if part.strip():
                values.add(part.strip().lower())
    return values


def build_search_filter(dto: RequestReportSearchDTO) -> ReportSearchFilter:
    include = resolve_include(dto.include)
    _, limit, offset = resolve_pagination(dto.page, dto.limit)
    url = dto.url.strip() if dto.url else None
    sort = dto.sort if dto.sort in (SORT_POPULAR, SORT_RECENT) else None

    return ReportSearchFilter(
        user_id=dto.user_id,
        category_id=dto.category_id,
        url=url or None,
        status_ids=resolve_status_ids(dto.status),
        sort=sort,
        include_status=INCLUDE_STATUS in include,
        include_category=INCLUDE_CATEGORY in include,
        include_user=INCLUDE_USER in include,
        include_tags=INCLUDE_TAGS in include,
        limit=limit,
        offset=offset,
    )


def parse_tags(raw_tags) -> list:
    """
        집계된 태그(JSON 문자열 / list) -> [{"id", "name"}]
        깨진 값, null, 태그 없는 LEFT JOIN 결과({"id": null}) 는 버림
    """
    if not raw_tags:
        return []

    if isinstance(raw_tags, (bytes, bytearray)):
        raw_tags = raw_tags.decode("utf-8", errors="replace")

    if isinstance(raw_tags, str):
        try:
            raw_tags = json.loads(raw_tags)
        except ValueError:
            return []

    if not isinstance(raw_tags, list):
        return []

    tags = []
    seen = set()
    for tag in raw_tags:
        if not isinstance(tag, dict) or tag.get("id") is None or tag.get("name") is None:
            continue
        try:
            tag_id = int(tag["id"])
        except (TypeError, ValueError):
            continue
        if tag_id in seen:
            continue
        seen.add(tag_id)
        tags.append({"id": tag_id, "name": str(tag["name"])})

    return tags
