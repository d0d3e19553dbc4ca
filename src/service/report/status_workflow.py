from src.service.report.report_filter import STATUS_NAMES

PENDING = STATUS_NAMES["pending"]
IN_REVIEW = STATUS_NAMES["in_review"]
APPROVED = STATUS_NAMES["approved"]
REJECTED = STATUS_NAMES["rejected"]

ALL_STATUSES = (PENDING, IN_REVIEW, APPROVED, REJECTED)

MODERATION_REASON = "Status updated by moderator"

STATUS_EMOJIS = {
    "pending": "⏳",
    "in_review": "🔍",
    "approved": "✅",
    "rejected": "❌",
}


def build_transition_table(statuses=ALL_STATUSES) -> dict:
    """
        (현재, 요청) -> 허용 여부
        기본 규칙: 같은 상태로의 변경만 불가
    """
    return {
        (current, requested): current != requested
        for current in statuses
        for requested in statuses
    }


TRANSITIONS = build_transition_table()


def is_transition_allowed(current: int, requested: int, table: dict = None) -> bool:
    table = TRANSITIONS if table is None else table
    return table.get((current, requested), current != requested)


def default_moderation_note(previous_name, new_name) -> str:
    return f"status changed from {previous_name} to {new_name}"
