from gitlab_changelog.application.ports.history_provider import HistoryProvider


class FakeHistoryProvider(HistoryProvider):
    """
    In-memory history for tests and dry runs.
    Returns canned data and records the starting points it was asked about.
    """

    def __init__(self, latest_tag: str | None = None, merge_request_ids: list[int] | None = None):
        self.latest_tag = latest_tag
        self.merge_request_ids = list(merge_request_ids or [])
        self.requested_matchers: list[str] = []
        self.requested_starting_points: list[str] = []

    def resolve_latest_tag(self, matcher: str) -> str | None:
        self.requested_matchers.append(matcher)
        return self.latest_tag

    def list_merge_request_ids(self, starting_point: str) -> list[int]:
        self.requested_starting_points.append(starting_point)
        return list(self.merge_request_ids)
