from typing import Protocol, TypedDict


class PullRequestData(TypedDict, total=False):
    number: int
    html_url: str


class HostingApi(Protocol):
    def authenticate(self) -> None:
        ...

    def list_pull_requests(self, base: str, state: str = "open") -> list[PullRequestData]:
        ...

    def create_pull_request(self, base: str, head: str, title: str, body: str) -> PullRequestData:
        ...
