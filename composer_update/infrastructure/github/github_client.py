import logging

import requests

from composer_update.domain.errors import GitHubApiError
from composer_update.infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubClient:
    def __init__(self, *, token: str, owner: str, repo: str, api_url: str = GITHUB_API_URL) -> None:
        self.token = token
        self.owner = owner
        self.repo = repo
        self.base = f"{api_url}/repos/{self.owner}/{self.repo}"
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def _raise_for_error(self, response: requests.Response, event: str, operation: str) -> None:
        if response.status_code < 400:
            return
        error_details = response.text
        try:
            error_payload = response.json()
            api_message = error_payload.get("message", "")
            api_errors = error_payload.get("errors", "")
            error_details = f"{api_message} | errors={api_errors}"
        except ValueError:
            pass
        safe_error_details = safe_message(error_details)
        log_event(
            logger,
            logging.ERROR,
            event,
            status_code=response.status_code,
            details=safe_error_details,
        )
        raise GitHubApiError(
            safe_message(f"GitHub {operation} failed ({response.status_code}): {safe_error_details}"),
            status_code=response.status_code,
        )

    def authenticate(self) -> None:
        if not self.token:
            raise GitHubApiError("GitHub authentication failed: empty token", status_code=401)
        log_event(logger, logging.INFO, "github.authenticate", owner=self.owner, repo=self.repo)
        response = self.session.get(self.base)
        self._raise_for_error(response, "github.authenticate_failed", "authentication")

    def list_pull_requests(self, base: str, state: str = "open") -> list[dict[str, object]]:
        log_event(logger, logging.INFO, "github.pr.list", base=base, state=state)
        response = self.session.get(f"{self.base}/pulls", params={"base": base, "state": state})
        self._raise_for_error(response, "github.pr.list_failed", "PR listing")
        return response.json()

    def create_pull_request(self, base: str, head: str, title: str, body: str) -> dict[str, object]:
        log_event(logger, logging.INFO, "github.pr.create", head=head, base=base, title=title)
        payload = {"title": title, "head": head, "base": base, "body": body}
        response = self.session.post(f"{self.base}/pulls", json=payload)
        self._raise_for_error(response, "github.pr.create_failed", "PR creation")
        return response.json()
