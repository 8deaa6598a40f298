"""
Client for the n8n public REST API.

The dashboard never talks to n8n directly; every call goes through this
client, built from the stored configuration. Failures, whether n8n
answered with a non-2xx status or never answered at all, surface as
`UpstreamFailure`. The API key is sent as a header and never logged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..core.config import settings
from ..core.errors import ConfigurationMissing, UpstreamFailure
from ..models.api_config import ApiConfiguration


logger = logging.getLogger("n8n_client")


def response_payload(response: requests.Response) -> Any:
    """Parsed JSON body when possible, otherwise the raw text."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class N8nClient:
    def __init__(
        self,
        api_url: str,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        api_key_header: Optional[str] = None,
    ) -> None:
        self.base_url = api_url.rstrip("/")
        self._api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.n8n_request_timeout_sec
        self.api_key_header = api_key_header or settings.n8n_api_key_header

    @classmethod
    def from_configuration(
        cls,
        config: Optional[ApiConfiguration],
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> "N8nClient":
        if config is None:
            raise ConfigurationMissing()
        return cls(config.api_url, config.api_key, session=session, timeout=timeout)

    def __repr__(self) -> str:
        return f"N8nClient(base_url={self.base_url!r})"

    def _request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        url = f"{self.base_url}/{path}"
        headers = {self.api_key_header: self._api_key, "Accept": "application/json"}
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("n8n request failed method=%s path=/%s err=%s", method, path, exc)
            raise UpstreamFailure(f"Failed to {action}", detail=str(exc)) from exc

        if response.status_code // 100 != 2:
            logger.warning("n8n request returned status=%s method=%s path=/%s", response.status_code, method, path)
            raise UpstreamFailure(
                f"Failed to {action}",
                status_code=response.status_code,
                detail=response_payload(response),
            )
        logger.info("n8n request ok status=%s method=%s path=/%s", response.status_code, method, path)
        return response_payload(response)

    def list_workflows(self) -> Any:
        return self._request("GET", "workflows", action="fetch workflows")

    def get_workflow(self, workflow_id: str) -> Any:
        return self._request("GET", f"workflows/{quote(str(workflow_id), safe='')}", action="fetch workflow")

    def activate_workflow(self, workflow_id: str) -> Any:
        return self._request(
            "POST", f"workflows/{quote(str(workflow_id), safe='')}/activate", action="activate workflow", json={}
        )

    def deactivate_workflow(self, workflow_id: str) -> Any:
        return self._request(
            "POST", f"workflows/{quote(str(workflow_id), safe='')}/deactivate", action="deactivate workflow", json={}
        )

    def execute_workflow(self, workflow_id: str) -> Any:
        return self._request(
            "POST", f"workflows/{quote(str(workflow_id), safe='')}/execute", action="execute workflow", json={}
        )

    def list_executions(self, *, limit: int, offset: int, workflow_id: Optional[str] = None) -> Any:
        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if workflow_id:
            params["workflowId"] = workflow_id
        return self._request("GET", "executions", action="fetch executions", params=params)

    def get_execution(self, execution_id: str) -> Any:
        return self._request("GET", f"executions/{quote(str(execution_id), safe='')}", action="fetch execution")
