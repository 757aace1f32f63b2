from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings


class StudentAPI:
    """
    Thin HTTP wrapper around the /students endpoints.

    Any non-2xx response raises ``httpx.HTTPStatusError``; network failures
    raise ``httpx.RequestError``. Pass ``http`` to reuse an existing client.
    """

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.CLIENT_TIMEOUT,
        http: Optional[httpx.Client] = None,
    ):
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self._http.request(method, path, **kwargs)
        response.raise_for_status()
        return response.json()

    def list_students(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/students")

    def get_student(self, student_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/students/{student_id}")

    def create_student(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/students", json=data)

    def update_student(self, student_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/students/{student_id}", json=data)

    def delete_student(self, student_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/students/{student_id}")

    def close(self):
        self._http.close()
