from typing import Optional, Dict, Any
from fastapi.testclient import TestClient

def api_call(client: TestClient, method: str, path: str, headers: Optional[Dict[str, str]] = None, json: Optional[Dict[str, Any]] = None, expected_status: int = 200) -> Dict[str, Any]:
    """Issue a request, assert its status and return the decoded body."""
    response = client.request(method, path, headers=headers, json=json)
    try:
        body = response.json()
    except ValueError:
        body = response.text
    assert response.status_code == expected_status, f"{method} {path} => {response.status_code}, body={body}, json={json}"
    return body

def envelope_data(body: Dict[str, Any]) -> Any:
    assert "message" in body, f"missing envelope message: {body}"
    return body["data"]

def error_message(body: Dict[str, Any]) -> str:
    return body["error"]["message"]
