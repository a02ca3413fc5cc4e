"""API client for employee certifications and learning transcripts."""

from __future__ import annotations

import logging
from typing import Any, List, Sequence, Union

from ..utils.http_client import HttpClient, extract_field, indexed_params

CERTIFICATION_PATH = "EmployeeCertification"
LEARNING_TRANSCRIPT_PATH = "EmployeeLearningTranscript"


def _normalize_user_names(user_names: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(user_names, str):
        user_names = [user_names]
    names = list(user_names)
    if not names:
        raise ValueError("At least one user name is required")
    return names


class LearningAPI:
    """Per-user learning records, queried with ``userName[i]`` indexed parameters."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def list_employee_certifications(self, access_token: str, user_names: Union[str, Sequence[str]]) -> List[Any]:
        return self._fetch(CERTIFICATION_PATH, access_token, user_names, "employees")

    def list_employee_learning_transcripts(
        self, access_token: str, user_names: Union[str, Sequence[str]]
    ) -> List[Any]:
        return self._fetch(LEARNING_TRANSCRIPT_PATH, access_token, user_names, "transcripts")

    def _fetch(self, path: str, access_token: str, user_names: Union[str, Sequence[str]], field: str) -> List[Any]:
        names = _normalize_user_names(user_names)
        try:
            data = self._client.get_json(path, access_token, indexed_params("userName", names))
        except Exception as exc:
            logging.error("Failed to fetch %s for %d user(s): %s", path, len(names), exc)
            raise

        records = extract_field(data, field)
        if not records:
            logging.warning("%s returned no %s for %s", path, field, ", ".join(names))
        return records
