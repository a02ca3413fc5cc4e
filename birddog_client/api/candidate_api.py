"""API client for job candidates."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..utils.http_client import HttpClient, extract_field

JOB_CANDIDATES_PATH = "JobCandidates"


class CandidateAPI:
    """Lists job candidates, optionally limited to a disposition and lookback window."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def list_job_candidates(
        self,
        access_token: str,
        disposition: Optional[str] = None,
        num_days: int = 0,
    ) -> List[Any]:
        """Returns the ``candidates`` array; ``num_days=0`` means no lookback limit."""

        params: list[tuple[str, Any]] = [("numdays", num_days)]
        if disposition is not None:
            logging.debug("Filtering job candidates by disposition %s", disposition)
            params.append(("disp", disposition))

        try:
            data = self._client.get_json(JOB_CANDIDATES_PATH, access_token, params)
        except Exception as exc:
            logging.error("Failed to fetch job candidates: %s", exc)
            raise

        candidates = extract_field(data, "candidates")
        if not candidates:
            logging.warning("No job candidates returned for numdays=%s", num_days)
        return candidates
