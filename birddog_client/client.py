"""High-level facade bundling every BirdDog endpoint behind one HTTP session."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

import requests

from .api import AuthAPI, CandidateAPI, EmployeeAPI, LearningAPI, TalentAPI
from .api.employee_api import DEFAULT_DISPOSITION, DEFAULT_SEARCH_DATE_TYPE
from .config import load_credentials, load_settings
from .models import ClientSettings, Credentials
from .utils.http_client import HttpClient


class BirdDogClient:
    """
    One method per BirdDog endpoint.

    Obtain a token once with :meth:`acquire_access_token` and pass it to every
    other call; the client never stores or refreshes it.

        with BirdDogClient.from_env() as client:
            token = client.acquire_access_token(load_credentials())
            employees = client.list_employees(token)
    """

    def __init__(self, http_client: Optional[HttpClient] = None) -> None:
        self.http = http_client or HttpClient()
        self.auth = AuthAPI(self.http)
        self.candidates = CandidateAPI(self.http)
        self.employees = EmployeeAPI(self.http)
        self.talent = TalentAPI(self.http)
        self.learning = LearningAPI(self.http)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, session: Optional[requests.Session] = None
    ) -> "BirdDogClient":
        return cls(
            HttpClient(
                base_url=settings.base_url,
                api_version=settings.api_version,
                timeout=settings.timeout,
                min_tls_version=settings.min_tls_version,
                user_agent=settings.user_agent,
                session=session,
            )
        )

    @classmethod
    def from_env(cls) -> "BirdDogClient":
        """Build a client from BIRDDOG_* environment variables."""
        return cls.from_settings(load_settings())

    def acquire_access_token(self, credentials: Optional[Credentials] = None) -> str:
        """Falls back to the BIRDDOG_* credentials from the environment."""
        return self.auth.acquire_access_token(credentials or load_credentials())

    def list_job_candidates(
        self, access_token: str, disposition: Optional[str] = None, num_days: int = 0
    ) -> List[Any]:
        return self.candidates.list_job_candidates(access_token, disposition, num_days)

    def list_employees(
        self,
        access_token: str,
        disposition: str = DEFAULT_DISPOSITION,
        search_date: Union[date, str, None] = None,
        search_date_type: str = DEFAULT_SEARCH_DATE_TYPE,
    ) -> List[Any]:
        return self.employees.list_employees(access_token, disposition, search_date, search_date_type)

    def list_talent_users(self, access_token: str, user_name: Optional[str] = None) -> Any:
        return self.talent.list_talent_users(access_token, user_name)

    def list_employee_certifications(self, access_token: str, user_names: Union[str, Sequence[str]]) -> List[Any]:
        return self.learning.list_employee_certifications(access_token, user_names)

    def list_employee_learning_transcripts(
        self, access_token: str, user_names: Union[str, Sequence[str]]
    ) -> List[Any]:
        return self.learning.list_employee_learning_transcripts(access_token, user_names)

    def get_employee_document(
        self,
        access_token: str,
        user_name: str,
        document_type: str,
        document_sub_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        return self.employees.get_employee_document(access_token, user_name, document_type, document_sub_type)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "BirdDogClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
