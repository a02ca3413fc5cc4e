"""API client for onboarding employees and their documents."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from ..utils.http_client import HttpClient, extract_field

EMPLOYEES_PATH = "Employees"
EMPLOYEE_DOCUMENT_PATH = "GetEmployeeDocument"

DEFAULT_DISPOSITION = "incomplete"
DEFAULT_SEARCH_DATE_TYPE = "hiredate"
SEARCH_DATE_FORMAT = "%m/%d/%Y"


def format_search_date(value: Union[date, str, None]) -> str:
    """Formats ``value`` as MM/dd/yyyy; ``None`` means today, strings pass through."""

    if value is None:
        value = date.today()
    if isinstance(value, str):
        return value
    return value.strftime(SEARCH_DATE_FORMAT)


class EmployeeAPI:
    """Lists onboarding applicants and fetches individual employee documents."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def list_employees(
        self,
        access_token: str,
        disposition: str = DEFAULT_DISPOSITION,
        search_date: Union[date, str, None] = None,
        search_date_type: str = DEFAULT_SEARCH_DATE_TYPE,
    ) -> List[Any]:
        params = [
            ("disp", disposition),
            ("SearchDate", format_search_date(search_date)),
            ("SearchDateType", search_date_type),
        ]
        try:
            data = self._client.get_json(EMPLOYEES_PATH, access_token, params)
        except Exception as exc:
            logging.error("Failed to fetch employees (disp=%s): %s", disposition, exc)
            raise

        employees = extract_field(data, "employees")
        if not employees:
            logging.warning("No employees returned for disp=%s on %s", disposition, params[1][1])
        return employees

    def get_employee_document(
        self,
        access_token: str,
        user_name: str,
        document_type: str,
        document_sub_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Returns the whole response object; the document is the envelope itself."""

        params = [("userName", user_name), ("documentType", document_type)]
        if document_sub_type is not None:
            params.append(("documentSubType", document_sub_type))

        try:
            return self._client.get_json(EMPLOYEE_DOCUMENT_PATH, access_token, params)
        except Exception as exc:
            logging.error("Failed to fetch %s document for %s: %s", document_type, user_name, exc)
            raise
