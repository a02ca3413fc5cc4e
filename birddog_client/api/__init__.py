"""API layer for authentication, candidates, employees, talent users, and learning records."""

from .auth_api import AuthAPI
from .candidate_api import CandidateAPI
from .employee_api import EmployeeAPI
from .learning_api import LearningAPI
from .talent_api import TalentAPI

__all__ = ["AuthAPI", "CandidateAPI", "EmployeeAPI", "TalentAPI", "LearningAPI"]
