"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Qualification(str, Enum):
    LIDER = "Líder"
    EXPERT = "Expert"
    RAZOAVEL = "Razoável"
    INICIANTE = "Iniciante"


class PolicyMode(str, Enum):
    SCORE = "score"
    QUALIFICATION = "qualification"
    PERCENTAGE = "percentage"
    LEAST_LOADED = "least_loaded"


class AssignmentStatus(str, Enum):
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"


class UnassignedReason(str, Enum):
    DISTRIBUTION_DISABLED = "distribution disabled"
    NO_ELIGIBLE_AGENTS = "no eligible agents"
