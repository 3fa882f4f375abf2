"""Agent entity — an operator who receives leads."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from leadflow.domain.value_objects.enums import Qualification


@dataclass
class Agent:
    id: str
    name: str
    is_available: bool = True
    qualification: Qualification | None = None
    distribution_percentage: int | None = None
    score: float | None = None
    lead_count: int = 0
    email: str | None = None
    role: str | None = None
    location_id: str | None = None

    def with_one_more_lead(self) -> Agent:
        return replace(self, lead_count=self.lead_count + 1)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the wire field names (camelCase).

        Optional policy attributes are omitted when unset so a roster only
        carries the attribute of the mode it is deployed with.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "isAvailable": self.is_available,
            "leadCount": self.lead_count,
        }
        if self.qualification is not None:
            data["qualification"] = self.qualification.value
        if self.distribution_percentage is not None:
            data["distributionPercentage"] = self.distribution_percentage
        if self.score is not None:
            data["score"] = self.score
        if self.email is not None:
            data["email"] = self.email
        if self.role is not None:
            data["role"] = self.role
        if self.location_id is not None:
            data["locationId"] = self.location_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Agent:
        if "id" not in data:
            raise ValueError("Agent record is missing 'id'")

        qualification = data.get("qualification")
        percentage = data.get("distributionPercentage")
        if percentage is not None:
            percentage = int(percentage)
            if not 0 <= percentage <= 100:
                raise ValueError(
                    f"distributionPercentage must be within [0, 100], got {percentage}"
                )
        lead_count = int(data.get("leadCount") or 0)
        if lead_count < 0:
            raise ValueError(f"leadCount must be non-negative, got {lead_count}")
        score = data.get("score")

        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            is_available=bool(data.get("isAvailable", True)),
            qualification=Qualification(qualification) if qualification else None,
            distribution_percentage=percentage,
            score=float(score) if score is not None else None,
            lead_count=lead_count,
            email=data.get("email"),
            role=data.get("role"),
            location_id=data.get("locationId"),
        )
