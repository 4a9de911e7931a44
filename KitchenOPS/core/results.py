from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class StationAttempt(BaseModel):
    """Ce qu'une station a tenté pour un plat donné."""

    station: str
    assigned: bool = False
    replenished: bool = False
    prepared: bool = False
    withdrawals: Dict[str, int] = Field(default_factory=dict)


class DishOutcome(BaseModel):
    """Résultat du traitement d'un plat de la file."""

    dish_name: str
    prepared: bool = False
    station: Optional[str] = None
    attempts: List[StationAttempt] = Field(default_factory=list)
    lines: List[str] = Field(default_factory=list)


class BatchReport(BaseModel):
    """Snapshot d'un passage complet sur la file de préparation."""

    outcomes: List[DishOutcome] = Field(default_factory=list)
    discarded: int = 0
    requeued: List[str] = Field(default_factory=list)
    lines: List[str] = Field(default_factory=list)

    @property
    def prepared_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.prepared)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.prepared)

    def text(self) -> str:
        return "\n".join(self.lines)
