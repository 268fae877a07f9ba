from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from backend.core.projection import (
    CompoundingFrequency,
    InvestmentProjectionRequest,
    project_investment,
    validate_projection_request,
)
from backend.core.simulation import round_currency

logger = logging.getLogger(__name__)


class SimulationNotFound(LookupError):
    def __init__(self, simulation_id: str):
        super().__init__(f"investment simulation {simulation_id} not found")
        self.simulation_id = simulation_id


class SimulationRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: Optional[str] = None
    initialAmount: float
    monthlyContribution: float
    interestRate: float
    timeframeYears: int
    compoundingFrequency: CompoundingFrequency
    finalAmount: float
    createdAt: datetime
    updatedAt: Optional[datetime] = None

    def to_request(self) -> InvestmentProjectionRequest:
        return InvestmentProjectionRequest(
            initialAmount=self.initialAmount,
            monthlyContribution=self.monthlyContribution,
            annualRatePercent=self.interestRate,
            timeframeYears=self.timeframeYears,
            compoundingFrequency=self.compoundingFrequency,
        )


class SimulationStore:
    """
    Process-local store of saved projections.

    One instance is created per app and shared by every request; writes take
    the lock so concurrent saves do not interleave.
    """

    def __init__(self) -> None:
        self._records: Dict[str, SimulationRecord] = {}
        self._lock = threading.Lock()

    def create(self, request: InvestmentProjectionRequest, name: Optional[str] = None) -> SimulationRecord:
        final_amount = project_investment(request)
        record = SimulationRecord(
            id=str(uuid.uuid4()),
            name=name,
            initialAmount=request.initialAmount,
            monthlyContribution=request.monthlyContribution,
            interestRate=request.annualRatePercent,
            timeframeYears=request.timeframeYears,
            compoundingFrequency=request.compoundingFrequency,
            finalAmount=round_currency(final_amount),
            createdAt=datetime.now(timezone.utc),
        )
        with self._lock:
            self._records[record.id] = record
        logger.info("saved investment simulation %s (finalAmount=%.2f)", record.id, record.finalAmount)
        return record

    def list(self) -> List[SimulationRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda record: record.createdAt, reverse=True)

    def get(self, simulation_id: str) -> SimulationRecord:
        with self._lock:
            record = self._records.get(simulation_id)
        if record is None:
            raise SimulationNotFound(simulation_id)
        return record

    def delete(self, simulation_id: str) -> None:
        with self._lock:
            if self._records.pop(simulation_id, None) is None:
                raise SimulationNotFound(simulation_id)
        logger.info("deleted investment simulation %s", simulation_id)

    def update(self, simulation_id: str, changes: Mapping[str, Any]) -> SimulationRecord:
        """
        Apply wire-named field changes and re-run the projection.

        Fields missing from changes keep their saved values. The read, the
        recalculation and the write happen under one lock.
        """
        with self._lock:
            current = self._records.get(simulation_id)
            if current is None:
                raise SimulationNotFound(simulation_id)

            merged = {**current.model_dump(), **changes}
            request = validate_projection_request(
                {
                    "initialAmount": merged["initialAmount"],
                    "monthlyContribution": merged["monthlyContribution"],
                    "annualRatePercent": merged["interestRate"],
                    "timeframeYears": merged["timeframeYears"],
                    "compoundingFrequency": merged["compoundingFrequency"],
                }
            )
            record = SimulationRecord(
                id=current.id,
                name=merged["name"],
                initialAmount=request.initialAmount,
                monthlyContribution=request.monthlyContribution,
                interestRate=request.annualRatePercent,
                timeframeYears=request.timeframeYears,
                compoundingFrequency=request.compoundingFrequency,
                finalAmount=round_currency(project_investment(request)),
                createdAt=current.createdAt,
                updatedAt=datetime.now(timezone.utc),
            )
            self._records[simulation_id] = record
        logger.info("updated investment simulation %s (finalAmount=%.2f)", simulation_id, record.finalAmount)
        return record
