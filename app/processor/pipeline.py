from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from app.processor.models import (
    EvidenceArtifact,
    NormalizedRecord,
    RevokedRecord,
    RunSummary,
)


@dataclass(slots=True)
class PipelineContext:
    input_path: Path
    header: list[str] = field(default_factory=list)
    revoked_records: list[RevokedRecord] = field(default_factory=list)
    normalized_records: list[NormalizedRecord] = field(default_factory=list)
    artifacts: list[EvidenceArtifact] = field(default_factory=list)
    summary: RunSummary = field(default_factory=RunSummary)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
