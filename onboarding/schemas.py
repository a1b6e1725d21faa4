from dataclasses import dataclass, field


@dataclass(frozen=True)
class PartitionResult:
    clean: list[dict[str, str]] = field(default_factory=list)
    rejected: list[dict[str, str]] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        return len(self.clean) + len(self.rejected)


@dataclass(frozen=True)
class OnboardingResult:
    source_file: str
    status: str
    total_records: int
    clean_records: int
    rejected_records: int
    loaded_records: int
    clean_path: str
    rejected_path: str
    error: str | None = None
