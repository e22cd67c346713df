from dataclasses import dataclass, field


@dataclass(frozen=True)
class WikiPageConfig:
    provider: str
    owner: str
    repo: str
    pages: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FetchTarget:
    provider: str
    owner: str
    repo: str
    page: str

    @property
    def label(self) -> str:
        return f"{self.owner}/{self.repo}/{self.page}"


@dataclass(frozen=True)
class FetchOutcome:
    label: str
    content: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AggregateSummary:
    targets_total: int
    succeeded_total: int
    failed_total: int
    sections_total: int


@dataclass(frozen=True)
class AggregateResult:
    text: str
    summary: AggregateSummary
