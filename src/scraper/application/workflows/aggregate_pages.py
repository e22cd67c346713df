import asyncio
from dataclasses import dataclass
from typing import Sequence

import aiohttp

from src.config.logger_config import logger
from src.scraper.application.ports import PageFetcherPort
from src.scraper.domain.extraction import extract_bash_blocks, filter_by_prefix
from src.scraper.domain.models import (
    AggregateResult,
    AggregateSummary,
    FetchOutcome,
    FetchTarget,
    WikiPageConfig,
)
from src.scraper.domain.rules import expand_targets


@dataclass(frozen=True)
class AggregateWorkflowConfig:
    section_header: str = "# === Source: {label} ==="
    error_line: str = "# Error fetching {label}: {error}"


class AggregatePagesWorkflow:
    def __init__(
        self,
        client: PageFetcherPort,
        config: AggregateWorkflowConfig | None = None,
    ) -> None:
        self.client = client
        self.config = config or AggregateWorkflowConfig()

    async def run(
        self,
        session: aiohttp.ClientSession,
        configs: Sequence[WikiPageConfig],
        exclude_prefixes: Sequence[str],
    ) -> AggregateResult:
        targets = expand_targets(configs)
        logger.info("Fetching {} wiki pages...", len(targets))

        # gather 依照傳入順序回傳結果，與完成順序無關
        outcomes = await asyncio.gather(*(self._fetch_outcome(session, target) for target in targets))

        errors: list[str] = []
        code_lines: list[str] = []
        sections_total = 0
        for outcome in outcomes:
            if not outcome.ok:
                errors.append(self.config.error_line.format(label=outcome.label, error=outcome.error))
                continue

            blocks = filter_by_prefix(extract_bash_blocks(outcome.content or ""), exclude_prefixes)
            if not blocks:
                logger.debug("No bash blocks left for {}", outcome.label)
                continue

            sections_total += 1
            code_lines.append(self.config.section_header.format(label=outcome.label))
            code_lines.extend(blocks)
            code_lines.append("")

        output = ""
        if errors:
            output += "\n".join(errors) + "\n\n"
        output += "\n".join(code_lines)

        summary = AggregateSummary(
            targets_total=len(targets),
            succeeded_total=len(targets) - len(errors),
            failed_total=len(errors),
            sections_total=sections_total,
        )
        logger.info(
            "Aggregation complete: targets={}, succeeded={}, failed={}, sections={}",
            summary.targets_total,
            summary.succeeded_total,
            summary.failed_total,
            summary.sections_total,
        )
        return AggregateResult(text=output, summary=summary)

    async def _fetch_outcome(self, session: aiohttp.ClientSession, target: FetchTarget) -> FetchOutcome:
        try:
            content = await self.client.fetch_page(
                session,
                target.provider,
                target.owner,
                target.repo,
                target.page,
            )
        except Exception as exc:
            logger.warning(
                "Failed fetching {} with error type {}: {}",
                target.label,
                type(exc).__name__,
                exc,
            )
            return FetchOutcome(label=target.label, error=str(exc))
        return FetchOutcome(label=target.label, content=content)
