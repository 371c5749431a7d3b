"""
Research orchestrator: concurrent multi-platform search, ranking and
content extraction for one topic.
"""

from __future__ import annotations
import asyncio
import concurrent.futures
import logging
import time
from typing import List, Optional, Sequence

import httpx

from .collect.dedup import dedup_results
from .collect.ranker import rank_results
from .config.settings import Settings
from .exceptions import ResearchError
from .extraction.content import ContentExtractor
from .models import RankedResult, ResearchSource, SearchResult
from .providers.base import BaseAdapter
from .providers.registry import build_adapters

logger = logging.getLogger(__name__)


class ResearchOrchestrator:
    """
    Fans a topic out to every configured platform adapter, merges what
    comes back, ranks it and extracts content for the best candidates.

    Adapter and fetch failures only shrink the output. ResearchError is
    raised only when something fails outside those boundaries.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        adapters: Optional[Sequence[BaseAdapter]] = None,
        extractor: Optional[ContentExtractor] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or Settings()
        self.adapters = list(adapters) if adapters is not None else build_adapters(self.settings, transport=transport)
        self.extractor = extractor or ContentExtractor(self.settings, transport=transport)

    def _new_executor(self) -> concurrent.futures.ThreadPoolExecutor:
        workers = max(len(self.adapters), self.settings.max_ranked_results, 1)
        return concurrent.futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="research")

    @staticmethod
    def _release(executor: concurrent.futures.ThreadPoolExecutor) -> None:
        # Timed-out workers are abandoned, never joined
        executor.shutdown(wait=False, cancel_futures=True)

    async def _search_adapter(self, adapter: BaseAdapter, topic: str,
                              executor: concurrent.futures.Executor) -> List[SearchResult]:
        limit = self.settings.limit_for(adapter.platform)
        loop = asyncio.get_running_loop()
        results = await loop.run_in_executor(executor, adapter.search, topic, limit)
        return list(results or [])[:limit]

    async def gather_candidates(self, topic: str) -> List[SearchResult]:
        """Run all adapters concurrently and merge their results in adapter order."""
        if not self.adapters:
            return []

        executor = self._new_executor()
        try:
            tasks = [
                asyncio.create_task(
                    asyncio.wait_for(self._search_adapter(a, topic, executor), timeout=self.settings.PROVIDER_TIMEOUT_SEC)
                )
                for a in self.adapters
            ]
            logger.info(f"Executing {len(tasks)} platform searches in parallel")
            results = await asyncio.gather(*tasks, return_exceptions=True)
        finally:
            self._release(executor)

        pool: List[SearchResult] = []
        for adapter, result in zip(self.adapters, results):
            name = adapter.platform.value
            if isinstance(result, asyncio.TimeoutError):
                logger.warning(f"Platform {name} timed out after {self.settings.PROVIDER_TIMEOUT_SEC}s")
            elif isinstance(result, BaseException):
                logger.warning(f"Platform {name} failed: {result!r}")
            elif result:
                pool.extend(result)
                logger.info(f"Platform {name} contributed {len(result)} candidates")
        return pool

    async def _extract_one(self, ranked: RankedResult, executor: concurrent.futures.Executor) -> ResearchSource:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, self.extractor.extract, ranked)

    async def extract_all(self, ranked: Sequence[RankedResult]) -> List[ResearchSource]:
        """Extract content for every ranked candidate concurrently, keeping order."""
        timeout = self.settings.EXTRACTION_TIMEOUT_SECONDS * 2
        executor = self._new_executor()
        try:
            tasks = [
                asyncio.create_task(asyncio.wait_for(self._extract_one(r, executor), timeout=timeout))
                for r in ranked
            ]
            results = await asyncio.gather(*tasks, return_exceptions=True)
        finally:
            self._release(executor)

        sources: List[ResearchSource] = []
        for r, result in zip(ranked, results):
            if isinstance(result, BaseException):
                logger.debug(f"Extraction failed for {r.url or r.title}: {result!r}")
                sources.append(self.extractor.snippet_fallback(r))
            else:
                sources.append(result)
        return sources

    async def conduct_research(self, topic: str, user_context: Optional[str] = None) -> List[ResearchSource]:
        """
        Collect, rank and extract sources for a topic.

        Args:
            topic: Non-empty research topic (validated by the caller)
            user_context: Optional free-form context from the requester

        Returns:
            Sources whose content is longer than ``min_content_chars``, best
            first. An empty list means no sufficient sources were found.

        Raises:
            ResearchError: A step failed outside the adapter/fetch boundaries
        """
        logger.info(f"Multi-source search for: '{topic}'")
        if user_context:
            logger.debug(f"User context: {user_context[:200]}")

        start = time.perf_counter()
        step = "search"
        try:
            pool = await self.gather_candidates(topic)

            step = "merge"
            candidates = dedup_results(pool)
            logger.info(f"Found {len(candidates)} candidates across platforms")
            if not candidates:
                return []

            step = "rank"
            top = rank_results(candidates, topic)[: self.settings.max_ranked_results]

            step = "extract"
            sources = await self.extract_all(top)

            step = "filter"
            kept = [s for s in sources if len(s.content) > self.settings.min_content_chars]
        except ResearchError:
            raise
        except Exception as e:
            logger.error(f"Research failed during {step} for '{topic}': {e}", exc_info=True)
            raise ResearchError(step, e) from e

        logger.info(
            f"Research for '{topic}' kept {len(kept)}/{len(sources)} sources "
            f"in {time.perf_counter() - start:.1f}s"
        )
        return kept


def conduct_research(
    topic: str,
    user_context: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> List[ResearchSource]:
    """
    Synchronous wrapper around ResearchOrchestrator.conduct_research.

    Safe to call from inside a running event loop; the research run then
    executes on its own loop in a worker thread.
    """
    orchestrator = ResearchOrchestrator(settings)
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(orchestrator.conduct_research(topic, user_context))

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, orchestrator.conduct_research(topic, user_context))
        return future.result()
