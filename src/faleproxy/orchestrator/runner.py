"""End-to-end pipeline runner: fetch -> transform -> extract."""

from __future__ import annotations

from dataclasses import dataclass, field

from faleproxy.config import Settings, load_settings
from faleproxy.logging import get_logger, request_context
from faleproxy.models.document import TransformResult
from faleproxy.tools.page_extractor import PageExtractor
from faleproxy.tools.page_fetcher import PageFetcher
from faleproxy.tools.page_transformer import PageTransformer

logger = get_logger(__name__)


@dataclass(frozen=True)
class Pipeline:
    """The three pipeline stages wired from one :class:`Settings`.

    Stages hold configuration only, so one pipeline may serve concurrent calls.
    """

    fetcher: PageFetcher
    transformer: PageTransformer
    extractor: PageExtractor = field(default_factory=PageExtractor)

    @classmethod
    def from_settings(cls, settings: Settings, *, fetcher: PageFetcher | None = None) -> Pipeline:
        return cls(
            fetcher=fetcher or PageFetcher(settings),
            transformer=PageTransformer(settings.substitution_rule(), skip_tags=settings.skip_tags),
            extractor=PageExtractor(content_scope=settings.content_scope),
        )

    async def run(self, url: str | None) -> TransformResult:
        """Fetch ``url`` and return its transformed title and content.

        Raises:
            InvalidUrlError: Malformed or missing URL; nothing is fetched.
            FetchError: The document could not be retrieved. No partial result is produced.
        """

        with request_context():
            fetched = await self.fetcher.fetch(url)
            parsed = self.transformer.transform(fetched)
            result = self.extractor.extract(parsed, original_url=str(url).strip())
            logger.info(
                "Transformed url=%s substitutions=%d title=%r",
                fetched.url,
                parsed.substitutions,
                result.title,
            )
            return result


async def run_pipeline(
    url: str | None,
    *,
    settings: Settings | None = None,
    fetcher: PageFetcher | None = None,
) -> TransformResult:
    """Convenience wrapper building a :class:`Pipeline` for a single call."""

    settings = settings or load_settings()
    return await Pipeline.from_settings(settings, fetcher=fetcher).run(url)

