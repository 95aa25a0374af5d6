"""Per-app service instances, built once in create_app and read by routes."""

from dataclasses import dataclass

import httpx
from fastapi import Request

from config import Settings
from services.articles import ArticleSearchEngine
from services.cache import TTLCache
from services.fetcher import CachedFetcher, register_resources
from services.football_data import FootballDataClient
from services.guardian import GuardianClient


@dataclass
class Services:
    cache: TTLCache
    fetcher: CachedFetcher
    articles: ArticleSearchEngine

    async def close(self) -> None:
        await self.fetcher.client.close()
        await self.articles.client.close()


def build_services(
    settings: Settings,
    football_transport: httpx.AsyncBaseTransport | None = None,
    guardian_transport: httpx.AsyncBaseTransport | None = None,
) -> Services:
    cache = TTLCache()
    register_resources(cache)
    football = FootballDataClient(settings.football_api_key, transport=football_transport)
    guardian = GuardianClient(settings.guardian_api_key, transport=guardian_transport)
    return Services(
        cache=cache,
        fetcher=CachedFetcher(cache, football),
        articles=ArticleSearchEngine(cache, guardian),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_fetcher(request: Request) -> CachedFetcher:
    return request.app.state.services.fetcher


def get_article_engine(request: Request) -> ArticleSearchEngine:
    return request.app.state.services.articles
