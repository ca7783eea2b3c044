"""Share Count API service."""

import os
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from share_count.core.cache import ShareCountCache
from share_count.core.config import SharedCountSettings, ShareCountConfig
from share_count.core.exceptions import SubjectNotFoundError
from share_count.core.models import parse_payload
from share_count.core.subjects import StaticSubjectResolver
from share_count.rendering.links import LinkRenderer

app = FastAPI(
    title="Share Count API",
    description="Cached social share counts and share links",
    version="0.1.0",
)

_cache: Optional[ShareCountCache] = None


def get_cache() -> ShareCountCache:
    """Get or create the cache instance."""
    global _cache
    if _cache is None:
        settings = SharedCountSettings()
        config = ShareCountConfig.from_env()
        resolver = StaticSubjectResolver(
            site_url=settings.site_url,
            site_title=settings.site_title,
            default_image=settings.default_image,
            site_id=config.site_id,
        )
        _cache = ShareCountCache(resolver=resolver, config=config)
    return _cache


def get_resolver(cache: ShareCountCache = Depends(get_cache)) -> StaticSubjectResolver:
    resolver = cache.resolver
    if not isinstance(resolver, StaticSubjectResolver):
        raise HTTPException(status_code=501, detail="Subject registry is read-only")
    return resolver


class SubjectRequest(BaseModel):
    id: str
    url: str
    title: str = ""
    published_at: Optional[int] = None
    image: Optional[str] = None


class CountsResponse(BaseModel):
    subject_id: str
    updated_at: Optional[int] = None
    counts: Optional[Dict[str, Any]] = None
    raw: Optional[str] = None


class SingleCountResponse(BaseModel):
    subject_id: str
    channel: str
    count: int


@app.exception_handler(SubjectNotFoundError)
async def subject_not_found(request, exc: SubjectNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.post("/api/subjects")
async def register_subject(
    request: SubjectRequest,
    resolver: StaticSubjectResolver = Depends(get_resolver),
) -> Dict[str, str]:
    """Register a content item whose shares should be tracked."""
    try:
        subject = resolver.add(
            request.id,
            url=request.url,
            title=request.title,
            published_at=request.published_at,
            image=request.image,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"subject_id": subject.id, "message": "Registered successfully"}


@app.get("/api/counts/{subject_id}")
def get_counts(
    subject_id: str,
    structured: bool = True,
    cache: ShareCountCache = Depends(get_cache),
) -> CountsResponse:
    """Get cached share counts for a subject, refreshing them when stale."""
    payload = cache.get_counts(subject_id)
    if payload is None:
        return CountsResponse(subject_id=subject_id)
    if structured:
        counts = parse_payload(payload.body)
        return CountsResponse(
            subject_id=subject_id,
            updated_at=payload.updated_at,
            counts=counts.to_dict() if counts is not None else None,
        )
    return CountsResponse(subject_id=subject_id, updated_at=payload.updated_at, raw=payload.body)


@app.get("/api/counts/{subject_id}/{channel}")
def get_single_count(
    subject_id: str,
    channel: str,
    cache: ShareCountCache = Depends(get_cache),
) -> SingleCountResponse:
    """Get the count for one channel."""
    count = cache.get_single_count(subject_id, channel)
    return SingleCountResponse(subject_id=subject_id, channel=channel, count=count)


@app.post("/api/counts/{subject_id}/refresh")
def refresh_counts(
    subject_id: str,
    cache: ShareCountCache = Depends(get_cache),
) -> CountsResponse:
    """Force a refresh from the SharedCount API."""
    payload = cache.refresh(subject_id)
    if payload is None:
        return CountsResponse(subject_id=subject_id)
    return CountsResponse(subject_id=subject_id, updated_at=payload.updated_at, raw=payload.body)


@app.get("/api/links/{subject_id}", response_class=HTMLResponse)
def get_links(
    subject_id: str,
    types: List[str] = Query(default=["facebook"]),
    cache: ShareCountCache = Depends(get_cache),
) -> str:
    """Render share links for a subject."""
    renderer = LinkRenderer(cache)
    return renderer.render(types, subject_id) or ""


@app.get("/health")
async def health_check():
    """Health check."""
    return {"status": "healthy", "service": "share-count-api"}


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("APP_HOST", "0.0.0.0")
    port = int(os.getenv("APP_PORT", "8080"))

    uvicorn.run(
        "share_count.api:app",
        host=host,
        port=port,
        reload=True,
    )
