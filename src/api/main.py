"""
FastAPI main application for Wikilinker
"""
import time
import logging
from functools import partial
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ..config import settings
from ..hosts import HtmlLinker, SiteRegistry, TrafilaturaExtractor
from ..linking import EntityCatalogue, EntityResolver, to_wiki_url
from .models import (
    LinkRequest, LinkResponse, LinkStats, MatchLogEntry, DebugInfo,
    HealthResponse, ErrorResponse
)

VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)

# Global variables
linker = None


def build_linker() -> HtmlLinker:
    """
    Load the catalogue and site registry and wire up the page linker.

    A missing catalogue leaves the service up with nothing to link; a missing
    site registry means every page uses the default selector.
    """
    try:
        catalogue = EntityCatalogue.from_file(settings.entities_file)
    except FileNotFoundError:
        logger.warning(f"Catalogue not found at {settings.entities_file}, no entities will be linked")
        catalogue = EntityCatalogue()

    try:
        sites = SiteRegistry.from_file(settings.sites_file)
    except FileNotFoundError:
        logger.warning(f"Site registry not found at {settings.sites_file}, using default selector only")
        sites = SiteRegistry()

    return HtmlLinker(
        EntityResolver(catalogue),
        extractor=TrafilaturaExtractor(min_length=settings.readerable_min_length),
        sites=sites,
        default_selector=settings.default_article_selector,
        url_builder=partial(to_wiki_url, base_url=settings.wiki_base_url),
        link_class=settings.link_class,
        min_text_length=settings.min_text_length,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    global linker

    # Startup
    logger.info("Starting Wikilinker API...")
    try:
        linker = build_linker()
        logger.info(f"Linker initialized with {len(linker.resolver.catalogue)} entities")
    except Exception as e:
        logger.error(f"Failed to initialize linker: {e}")
        # Continue anyway - will initialize on first request

    yield

    # Shutdown
    logger.info("Shutting down Wikilinker API...")


# Create FastAPI app
app = FastAPI(
    title="Wikilinker API",
    description="Link the first mention of each known entity in a page to Wikipedia",
    version=VERSION,
    lifespan=lifespan
)

# Add middleware
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list + ["*"] if settings.debug else settings.allowed_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


def get_linker_dependency() -> HtmlLinker:
    """Dependency to get the page linker"""
    global linker
    if linker is None:
        linker = build_linker()
    return linker


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        catalogue_size=len(linker.resolver.catalogue) if linker else 0,
        sites_configured=len(linker.sites) if linker and linker.sites is not None else 0,
    )


@app.post("/api/link", response_model=LinkResponse, responses={500: {"model": ErrorResponse}})
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
def link_page(
    request: Request,
    link_request: LinkRequest,
    page_linker: HtmlLinker = Depends(get_linker_dependency)
):
    """Inject entity links into the supplied page markup"""
    start_time = time.time()

    try:
        logger.info(f"Linking {len(link_request.html)} chars from {link_request.url or 'inline markup'}")

        outcome = page_linker.link(
            link_request.html,
            base_url=link_request.url,
            article_selector=link_request.article_selector,
            debug=link_request.debug,
            two_phase=link_request.two_phase,
        )
        result = outcome.result

        debug_info = None
        if link_request.debug:
            debug_info = DebugInfo(
                selector=outcome.selector,
                discovered=result.discovered,
                discovery=result.discovery_trace.to_dict() if result.discovery_trace else None,
                injection=result.injection.trace.to_dict() if result.injection.trace else None,
            )

        return LinkResponse(
            html=outcome.html,
            stats=LinkStats(linked=result.linked, mode=result.mode),
            match_log=[
                MatchLogEntry(text=record.text, url=record.url, context=record.context)
                for record in result.injection.links
            ],
            debug_info=debug_info,
            processing_time=time.time() - start_time,
        )

    except Exception as e:
        logger.error(f"Error in link endpoint: {e}")
        raise HTTPException(
            status_code=500,
            detail="Linking failed for this page. Please try again."
        )
