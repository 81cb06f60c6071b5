from fastapi import FastAPI

from mr_mirror.core.application.ports import VcsPort
from mr_mirror.infrastructure.configuration.main_settings import Settings
from mr_mirror.infrastructure.entrypoints.api.health_router import router as health_router
from mr_mirror.infrastructure.entrypoints.api.merge_request_router import (
    router as merge_request_router,
)
from mr_mirror.infrastructure.observability.logger_factory_service import get_logger
from mr_mirror.infrastructure.observability.logging import CorrelationMiddleware
from mr_mirror.infrastructure.resolution.container import (
    build_branch_mapping,
    build_mirror_workflow,
    build_vcs,
)

logger = get_logger(__name__)


def create_app(settings: Settings, vcs: VcsPort | None = None) -> FastAPI:
    """Builds the webhook app. ``vcs`` defaults to the GitLab adapter."""
    mapping = build_branch_mapping(settings)
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info("App configured", app_name=settings.app_name, gitlab_url=settings.gitlab_base_url)
    logger.info("Branch mappings loaded", mappings=mapping.as_dict())
    logger.info(
        "Webhook secret present",
        has_webhook_secret=bool(settings.gitlab_webhook_secret),
        gitlab_verify_ssl=settings.gitlab_verify_ssl,
    )
    logger.info("------------------------")

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.mirror_workflow = build_mirror_workflow(
        vcs or build_vcs(settings),
        mapping,
        commit_fetch_max_attempts=settings.commit_fetch_max_attempts,
    )

    app.add_middleware(CorrelationMiddleware)
    app.include_router(health_router)
    app.include_router(merge_request_router)

    return app
