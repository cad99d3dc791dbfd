"""Dependency container wiring for the application."""

from dataclasses import dataclass

from caffeine_check.config import Settings, parse_limit_brackets
from caffeine_check.services.assessment import AssessmentService
from caffeine_check.services.catalog import DEFAULT_CATALOG, ItemCatalog
from caffeine_check.services.limits import DEFAULT_POLICY


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: ItemCatalog
    assessment_service: AssessmentService


def build_container(
    settings: Settings | None = None, catalog: ItemCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog or DEFAULT_CATALOG
    policy = parse_limit_brackets(resolved_settings.limit_brackets) or DEFAULT_POLICY
    assessment_service = AssessmentService(
        catalog=resolved_catalog,
        policy=policy,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        assessment_service=assessment_service,
    )
