"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.ports.auth_provider import AuthProviderPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_repository import RecordRepositoryPort
from src.application.session import SessionContext
from src.application.use_cases.add_sample_data import AddSampleDataUseCase
from src.application.use_cases.authenticate import AuthenticateUseCase
from src.application.use_cases.get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_family_overview import (
    GetFamilyOverviewUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_record_stats import GetRecordStatsUseCase
from src.application.use_cases.record_access import (
    FamilyMemberAccessUseCase,
    RecordAccessUseCase,
)
from src.application.use_cases.submit_record import SubmitRecordUseCase
from src.infrastructure.auth_provider import SqlAlchemyAuthProvider
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.query_cache import QueryCache
from src.infrastructure.record_repository import SqlAlchemyRecordRepository
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.tables import TABLE_SPECS


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> TrackerSettings:
    """Return runtime settings sourced from the environment."""
    return TrackerSettings.from_env()


def build_record_repository(
    entity: str,
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> RecordRepositoryPort:
    """Return the repository serving one record table.

    Raises:
        KeyError: If ``entity`` is not a known record table.
    """
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or build_settings()
    return SqlAlchemyRecordRepository(
        resolved_db,
        TABLE_SPECS[entity],
        default_currency=resolved_settings.default_currency,
    )


def build_auth_provider(
    db_port: DatabaseEnginePort | None = None,
) -> AuthProviderPort:
    """Return the auth backend."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAuthProvider(resolved_db)


def build_query_cache(
    session: SessionContext,
    settings: TrackerSettings | None = None,
) -> QueryCache:
    """Return a query cache that empties itself when the session ends."""
    resolved_settings = settings or build_settings()
    cache = QueryCache(enabled=resolved_settings.cache_enabled)
    session.subscribe(cache.on_session_event)
    return cache


@dataclass(frozen=True)
class TrackerServices:
    """Use cases shared by one user interface session."""

    session: SessionContext
    cache: QueryCache
    settings: TrackerSettings
    auth: AuthenticateUseCase
    assets: RecordAccessUseCase
    debts: RecordAccessUseCase
    family_members: FamilyMemberAccessUseCase
    family_assets: RecordAccessUseCase
    family_debts: RecordAccessUseCase

    def access_for(self, entity: str) -> RecordAccessUseCase:
        """Return the record access use case for ``entity``."""
        return getattr(self, entity)

    def submit_for(self, entity: str) -> SubmitRecordUseCase:
        """Return a form submission use case for ``entity``."""
        return SubmitRecordUseCase(self.access_for(entity))

    def net_worth_summary(self) -> GetNetWorthSummaryUseCase:
        return GetNetWorthSummaryUseCase(
            self.assets,
            self.debts,
            currency_code=self.settings.default_currency,
        )

    def category_breakdown(
        self,
        entity: str,
    ) -> GetAssetCategoryBreakdownUseCase:
        return GetAssetCategoryBreakdownUseCase(
            self.access_for(entity),
            currency_code=self.settings.default_currency,
        )

    def record_stats(self, entity: str) -> GetRecordStatsUseCase:
        return GetRecordStatsUseCase(self.access_for(entity))

    def family_overview(self) -> GetFamilyOverviewUseCase:
        return GetFamilyOverviewUseCase(
            self.family_members,
            self.family_assets,
            self.family_debts,
            currency_code=self.settings.default_currency,
        )

    def sample_data(self) -> AddSampleDataUseCase:
        return AddSampleDataUseCase(self.assets, self.debts)


def build_services(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> TrackerServices:
    """Wire a session, its cache and every record use case together."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or build_settings()
    logger = get_app_logger()
    session = SessionContext()
    cache = build_query_cache(session, resolved_settings)
    repositories = {
        entity: build_record_repository(entity, resolved_db, resolved_settings)
        for entity in TABLE_SPECS
    }

    def _access(entity: str) -> RecordAccessUseCase:
        return RecordAccessUseCase(
            repositories[entity],
            session,
            cache,
            logger=logger,
        )

    family_members = FamilyMemberAccessUseCase(
        repositories["family_members"],
        session,
        cache,
        logger=logger,
    )
    return TrackerServices(
        session=session,
        cache=cache,
        settings=resolved_settings,
        auth=AuthenticateUseCase(
            build_auth_provider(resolved_db),
            session,
            logger=logger,
        ),
        assets=_access("assets"),
        debts=_access("debts"),
        family_members=family_members,
        family_assets=_access("family_assets"),
        family_debts=_access("family_debts"),
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_record_repository",
    "build_auth_provider",
    "build_query_cache",
    "build_services",
    "TrackerServices",
]
