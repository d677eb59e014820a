"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.blog_post_mapper import BlogPostMapper
from src.app.infrastructure.blog_post_repository import BlogPostRepository

from src.app.core.services.blog_post_service import BlogPostService

from src.app.core.domain.models import BlogPost


API_MODULES = [
    "src.app.api.posts",
]


def create_entity_mapper(blog_post_mapper: BlogPostMapper) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            BlogPost: blog_post_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=API_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    blog_post_mapper = providers.Singleton(BlogPostMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        blog_post_mapper=blog_post_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories and Unit of Work (per-request)
    # =========================================================================
    blog_post_repository = providers.Factory(
        BlogPostRepository,
        db=database,
        mapper=blog_post_mapper,
    )

    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    blog_post_service = providers.Factory(
        BlogPostService,
        repository=blog_post_repository,
        unit_of_work=unit_of_work,
    )
