from datetime import UTC

from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Author, BlogPost
from src.app.infrastructure.entities.blog_post_entity import BlogPostEntity


class BlogPostMapper(BaseEntityMapper[BlogPost, BlogPostEntity]):
    """Mapper for converting between BlogPost domain model and BlogPostEntity."""

    @staticmethod
    def to_entity(model_instance: BlogPost) -> BlogPostEntity:
        """Convert a BlogPost (domain model) to BlogPostEntity, flattening the author into columns."""
        return BlogPostEntity(
            id=model_instance.id,
            author_first_name=model_instance.author.first_name,
            author_last_name=model_instance.author.last_name,
            title=model_instance.title,
            content=model_instance.content,
            created=model_instance.created,
        )

    @staticmethod
    def to_model(entity: BlogPostEntity) -> BlogPost:
        """
        Convert a BlogPostEntity (database entity) to BlogPost (domain model).

        Backends without a timezone-aware timestamp type (SQLite) hand back
        naive values; those were written as UTC and are read back as UTC.
        """
        created = entity.created
        if created.tzinfo is None:
            created = created.replace(tzinfo=UTC)
        return BlogPost(
            id=entity.id,
            author=Author(
                first_name=entity.author_first_name,
                last_name=entity.author_last_name,
            ),
            title=entity.title,
            content=entity.content,
            created=created,
        )
