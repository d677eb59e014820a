from datetime import datetime, UTC
from uuid import uuid4

from src.app.infrastructure.entities.blog_post_entity import BlogPostEntity
from src.app.infrastructure.mappers.blog_post_mapper import BlogPostMapper


def make_entity(created: datetime) -> BlogPostEntity:
    return BlogPostEntity(
        id=uuid4(),
        author_first_name="Jane",
        author_last_name="Doe",
        title="T",
        content="C",
        created=created,
    )


def test_naive_created_is_read_as_utc():
    post = BlogPostMapper.to_model(make_entity(datetime(2024, 5, 1, 12, 0)))

    assert post.created == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    assert post.created.tzinfo is not None


def test_aware_created_is_kept():
    created = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

    post = BlogPostMapper.to_model(make_entity(created))

    assert post.created == created
    assert post.author.full_name == "Jane Doe"
