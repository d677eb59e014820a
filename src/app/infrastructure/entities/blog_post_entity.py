from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class BlogPostEntity(Base):
    """SQLAlchemy model for the blog_posts table."""
    __tablename__ = "blog_posts"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    author_first_name: Mapped[str] = mapped_column(Text, nullable=False)
    author_last_name: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
