"""Article repository."""

from typing import Any

from synapse.models import Article, Profile

from .base import BaseRepository, coerce_string_list, translate_db_errors


class ArticleRepository(BaseRepository[Article]):
    """Repository for Article operations."""

    model = Article

    @translate_db_errors("list_all_with_author")
    def list_all_with_author(self) -> list[dict[str, Any]]:
        """
        Return every article with its author's display name.

        ``author_name`` is None when the author is unknown or has no profile.
        """
        rows = (
            self.session.query(Article, Profile.full_name)
            .outerjoin(Profile, Profile.user_id == Article.author_id)
            .order_by(Article.id)
            .all()
        )
        return [
            {
                "id": article.id,
                "title": article.title,
                "excerpt": article.excerpt,
                "featured_image": article.featured_image,
                "author_name": author_name,
                "tags": coerce_string_list(article.tags),
            }
            for article, author_name in rows
        ]
