"""
Posts service - business logic for blog post management
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional
from services.base_service import BaseService, ServiceResult
from config.settings import POSTS_COLLECTION

logger = logging.getLogger(__name__)


def build_post_document(
    title: str,
    content: str,
    first_name: str,
    last_name: str,
    created: Optional[datetime] = None
) -> Dict[str, Any]:
    """Build the stored form of a post, stamping created when absent"""
    return {
        "title": title,
        "content": content,
        "author": {"firstName": first_name, "lastName": last_name},
        "created": created or datetime.now(timezone.utc)
    }


class PostsService(BaseService):
    """Service for blog post operations"""

    def __init__(self):
        super().__init__(POSTS_COLLECTION)

    async def create_post(
        self,
        title: str,
        content: str,
        first_name: str,
        last_name: str,
        created: Optional[datetime] = None
    ) -> ServiceResult:
        """
        Create a new post

        Args:
            title: Post title
            content: Post body
            first_name: Author first name
            last_name: Author last name
            created: Creation timestamp (default: now)

        Returns:
            ServiceResult with created post document
        """
        document = build_post_document(title, content, first_name, last_name, created)
        logger.info(f"Creating post: {title}")
        return await self.create(document)

    async def seed_posts(self, posts: List[Dict[str, Any]]) -> ServiceResult:
        """
        Bulk insert posts directly into the store

        Args:
            posts: Post documents shaped like build_post_document output;
                created is stamped when missing

        Returns:
            ServiceResult with inserted post documents
        """
        documents = []
        for post in posts:
            document = dict(post)
            if not document.get("created"):
                document["created"] = datetime.now(timezone.utc)
            documents.append(document)

        logger.info(f"Seeding {len(documents)} posts")
        return await self.create_many(documents)

    async def list_posts(self) -> ServiceResult:
        """Get every post in the store"""
        return await self.read()

    async def get_post_by_id(self, post_id: str) -> ServiceResult:
        """Get a post by its id"""
        return await self.get_by_id(post_id)

    async def update_post(
        self,
        post_id: str,
        title: str,
        content: str,
        first_name: str,
        last_name: str,
        created: Optional[datetime] = None
    ) -> ServiceResult:
        """
        Replace title, content and author of an existing post

        created is only overwritten when supplied; the id never changes.
        """
        updates = {
            "title": title,
            "content": content,
            "author": {"firstName": first_name, "lastName": last_name}
        }
        if created is not None:
            updates["created"] = created

        logger.info(f"Updating post: {post_id}")
        return await self.update(post_id, updates)

    async def delete_post(self, post_id: str) -> ServiceResult:
        """Permanently remove a post"""
        logger.info(f"Deleting post: {post_id}")
        return await self.delete(post_id)

    async def count_posts(self) -> ServiceResult:
        """Count posts currently in the store"""
        return await self.count()

# Global service instance
_posts_service: Optional[PostsService] = None

def get_posts_service() -> PostsService:
    """Get the global posts service instance"""
    global _posts_service
    if _posts_service is None:
        _posts_service = PostsService()
    return _posts_service
