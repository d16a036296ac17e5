"""
Blog post API routes
All data access goes through the posts service layer.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Response

from models.post import PostCreateRequest, PostUpdateRequest, PostResponse, serialize_post
from services.base_service import ServiceResult
from services.posts_service import get_posts_service

router = APIRouter()

# Bare /{post_id} routes kept for older clients
legacy_router = APIRouter()

logger = logging.getLogger(__name__)


def raise_for_result(result: ServiceResult, not_found_detail: str = "Post not found"):
    """Translate a failed ServiceResult into the matching HTTP error"""
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=not_found_detail)
    raise HTTPException(status_code=500, detail=result.error)


@router.get("", response_model=List[PostResponse])
async def list_posts():
    """Get all posts"""
    result = await get_posts_service().list_posts()
    raise_for_result(result)
    return [serialize_post(post) for post in result.data]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str):
    """Get a single post"""
    result = await get_posts_service().get_post_by_id(post_id)
    raise_for_result(result)
    return serialize_post(result.data[0])


@router.post("", status_code=201, response_model=PostResponse)
async def create_post(request: PostCreateRequest):
    """Create a new post"""
    result = await get_posts_service().create_post(
        title=request.title,
        content=request.content,
        first_name=request.author.first_name,
        last_name=request.author.last_name,
        created=request.created
    )
    raise_for_result(result)
    return serialize_post(result.data[0])


@router.put("/{post_id}", status_code=201, response_model=PostResponse)
async def update_post(post_id: str, request: PostUpdateRequest):
    """Replace an existing post"""
    if request.id != post_id:
        message = f"Request path id ({post_id}) and request body id ({request.id}) must match"
        logger.warning(message)
        raise HTTPException(status_code=400, detail=message)

    result = await get_posts_service().update_post(
        post_id,
        title=request.title,
        content=request.content,
        first_name=request.author.first_name,
        last_name=request.author.last_name,
        created=request.created
    )
    raise_for_result(result)
    return serialize_post(result.data[0])


@router.delete("/{post_id}", status_code=204, response_class=Response)
async def delete_post(post_id: str):
    """Delete a post"""
    result = await get_posts_service().delete_post(post_id)
    raise_for_result(result)
    return Response(status_code=204)


legacy_router.add_api_route(
    "/{post_id}",
    delete_post,
    methods=["DELETE"],
    status_code=204,
    response_class=Response
)
