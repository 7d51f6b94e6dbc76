from typing import Annotated

from fastapi import APIRouter, Depends, status

from prediction_diary.presentation.api.dependencies import get_controller
from prediction_diary.presentation.api.v1.schemas.post import (
    PostCreate, PostResponse, PostUpdate, TimelineResponse)
from prediction_diary.presentation.controller import DiaryController

router = APIRouter()


@router.post("/post", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def add_new_post(
    data: PostCreate,
    controller: Annotated[DiaryController, Depends(get_controller)],
):
    """Mint this week's prediction post for a user (404 if the user is unknown)"""
    return await controller.add_new_post(data.uid)


@router.put("/post/{post_id}", response_model=PostResponse)
async def edit_post(
    post_id: str,
    data: PostUpdate,
    controller: Annotated[DiaryController, Depends(get_controller)],
):
    """Set the description and image of a post (404 if the post is unknown)"""
    return await controller.edit_post(post_id, image=data.image, description=data.description)


@router.get("/posts/by-uid/{uid}", response_model=TimelineResponse)
async def get_user_timeline(
    uid: str,
    controller: Annotated[DiaryController, Depends(get_controller)],
):
    """List a user's posts"""
    return TimelineResponse(items=await controller.get_user_timeline(uid))
