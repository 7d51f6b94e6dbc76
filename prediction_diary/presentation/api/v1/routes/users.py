from typing import Annotated

from fastapi import APIRouter, Depends, status

from prediction_diary.presentation.api.dependencies import get_controller
from prediction_diary.presentation.api.v1.schemas.user import (UserCreate,
                                                               UserCreated)
from prediction_diary.presentation.controller import DiaryController

router = APIRouter()


@router.post("/user", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_account(
    data: UserCreate,
    controller: Annotated[DiaryController, Depends(get_controller)],
):
    """Create an account for a personality class"""
    result = await controller.create_account(data.to_personality_class())
    return UserCreated(uid=result.id)
