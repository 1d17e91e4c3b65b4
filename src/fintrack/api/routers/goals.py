"""Savings goal endpoints."""

from fastapi import APIRouter, Depends, Response

from fintrack.api.deps import get_current_user_id, get_goal_service
from fintrack.api.schemas import (
    GoalCreateRequest,
    GoalUpdateRequest,
    GoalResponse,
    GoalListResponse,
)
from fintrack.services import GoalService, GoalCreate, GoalUpdate

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("/", response_model=GoalListResponse)
def list_goals(
    user_id: str = Depends(get_current_user_id),
    service: GoalService = Depends(get_goal_service),
) -> GoalListResponse:
    """List goals, newest first."""
    goals = service.list_goals(user_id)
    return GoalListResponse(
        goals=[GoalResponse.model_validate(g) for g in goals],
        count=len(goals),
    )


@router.post("/", response_model=GoalResponse, status_code=201)
def create_goal(
    data: GoalCreateRequest,
    user_id: str = Depends(get_current_user_id),
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    """Create a goal."""
    goal = service.create_goal(
        user_id,
        GoalCreate(
            name=data.name,
            target_amount=data.target_amount,
            current_amount=data.current_amount,
            deadline=data.deadline,
        ),
    )
    return GoalResponse.model_validate(goal)


@router.get("/{goal_id}", response_model=GoalResponse)
def get_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    """Get a single goal."""
    return GoalResponse.model_validate(service.get_goal(user_id, goal_id))


@router.patch("/{goal_id}", response_model=GoalResponse)
def update_goal(
    goal_id: str,
    data: GoalUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    """Update a goal."""
    goal = service.update_goal(
        user_id,
        goal_id,
        GoalUpdate(
            name=data.name,
            target_amount=data.target_amount,
            current_amount=data.current_amount,
            deadline=data.deadline,
            clear_deadline=data.clear_deadline,
        ),
    )
    return GoalResponse.model_validate(goal)


@router.delete("/{goal_id}", status_code=204)
def delete_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    service: GoalService = Depends(get_goal_service),
) -> Response:
    """Delete a goal."""
    service.delete_goal(user_id, goal_id)
    return Response(status_code=204)
