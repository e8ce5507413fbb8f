"""Read-only endpoints over the data store."""

import logging

from fastapi import APIRouter

from chat.domain.shared.exceptions import EntityNotFoundError
from chat.presentation.api.dependencies import Store
from chat.presentation.api.schemas import (
    ConversationResponse,
    MessageResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users", summary="List users")
def list_users(store: Store) -> list[UserResponse]:
    return [UserResponse.from_domain(u) for u in store.get_all_users_by_id().values()]


@router.get(
    "/users/{name}",
    summary="Get a user by name",
    responses={404: {"description": "No user with this name"}},
)
def get_user_by_name(name: str, store: Store) -> UserResponse:
    user = store.get_all_users_by_name().get(name)
    if user is None:
        raise EntityNotFoundError("User", name)
    return UserResponse.from_domain(user)


@router.get("/conversations", summary="List conversations")
def list_conversations(store: Store) -> list[ConversationResponse]:
    """Conversations in creation order."""
    return [ConversationResponse.from_domain(c) for c in store.get_all_conversations()]


@router.get("/messages", summary="List messages")
def list_messages(store: Store) -> list[MessageResponse]:
    """Messages in creation order."""
    return [MessageResponse.from_domain(m) for m in store.get_all_messages()]
