"""Scripted companion chat routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from companion.conversation import Companion, ConversationStore
from mood.dates import ValidationError
from store import StoreError
from web.auth import get_current_user
from web.deps import get_user_client
from web.models import ChatMessage, ChatReply, ChatSend
from web.routes.mood import store_failure

router = APIRouter(prefix="/api/companion", tags=["companion"])


def _to_message(row: dict) -> ChatMessage:
    return ChatMessage(
        id=str(row["id"]) if row.get("id") is not None else None,
        message=row["message"],
        is_user=bool(row.get("is_user")),
        created_at=row.get("created_at"),
    )


@router.get("/messages", response_model=list[ChatMessage])
async def list_messages(
    limit: int = 50,
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
):
    try:
        messages = Companion(ConversationStore(client)).history(user["id"], limit=limit)
    except StoreError as e:
        raise store_failure(e)
    return [_to_message(m) for m in messages]


@router.post("/messages", response_model=ChatReply, status_code=status.HTTP_201_CREATED)
async def send_message(
    body: ChatSend,
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
):
    try:
        saved_user, saved_reply = Companion(ConversationStore(client)).reply(user["id"], body.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise store_failure(e)
    return ChatReply(user_message=_to_message(saved_user), reply=_to_message(saved_reply))
