"""FastAPI application, chat endpoint and startup."""

import sys
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from habitual.adapters.llm.claude_adapter import ClaudeAdapter
from habitual.adapters.web.signal_routes import (
    pricing_router,
    resolve_registry,
    settings,
    signals_router,
    survey_router,
)
from habitual.domain.agent import AgentChat, ChatError
from habitual.domain.models import ChatMessage
from habitual.domain.persona import AGENT_PERSONA


def _log(msg: str):
    print(msg, file=sys.stderr)


app = FastAPI(title="HabitualOS Signals")
app.include_router(signals_router)
app.include_router(survey_router)
app.include_router(pricing_router)

llm = ClaudeAdapter(timeout=settings.llm.timeout_seconds)


class HistoryMessage(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    message: str
    history: List[HistoryMessage] = []
    chat_type: Optional[str] = None


class ChatResponse(BaseModel):
    response: str
    visible_text: str
    signal: Optional[Dict[str, Any]] = None


class StatusResponse(BaseModel):
    sessionId: str
    chatType: str
    defaultModel: str


@app.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest):
    chat_type = req.chat_type or settings.chat_type
    registry = resolve_registry(chat_type)
    agent = AgentChat(
        llm=llm,
        registry=registry,
        system_prompt=AGENT_PERSONA if chat_type == "agent" else "",
        model=settings.llm.resolve_model(),
        max_history=settings.llm.max_history,
    )
    history = [ChatMessage(role=m.role, content=m.content) for m in req.history]
    try:
        turn = await agent.respond(req.message, history)
    except ChatError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ChatResponse(
        response=turn.text,
        visible_text=turn.visible_text,
        signal=turn.signal.to_dict() if turn.signal else None,
    )


@app.get("/status", response_model=StatusResponse)
async def status():
    return StatusResponse(
        sessionId=settings.session_id,
        chatType=settings.chat_type,
        defaultModel=settings.llm.default_model,
    )


@app.on_event("startup")
async def startup_event():
    _log("HabitualOS signals server starting")
    _log(f"Session: {settings.session_id}")
    _log(f"Chat type: {settings.chat_type}")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
