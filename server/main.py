from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from rpsbrain import BrainConfig, InvalidMoveError, MatchOverError, SessionNotFoundError, SessionRegistry
from rpsbrain.logger_config import setup_logger

logger = setup_logger("rpsbrain", level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))

app = FastAPI(title="RPS Brain API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

registry = SessionRegistry(
    BrainConfig.from_env(),
    max_sessions=int(os.getenv("RPS_MAX_SESSIONS", "1000")),
    idle_ttl=float(os.getenv("RPS_SESSION_TTL", "3600")),
)


class CreateReq(BaseModel):
    rounds: Literal[20, 50, 100] = 20


class PlayReq(BaseModel):
    move: str


class PredictionRes(BaseModel):
    move: str
    confidence: int
    strategy: str


class SummaryRes(BaseModel):
    total_rounds: int
    current_round: int
    player_score: int
    bot_score: int
    ties: int
    history: List[str]
    game_over: bool
    winner: Optional[str] = None
    win_rate: int


class SessionRes(BaseModel):
    session_id: str
    summary: SummaryRes


class PlayRes(BaseModel):
    round: int
    player_move: str
    bot_move: str
    result: str
    prediction: PredictionRes
    summary: SummaryRes


def _match(sid: str):
    try:
        return registry.get(sid)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/")
def health() -> Dict[str, Any]:
    return {"ok": True, "sessions": len(registry)}


@app.post("/sessions", response_model=SessionRes)
def create_session(req: CreateReq):
    sid = registry.create(req.rounds)
    return {"session_id": sid, "summary": registry.get(sid).summary()}


@app.get("/sessions/{sid}", response_model=SessionRes)
def get_session(sid: str):
    return {"session_id": sid, "summary": _match(sid).summary()}


@app.get("/sessions/{sid}/prediction", response_model=PredictionRes)
def get_prediction(sid: str):
    return _match(sid).brain.predict_next_move().to_dict()


@app.post("/sessions/{sid}/play", response_model=PlayRes)
def play(sid: str, req: PlayReq):
    match = _match(sid)
    try:
        result = match.play(req.move)
    except InvalidMoveError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MatchOverError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {**result.to_dict(), "summary": match.summary()}


@app.post("/sessions/{sid}/reset", response_model=SessionRes)
def reset_session(sid: str):
    match = _match(sid)
    match.restart()
    return {"session_id": sid, "summary": match.summary()}


@app.delete("/sessions/{sid}")
def drop_session(sid: str):
    try:
        registry.drop(sid)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"ok": True}


# Mount static files if available; registered last so API routes take precedence
static_path = os.getenv("STATIC_PATH", "./static")
if os.path.exists(static_path):
    app.mount("/app", StaticFiles(directory=static_path, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
