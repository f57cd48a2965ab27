"""Tilt maze game HTTP API.

This router is consumed by the browser client, which renders the maze and
turns device motion or pointer events into per-tick moves.

Key concepts:
- Sessions are server-owned: the backend stores the maze and the ball.
- The client sends raw moves; the backend bounds them, confines the ball
  against the walls and reports when the goal cell is reached.
- Reaching the goal regenerates the maze inside the same session.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from core.game_session import GameConfig, GameSession
from generator.rules import GenerationError

from .session_dtos import (
    BallDTO,
    CreateSessionRequest,
    ErrorDTO,
    MazeDTO,
    MoveRequest,
    MoveResponse,
    SessionStateResponse,
    ValidateResponse,
    WallDTO,
)
from .session_store import SessionStore


router = APIRouter(prefix="/sessions", tags=["sessions"])
_store = SessionStore()


# ------------------------
# Serialization helpers
# ------------------------

def _maze_to_dto(data: Dict[str, Any], text: str) -> MazeDTO:
    return MazeDTO(
        width=data["width"],
        height=data["height"],
        walls=[WallDTO(**w) for w in data["walls"]],
        text=text,
    )


def _state_to_dto(session_id: str, snapshot: Dict[str, Any]) -> SessionStateResponse:
    return SessionStateResponse(
        sessionId=session_id,
        maze=_maze_to_dto(snapshot["maze"], snapshot["text"]),
        ball=BallDTO(**snapshot["ball"]),
        cell=snapshot["cell"],
        cellWidth=snapshot["cell_width"],
        wins=snapshot["wins"],
        generations=snapshot["generations"],
    )


def _get_session_or_404(session_id: str) -> GameSession:
    session = _store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail={"code": "SESSION_NOT_FOUND", "message": "Session not found"})
    return session


# ------------------------
# Routes
# ------------------------

@router.post("", response_model=SessionStateResponse)
def create_session(req: CreateSessionRequest):
    try:
        config = GameConfig(
            width=req.width,
            height=req.height,
            cell_width=req.cellWidth,
            ball_radius=req.ballRadius,
            river_factor=req.riverFactor,
            seed=req.seed,
        )
    except (ValueError, GenerationError) as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_CONFIG", "message": str(e)})

    handle = _store.create(config)
    return _state_to_dto(handle.session_id, handle.session.snapshot())


@router.get("/{session_id}", response_model=SessionStateResponse)
def get_session(session_id: str):
    session = _get_session_or_404(session_id)
    return _state_to_dto(session_id, session.snapshot())


@router.delete("/{session_id}", response_model=Dict[str, bool])
def delete_session(session_id: str):
    if not _store.delete(session_id):
        raise HTTPException(status_code=404, detail={"code": "SESSION_NOT_FOUND", "message": "Session not found"})
    return {"ok": True}


@router.post("/{session_id}/moves:apply", response_model=MoveResponse)
def apply_move(session_id: str, req: MoveRequest):
    session = _get_session_or_404(session_id)
    result = session.step(req.dx, req.dy)

    return MoveResponse(
        ball=BallDTO(x=result.x, y=result.y, radius=session.config.ball_radius),
        cell=list(result.cell),
        won=result.won,
        wins=result.wins,
        maze=_maze_to_dto(result.maze, result.text) if result.won else None,
    )


@router.post("/{session_id}:restart", response_model=SessionStateResponse)
def restart_session(session_id: str):
    session = _get_session_or_404(session_id)
    session.restart()
    return _state_to_dto(session_id, session.snapshot())


@router.get("/{session_id}/maze.txt", response_class=PlainTextResponse)
def get_maze_text(session_id: str):
    session = _get_session_or_404(session_id)
    return session.snapshot()["text"]


@router.post("/{session_id}:validate", response_model=ValidateResponse)
def validate_session_maze(session_id: str):
    session = _get_session_or_404(session_id)
    connectivity, structure = session.validate_maze()

    errors: List[ErrorDTO] = []
    for issue in connectivity:
        errors.append(ErrorDTO(code="CONNECTIVITY", message=issue.message, x=issue.x, y=issue.y))
    for issue in structure:
        errors.append(ErrorDTO(code="STRUCTURE", message=issue.message, x=issue.x, y=issue.y))

    return ValidateResponse(ok=not errors, errors=errors)
