from typing import List, Literal, Optional

from pydantic import BaseModel, Field

# --- Request DTOs ---

class CreateSessionRequest(BaseModel):
    # Defaults match the original 20x20 tilt maze
    width: int = Field(default=20, gt=0, le=200)
    height: int = Field(default=20, gt=0, le=200)
    cellWidth: float = Field(default=20, gt=0)
    ballRadius: float = Field(default=8, gt=0)
    riverFactor: float = Field(default=0.1, ge=0)
    seed: Optional[int] = None

class MoveRequest(BaseModel):
    # Raw per-tick input; the server bounds it to ballRadius - 2
    dx: float
    dy: float

# --- Response DTOs ---

class WallDTO(BaseModel):
    x: int
    y: int
    orientation: Literal["HORIZONTAL", "VERTICAL"]
    present: bool

class MazeDTO(BaseModel):
    width: int
    height: int
    walls: List[WallDTO]
    text: str

class BallDTO(BaseModel):
    x: float
    y: float
    radius: float

class SessionStateResponse(BaseModel):
    sessionId: str
    maze: MazeDTO
    ball: BallDTO
    cell: List[int]
    cellWidth: float
    wins: int
    generations: int

class MoveResponse(BaseModel):
    ball: BallDTO
    cell: List[int]
    won: bool
    wins: int
    # Set when the move reached the goal and a new maze was generated
    maze: Optional[MazeDTO] = None

class ErrorDTO(BaseModel):
    code: str
    message: str
    x: Optional[int] = None
    y: Optional[int] = None

class ValidateResponse(BaseModel):
    ok: bool
    errors: List[ErrorDTO] = Field(default_factory=list)
