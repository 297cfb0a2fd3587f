"""
Light Button Puzzle - FastAPI Backend Server

JSON API used by the game screen: solving, validating, scoring, presets.
"""

from pathlib import Path
import logging
import sys

# Add project root to path so lb_solver imports without installing
_project_root = Path(__file__).parent.parent
sys.path.insert(0, str(_project_root))

from fastapi import FastAPI, HTTPException, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
import uvicorn

from lb_solver import (
    PRESETS, InstanceTooLarge, InvalidInstance, PuzzleInstance, SolveTimeout, Solution,
    accuracy, admit_and_solve, random_puzzle, validate,
)
from lb_solver.config import HOST, LOG_LEVEL, PORT, SolverConfig
from lb_solver.scoring import AWARD_THRESHOLD

logger = logging.getLogger(__name__)

SOLVER_CONFIG = SolverConfig.from_env()

app = FastAPI(title="Light Button Puzzle")
api_router = APIRouter(prefix="/api")

# Allow all origins, the game page may be served from anywhere
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request/Response models
class PuzzleModel(ApiModel):
    lights: list[str | int] | str            # "RGBGR" or ["R", "G", ...]
    buttons: list[list[int]]                 # 0-based light indices per button
    max_presses: list[int]
    target_color: str | int = "R"
    name: str = ""


class SolveResponse(ApiModel):
    success: bool
    possible: bool = False
    button_presses: Optional[list[int]] = None
    total_presses: Optional[int] = None
    states_explored: int = 0
    timed_out: bool = False
    error: Optional[str] = None


class ValidateRequest(ApiModel):
    puzzle: PuzzleModel
    button_presses: list[int]


class ValidateResponse(ApiModel):
    valid: bool


class ScoreRequest(ApiModel):
    optimal_total: Optional[int] = None
    possible: bool = True
    player_total: int
    solved: bool


class ScoreResponse(ApiModel):
    accuracy: int
    award: bool


def instance_from_model(puzzle: PuzzleModel) -> PuzzleInstance:
    """Build a validated PuzzleInstance (raises InvalidInstance)."""
    return PuzzleInstance.create(
        puzzle.lights,
        puzzle.buttons,
        puzzle.max_presses,
        puzzle.target_color,
        name=puzzle.name,
    )


def solve_response(instance: PuzzleInstance) -> SolveResponse:
    """Admission + deadline-bounded solve, mapped to the response model."""
    try:
        result: Solution = admit_and_solve(instance, SOLVER_CONFIG)
    except InstanceTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))
    except SolveTimeout as e:
        return SolveResponse(success=False, timed_out=True, error=str(e))

    return SolveResponse(
        success=True,
        possible=result.possible,
        button_presses=list(result.button_presses) if result.possible else None,
        total_presses=result.total_presses,
        states_explored=result.states_explored,
    )


# Routes
@api_router.get("/health")
async def health():
    return {"status": "ok"}


@api_router.post("/solve", response_model=SolveResponse)
def solve_board(puzzle: PuzzleModel):
    """
    Compute the optimal solution for a puzzle.

    An unsolvable puzzle is a successful call with possible=false; a
    malformed one returns success=false with the reason.
    """
    try:
        instance = instance_from_model(puzzle)
    except InvalidInstance as e:
        logger.info("Rejected puzzle: %s", e)
        return SolveResponse(success=False, error=str(e))

    return solve_response(instance)


@api_router.post("/validate", response_model=ValidateResponse)
async def validate_solution(request: ValidateRequest):
    """Check a press vector against a puzzle."""
    try:
        instance = instance_from_model(request.puzzle)
    except InvalidInstance as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ValidateResponse(valid=validate(instance, request.button_presses))


@api_router.post("/score", response_model=ScoreResponse)
async def score(request: ScoreRequest):
    """Player accuracy for a finished (solved or abandoned) game."""
    value = accuracy(request.optimal_total, request.player_total, request.solved, request.possible)
    return ScoreResponse(accuracy=value, award=value >= AWARD_THRESHOLD)


# === Preset / generation endpoints ===

@api_router.get("/presets")
async def get_presets():
    """All preset puzzles, with their index for /presets/{index}/solve."""
    return {
        "presets": [
            {"index": i, **preset.to_dict()}
            for i, preset in enumerate(PRESETS)
        ]
    }


@api_router.get("/presets/{index}/solve", response_model=SolveResponse)
def solve_preset(index: int):
    if not 0 <= index < len(PRESETS):
        raise HTTPException(status_code=404, detail=f"No preset with index {index}")
    return solve_response(PRESETS[index])


@api_router.get("/random")
async def get_random_puzzle(lights: int = 5, buttons: int = 3, target: str = "R", seed: Optional[int] = None):
    """Generate a custom puzzle like the setup screen does."""
    import random

    rng = random.Random(seed)
    try:
        puzzle = random_puzzle(lights, buttons, target, rng=rng)
    except InvalidInstance as e:
        raise HTTPException(status_code=400, detail=str(e))
    return puzzle.to_dict()


# Register the API router
app.include_router(api_router)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting Light Button Puzzle server at http://%s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
