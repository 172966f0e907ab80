from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from practice_engine import (
    EmptyAnswerError,
    EquationExercise,
    Exercise,
    GameMode,
    PlayerProgress,
    PracticeSession,
    RoundState,
    RoundStateError,
    resolve_tier,
)
from practice_engine.config import EngineSettings

settings = EngineSettings.load()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Practice Engine Service")
sessions: Dict[str, PracticeSession] = {}


class CreateSessionRequest(BaseModel):
    level: int = Field(default=1, ge=1)
    total_xp: int = Field(default=0, ge=0)
    current_streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)
    mode: GameMode = GameMode.MATH
    seed: Optional[int] = None


class SubmitRequest(BaseModel):
    answer: str


class ModeRequest(BaseModel):
    mode: GameMode


class TierResponse(BaseModel):
    tier: str
    operators: List[str]
    variance: int
    math_duration: int
    word_duration: int


class ExerciseResponse(BaseModel):
    kind: str
    tier: str
    prompt: Optional[str] = None
    answer_choices: Optional[List[int]] = None
    definition: Optional[str] = None
    category: Optional[str] = None
    masked_form: Optional[str] = None
    hint_count: int = 0


class RoundResponse(BaseModel):
    phase: str
    time_remaining: int
    is_locked: bool
    correct: Optional[bool] = None
    timed_out: bool = False


class ProgressResponse(BaseModel):
    level: int
    total_xp: int
    current_streak: int
    best_streak: int


class SubmitResponse(BaseModel):
    accepted: bool
    correct: Optional[bool] = None
    xp_award: int = 0
    new_streak: int
    best_streak: int


def _get_session(session_id: str) -> PracticeSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="unknown session")
    return session


def _exercise_response(exercise: Exercise) -> ExerciseResponse:
    # The answer itself is never sent to the client.
    if isinstance(exercise, EquationExercise):
        return ExerciseResponse(
            kind=exercise.kind,
            tier=exercise.tier.value,
            prompt=exercise.prompt,
            answer_choices=list(exercise.answer_choices),
        )
    return ExerciseResponse(
        kind=exercise.kind,
        tier=exercise.tier.value,
        definition=exercise.definition,
        category=exercise.category,
        masked_form=exercise.masked_form,
        hint_count=len(exercise.hints),
    )


def _round_response(state: Optional[RoundState]) -> RoundResponse:
    if state is None:
        raise HTTPException(status_code=409, detail="no round in progress")
    return RoundResponse(
        phase=state.phase.value,
        time_remaining=state.time_remaining,
        is_locked=state.is_locked,
        correct=state.correct,
        timed_out=state.timed_out,
    )


@app.get("/tiers/{level}", response_model=TierResponse)
def get_tier(level: int) -> TierResponse:
    params = resolve_tier(level)
    return TierResponse(
        tier=params.tier.value,
        operators=[op.value for op in params.operators],
        variance=params.variance,
        math_duration=params.math_duration,
        word_duration=params.word_duration,
    )


@app.post("/sessions")
def create_session(body: CreateSessionRequest) -> dict:
    progress = PlayerProgress(
        level=body.level,
        total_xp=body.total_xp,
        current_streak=body.current_streak,
        best_streak=body.best_streak,
    )
    seed = body.seed if body.seed is not None else settings.seed
    session_id = uuid.uuid4().hex
    sessions[session_id] = PracticeSession(
        progress,
        mode=body.mode,
        seed=seed,
        recent_window=settings.recent_equation_window,
        max_attempts=settings.max_generation_attempts,
    )
    logger.info(f"Created session {session_id} at level {body.level} ({body.mode.value})")
    return {"session_id": session_id}


@app.post("/sessions/{session_id}/exercise", response_model=ExerciseResponse)
def next_exercise(session_id: str) -> ExerciseResponse:
    session = _get_session(session_id)
    try:
        if session.round is not None:
            exercise = session.advance()
        else:
            exercise = session.next_exercise()
            session.start_round(exercise)
    except RoundStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _exercise_response(exercise)


@app.post("/sessions/{session_id}/tick", response_model=RoundResponse)
def tick(session_id: str) -> RoundResponse:
    session = _get_session(session_id)
    return _round_response(session.tick())


@app.post("/sessions/{session_id}/submit", response_model=SubmitResponse)
def submit(session_id: str, body: SubmitRequest) -> SubmitResponse:
    session = _get_session(session_id)
    try:
        result = session.submit(body.answer)
    except EmptyAnswerError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RoundStateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if result is None:
        return SubmitResponse(
            accepted=False,
            new_streak=session.progress.current_streak,
            best_streak=session.progress.best_streak,
        )
    return SubmitResponse(
        accepted=True,
        correct=result.correct,
        xp_award=result.xp_award,
        new_streak=result.new_streak,
        best_streak=result.best_streak,
    )


@app.post("/sessions/{session_id}/hint")
def hint(session_id: str) -> dict:
    session = _get_session(session_id)
    return {"hint": session.reveal_hint(), "revealed": session.hints_revealed}


@app.post("/sessions/{session_id}/mode", response_model=Optional[ExerciseResponse])
def change_mode(session_id: str, body: ModeRequest) -> Optional[ExerciseResponse]:
    session = _get_session(session_id)
    session.change_mode(body.mode)
    if session.exercise is None:
        return None
    return _exercise_response(session.exercise)


@app.get("/sessions/{session_id}/stats")
def stats(session_id: str) -> dict:
    session = _get_session(session_id)
    progress = session.progress
    return {
        "stats": session.stats.as_dict(),
        "progress": ProgressResponse(
            level=progress.level,
            total_xp=progress.total_xp,
            current_streak=progress.current_streak,
            best_streak=progress.best_streak,
        ).model_dump(),
        "generation": session.factory.get_stats(),
    }


@app.delete("/sessions/{session_id}")
def end_session(session_id: str) -> dict:
    session = _get_session(session_id)
    session.cancel()
    del sessions[session_id]
    return {"status": "ended"}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
