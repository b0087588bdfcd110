"""HTTP routes for the physlist API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel

from physlist import __version__
from physlist.api.runtime import ApiState
from physlist.domain.errors import ExclusivityViolation, PhysicsConfigError
from physlist.domain.registry import DEFAULT_REGISTRY
from physlist.schemas.physics import PhysicsConfig

router = APIRouter()

UNPROCESSABLE_CONTENT = 422


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]
ApplyQuery = Annotated[bool, Query(description="Dry-run the setup on a recording engine")]


class ModuleSummary(BaseModel):
    name: str
    category: str


class StepLimiterSummary(BaseModel):
    particle: str
    tag: str


class DiagnosticSummary(BaseModel):
    code: str
    message: str
    level: str


class ResolveResponse(BaseModel):
    modules: list[str]
    decay: str | None
    radioactive_decay: str | None
    electromagnetic: str | None
    hadronic: list[str]
    cuts: dict[str, float]
    energy_window: dict[str, float]
    step_limiters: list[StepLimiterSummary]
    diagnostics: list[DiagnosticSummary]
    transcript: list[str]


def _resolve(state: ApiState, config: PhysicsConfig, apply: bool) -> dict[str, Any]:
    try:
        return state.resolve(config, apply=apply)
    except ExclusivityViolation as exc:
        raise HTTPException(
            status_code=UNPROCESSABLE_CONTENT,
            detail={"error": "exclusivity_violation", "message": str(exc), "modules": list(exc.names)},
        ) from exc
    except PhysicsConfigError as exc:
        raise HTTPException(
            status_code=UNPROCESSABLE_CONTENT,
            detail={"error": type(exc).__name__, "message": str(exc)},
        ) from exc


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Simple readiness probe."""

    return {"status": "ok", "version": __version__}


@router.get("/modules", response_model=list[ModuleSummary])
async def list_modules() -> list[ModuleSummary]:
    """Every module name the resolver recognises."""

    return [
        ModuleSummary(name=name, category=category.value)
        for name, category in DEFAULT_REGISTRY.categories()
    ]


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_config(
    config: PhysicsConfig, state: ApiStateDep, apply: ApplyQuery = False
) -> dict[str, Any]:
    return _resolve(state, config, apply)


@router.get("/configs", response_model=list[str])
async def list_configs(state: ApiStateDep) -> list[str]:
    return state.repository.list_names()


@router.put("/configs/{name}", status_code=status.HTTP_201_CREATED, response_model=PhysicsConfig)
async def store_config(name: str, config: PhysicsConfig, state: ApiStateDep) -> PhysicsConfig:
    try:
        state.repository.save(name, config)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return config


def _load(state: ApiState, name: str) -> PhysicsConfig:
    try:
        return state.repository.load(name)
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Configuration '{name}' not found"
        ) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/configs/{name}", response_model=PhysicsConfig)
async def get_config(name: str, state: ApiStateDep) -> PhysicsConfig:
    return _load(state, name)


@router.post("/configs/{name}/resolve", response_model=ResolveResponse)
async def resolve_stored_config(
    name: str, state: ApiStateDep, apply: ApplyQuery = False
) -> dict[str, Any]:
    return _resolve(state, _load(state, name), apply)


@router.delete("/configs/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_config(name: str, state: ApiStateDep) -> None:
    try:
        state.repository.delete(name)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
