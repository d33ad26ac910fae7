from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, Field, validator

from exprbf.compiler import CompilerOptions, ExpressionCompiler
from exprbf.errors import CompileError, ExpressionTooDeep, InvalidNumber, MalformedInput, NumberTooLarge
from exprbf.tape import StepLimitExceeded, TapeMachine

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1_000_000


def _error_kind(exc: CompileError) -> str:
    if isinstance(exc, MalformedInput):
        return "malformed_input"
    if isinstance(exc, InvalidNumber):
        return "invalid_number"
    if isinstance(exc, NumberTooLarge):
        return "number_too_large"
    if isinstance(exc, ExpressionTooDeep):
        return "expression_too_deep"
    return "compile_error"


class CompileRequest(BaseModel):
    source: str = Field(max_length=4096)
    run: bool = False
    max_steps: Optional[int] = Field(default=None, ge=1)

    @validator("source")
    def validate_source(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("source must not be blank")
        return value


class CompileResponse(BaseModel):
    name: str
    expression: str
    tree: str
    program: str
    length: int
    output: Optional[str] = None


def create_app(options: Optional[CompilerOptions] = None) -> FastAPI:
    compiler = ExpressionCompiler(options)
    app = FastAPI(title="exprbf compile API", version="0.1.0")

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/api/compile", response_model=CompileResponse)
    def compile_source(payload: CompileRequest) -> CompileResponse:
        try:
            compilation = compiler.compile_source(payload.source)
        except CompileError as exc:
            logger.debug(f"Rejected {payload.source!r}: {exc}")
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"error": _error_kind(exc), "message": str(exc)},
            ) from exc

        output: Optional[str] = None
        if payload.run:
            machine = TapeMachine()
            try:
                output = machine.run(
                    compilation.program,
                    max_steps=payload.max_steps or DEFAULT_MAX_STEPS,
                )
            except StepLimitExceeded as exc:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=str(exc),
                ) from exc

        return CompileResponse(
            name=compilation.name,
            expression=compilation.expression,
            tree=compilation.tree.render(),
            program=compilation.program,
            length=len(compilation.program),
            output=output,
        )

    return app


__all__ = ["CompileRequest", "CompileResponse", "create_app"]
