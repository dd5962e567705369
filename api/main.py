from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import DashboardSummaryResponse, ErrorResponse
from core.config import get_settings
from core.logging_config import setup_logging
from core.summary import SUMMARY_ERROR_MESSAGE, build_summary

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title="HLTB Insights API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


@app.get(
    "/api/hltb/summary",
    response_model=DashboardSummaryResponse,
    responses={500: {"model": ErrorResponse}},
)
def hltb_summary():
    try:
        return _json(build_summary())
    except Exception:
        logger.exception("hltb_summary failed")
        return JSONResponse(status_code=500, content={"error": SUMMARY_ERROR_MESSAGE})
