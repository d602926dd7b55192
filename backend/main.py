"""
Disposition Report Service — FastAPI Backend
"""

import asyncio
import logging
import os
from typing import Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from services.config import load_institution
from services.errors import RenderError, ValidationError
from services.kinds import KINDS
from services.report_gen import generate_pdf_report

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

institution = load_institution()

app = FastAPI(title="Disposition Report Service")

_origins = ["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"]
_frontend_url = os.getenv("FRONTEND_URL", "").strip()
if _frontend_url:
    _origins.append(_frontend_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _pdf_filename(kind: str, payload: Any) -> str:
    ref = payload.get("refNumber", "") if isinstance(payload, dict) else ""
    safe_ref = "".join(c if c.isalnum() or c in "_-" else "_" for c in str(ref))[:40].strip("_")
    return f"{kind}-{safe_ref}.pdf" if safe_ref else f"{kind}.pdf"


# ── Report Endpoints ──────────────────────────────────────────────────────────

@app.post("/dispo/{kind}")
async def create_report(kind: str, payload: Any = Body(...)):
    if kind not in KINDS:
        raise HTTPException(status_code=404, detail=f"Unknown report kind: {kind}")

    # Layout and rendering are CPU-bound; keep them off the event loop.
    loop = asyncio.get_event_loop()
    try:
        pdf = await loop.run_in_executor(
            None, generate_pdf_report, KINDS[kind], payload, institution
        )
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"detail": f"Invalid report payload: {e}", "field": e.field},
        )
    except RenderError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{_pdf_filename(kind, payload)}"'},
    )


@app.get("/api/kinds")
async def list_kinds():
    return {"kinds": sorted(KINDS)}


# ── Health Check ──────────────────────────────────────────────────────────────

@app.get("/api/health")
async def health():
    return {"status": "ok", "institution": institution.name}
