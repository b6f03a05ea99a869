from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from layers.sources import MapState
from printspec.build import build_spec
from printspec.config import get_print_config
from printspec.errors import (
    IncompleteViewState,
    InvalidUnitKind,
    SpecAssemblyFailed,
    UnknownProjection,
)
from telemetry.log import setup_logging

setup_logging()

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/print/config")
def print_config():
    return get_print_config().model_dump(mode="json")


@app.post("/print/spec")
async def print_spec(body: MapState):
    try:
        spec = await build_spec(body)
    except (IncompleteViewState, InvalidUnitKind, UnknownProjection) as e:
        logger.warning(f"Rejected print request: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e
    except SpecAssemblyFailed as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return {
        "spec": spec.to_document(),
        "diagnostics": [d.as_dict() for d in spec.diagnostics],
    }
