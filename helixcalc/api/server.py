"""
FastAPI server for the helical reducer calculator.

Provides JSON endpoints for reducer, gear stage, bearing and shaft
calculations, drafting export and catalog reference data.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from helixcalc import __version__
from helixcalc.catalog.data import BEARING_CATALOG, MATERIALS_BY_CATEGORY
from helixcalc.catalog.matcher import select_bearing
from helixcalc.catalog.models import BearingCatalogEntry, BearingKind, Material, MaterialCategory
from helixcalc.export.dat import generate_dat_files
from helixcalc.generator.reducer import size_reducer
from helixcalc.generator.shaft import size_shaft
from helixcalc.generator.stage import size_gear_stage
from helixcalc.models.inputs import (
    BearingInput,
    DrawingPositions,
    GearStageInput,
    ReducerInput,
    ShaftInput,
    example_input,
)
from helixcalc.models.outputs import BearingResult, GearStageResult, ReducerResult, ShaftResult
from helixcalc.physics.tables import WORKING_FACTORS

# Create FastAPI app
app = FastAPI(
    title="Helical Reducer Calculator API",
    description="""
    Two-stage helical gear reducer calculations: ratio distribution,
    gear stage sizing, bearing life selection and shaft sizing.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str


class ExportRequest(BaseModel):
    """Request body for the drafting export."""
    reducer: ReducerInput
    shaft: Optional[ShaftInput] = None
    bearings: list[BearingInput] = Field(default_factory=list)
    positions: Optional[DrawingPositions] = None


class ExportResponse(BaseModel):
    """Generated .dat files by name."""
    files: dict[str, str]


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/examples/{kind}", tags=["Reference"])
async def get_example(kind: str):
    """Get an example input for 'reducer', 'stage', 'bearing' or 'shaft'."""
    try:
        return example_input(kind).model_dump(mode="json", exclude_none=True)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post(
    "/reducer",
    response_model=ReducerResult,
    responses={400: {"model": ErrorResponse}},
    tags=["Calculations"],
)
async def reducer(inputs: ReducerInput):
    """
    Size a two-stage helical reducer.

    Distributes the ratio over both stages and sizes each gear pair.
    """
    try:
        return size_reducer(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post(
    "/stage",
    response_model=GearStageResult,
    responses={400: {"model": ErrorResponse}},
    tags=["Calculations"],
)
async def stage(inputs: GearStageInput):
    """Size a single helical gear stage."""
    try:
        return size_gear_stage(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post(
    "/bearing",
    response_model=BearingResult,
    responses={400: {"model": ErrorResponse}},
    tags=["Calculations"],
)
async def bearing(inputs: BearingInput):
    """
    Select a rolling bearing.

    A designation evaluates that bearing; a bore diameter searches the
    catalog for the smallest adequate bearing of the requested kind.
    """
    try:
        return select_bearing(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post(
    "/shaft",
    response_model=ShaftResult,
    responses={400: {"model": ErrorResponse}},
    tags=["Calculations"],
)
async def shaft(inputs: ShaftInput):
    """Size a shaft and check its parallel key."""
    try:
        return size_shaft(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post(
    "/export",
    response_model=ExportResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["Export"],
)
async def export(request: ExportRequest):
    """Generate .dat records for a drafting tool."""
    try:
        reducer_result = size_reducer(request.reducer)
        shaft_result = size_shaft(request.shaft) if request.shaft else None
        bearing_results = [select_bearing(b) for b in request.bearings]
        return ExportResponse(files=generate_dat_files(
            reducer_result, shaft_result, bearing_results, request.positions
        ))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.get("/materials", response_model=list[Material], tags=["Reference"])
async def list_materials(category: MaterialCategory = MaterialCategory.GEAR):
    """Get the materials of one catalog."""
    return list(MATERIALS_BY_CATEGORY[category].values())


@app.get("/bearings", response_model=list[BearingCatalogEntry], tags=["Reference"])
async def list_bearings(kind: Optional[BearingKind] = None):
    """Get catalog bearings, optionally of one kind."""
    return [b for b in BEARING_CATALOG if kind is None or b.kind == kind]


@app.get("/working-factors", tags=["Reference"])
async def list_working_factors():
    """Get the application factor Ko table."""
    return {
        "working_factors": {
            prime_mover.value: {load.value: ko for load, ko in row.items()}
            for prime_mover, row in WORKING_FACTORS.items()
        },
        "descriptions": {
            "uniform": "Generators, belt conveyors, fans",
            "moderate_shock": "Machine tool drives, mixers, heavy conveyors",
            "heavy_shock": "Crushers, punch presses, rolling mills",
        },
    }
