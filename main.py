# main.py
import logging
from datetime import datetime
from typing import List

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from robot_cleaner.entities.robot import Robot
from robot_cleaner.storage.reports import ReportStore, StorageError, create_report_store
from robot_cleaner.utils.consts import API_PREFIX, HOST, LOG_LEVEL, MAX_COMMANDS, MAX_STEPS, PORT, STORE_URL
from robot_cleaner.utils.enums import Direction
from robot_cleaner.utils.types import Command, Coordinate

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("robot_cleaner.api")

app = FastAPI(title="Robot Cleaner Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

store: ReportStore = create_report_store(STORE_URL)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class CoordinateInput(BaseModel):
    x: int
    y: int

class CommandInput(BaseModel):
    direction: Direction
    steps: int = Field(ge=0, le=MAX_STEPS)

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value):
        # Accept "north" / "North" / "N" as well as the compass numbers
        if isinstance(value, str):
            return Direction.from_name(value)
        return value

class PathInput(BaseModel):
    start: CoordinateInput
    commands: List[CommandInput] = Field(default_factory=list, max_length=MAX_COMMANDS)

class PathOutput(BaseModel):
    id: int
    timestamp: datetime
    commands: int
    result: int
    duration: float


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_store() -> ReportStore:
    return store


def get_robot() -> Robot:
    # One robot per request, never shared
    return Robot()


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Robot cleaner server is running"}


@app.post(f"{API_PREFIX}/enter-path", response_model=PathOutput)
def enter_path(
    input_data: PathInput,
    robot: Robot = Depends(get_robot),
    report_store: ReportStore = Depends(get_store),
):
    """
    Runs the robot along the supplied commands, stores the execution report
    and returns it with its new id.
    """
    logger.info(
        "Received path request: start=(%d, %d), %d commands",
        input_data.start.x, input_data.start.y, len(input_data.commands),
    )
    start = Coordinate(input_data.start.x, input_data.start.y)
    commands = [Command(c.direction, c.steps) for c in input_data.commands]

    report = robot.execute_commands(start, commands)
    try:
        report_id = report_store.insert(report)
    except StorageError as e:
        logger.exception("Could not store execution report")
        raise HTTPException(status_code=500, detail=str(e))

    return report.with_id(report_id).get_dict()


@app.get(f"{API_PREFIX}/enter-path/{{report_id}}", response_model=PathOutput)
def get_path(report_id: int, report_store: ReportStore = Depends(get_store)):
    logger.info("Received request for execution report with ID: %d", report_id)
    try:
        report = report_store.get(report_id)
    except StorageError as e:
        logger.exception("Could not read execution report %d", report_id)
        raise HTTPException(status_code=500, detail=str(e))

    if report is None:
        logger.info("Execution report with ID %d not found", report_id)
        raise HTTPException(status_code=404, detail=f"Execution report {report_id} not found")

    logger.info("Found execution report: %s", report.get_dict())
    return report.get_dict()


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
