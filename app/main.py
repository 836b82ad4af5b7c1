import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from weekroster.models import Employee, ScheduleResult, SchedulingConfig
from weekroster.output_formatter import create_html_schedule
from weekroster.sample_data import sample_employees
from weekroster.solver import solve_week

logger = logging.getLogger(__name__)

app = FastAPI(title="Weekly Shift Scheduler")

class ScheduleRequest(BaseModel):
    employees: List[Employee]
    config: SchedulingConfig = SchedulingConfig()

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/schedule", response_model=ScheduleResult)
def schedule(req: ScheduleRequest):
    logger.info("Scheduling %d employees", len(req.employees))
    return solve_week(req.employees, req.config)

@app.get("/sample", response_model=ScheduleResult)
def sample(seed: Optional[int] = None):
    """Schedule the built-in eight-person roster."""
    return solve_week(sample_employees(), SchedulingConfig(seed=seed))

@app.get("/sample.html", response_class=HTMLResponse)
def sample_html(seed: Optional[int] = None):
    config = SchedulingConfig(seed=seed)
    result = solve_week(sample_employees(), config)
    return HTMLResponse(create_html_schedule(result, config.week_start))
