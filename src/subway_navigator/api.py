"""FastAPI web interface for the subway navigator."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional

from .config import API_HOST, API_PORT, LOG_LEVEL
from .routing import planner
from .stations import find_station, find_stations_by_line, list_stations

app = FastAPI(
    title="Subway Navigator",
    description="Transfer-aware shortest routes on a subway map",
    version="0.1.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RouteRequest(BaseModel):
    from_station: str
    to_station: str
    transfer_cost: Optional[int] = Field(default=None, ge=0)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Subway Navigator"}


@app.get("/stations")
async def get_stations(line: Optional[str] = None):
    """List all stations, optionally only those on one line."""
    if line:
        stations = find_stations_by_line(line, planner.graph)
    else:
        stations = list_stations(planner.graph)
    return {"count": len(stations), "stations": stations}


@app.get("/map")
async def get_map():
    """Every station with its outgoing connections."""
    return {
        station: [
            {"destination": edge.destination, "cost": edge.cost, "line": edge.line}
            for edge in edges
        ]
        for station, edges in planner.graph.adjacency.items()
    }


@app.post("/route")
async def get_route_endpoint(request: RouteRequest):
    """Get the cheapest route between two stations."""
    from_st = find_station(request.from_station, planner.graph)
    to_st = find_station(request.to_station, planner.graph)

    if not from_st:
        raise HTTPException(status_code=404, detail=f"Station not found: {request.from_station}")
    if not to_st:
        raise HTTPException(status_code=404, detail=f"Station not found: {request.to_station}")

    route = planner.plan(from_st, to_st, request.transfer_cost)
    if not route.reachable:
        raise HTTPException(status_code=404, detail="No route found")

    return {
        "from": from_st,
        "to": to_st,
        "cost": route.cost,
        "transfers": route.transfer_count,
        "path": [{"station": station, "line": line} for station, line in route.path],
        "segments": [
            {
                "line": seg.line,
                "from_station": seg.from_station,
                "to_station": seg.to_station,
                "stops": len(seg.stops) - 1,
                "cost": seg.cost
            }
            for seg in route.segments
        ]
    }


def run_server(host: str = API_HOST, port: int = API_PORT):
    """Run the FastAPI server."""
    import uvicorn
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
