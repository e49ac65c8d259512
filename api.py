"""
FastAPI server playing the remote movie service for local development.
Endpoints:
- GET /health: basic health check
- GET /movies: every movie in catalog order
- GET /movies/{movie_id}: one movie, 404 if unknown

Startup loads the catalog file configured by FILMSHELF_CATALOG_PATH (data/movies.json by default).

Run: uvicorn api:app --port 3001 --reload
"""

# Import standard libraries for timing
import time  # measure startup latency
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for settings and data loading
from filmshelf.config import configure_logging, get_settings  # env-backed settings
from filmshelf.data_loader import DataLoader  # loads and parses movies
from filmshelf.models import Movie  # movie record

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Filmshelf Movie Service", version="1.0.0")  # web app

# Globals that hold the loaded catalog and measured startup time
MOVIES: Optional[List[Movie]] = None  # loaded at startup, in file order
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	title: str  # human-readable title
	director: str  # director name
	poster: str  # poster image URL
	year: int  # release year
	rating: float  # average rating


def to_out(movie: Movie) -> MovieOut:
	"""Convert a Movie into its response schema."""
	return MovieOut(
		id=movie.id,
		title=movie.title,
		director=movie.director,
		poster=movie.poster,
		year=movie.year,
		rating=movie.rating,
	)


# FastAPI startup hook to load the catalog once
@app.on_event("startup")
async def startup_event():
	"""Load the catalog file and log how long it took."""
	global MOVIES, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = get_settings()  # read env configuration
	configure_logging(settings.log_level)  # console sink at the configured level
	logger.info(f"[API] Startup: loading catalog from {settings.catalog_path}")  # log intent

	MOVIES = DataLoader().load_movies_from_json(settings.catalog_path)  # read dataset

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(MOVIES)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"catalog_ready": MOVIES is not None,  # True if catalog loaded
		"movies": len(MOVIES or []),  # catalog size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=List[MovieOut])
async def list_movies():
	"""Return the whole catalog in file order."""
	movies = MOVIES or []  # empty until startup finished
	logger.debug(f"[API] /movies served {len(movies)} movies")
	return [to_out(m) for m in movies]


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: int):
	"""Return one movie by id."""
	for m in MOVIES or []:
		if m.id == movie_id:
			return to_out(m)
	logger.warning(f"[API] /movies/{movie_id} not found")  # unknown id
	raise HTTPException(status_code=404, detail="Movie not found")
