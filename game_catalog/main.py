"""FastAPI entry point for the Game Catalog API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings
from .models import CreateGameRequest, Game, UpdateGameRequest
from .store import GameNotFoundError, GameStore

settings = Settings.from_env()

logger = logging.getLogger(__name__)
logging.getLogger("game_catalog").setLevel(settings.log_level)

app = FastAPI(
    title="Game Catalog",
    description="A small in-memory catalog of games with list, lookup and create endpoints.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

games_router = APIRouter(prefix="/games", tags=["games"])
game_store = GameStore.seeded() if settings.seed_catalog else GameStore()


@app.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello World!"


@app.get("/fechcha", response_class=PlainTextResponse)
async def fechcha() -> str:
    return "This is fechcha route"


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@games_router.get("", response_model=list[Game])
async def list_games() -> list[Game]:
    return game_store.list_all()


@games_router.get("/{game_id}", response_model=Game)
async def get_game(game_id: int) -> Game:
    game = game_store.find_by_id(game_id)
    if game is None:
        logger.info("Lookup for unknown game id=%s", game_id)
        raise HTTPException(status_code=404, detail="Game not found.")
    logger.debug("Lookup for game id=%s matched '%s'", game_id, game.name)
    return game


@games_router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game(
    payload: CreateGameRequest, request: Request, response: Response
) -> Game:
    game = game_store.create(payload)
    response.headers["Location"] = str(request.url_for("get_game", game_id=game.id))
    return game


@games_router.put("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_game(game_id: int, payload: UpdateGameRequest) -> Response:
    try:
        game_store.update(game_id, payload)
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Game not found.") from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app.include_router(games_router)
