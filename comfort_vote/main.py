import logging
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from .config import CATEGORIES, CORS_METHODS, CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from .errors import InvalidCategory
from .models import Health, VoteAck, VoteIn
from .state import VoteStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def get_store(request: Request) -> VoteStore:
    return request.app.state.store


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: VoteStore = app.state.store
    logger.info("Vote server starting, categories=%s", list(store.categories))
    yield
    logger.info("Vote server shutting down, final counts=%s", store.snapshot())


def create_app(store: Optional[VoteStore] = None) -> FastAPI:
    app = FastAPI(title="Comfort Vote", lifespan=lifespan)
    app.state.store = store if store is not None else VoteStore(CATEGORIES)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=CORS_METHODS,
    )

    # plain def: FastAPI runs these in its threadpool, the store lock serializes them
    @app.post("/vote", response_model=VoteAck)
    def vote(v: VoteIn, store: VoteStore = Depends(get_store)):
        try:
            store.cast_vote(v.user_id, v.vote)
        except InvalidCategory as e:
            logger.warning("Rejected vote: user_id=%s, vote=%s", v.user_id, e.category)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid vote option",
            )
        return VoteAck()

    @app.get("/results")
    def results(store: VoteStore = Depends(get_store)) -> Dict[str, int]:
        return store.snapshot()

    @app.get("/health", response_model=Health)
    def health(store: VoteStore = Depends(get_store)):
        return Health(categories=list(store.categories), voters=store.voter_count())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("comfort_vote.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
