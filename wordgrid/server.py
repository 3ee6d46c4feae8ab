import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordgrid.settings import Settings, settings as default_settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")


class SolveRequest(BaseModel):
    board: str
    size: int | None = None


def create_app(cfg: Settings | None = None) -> FastAPI:
    from contextlib import asynccontextmanager

    cfg = cfg or default_settings

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        from wordgrid.trie import load_trie

        logger.info("Loading dictionary from %s (max_words=%d)", cfg.DICTIONARY_PATH, cfg.MAX_WORDS)
        application.state.trie = load_trie(
            str(cfg.DICTIONARY_PATH), cfg.MAX_WORDS, cfg.MIN_WORD_LENGTH, cfg.LOWERCASE_WORDS
        )
        logger.info("Trie loaded")
        yield
        application.state.trie = None

    application = FastAPI(title="Word Grid", lifespan=lifespan)
    application.state.trie = None

    @application.get("/health")
    async def health():
        trie = application.state.trie
        return {"status": "ok", "trie_loaded": trie is not None, "word_count": len(trie) if trie else 0}

    @application.get("/autocomplete")
    async def autocomplete(q: str, limit: int | None = Query(None, ge=0)):
        if limit is None:
            limit = cfg.AUTOCOMPLETE_LIMIT
        results = application.state.trie.autocomplete(q, limit)
        return {"query": q, "results": results}

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordgrid.errors import InvalidDimensions
        from wordgrid.grid import Grid
        from wordgrid.metrics import StageTimer
        from wordgrid.solver import BoardSearcher, rank_words

        size = body.size if body.size is not None else cfg.BOARD_SIZE
        timer = StageTimer()

        with timer.stage("grid"):
            try:
                grid = Grid.from_data(body.board, size)
            except InvalidDimensions as e:
                raise HTTPException(400, str(e))

        logger.info("Board %dx%d: %s", size, size, " / ".join(grid.rows()))

        searcher = BoardSearcher(grid, application.state.trie)
        with timer.stage("solve") as st:
            found = searcher.solve()
            st.items = len(found)

        words = rank_words(found, cfg.MAX_RESULTS)
        logger.info("Found %d words (returning top %d)", len(found), len(words))

        with timer.stage("trace") as st:
            paths = {w: [list(p) for p in searcher.trace(w)] for w in words}
            st.items = len(paths)

        if cfg.DEBUG:
            logger.info("Timings: %s, counts: %s", timer.summary(), timer.counts())

        return JSONResponse({
            "size": size,
            "board": grid.rows(),
            "words": words,
            "word_count": len(found),
            "paths": paths,
            "stage_timings": timer.summary(),
            "stage_counts": timer.counts(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(cfg)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(cfg, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(cfg), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(cfg)})

    return application


app = create_app()
