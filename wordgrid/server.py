import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from wordgrid.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")

# Populated at startup
_dictionary = None


def _load_dictionary():
    global _dictionary
    from wordgrid.loader import load_word_list
    logger.info("Loading word list from %s (min_length=%d)", settings.WORD_LIST_PATH, settings.MIN_WORD_LENGTH)
    _dictionary = load_word_list(settings.WORD_LIST_PATH, settings.MIN_WORD_LENGTH)


def _board_from_body(body):
    from wordgrid.grid import Grid
    from wordgrid.loader import LoadError, parse_board

    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")

    if "board_text" in body:
        if not isinstance(body["board_text"], str):
            raise HTTPException(400, "board_text must be a string")
        try:
            return parse_board(body["board_text"])
        except LoadError as e:
            raise HTTPException(400, f"Invalid board: {e}")

    rows = body.get("board")
    if not isinstance(rows, list) or not rows:
        raise HTTPException(400, "Missing board: send 'board' (list of rows) or 'board_text'")
    for y, row in enumerate(rows):
        if not isinstance(row, list):
            raise HTTPException(400, f"Row {y} is not a list")
        for x, letter in enumerate(row):
            if not isinstance(letter, str) or not letter.strip():
                raise HTTPException(400, f"Invalid cell at row {y}, column {x}")
    return Grid([[letter.strip() for letter in row] for row in rows])


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        _load_dictionary()
        logger.info("Word list loaded (%d words)", len(_dictionary))
        yield

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "words_loaded": len(_dictionary) if _dictionary is not None else 0}

    @application.post("/solve")
    async def solve(request: Request):
        from wordgrid.metrics import StageTimer
        from wordgrid.scoring import sort_by_length, total_points
        from wordgrid.solver import find_words, word_positions

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body is not valid JSON")

        timer = StageTimer()

        with timer.stage("parse", "cells") as st:
            grid = _board_from_body(body)
            st.count = len(grid)

        board_str = " / ".join(" ".join(row) for row in grid.letters())
        logger.info("Board %d rows, %d cells: %s", grid.height, len(grid), board_str)

        with timer.stage("solve", "words") as st:
            # flags are per request, the prefix index is shared
            found = find_words(
                _dictionary.fresh(), grid,
                parallel=settings.PARALLEL,
                max_workers=settings.MAX_WORKERS,
            )
            st.count = len(found)

        all_words = sort_by_length(found)
        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        with timer.stage("positions", "words") as st:
            positions = word_positions(grid, words)
            st.count = len(positions)

        return JSONResponse({
            "board": grid.letters(),
            "words": words,
            "word_count": len(all_words),
            "points": total_points(all_words),
            "positions": {w: [p.x, p.y] for w, p in positions.items()},
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
            "stage_counts": timer.counts,
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        min_length = settings.MIN_WORD_LENGTH
        errors = update_settings(settings, **body)
        if settings.MIN_WORD_LENGTH != min_length:
            try:
                _load_dictionary()
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to reload word list from %s: %s", settings.WORD_LIST_PATH, e)
                # the loaded words still match the old length
                settings.MIN_WORD_LENGTH = min_length
                errors["MIN_WORD_LENGTH"] = f"could not reload word list: {e}"
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
