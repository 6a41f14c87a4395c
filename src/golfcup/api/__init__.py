"""REST API exposing the scoring engine over stored documents."""

from __future__ import annotations

import logging
from dataclasses import asdict, replace

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from golfcup.api.schemas import CourseResponse, FactsResponse, ThresholdsResponse
from golfcup.config import COURSE_PAR, HOLES_PER_ROUND, FactThresholds, stroke_indices
from golfcup.models import Game, Tournament, TournamentSnapshot
from golfcup.report import export_progress_csv
from golfcup.scoring import recompute_game, recompute_tournament
from golfcup.stats import generate_facts


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="golfcup scoring")
    app.state.thresholds = FactThresholds.from_env()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/course", response_model=CourseResponse)
    async def course() -> CourseResponse:
        return CourseResponse(
            holes=HOLES_PER_ROUND,
            par=COURSE_PAR,
            stroke_indices=list(stroke_indices()),
        )

    @app.get("/thresholds", response_model=ThresholdsResponse)
    async def thresholds() -> ThresholdsResponse:
        return ThresholdsResponse(**asdict(app.state.thresholds))

    @app.post("/games/recompute", response_model=Game)
    async def recompute_single_game(game: Game) -> Game:
        return recompute_game(game)

    @app.post("/tournaments/recompute", response_model=TournamentSnapshot)
    async def recompute_snapshot(snapshot: TournamentSnapshot) -> TournamentSnapshot:
        if snapshot.tournament is None:
            raise HTTPException(status_code=400, detail="snapshot has no tournament record")
        update = recompute_tournament(snapshot.tournament, snapshot.games)
        logger.info("Recomputed tournament %s via API", update.tournament.id)
        return snapshot.model_copy(update={"tournament": update.tournament, "games": update.games})

    @app.post("/tournaments/progress.csv")
    async def progress_csv(tournament: Tournament) -> Response:
        return Response(
            content=export_progress_csv(tournament),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{tournament.id}-progress.csv"'},
        )

    @app.post("/facts", response_model=FactsResponse)
    async def facts(
        snapshot: TournamentSnapshot,
        blow_up_strokes: int | None = Query(None, ge=1),
        grind_streak: int | None = Query(None, ge=1),
    ) -> FactsResponse:
        resolved: FactThresholds = app.state.thresholds
        if blow_up_strokes is not None:
            resolved = replace(resolved, blow_up_strokes=blow_up_strokes)
        if grind_streak is not None:
            resolved = replace(resolved, grind_streak=grind_streak)
        # Detectors read outcomes and points, so derive them from the raw scores first.
        snapshot = snapshot.model_copy(
            update={"games": [recompute_game(game) for game in snapshot.games]}
        )
        return FactsResponse(facts=generate_facts(snapshot, resolved))

    return app
