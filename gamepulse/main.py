"""
FastAPI entrypoint pour le service de prediction
Expose health check, liste des equipes, prediction et refresh des donnees
"""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from gamepulse import __version__
from gamepulse.config import settings as config
from gamepulse.contracts.input_models import PredictionRequest
from gamepulse.contracts.output_models import DataSourceInfo, LoadReport, PredictionResponse
from gamepulse.errors import (
    DegenerateRatingsError,
    InvalidMatchupError,
    InvalidProfileError,
    MissingProfileError,
)
from gamepulse.pipelines.fallback_pipeline import ProfileLoadPipeline
from gamepulse.pipelines.prediction_pipeline import PredictionPipeline
from gamepulse.store.profile_store import ProfileStore
from gamepulse.store.static_profiles import load_static_profiles

# Configuration logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(
    store: Optional[ProfileStore] = None,
    loader: Optional[ProfileLoadPipeline] = None,
    load_on_startup: Optional[bool] = None
) -> FastAPI:
    """
    Construit l'application avec ses collaborateurs injectes

    Args:
        store: Store de profils (table statique par defaut)
        loader: Pipeline de chargement (cree sur le store par defaut)
        load_on_startup: Charger les donnees API au demarrage
    """
    if store is None:
        store = ProfileStore(load_static_profiles())
    if loader is None:
        loader = ProfileLoadPipeline(store)
    if load_on_startup is None:
        load_on_startup = config.SETTINGS.service.load_on_startup

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestion du cycle de vie de l'application"""
        logger.info("GamePulse demarrage...")
        if load_on_startup:
            report = await run_in_threadpool(loader.run)
            logger.info(f"[{report.trace_id}] Donnees chargees: {report.teams_count} equipes ({report.source.value})")
        yield
        logger.info("GamePulse arret...")

    app = FastAPI(
        title="GamePulse Score Predictor",
        description="Prediction de score pour les affiches de football universitaire",
        version=__version__,
        lifespan=lifespan
    )
    app.state.store = store
    app.state.loader = loader
    app.state.predictor = PredictionPipeline(store)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "gamepulse",
            "version": __version__,
            "teams_loaded": len(store)
        }

    @app.get("/teams")
    async def list_teams():
        """Liste triee des equipes disponibles"""
        return {
            "teams": store.team_names(),
            "data_source": store.data_source.value
        }

    @app.get("/teams/{team_name}")
    async def get_team(team_name: str):
        """Profil d'une equipe avec sa fraicheur"""
        try:
            entry = store.entry(team_name)
        except MissingProfileError as e:
            raise HTTPException(status_code=404, detail=str(e))

        return {
            "team": team_name,
            "profile": entry.profile.model_dump(),
            "source": entry.source.value,
            "fetched_at": entry.fetched_at.isoformat()
        }

    @app.post("/predict", response_model=PredictionResponse)
    def predict_matchup(payload: PredictionRequest, request: Request):
        """
        Predit le score d'une affiche

        Args:
            payload: {team_a: str, team_b: str}

        Returns:
            PredictionResponse avec scores, probabilites et analyse
        """
        trace_id = request.headers.get("X-Trace-Id") or str(uuid.uuid4())

        try:
            return app.state.predictor.predict_matchup(payload.team_a, payload.team_b, trace_id=trace_id)
        except MissingProfileError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except (InvalidMatchupError, InvalidProfileError, DegenerateRatingsError) as e:
            logger.warning(f"[{trace_id}] Prediction refusee: {e}")
            raise HTTPException(status_code=422, detail=str(e))

    @app.post("/data/refresh", response_model=LoadReport)
    def refresh_data():
        """Vide le cache et recharge les donnees depuis les API"""
        report = loader.refresh()
        if report.status == "fallback":
            logger.warning(f"[{report.trace_id}] Refresh en fallback: {report.error_cause}")
        return report

    @app.get("/data/source", response_model=DataSourceInfo)
    async def data_source_info():
        """Source des donnees actuellement servies"""
        return DataSourceInfo(
            source=store.data_source,
            total_teams=len(store),
            load_error=store.load_error,
            error_summary=loader.last_report.error_summary if loader.last_report else None,
            last_refreshed_at=store.last_refreshed_at
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.SETTINGS.service.host, port=config.SETTINGS.service.port)
