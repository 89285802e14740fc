"""
Pipeline de prediction
Orchestre lecture des profils, moteur de prediction et analyse
"""
import logging
import uuid
from typing import Optional

from gamepulse.contracts.output_models import PredictionResponse
from gamepulse.errors import InvalidMatchupError, MissingProfileError
from gamepulse.presentation.analysis import build_analysis
from gamepulse.scoring.prediction_engine import PredictionEngine
from gamepulse.store.profile_store import ProfileStore

logger = logging.getLogger(__name__)


class PredictionPipeline:
    """
    Pipeline de prediction pour une affiche
    Travaille sur un snapshot du store pris au moment de l'appel
    """

    def __init__(self, store: ProfileStore, engine: Optional[PredictionEngine] = None):
        self.store = store
        self.engine = engine or PredictionEngine()

    def predict_matchup(
        self,
        team_a: str,
        team_b: str,
        trace_id: Optional[str] = None
    ) -> PredictionResponse:
        """
        Predit le score d'une affiche

        Args:
            team_a: Nom de la premiere equipe
            team_b: Nom de la seconde equipe
            trace_id: ID de tracabilite

        Returns:
            PredictionResponse complete

        Raises:
            InvalidMatchupError: equipe manquante ou identique
            MissingProfileError: equipe inconnue du store
            InvalidProfileError, DegenerateRatingsError: remontees du moteur
        """
        trace_id = trace_id or str(uuid.uuid4())

        if not team_a or not team_b:
            raise InvalidMatchupError("Please select both teams")

        if team_a == team_b:
            raise InvalidMatchupError("Please select two different teams")

        snapshot, data_source = self.store.snapshot_with_source()

        for name in (team_a, team_b):
            if name not in snapshot:
                logger.warning(f"[trace:{trace_id}] Unknown team requested: {name}")
                raise MissingProfileError(name)

        profile_a = snapshot[team_a]
        profile_b = snapshot[team_b]

        result = self.engine.predict(profile_a, profile_b)
        analysis = build_analysis(team_a, team_b, profile_a, profile_b, result)

        logger.info(
            f"[trace:{trace_id}] Prediction {team_a} {result.score_a} - {result.score_b} {team_b} "
            f"({result.win_probability_a}% / {result.win_probability_b}%)"
        )

        return PredictionResponse(
            team_a=team_a,
            team_b=team_b,
            profile_a=profile_a,
            profile_b=profile_b,
            result=result,
            analysis=analysis,
            data_source=data_source,
            trace_id=trace_id
        )
