"""
Modeles de sortie du moteur de prediction et du chargement des profils
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .input_models import TeamProfile


class DataSource(str, Enum):
    """Origine des profils actuellement servis"""
    API = "api"
    STATIC = "static"


class PredictionResult(BaseModel):
    """Resultat du moteur pour une affiche A vs B"""
    model_config = ConfigDict(frozen=True)

    score_a: int = Field(..., ge=7)
    score_b: int = Field(..., ge=7)
    win_probability_a: float = Field(..., ge=0, le=100)
    win_probability_b: float = Field(..., ge=0, le=100)
    rating_a: float
    rating_b: float

    @computed_field
    @property
    def margin(self) -> int:
        """Ecart de points entre les deux scores projetes"""
        return abs(self.score_a - self.score_b)


class MatchupAnalysis(BaseModel):
    """Analyse lisible d'une prediction"""
    predicted_winner: str
    winner_probability: str
    margin: int
    team_a_record: str
    team_b_record: str
    team_a_streak: str
    team_b_streak: str


class PredictionResponse(BaseModel):
    """Reponse complete d'une prediction"""
    team_a: str
    team_b: str
    profile_a: TeamProfile
    profile_b: TeamProfile
    result: PredictionResult
    analysis: MatchupAnalysis
    data_source: DataSource
    trace_id: str
    predicted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LoadReport(BaseModel):
    """Resultat d'un chargement des profils (distant ou fallback statique)"""
    status: str = Field(..., pattern=r'^(success|fallback)$')
    source: DataSource
    trace_id: str
    teams_count: int = Field(default=0, ge=0)
    remote_teams_count: int = Field(default=0, ge=0)
    loaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    error_cause: Optional[str] = Field(default=None, description="Cause explicite du fallback")
    error_summary: Optional[Dict[str, Any]] = None
    events: List[Dict[str, Any]] = Field(default_factory=list)


class DataSourceInfo(BaseModel):
    """Etat courant de la source de donnees"""
    source: DataSource
    total_teams: int
    load_error: Optional[str] = None
    error_summary: Optional[Dict[str, Any]] = None
    last_refreshed_at: Optional[datetime] = None
