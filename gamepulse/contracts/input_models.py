"""
Modeles de validation des donnees entrantes
Profils d'equipe, resultats de matchs et requetes de prediction
"""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TeamProfile(BaseModel):
    """Profil statistique d'une equipe (immutable)"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    wins: int = Field(..., ge=0, description="Victoires")
    losses: int = Field(..., ge=0, description="Defaites")
    ppg: float = Field(..., ge=0, description="Points marques par match")
    papg: float = Field(..., ge=0, description="Points encaisses par match")
    streak: int = Field(default=0, description="Serie en cours (+ victoires, - defaites)")
    strength: float = Field(..., description="Force composite (echelle ~0-100)")

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"


class GameResult(BaseModel):
    """
    Match joue (ou programme) tel que renvoye par l'API CFBD
    Accepte les noms de champs snake_case et camelCase
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    home_team: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("home_team", "homeTeam")
    )
    away_team: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("away_team", "awayTeam")
    )
    home_points: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("home_points", "homePoints")
    )
    away_points: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("away_points", "awayPoints")
    )
    start_date: datetime = Field(
        ..., validation_alias=AliasChoices("start_date", "startDate")
    )

    @property
    def is_complete(self) -> bool:
        """True si les deux scores finaux sont connus"""
        return self.home_points is not None and self.away_points is not None

    def involves(self, team: str) -> bool:
        return team == self.home_team or team == self.away_team


class PredictionRequest(BaseModel):
    """Requete de prediction pour une affiche"""
    team_a: str = Field(..., min_length=1, description="Premiere equipe")
    team_b: str = Field(..., min_length=1, description="Seconde equipe")

    @field_validator('team_a', 'team_b')
    @classmethod
    def validate_team_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Team name cannot be empty")
        return v.strip()
