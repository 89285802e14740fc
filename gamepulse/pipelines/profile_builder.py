"""
Construction des profils d'equipe a partir des donnees brutes API
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from gamepulse.config.settings import ProfileDefaults
from gamepulse.contracts.input_models import GameResult, TeamProfile
from gamepulse.scoring.streak import compute_streak

from .cfbd_client import CollegeFootballDataClient

logger = logging.getLogger(__name__)


def derive_strength(
    wins: int,
    losses: int,
    ppg: float,
    papg: float,
    minimum: float = 70,
    maximum: float = 100
) -> int:
    """
    Force composite d'une equipe (bornee)

    Formule: bilan 40%, offense 30% (base 40 ppg), defense 30% (base 35 papg)
    """
    win_pct = wins / (wins + losses)
    raw = win_pct * 40 + (ppg / 40) * 30 + (1 - papg / 35) * 30
    strength = int(math.floor(raw + 0.5))
    return int(max(minimum, min(maximum, strength)))


def _parse_stat(value: Any, default: float) -> float:
    """Valeur numerique d'une stat, defaut si absente, invalide, nulle ou negative"""
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(parsed) or parsed <= 0:
        return default
    return parsed


def parse_games(raw_games: Optional[List[Dict[str, Any]]]) -> List[GameResult]:
    """Convertit les matchs bruts; les entrees invalides sont ignorees"""
    if not raw_games:
        return []

    games = []
    skipped = 0
    for raw in raw_games:
        try:
            games.append(GameResult.model_validate(raw))
        except ValidationError:
            skipped += 1

    if skipped:
        logger.warning(f"{skipped} matchs ignores (format invalide)")
    return games


def _record_for(record: Optional[Dict[str, Any]], defaults: ProfileDefaults) -> tuple:
    """Bilan (wins, losses); defauts si absent ou sans match joue"""
    if not record:
        return defaults.wins, defaults.losses

    total = record.get("total") or {}
    wins = total.get("wins")
    losses = total.get("losses")

    if wins is None or losses is None or wins + losses == 0:
        return defaults.wins, defaults.losses
    return int(wins), int(losses)


def assemble_profiles(
    teams: Optional[List[Dict[str, Any]]],
    stats: Optional[List[Dict[str, Any]]],
    records: Optional[List[Dict[str, Any]]],
    games: Optional[List[Dict[str, Any]]],
    defaults: ProfileDefaults
) -> Optional[Dict[str, TeamProfile]]:
    """
    Assemble les profils a partir des quatre jeux de donnees

    Args:
        teams: Liste d'equipes (obligatoire)
        stats: Stats de saison (statName/statValue par equipe)
        records: Bilans par equipe
        games: Matchs de la saison
        defaults: Valeurs par defaut pour les donnees manquantes

    Returns:
        Table nom -> profil, ou None sans liste d'equipes
    """
    if not teams:
        logger.warning("Aucune equipe disponible depuis les API")
        return None

    stats_by_team: Dict[str, List[Dict[str, Any]]] = {}
    for stat in stats or []:
        stats_by_team.setdefault(stat.get("team"), []).append(stat)

    records_by_team = {r.get("team"): r for r in records or []}
    parsed_games = parse_games(games)

    profiles: Dict[str, TeamProfile] = {}
    for team in teams:
        name = team.get("school") or team.get("strTeam")
        if not name:
            continue

        team_stats = {s.get("statName"): s.get("statValue") for s in stats_by_team.get(name, [])}
        ppg = _parse_stat(team_stats.get("pointsPerGame"), defaults.ppg)
        papg = _parse_stat(team_stats.get("pointsAllowedPerGame"), defaults.papg)

        streak = compute_streak(name, parsed_games) if parsed_games else 0

        try:
            wins, losses = _record_for(records_by_team.get(name), defaults)
            profiles[name] = TeamProfile(
                wins=wins,
                losses=losses,
                ppg=round(ppg, 1),
                papg=round(papg, 1),
                streak=streak,
                strength=derive_strength(
                    wins, losses, ppg, papg,
                    minimum=defaults.strength_min,
                    maximum=defaults.strength_max
                )
            )
        except (ValidationError, ValueError, TypeError, OverflowError, ZeroDivisionError) as e:
            logger.warning(f"Profil ignore pour {name}: {e}")

    logger.info(f"Profils construits pour {len(profiles)} equipes depuis les API")
    return profiles


def build_profiles(client: CollegeFootballDataClient) -> Optional[Dict[str, TeamProfile]]:
    """
    Recupere les donnees (en parallele) et construit les profils

    Returns:
        Table nom -> profil, ou None si la liste d'equipes est indisponible
    """
    logger.info(f"[{client.trace_id}] Recuperation des donnees equipes depuis les API")

    with ThreadPoolExecutor(max_workers=client.settings.http.max_workers) as executor:
        teams_future = executor.submit(client.get_teams)
        stats_future = executor.submit(client.get_team_stats)
        records_future = executor.submit(client.get_team_records)
        games_future = executor.submit(client.get_games)

        teams = teams_future.result()
        stats = stats_future.result()
        records = records_future.result()
        games = games_future.result()

    return assemble_profiles(teams, stats, records, games, client.settings.profile_defaults)
