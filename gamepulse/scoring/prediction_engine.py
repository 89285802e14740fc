"""
Moteur de prediction de score
Score projete, probabilite de victoire et rating pour une affiche A vs B
"""
import math

from gamepulse.contracts.input_models import TeamProfile
from gamepulse.contracts.output_models import PredictionResult
from gamepulse.errors import DegenerateRatingsError, InvalidProfileError

from .rating import compute_rating


def _round_half_up(value: float) -> int:
    """Arrondi a l'entier le plus proche, .5 vers le haut"""
    return int(math.floor(value + 0.5))


class PredictionEngine:
    """
    Moteur heuristique a poids fixes
    Base sur: offense, matchup defensif, ecart de rating, momentum
    """

    LEAGUE_AVG_PAPG = 22.0
    DEFENSIVE_MATCHUP_WEIGHT = 0.3
    RATING_DIFF_WEIGHT = 0.15
    STREAK_IMPACT_PER_GAME = 1.5
    MAX_STREAK_IMPACT = 4.5
    MIN_SCORE = 7

    def streak_impact(self, streak: int) -> float:
        """Bonus/malus de momentum, borne a +/- MAX_STREAK_IMPACT"""
        if streak == 0:
            return 0.0
        return max(-self.MAX_STREAK_IMPACT, min(self.MAX_STREAK_IMPACT, streak * self.STREAK_IMPACT_PER_GAME))

    def defensive_modifier(self, opponent: TeamProfile) -> float:
        """Ecart relatif de la defense adverse par rapport a la moyenne"""
        return (opponent.papg - self.LEAGUE_AVG_PAPG) / self.LEAGUE_AVG_PAPG

    def predict(self, team_a: TeamProfile, team_b: TeamProfile) -> PredictionResult:
        """
        Predit le score d'une affiche

        Args:
            team_a: Profil equipe A
            team_b: Profil equipe B

        Returns:
            PredictionResult avec scores, probabilites et ratings

        Raises:
            InvalidProfileError: si un profil n'a aucun match joue
            DegenerateRatingsError: si la probabilite ne peut etre calculee
        """
        for label, profile in (("team_a", team_a), ("team_b", team_b)):
            if profile.wins + profile.losses == 0:
                raise InvalidProfileError(
                    f"{label} has no games played (wins + losses == 0)", team_name=label
                )
            for field in ("ppg", "papg", "strength"):
                if not math.isfinite(getattr(profile, field)):
                    raise InvalidProfileError(
                        f"{label} has a non-finite {field}: {getattr(profile, field)}", team_name=label
                    )

        rating_a = compute_rating(team_a)
        rating_b = compute_rating(team_b)

        # Base: offense propre
        score_a = team_a.ppg
        score_b = team_b.ppg

        # Matchup defensif
        score_a += score_a * self.defensive_modifier(team_b) * self.DEFENSIVE_MATCHUP_WEIGHT
        score_b += score_b * self.defensive_modifier(team_a) * self.DEFENSIVE_MATCHUP_WEIGHT

        # Ecart de force (somme nulle)
        rating_diff = rating_a - rating_b
        score_a += rating_diff * self.RATING_DIFF_WEIGHT
        score_b -= rating_diff * self.RATING_DIFF_WEIGHT

        # Momentum (independant pour chaque equipe)
        score_a += self.streak_impact(team_a.streak)
        score_b += self.streak_impact(team_b.streak)

        final_a = max(self.MIN_SCORE, _round_half_up(score_a))
        final_b = max(self.MIN_SCORE, _round_half_up(score_b))

        # Probabilite issue des ratings, pas des scores ajustes
        total_rating = rating_a + rating_b
        if total_rating == 0 or rating_a < 0 or rating_b < 0:
            raise DegenerateRatingsError(
                f"Cannot derive win probability from ratings {rating_a:.2f} / {rating_b:.2f}"
            )

        probability_a = round(rating_a / total_rating * 100, 1)
        probability_b = round(100 - probability_a, 1)

        return PredictionResult(
            score_a=final_a,
            score_b=final_b,
            win_probability_a=probability_a,
            win_probability_b=probability_b,
            rating_a=rating_a,
            rating_b=rating_b
        )


_default_engine = PredictionEngine()


def predict(team_a: TeamProfile, team_b: TeamProfile) -> PredictionResult:
    """Prediction avec le moteur par defaut"""
    return _default_engine.predict(team_a, team_b)
