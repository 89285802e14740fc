"""
Mise en forme des predictions pour l'affichage
"""
from gamepulse.contracts.input_models import TeamProfile
from gamepulse.contracts.output_models import MatchupAnalysis, PredictionResult

TIE_LABEL = "Neither (Tie)"
TIE_PROBABILITY = "50.0"


def format_streak(streak: int) -> str:
    if streak > 0:
        return f"{streak} game win streak 🔥"
    if streak < 0:
        return f"{abs(streak)} game losing streak 📉"
    return "No active streak"


def format_record(profile: TeamProfile) -> str:
    """Ex: '10-2 (35.2 PPG, 18.5 PAPG)'"""
    return f"{profile.wins}-{profile.losses} ({profile.ppg:.1f} PPG, {profile.papg:.1f} PAPG)"


def build_analysis(
    team_a: str,
    team_b: str,
    profile_a: TeamProfile,
    profile_b: TeamProfile,
    result: PredictionResult
) -> MatchupAnalysis:
    """
    Construit l'analyse d'une prediction

    Le vainqueur affiche est celui du score projete; la probabilite
    affichee est celle du rating de ce vainqueur.
    """
    if result.score_a > result.score_b:
        winner, probability = team_a, f"{result.win_probability_a:.1f}"
    elif result.score_b > result.score_a:
        winner, probability = team_b, f"{result.win_probability_b:.1f}"
    else:
        winner, probability = TIE_LABEL, TIE_PROBABILITY

    return MatchupAnalysis(
        predicted_winner=winner,
        winner_probability=probability,
        margin=result.margin,
        team_a_record=format_record(profile_a),
        team_b_record=format_record(profile_b),
        team_a_streak=format_streak(profile_a.streak),
        team_b_streak=format_streak(profile_b.streak)
    )


def render_text(team_a: str, team_b: str, result: PredictionResult, analysis: MatchupAnalysis) -> str:
    """Rendu texte brut d'une prediction"""
    lines = [
        f"{team_a} {result.score_a} - {result.score_b} {team_b}",
        f"Predicted Winner: {analysis.predicted_winner} ({analysis.winner_probability}% win probability)",
        f"Margin of Victory: {analysis.margin} points",
        f"{team_a} Record: {analysis.team_a_record}",
        f"{team_b} Record: {analysis.team_b_record}",
        f"{team_a} Current Streak: {analysis.team_a_streak}",
        f"{team_b} Current Streak: {analysis.team_b_streak}",
    ]
    return "\n".join(lines)
