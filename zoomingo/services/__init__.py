from zoomingo.services.games import check_win, create_game, resume_game, select_scenario
from zoomingo.services.seeding import init_db, seed_scenarios

__all__ = ["create_game", "select_scenario", "check_win", "resume_game", "init_db", "seed_scenarios"]
