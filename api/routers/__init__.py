"""
Router package for the Hunter System API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- profile: Authenticated hunter and profile updates
- workouts: Workout log and progression rewards
- quests: Quest generation and completion
- system: Chat with The System
- meals: Nutrition log
- leaderboard: Top hunters by XP
- stats: Dashboard statistics and training intensity
"""

from api.routers.health import router as health_router
from api.routers.profile import router as profile_router
from api.routers.workouts import router as workouts_router
from api.routers.quests import router as quests_router
from api.routers.system import router as system_router
from api.routers.meals import router as meals_router
from api.routers.leaderboard import router as leaderboard_router
from api.routers.stats import router as stats_router

__all__ = [
    "health_router",
    "profile_router",
    "workouts_router",
    "quests_router",
    "system_router",
    "meals_router",
    "leaderboard_router",
    "stats_router",
]
