"""核心遊戲系統"""

from .entities import Car, Obstacle, Coin
from .game_state import RunState, RunPhase, Command
from .geometry import CollisionDetector
from .lanes import compute_lanes, clamp_lane, relayout
from .spawner import EntitySpawner
from .difficulty import DifficultyController
from .simulation import Simulation, StepResult
from .session import RunSession

__all__ = [
    'Car', 'Obstacle', 'Coin',
    'RunState', 'RunPhase', 'Command',
    'CollisionDetector',
    'compute_lanes', 'clamp_lane', 'relayout',
    'EntitySpawner', 'DifficultyController',
    'Simulation', 'StepResult', 'RunSession',
]
