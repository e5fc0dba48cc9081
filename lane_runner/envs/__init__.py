"""gymnasium 環境"""

from .runner_env import LaneRunnerEnv

__all__ = ['LaneRunnerEnv']
