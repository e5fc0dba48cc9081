import gymnasium as gym
from gymnasium import spaces
import numpy as np

from ..config.constants import REFERENCE_FRAME_MS, THEME_COLORS, HUD_SCORE_Y
from ..config.game_config import GameConfig
from ..core import RunSession
from ..storage import MemoryHighScoreStore


class LaneRunnerEnv(gym.Env):
    """
    單人車道閃避：
      - 動作 {0=左, 1=不動, 2=右}
      - 觀測 2 + max_lanes 維: (car_lane, speed, 各車道最近障礙物的接近度)
        car_lane ∈ [0,1]；speed 以 base_speed 正規化後截斷於 [0, 10]；
        接近度 ∈ [0,1]，1 表示貼近車頭，0 表示無障礙物或車道未開放
      - 每閃過一台車 / 吃到一枚金幣 +1，撞車 -1 並結束
      - 內部時鐘每步前進 frame_ms 毫秒
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self,
                 config: GameConfig = None,
                 frame_ms=REFERENCE_FRAME_MS,
                 max_steps=20_000,
                 crash_penalty=1.0,
                 enable_render=False
                 ):
        super().__init__()
        self.config = (config or GameConfig()).validate()
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.crash_penalty = crash_penalty
        self.enable_render = enable_render

        self.max_lanes = max(self.config.lane_count, self.config.escalated_lane_count)
        self.action_space = spaces.Discrete(3)

        low = np.zeros(2 + self.max_lanes, dtype=np.float32)
        high = np.ones(2 + self.max_lanes, dtype=np.float32)
        high[1] = 10.0
        self.observation_space = spaces.Box(low, high, dtype=np.float32)

        self.session = None
        self.now = 0.0
        self.steps = 0
        self.renderer = None

        if self.enable_render:
            from ..rendering import PygameRenderer
            self.renderer = PygameRenderer()
            self.renderer.init(int(self.config.canvas_width), int(self.config.canvas_height),
                               "Lane Runner Env")

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        # 會話共用 gymnasium 的 np_random，確保 seed 可重現
        self.session = RunSession(self.config, store=MemoryHighScoreStore(),
                                  rng=self.np_random, clock=lambda: self.now)
        self.now = 0.0
        self.steps = 0
        self.session.start(self.now)
        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.session.is_game_over:
            # 已結束的回合不再推進
            return self._get_obs(), 0.0, True, False, self._get_info()

        if action == 0:
            self.session.shift_lane(-1)
        elif action == 2:
            self.session.shift_lane(1)

        before = self.session.state.score
        self.now += self.frame_ms
        self.steps += 1
        result = self.session.step(self.now)

        reward = float(self.session.state.score - before)
        terminated = result.collided
        if terminated:
            reward -= self.crash_penalty
        truncated = not terminated and self.steps >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _get_obs(self):
        state = self.session.state
        car = state.car
        obs = np.zeros(2 + self.max_lanes, dtype=np.float32)
        obs[0] = car.lane / max(1, state.lane_count - 1)
        base = self.config.base_speed if self.config.base_speed > 0 else 1.0
        obs[1] = min(10.0, state.speed / base)

        # 只看車頭前方尚未計分的障礙物
        span = car.y + self.config.obstacle_height
        for obstacle in state.obstacles:
            if obstacle.scored or obstacle.lane >= self.max_lanes:
                continue
            distance = car.top - (obstacle.y + obstacle.height / 2)
            proximity = 1.0 - np.clip(distance / span, 0.0, 1.0)
            obs[2 + obstacle.lane] = max(obs[2 + obstacle.lane], proximity)
        return obs

    def _get_info(self):
        state = self.session.state
        return {
            "score": state.score,
            "speed": state.speed,
            "lane_count": state.lane_count,
            "obstacles_passed": state.obstacles_passed,
            "coins_collected": state.coins_collected,
        }

    def render(self):
        if not self.enable_render:
            return
        events = self.renderer.handle_events()
        if events['quit']:
            self.close()
            return

        snapshot = self.session.snapshot()
        self.renderer.draw_road(snapshot['lanes'])
        for coin in snapshot['coins']:
            self.renderer.draw_coin(coin['x'], coin['y'], coin['radius'])
        for obstacle in snapshot['obstacles']:
            self.renderer.draw_rect_entity(obstacle['x'], obstacle['y'], obstacle['width'],
                                           obstacle['height'], obstacle['color'])
        car = snapshot['car']
        self.renderer.draw_rect_entity(car['x'], car['y'], car['width'], car['height'],
                                       THEME_COLORS['car'])
        self.renderer.draw_text(f"Score: {snapshot['score']}", int(self.config.canvas_width) // 2,
                                HUD_SCORE_Y, size='small', center=True)
        self.renderer.present()
        self.renderer.tick(1000.0 / self.frame_ms)

    def close(self):
        if self.renderer:
            self.renderer.cleanup()
            self.renderer = None
            self.enable_render = False
