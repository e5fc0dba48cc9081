"""
輸入轉換：把按鍵與點擊轉成遊戲指令
"""

from typing import Iterable, List, Optional

import pygame

from ..core.game_state import Command


LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
RESTART_KEYS = (pygame.K_SPACE,)


def commands_from_keys(keys: Iterable[int], game_over: bool) -> List[Command]:
    """按鍵轉指令；結束畫面只接受重新開始"""
    commands = []
    for key in keys:
        if game_over:
            if key in RESTART_KEYS:
                commands.append(Command.RESTART)
        elif key in LEFT_KEYS:
            commands.append(Command.SHIFT_LEFT)
        elif key in RIGHT_KEYS:
            commands.append(Command.SHIFT_RIGHT)
    return commands


def command_from_pointer(pointer_x: Optional[float], car_x: float,
                         game_over: bool) -> Optional[Command]:
    """點擊轉指令：點在車輛左側往左，否則往右；結束畫面點擊即重新開始"""
    if pointer_x is None:
        return None
    if game_over:
        return Command.RESTART
    return Command.SHIFT_LEFT if pointer_x < car_x else Command.SHIFT_RIGHT
