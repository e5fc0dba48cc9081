"""Tests for commands.py: key and pointer translation into game commands."""

import pygame

from lane_runner.controls import Command, commands_from_keys, command_from_pointer


class TestKeys:
    def test_arrow_and_letter_keys(self):
        keys = [pygame.K_LEFT, pygame.K_d, pygame.K_a, pygame.K_RIGHT]
        assert commands_from_keys(keys, game_over=False) == [
            Command.SHIFT_LEFT, Command.SHIFT_RIGHT, Command.SHIFT_LEFT, Command.SHIFT_RIGHT]

    def test_space_ignored_while_running(self):
        assert commands_from_keys([pygame.K_SPACE], game_over=False) == []

    def test_only_restart_after_game_over(self):
        """結束畫面只接受 SPACE"""
        keys = [pygame.K_LEFT, pygame.K_SPACE, pygame.K_RIGHT]
        assert commands_from_keys(keys, game_over=True) == [Command.RESTART]

    def test_unrelated_keys(self):
        assert commands_from_keys([pygame.K_z, pygame.K_UP], game_over=False) == []


class TestPointer:
    def test_left_of_car(self):
        assert command_from_pointer(50, 180, game_over=False) is Command.SHIFT_LEFT

    def test_right_of_or_on_car(self):
        assert command_from_pointer(180, 180, game_over=False) is Command.SHIFT_RIGHT
        assert command_from_pointer(300, 180, game_over=False) is Command.SHIFT_RIGHT

    def test_any_press_restarts_after_game_over(self):
        assert command_from_pointer(10, 180, game_over=True) is Command.RESTART

    def test_no_pointer(self):
        assert command_from_pointer(None, 180, game_over=False) is None
