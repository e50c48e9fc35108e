"""
Tests for the game state machine and its tick loop.
"""

import pytest

from flappy_arcade.config import GameConfig
from flappy_arcade.data_models import GameState, Pipe
from flappy_arcade.errors import SchedulerError
from flappy_arcade.game import FlappyGame, GameObserver

from conftest import run_ticks

MENU, PLAYING, GAME_OVER = GameState.MENU, GameState.PLAYING, GameState.GAME_OVER


def crash(game):
    """Drop the bird onto the ground and let one tick register it."""
    game.ctx.bird.y = game.config.ground_y - game.config.bird_radius - 0.1
    game.ctx.bird.velocity = 0.0
    game.scheduler.tick()


class TestMenu:
    def test_initial_state(self, game, config):
        snap = game.snapshot()
        assert snap.state is MENU
        assert snap.score == 0
        assert snap.pipes == ()
        assert (snap.bird.x, snap.bird.y, snap.bird.radius) == (100, 300, 20)

    def test_ticks_are_noops_in_menu(self, game):
        before = game.snapshot()
        run_ticks(game, 200)
        assert game.snapshot() == before
        assert game.ctx.spawn_timer == 0

    def test_first_input_starts_and_flaps(self, game, config, observer):
        game.on_flap_input()
        assert game.state is PLAYING
        assert game.ctx.bird.velocity == config.jump_strength
        assert observer.transitions == [(MENU, PLAYING)]


class TestPlaying:
    def test_input_flaps_without_state_change(self, game, config):
        game.on_flap_input()
        run_ticks(game, 10)
        assert game.ctx.bird.velocity != config.jump_strength
        game.on_flap_input()
        assert game.state is PLAYING
        assert game.ctx.bird.velocity == config.jump_strength

    def test_last_flap_wins(self, game, config):
        game.on_flap_input()
        game.ctx.bird.velocity = 7.0
        game.on_flap_input()
        game.on_flap_input()
        assert game.ctx.bird.velocity == config.jump_strength

    def test_tick_after_starting_flap(self, game):
        y0 = game.ctx.bird.y
        game.on_flap_input()
        game.scheduler.tick()
        assert game.ctx.bird.velocity == pytest.approx(-9.4)
        assert game.ctx.bird.y == pytest.approx(y0 - 9.4)

    def test_collision_ends_game(self, game, observer):
        game.on_flap_input()
        crash(game)
        assert game.state is GAME_OVER
        assert observer.transitions[-1] == (PLAYING, GAME_OVER)

    def test_pipe_collision_ends_game(self, game):
        game.on_flap_input()
        game.ctx.pipes.append(Pipe(x=100, gap_top=400))
        game.scheduler.tick()
        assert game.state is GAME_OVER

    def test_falling_without_input_hits_ground(self, game):
        game.on_flap_input()
        run_ticks(game, 200)
        assert game.state is GAME_OVER
        assert game.ctx.bird.velocity <= game.config.max_fall_speed

    def test_score_is_monotonic_one_per_pipe(self, hovering_game, observer):
        game = hovering_game
        game.on_flap_input()
        last = 0
        for _ in range(1000):
            game.scheduler.tick()
            assert game.score - last in (0, 1)
            last = game.score
        assert game.state is PLAYING
        # Spawns at 121, 242, ...; each scores 186 ticks after it appears.
        assert game.score == 6
        assert observer.scores == [1, 2, 3, 4, 5, 6]


class TestGameOver:
    def test_simulation_frozen(self, game):
        game.on_flap_input()
        game.ctx.pipes.append(Pipe(x=300, gap_top=100))
        crash(game)
        frozen = game.snapshot()
        run_ticks(game, 50)
        assert game.snapshot() == frozen

    def test_input_resets_to_menu(self, game, observer):
        game.on_flap_input()
        game.ctx.pipes.append(Pipe(x=300, gap_top=100))
        game.ctx.score = 3
        crash(game)

        game.on_flap_input()

        assert game.state is MENU
        assert game.ctx.bird.velocity == 0.0
        assert game.snapshot().pipes == ()
        assert game.score == 0
        assert game.ctx.spawn_timer == 0
        assert observer.transitions[-1] == (GAME_OVER, MENU)
        assert observer.scores[-1] == 0

    def test_snapshot_log_dict(self, game):
        game.on_flap_input()
        game.ctx.pipes.append(Pipe(x=300.123, gap_top=100))
        crash(game)
        entry = game.snapshot().to_log_dict()
        assert entry["state"] == "game_over"
        assert entry["pipes"] == [{"x": 298.12, "gap_top": 100}]
        assert entry["score"] == 0

    def test_next_input_after_reset_starts_again(self, game, config):
        game.on_flap_input()
        crash(game)
        game.on_flap_input()
        game.on_flap_input()
        assert game.state is PLAYING
        assert game.ctx.bird.velocity == config.jump_strength


class TestReset:
    """Reset from any state yields the same snapshot as a fresh game."""

    @pytest.fixture
    def initial(self, config):
        return FlappyGame(config).snapshot()

    def test_reset_from_menu(self, game, initial):
        game.reset()
        assert game.snapshot() == initial

    def test_reset_from_playing(self, game, initial):
        game.on_flap_input()
        run_ticks(game, 150)
        game.reset()
        assert game.snapshot() == initial

    def test_reset_from_game_over(self, game, initial):
        game.on_flap_input()
        crash(game)
        game.reset()
        assert game.snapshot() == initial

    def test_reset_issues_fresh_handle(self, game):
        old = game.scheduler.handle
        game.on_flap_input()
        crash(game)
        game.on_flap_input()
        assert game.scheduler.is_running
        assert game.scheduler.handle != old
        with pytest.raises(SchedulerError):
            game.scheduler.tick(old)

    def test_failing_observer_still_restarts_loop(self, game):
        """An observer error propagates, but the game is left in Menu with a live loop."""
        class Broken(GameObserver):
            def on_score_changed(self, score):
                raise RuntimeError("display gone")

        old = game.scheduler.handle
        game.add_observer(Broken())
        with pytest.raises(RuntimeError):
            game.reset()
        assert game.state is MENU
        assert game.scheduler.is_running
        assert game.scheduler.handle != old

    def test_stopped_game_does_not_tick(self, game):
        game.on_flap_input()
        game.stop()
        before = game.snapshot()
        assert game.scheduler.tick() is False
        assert game.snapshot() == before


class TestConfigurable:
    def test_custom_gravity(self):
        game = FlappyGame(GameConfig(gravity=1.5))
        game.start()
        game.on_flap_input()
        game.scheduler.tick()
        assert game.ctx.bird.velocity == pytest.approx(-8.5)
