import io

import pytest

from dungeonarcade.console import Console
from dungeonarcade.dino import (
    DinoConfig,
    DinoRunner,
    DinoState,
    Obstacle,
    ObstacleKind,
)
from dungeonarcade.profile import PlayerProfile


class ScriptedRng:
    def __init__(self, value=0.99, choice=0):
        self.value = value
        self.choice = choice

    def random(self):
        return self.value

    def randrange(self, n):
        return min(self.choice, n - 1)


def make_runner(value=0.99, choice=0, **cfg):
    return DinoRunner(DinoConfig(**cfg), ScriptedRng(value, choice))


def make_console(keys=(), lines=()):
    out = io.StringIO()
    return Console(output=out, keys=list(keys), lines=list(lines), sleep=lambda s: None), out


def test_ground_is_clamped_to_screen():
    runner = make_runner(ground_y=100)
    assert runner.config.ground_y == runner.config.height - 2
    low = make_runner(ground_y=0)
    assert low.config.ground_y == 2


def test_reset_places_player_on_ground_and_keeps_best():
    runner = make_runner()
    runner.state.best_score = 50
    runner.state.score = 7
    runner.reset()
    assert runner.state.y == runner.config.ground_y
    assert runner.state.on_ground
    assert runner.state.score == 0
    assert runner.state.best_score == 50


def test_jump_only_from_ground():
    runner = make_runner()
    runner.jump()
    assert runner.state.vy == runner.config.jump_v
    assert not runner.state.on_ground
    runner.state.vy = 1.0
    runner.jump()
    assert runner.state.vy == 1.0


def test_bird_spawns_first_when_chosen():
    runner = make_runner(value=0.0, choice=0)
    spawned = runner.spawn_obstacle()
    assert spawned.kind is ObstacleKind.BIRD_HIGH
    assert spawned.x == runner.config.width
    assert runner.state.gap_remain == runner.config.min_gap_tiles


def test_cactus_spawns_first_when_chosen():
    runner = make_runner(value=0.0, choice=1)
    spawned = runner.spawn_obstacle()
    assert spawned.kind is ObstacleKind.CACTUS_LOW
    assert spawned.x == runner.config.width - 2
    assert spawned.height == runner.config.cactus_height
    assert runner.state.obstacles == [spawned]


def test_no_spawn_while_gap_remains_or_unlucky():
    runner = make_runner(value=0.0)
    runner.state.gap_remain = 5.0
    assert runner.spawn_obstacle() is None
    assert runner.state.obstacles == []
    unlucky = make_runner(value=0.99)
    assert unlucky.spawn_obstacle() is None
    assert unlucky.state.obstacles == []


def test_tick_moves_obstacles_and_scores():
    runner = make_runner()
    runner.state.obstacles.append(Obstacle(ObstacleKind.CACTUS_LOW, 50.0, 2))
    runner.tick()
    assert runner.state.obstacles[0].x == pytest.approx(50.0 - runner.config.base_speed)
    assert runner.state.score == 1
    assert runner.state.running


def test_tick_drops_obstacles_far_off_screen():
    runner = make_runner()
    runner.state.obstacles.append(Obstacle(ObstacleKind.BIRD_HIGH, -3.5, 1))
    runner.tick()
    assert runner.state.obstacles == []


def test_gap_shrinks_and_never_goes_negative():
    runner = make_runner()
    runner.state.gap_remain = 0.5
    runner.tick()
    assert runner.state.gap_remain == 0.0


def test_standing_on_cactus_ends_game():
    runner = make_runner()
    x = runner.config.player_x + runner.config.base_speed
    runner.state.obstacles.append(Obstacle(ObstacleKind.CACTUS_LOW, x, 2))
    runner.tick()
    assert not runner.state.running


def test_jumping_clears_cactus():
    runner = make_runner()
    x = runner.config.player_x + runner.config.base_speed
    runner.state.obstacles.append(Obstacle(ObstacleKind.CACTUS_LOW, x, 2))
    runner.jump()
    runner.tick()
    assert runner.state.running
    assert runner.state.y < runner.config.ground_y


def test_bird_hits_standing_player_but_not_ducking_one():
    standing = make_runner()
    x = standing.config.player_x + standing.config.base_speed
    standing.state.obstacles.append(Obstacle(ObstacleKind.BIRD_HIGH, x, 1))
    standing.tick()
    assert not standing.state.running

    ducking = make_runner()
    ducking.state.obstacles.append(Obstacle(ObstacleKind.BIRD_HIGH, x, 1))
    ducking.set_duck(True)
    ducking.tick()
    assert ducking.state.running
    assert ducking.state.duck


def test_coins_follow_score():
    runner = make_runner()
    runner.state.score = runner.config.score_per_coin - 1
    runner.tick()
    assert runner.state.coins == 1


def test_handle_key_controls():
    runner = make_runner()
    runner.handle_key(" ")
    assert not runner.state.on_ground
    runner.reset()
    runner.handle_key("up")
    assert runner.state.vy == runner.config.jump_v
    runner.reset()
    runner.handle_key("S")
    assert runner.state.duck
    runner.handle_key(None)
    assert not runner.state.duck
    runner.handle_key("P")
    assert runner.state.paused
    runner.handle_key("q")
    assert not runner.state.running


def test_duck_needs_ground():
    runner = make_runner()
    runner.jump()
    runner.set_duck(True)
    assert not runner.state.duck


def test_render_frame_shape():
    runner = make_runner()
    lines = runner.render().split("\n")
    border = "+" + "-" * runner.config.width + "+"
    assert lines[2] == border
    assert lines[3 + runner.config.height] == border
    assert lines[0].startswith("[DINO RUNNER]")
    rows = lines[3:3 + runner.config.height]
    assert set(rows[runner.config.ground_y][1:-1]) <= {"_", "#", "/", "\\"}
    assert rows[runner.config.ground_y - 1][1 + runner.config.player_x] == "O"


def test_render_ducking_and_paused():
    runner = make_runner()
    runner.set_duck(True)
    runner.toggle_pause()
    text = runner.render()
    assert "[d]" in text
    assert "=== 일시정지 (P: 해제) ===" in text


def test_render_bird():
    runner = make_runner()
    runner.state.obstacles.append(Obstacle(ObstacleKind.BIRD_HIGH, 40.0, 1))
    assert "<^>" in runner.render()


def test_play_quits_and_reports():
    runner = make_runner()
    console, out = make_console(keys=["q"])
    profile = PlayerProfile(coins=5)
    earned = runner.play(console, profile)
    assert earned == 0
    assert profile.coins == 5
    assert runner.state.best_score == runner.state.score
    assert "G A M E  O V E R" in out.getvalue()


def test_play_awards_coins_to_profile():
    runner = make_runner(score_per_coin=1)
    console, _ = make_console(keys=["q"])
    profile = PlayerProfile()
    earned = runner.play(console, profile)
    assert earned == runner.state.coins
    assert profile.coins == earned
    assert earned >= 1


def test_run_exit_choice():
    runner = make_runner()
    console, out = make_console(keys=["x", "3"])
    assert runner.run(console, PlayerProfile()) == 0
    assert "게임을 종료합니다." in out.getvalue()


def test_run_help_choice():
    runner = make_runner()
    console, out = make_console(keys=["2", "z"])
    assert runner.run(console, PlayerProfile()) == 0
    assert "[조작법]" in out.getvalue()


def test_run_plays_then_returns_on_q():
    runner = make_runner()
    console, out = make_console(keys=["1", "q", "q"])
    runner.run(console, PlayerProfile())
    text = out.getvalue()
    assert text.count("G A M E  O V E R") == 1
    assert "다시하기: R" in text


def test_run_retry_plays_again():
    runner = make_runner()
    console, out = make_console(keys=["1", "q", "r", "q", "q"])
    runner.run(console, PlayerProfile())
    assert out.getvalue().count("G A M E  O V E R") == 2


def test_state_defaults():
    state = DinoState()
    assert state.running and not state.paused
    assert state.obstacles == []