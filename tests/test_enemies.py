import pygame
import pytest

from templegame.collision import ObjectType
from templegame.enemies import Flotte, Scarerun
from templegame.enemy_base import MOVE_SPEED, EnemyState
from templegame.game_object import GameObject
from templegame.input import get_input
from templegame.resources import ResourceManager
from templegame.vector2d import Vector2D


class _Canvas:
    def __init__(self):
        self.calls = []

    def _record(name):
        def method(self, *args):
            self.calls.append((name, args))

        return method

    draw_rota_graph = _record("draw_rota_graph")
    draw_extend_graph = _record("draw_extend_graph")
    draw_box = _record("draw_box")
    draw_circle = _record("draw_circle")
    draw_line = _record("draw_line")
    draw_text = _record("draw_text")
    set_font_size = _record("set_font_size")
    fill_alpha = _record("fill_alpha")
    clear = _record("clear")


def _write_sheet(path, width, height):
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface((width, height), pygame.SRCALPHA), str(path))


@pytest.fixture(autouse=True)
def _quiet_input():
    controls = get_input()
    controls.update()
    controls.update()


@pytest.fixture
def sprites(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    ResourceManager.delete_instance()
    _write_sheet(tmp_path / "resource/images/enemy/flotte/idle.png", 80, 20)
    _write_sheet(tmp_path / "resource/images/enemy/scarerun/idle.png", 184, 40)
    yield tmp_path
    ResourceManager.delete_instance()
    pygame.display.quit()


def _player_object():
    other = GameObject()
    other.collision.object_type = ObjectType.PLAYER
    return other


def test_flotte_initialize_sets_up_collision(sprites):
    flotte = Flotte()
    flotte.initialize()
    assert len(flotte.idle_img) == 4
    assert flotte.image == flotte.idle_img[0]
    assert flotte.collision.radius == 10
    assert flotte.collision.box_size == Vector2D(20, 20)
    assert flotte.collision.object_type is ObjectType.ENEMY
    assert flotte.collision.is_blocking is True
    assert flotte.draw_collision_circle is True
    assert flotte.now_state is EnemyState.IDLE


def test_flotte_update_does_not_move():
    flotte = Flotte()
    flotte.velocity = Vector2D(3.0, 3.0)
    flotte.update(1.0)
    assert flotte.location == Vector2D(0.0)


def test_flotte_draws_nothing():
    canvas = _Canvas()
    Flotte().draw(canvas, Vector2D(0.0))
    assert canvas.calls == []


def test_flotte_ignores_hits_and_movement():
    flotte = Flotte()
    flotte.on_hit_collision(_player_object())
    flotte.movement(30.0)
    assert flotte.velocity == Vector2D(0.0)


def test_scarerun_initialize(sprites):
    enemy = Scarerun()
    enemy.initialize()
    assert len(enemy.idle_img) == 4
    assert enemy.die_img == enemy.idle_img
    assert enemy.img_size == Vector2D(10, 5)
    assert enemy.collision.box_size == Vector2D(46, 40)
    assert enemy.collision.radius == 20
    assert enemy.draw_collision_capsule is True
    assert enemy.collision.object_type is ObjectType.ENEMY


def test_scarerun_finalize_clears_idle_only(sprites):
    enemy = Scarerun()
    enemy.initialize()
    enemy.finalize()
    assert enemy.idle_img == []
    assert len(enemy.die_img) == 4


def test_scarerun_starts_walking_left():
    enemy = Scarerun()
    enemy.location = Vector2D(100.0, 430.0)
    enemy.update(0.016)
    assert enemy.velocity.x == -MOVE_SPEED
    assert enemy.flip_flag is True
    assert enemy.spawn_position == Vector2D(100.0, 430.0)


def test_scarerun_patrol_stays_in_range():
    enemy = Scarerun()
    enemy.location = Vector2D(100.0, 430.0)
    xs = []
    for _ in range(200):
        enemy.update(0.016)
        xs.append(enemy.location.x)
    low = 100.0 - 30.0 - MOVE_SPEED
    high = 100.0 + MOVE_SPEED
    assert all(low <= x <= high for x in xs)
    assert min(xs) <= 100.0 - 30.0
    assert max(xs) >= 100.0 - MOVE_SPEED
    assert all(y == 430.0 for y in (enemy.location.y,))


def test_scarerun_dies_at_zero_hp():
    enemy = Scarerun()
    enemy.location = Vector2D(50.0, 430.0)
    enemy.velocity = Vector2D(1.0, 0.0)
    enemy.hp = 0.0
    enemy.update(0.016)
    assert enemy.now_state is EnemyState.DIE
    assert enemy.velocity == Vector2D(0.0)


def test_scarerun_knocked_back_by_player():
    enemy = Scarerun()
    enemy.on_hit_collision(_player_object())
    assert enemy.velocity == Vector2D(2.0, 1.0)