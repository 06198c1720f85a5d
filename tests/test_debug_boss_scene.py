import pytest

from templegame.boss import BossBase, Vaillant
from templegame.config import WIN_MAX_X, WIN_MAX_Y
from templegame.debug_boss_scene import DebugBossScene
from templegame.input import KEY_0, get_input
from templegame.scene_base import SceneType


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


class _Boss(Vaillant):
    def initialize(self):
        BossBase.initialize(self)


@pytest.fixture
def controls():
    state = get_input()
    state.update()
    state.update()
    yield state
    state.update()
    state.update()


@pytest.fixture
def scene(controls):
    arena = DebugBossScene()
    arena.boss_class = _Boss
    arena.initialize()
    return arena


def test_initialize_spawns_row(controls):
    arena = DebugBossScene()
    arena.boss_class = _Boss
    arena.initialize()
    assert len(arena.vaillants) == 3
    xs = [boss.location.x for boss in arena.vaillants]
    assert xs[0] == 220.0
    assert all(b - a == 220.0 for a, b in zip(xs, xs[1:]))
    assert all(boss.location.y == 430.0 for boss in arena.vaillants)


def test_update_adds_bosses(scene):
    assert DebugBossScene.update(scene, 0.016) is SceneType.DEBUG_BOSS
    assert len(DebugBossScene.objects(scene)) == 3


def test_key_zero_returns_to_title(scene, controls):
    controls.update(keys=[KEY_0])
    assert DebugBossScene.update(scene, 0.016) is SceneType.TITLE
    assert DebugBossScene.objects(scene) == []


def test_draw_fills_background_first(scene):
    DebugBossScene.update(scene, 0.016)
    canvas = _Canvas()
    DebugBossScene.draw(scene, canvas)
    assert canvas.calls[0] == ("draw_box", (0, 0, WIN_MAX_X, WIN_MAX_Y, (100, 100, 100), True))
    assert sum(1 for name, _ in canvas.calls if name == "draw_rota_graph") == 3


def test_finalize_clears_objects(scene):
    DebugBossScene.update(scene, 0.016)
    assert len(DebugBossScene.objects(scene)) == 3
    DebugBossScene.finalize(scene)
    assert DebugBossScene.objects(scene) == []


def test_now_scene_type():
    assert DebugBossScene().now_scene_type() is SceneType.DEBUG_BOSS