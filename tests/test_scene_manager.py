import pytest

from templegame import config
from templegame.debug_boss_scene import DebugBossScene
from templegame.in_game_scene import InGameScene
from templegame.scene_base import SceneBase, SceneType
from templegame.scene_manager import SceneManager
from templegame.title_scene import TitleScene


class FakeCanvas:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def set_font_size(self, size):
        self.calls.append(("font", size))

    def draw_text(self, x, y, color, text):
        self.calls.append(("text", text))


class FakeTimer:
    def __init__(self, delta):
        self.delta = delta
        self.ticks = 0

    def tick(self):
        self.ticks += 1

    def delta_second(self):
        return self.delta


class FakeFps:
    def __init__(self):
        self.limit_rate = None
        self.interval = None
        self.limits = 0

    def set_limit_rate(self, rate):
        self.limit_rate = rate

    def set_update_interval(self, interval):
        self.interval = interval

    def limit(self):
        self.limits += 1

    def update(self):
        pass

    def get(self):
        return 0.0


def make_scene_class(own_type, returns, log):
    class FakeScene(SceneBase):
        def __init__(self):
            super().__init__()
            self.deltas = []
            self.drawn = 0
            self.finalized = False
            log.append(("created", own_type))

        def initialize(self):
            log.append(("initialize", own_type))

        def update(self, delta_second):
            self.deltas.append(delta_second)
            return returns

        def draw(self, canvas):
            self.drawn += 1
            canvas.calls.append(("scene", own_type))

        def finalize(self):
            self.finalized = True
            log.append(("finalize", own_type))

        def now_scene_type(self):
            return own_type

    return FakeScene


def make_manager(factories):
    return SceneManager(
        canvas=FakeCanvas(),
        frame_timer=FakeTimer(0.5),
        fps_counter=FakeFps(),
        scene_factories=factories,
    )


@pytest.mark.parametrize(
    ("scene_type", "scene_class"),
    [
        (SceneType.TITLE, TitleScene),
        (SceneType.IN_GAME, InGameScene),
        (SceneType.DEBUG_BOSS, DebugBossScene),
    ],
)
def test_default_factories_create_matching_scenes(scene_type, scene_class):
    manager = SceneManager(fps_counter=FakeFps())
    scene = manager.create_scene(scene_type)
    assert type(scene) is scene_class
    assert scene.now_scene_type() is scene_type


@pytest.mark.parametrize("scene_type", [SceneType.EXIT, SceneType.RESULT, SceneType.RE_START])
def test_create_scene_without_factory_is_none(scene_type):
    manager = SceneManager(fps_counter=FakeFps())
    assert manager.create_scene(scene_type) is None


def test_change_scene_to_unknown_type_raises_and_keeps_current():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.TITLE, log)
    manager = make_manager({SceneType.TITLE: title})
    manager.change_scene(SceneType.TITLE)
    current = manager.current_scene
    with pytest.raises(RuntimeError):
        manager.change_scene(SceneType.EXIT)
    assert manager.current_scene is current
    assert current.finalized is False


def test_change_scene_finalizes_old_and_initializes_new():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.TITLE, log)
    game = make_scene_class(SceneType.IN_GAME, SceneType.IN_GAME, log)
    manager = make_manager({SceneType.TITLE: title, SceneType.IN_GAME: game})
    manager.change_scene(SceneType.TITLE)
    old = manager.current_scene
    manager.change_scene(SceneType.IN_GAME)
    assert old.finalized is True
    assert manager.current_scene.now_scene_type() is SceneType.IN_GAME
    assert log.index(("finalize", SceneType.TITLE)) < log.index(("initialize", SceneType.IN_GAME))


def test_run_stops_on_exit_after_drawing():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.EXIT, log)
    manager = make_manager({SceneType.TITLE: title})
    manager.change_scene(SceneType.TITLE)
    manager.run()
    scene = manager.current_scene
    assert scene.deltas == [0.5]
    assert scene.drawn == 1
    assert manager.fps_counter.limit_rate == config.FPS
    assert manager.fps_counter.interval == 1000


def test_run_switches_scene_when_update_returns_other_type():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.IN_GAME, log)
    game = make_scene_class(SceneType.IN_GAME, SceneType.EXIT, log)
    manager = make_manager({SceneType.TITLE: title, SceneType.IN_GAME: game})
    manager.change_scene(SceneType.TITLE)
    manager.run()
    assert manager.current_scene.now_scene_type() is SceneType.IN_GAME
    assert ("finalize", SceneType.TITLE) in log
    assert manager.frame_timer.ticks == 2


def test_run_without_scene_raises():
    manager = make_manager({})
    with pytest.raises(RuntimeError):
        manager.run()


def test_graph_clears_then_draws_scene():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.TITLE, log)
    manager = make_manager({SceneType.TITLE: title})
    manager.change_scene(SceneType.TITLE)
    manager.graph()
    calls = manager.canvas.calls
    assert calls[0] == ("clear",)
    assert calls[1] == ("scene", SceneType.TITLE)
    has_fps = any(call[0] == "text" and call[1].startswith("FPS") for call in calls)
    assert has_fps == bool(config.DEBUG)


def test_graph_without_scene_raises():
    manager = make_manager({})
    with pytest.raises(RuntimeError):
        manager.graph()


def test_shutdown_finalizes_and_clears_scene():
    log = []
    title = make_scene_class(SceneType.TITLE, SceneType.TITLE, log)
    manager = make_manager({SceneType.TITLE: title})
    manager.change_scene(SceneType.TITLE)
    scene = manager.current_scene
    manager.shutdown()
    assert scene.finalized is True
    assert manager.current_scene is None
    manager.shutdown()
    assert log.count(("finalize", SceneType.TITLE)) == 1