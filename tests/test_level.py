import pytest

from roomcrawl.level import Level, LevelManager


class _Obj:
    def __init__(self, name="", log=None):
        self.name = name
        self.layer = None
        self.is_dead = False
        self.log = log if log is not None else []

    def begin(self):
        self.log.append(("begin", self.name))

    def tick(self, dt):
        self.log.append(("tick", self.name, dt))

    def final_tick(self, dt):
        self.log.append(("final", self.name, dt))

    def render(self):
        self.log.append(("render", self.name))


class _TrackedLevel(Level):
    def __init__(self):
        super().__init__(3)
        self.events = []

    def begin(self):
        self.events.append("begin")
        super().begin()

    def end(self):
        self.events.append("end")
        super().end()

    def tick(self, dt):
        self.events.append("tick")
        super().tick(dt)

    def final_tick(self, dt):
        self.events.append("final")
        super().final_tick(dt)

    def render(self):
        self.events.append("render")
        super().render()


def test_add_object_sets_layer():
    level = Level(3)
    obj = _Obj("a")
    level.add_object(obj, 2)
    assert obj.layer == 2
    assert level.objects(2) == (obj,)
    assert level.object_count(2) == 1
    assert level.object_count(0) == 0


def test_invalid_layer():
    level = Level(2)
    with pytest.raises(IndexError):
        level.add_object(_Obj(), 2)
    with pytest.raises(ValueError):
        Level(0)


def test_begin_and_ticks_in_layer_order():
    log = []
    level = Level(2)
    level.add_object(_Obj("late", log), 1)
    level.add_object(_Obj("early", log), 0)
    level.begin()
    level.tick(0.5)
    level.final_tick(0.5)
    assert log == [
        ("begin", "early"),
        ("begin", "late"),
        ("tick", "early", 0.5),
        ("tick", "late", 0.5),
        ("final", "early", 0.5),
        ("final", "late", 0.5),
    ]


def test_render_drops_dead_objects():
    log = []
    level = Level(1)
    alive, dead = _Obj("alive", log), _Obj("dead", log)
    level.add_object(alive, 0)
    level.add_object(dead, 0)
    dead.is_dead = True
    level.render()
    assert log == [("render", "alive")]
    assert level.objects(0) == (alive,)


def test_tick_clears_colliders():
    level = Level(2)
    level.register_collider("c1", 1)
    assert level.colliders(1) == ("c1",)
    level.tick(0.1)
    assert level.colliders(1) == ()


def test_find_object_by_name():
    level = Level(2)
    first, second = _Obj("Player"), _Obj("Player")
    level.add_object(first, 1)
    level.add_object(second, 1)
    assert level.find_object_by_name(1, "Player") is first
    assert level.find_object_by_name(0, "Player") is None


def test_delete_layer_and_all():
    level = Level(2)
    level.add_object(_Obj(), 0)
    level.add_object(_Obj(), 1)
    level.delete_layer(0)
    assert level.object_count(0) == 0
    assert level.object_count(1) == 1
    level.delete_all_objects()
    assert level.object_count(1) == 0


def test_default_end_empties_level():
    level = Level(1)
    level.add_object(_Obj(), 0)
    level.end()
    assert level.object_count(0) == 0


def test_manager_begins_start_level():
    start = _TrackedLevel()
    manager = LevelManager({"start": start}, "start")
    assert manager.current is start
    assert start.events == ["begin"]


def test_manager_unknown_start():
    with pytest.raises(KeyError):
        LevelManager({"a": _TrackedLevel()}, "b")


def test_change_level():
    first, second = _TrackedLevel(), _TrackedLevel()
    manager = LevelManager({"a": first, "b": second}, "a")
    manager.change_level("b")
    assert first.events == ["begin", "end"]
    assert second.events == ["begin"]
    assert manager.current is second


def test_change_to_same_level_is_noop():
    first = _TrackedLevel()
    manager = LevelManager({"a": first}, "a")
    manager.change_level("a")
    assert first.events == ["begin"]


def test_change_to_unknown_level():
    manager = LevelManager({"a": _TrackedLevel()}, "a")
    with pytest.raises(KeyError):
        manager.change_level("zzz")


def test_progress_and_render():
    level = _TrackedLevel()
    manager = LevelManager({"a": level}, "a")
    manager.progress(0.1)
    manager.render()
    assert level.events == ["begin", "tick", "final", "render"]


def test_manager_find_object_by_name():
    level = _TrackedLevel()
    obj = _Obj("Player")
    level.add_object(obj, 1)
    manager = LevelManager({"a": level}, "a")
    assert manager.find_object_by_name(1, "Player") is obj
    assert manager.find_object_by_name(1, "Other") is None