from types import SimpleNamespace

import pytest

from roomcrawl.collision import CollisionManager, collision_id, is_collision
from roomcrawl.core import Base, Vec2


class FakeCollider(Base):
    def __init__(self, pos, scale=Vec2(10.0, 10.0)):
        super().__init__("collider")
        self.owner = SimpleNamespace(is_dead=False)
        self.final_pos = pos
        self.scale = scale
        self.events = []

    def begin_overlap(self, other):
        self.events.append(("begin", other.id))

    def overlap(self, other):
        self.events.append(("overlap", other.id))

    def end_overlap(self, other):
        self.events.append(("end", other.id))


def layers(mapping):
    return lambda layer: mapping.get(layer, [])


def test_collision_id_packs_left_low_right_high():
    assert collision_id(1, 2) == (2 << 32) | 1
    assert collision_id(7, 0) == 7


def test_collision_id_is_ordered():
    assert collision_id(3, 4) != collision_id(4, 3)


def test_is_collision_overlapping_and_touching():
    a = FakeCollider(Vec2(0.0, 0.0))
    b = FakeCollider(Vec2(5.0, 5.0))
    c = FakeCollider(Vec2(10.0, 0.0))
    assert is_collision(a, b) is True
    assert is_collision(a, c) is False
    assert is_collision(b, a) == is_collision(a, b)


def test_toggle_is_symmetric_and_flips():
    mgr = CollisionManager(4)
    assert mgr.is_checked(1, 3) is False
    mgr.toggle(3, 1)
    assert mgr.is_checked(1, 3) is True
    assert mgr.is_checked(3, 1) is True
    mgr.toggle(1, 3)
    assert mgr.is_checked(3, 1) is False


def test_layer_out_of_range_raises():
    mgr = CollisionManager(2)
    with pytest.raises(ValueError):
        mgr.toggle(0, 2)
    with pytest.raises(ValueError):
        CollisionManager(0)


def test_begin_overlap_end_sequence():
    mgr = CollisionManager(2)
    mgr.toggle(0, 1)
    a = FakeCollider(Vec2(0.0, 0.0))
    b = FakeCollider(Vec2(1.0, 1.0))
    source = layers({0: [a], 1: [b]})

    mgr.tick(source)
    assert a.events == [("begin", b.id)]
    assert b.events == [("begin", a.id)]

    mgr.tick(source)
    assert a.events[-1] == ("overlap", b.id)

    b.final_pos = Vec2(100.0, 100.0)
    mgr.tick(source)
    assert a.events[-1] == ("end", b.id)
    assert b.events[-1] == ("end", a.id)

    count = len(a.events)
    mgr.tick(source)
    assert len(a.events) == count


def test_unchecked_layers_are_ignored():
    mgr = CollisionManager(2)
    a = FakeCollider(Vec2(0.0, 0.0))
    b = FakeCollider(Vec2(0.0, 0.0))
    mgr.tick(layers({0: [a], 1: [b]}))
    assert a.events == [] and b.events == []


def test_dead_owner_ends_overlap():
    mgr = CollisionManager(2)
    mgr.toggle(0, 1)
    a = FakeCollider(Vec2(0.0, 0.0))
    b = FakeCollider(Vec2(0.0, 0.0))
    source = layers({0: [a], 1: [b]})
    mgr.tick(source)
    b.owner.is_dead = True
    mgr.tick(source)
    assert a.events == [("begin", b.id), ("end", b.id)]


def test_same_layer_pairs_each_once_without_self():
    mgr = CollisionManager(1)
    mgr.toggle(0, 0)
    group = [FakeCollider(Vec2(0.0, 0.0)) for _ in range(3)]
    mgr.tick(layers({0: group}))
    for collider in group:
        others = {c.id for c in group if c is not collider}
        assert {other for _, other in collider.events} == others
        assert len(collider.events) == len(group) - 1


def test_clear_forgets_matrix_and_history():
    mgr = CollisionManager(2)
    mgr.toggle(0, 1)
    a = FakeCollider(Vec2(0.0, 0.0))
    b = FakeCollider(Vec2(0.0, 0.0))
    source = layers({0: [a], 1: [b]})
    mgr.tick(source)
    mgr.clear()
    assert mgr.is_checked(0, 1) is False
    mgr.toggle(0, 1)
    mgr.tick(source)
    assert a.events == [("begin", b.id), ("begin", b.id)]