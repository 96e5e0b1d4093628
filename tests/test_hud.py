import pytest

from roomcrawl.core import Vec2
from roomcrawl.hud import Button, Heart, heart_positions, heart_slots


def test_full_health_is_all_full_hearts():
    assert heart_slots(6, 6) == [Heart.FULL] * 3


def test_odd_hp_shows_half_heart_then_empty():
    assert heart_slots(6, 3) == [Heart.FULL, Heart.HALF, Heart.EMPTY]


def test_zero_hp_is_all_empty():
    assert heart_slots(6, 0) == [Heart.EMPTY] * 3


@pytest.mark.parametrize("max_hp", range(0, 9))
def test_slot_invariants(max_hp):
    for cur_hp in range(0, max_hp + 1):
        slots = heart_slots(max_hp, cur_hp)
        assert len(slots) == (max_hp + 1) // 2
        assert slots.count(Heart.FULL) == cur_hp // 2
        assert slots.count(Heart.HALF) == cur_hp % 2
        assert 2 * slots.count(Heart.FULL) + slots.count(Heart.HALF) == cur_hp


def test_negative_hp_rejected():
    with pytest.raises(ValueError):
        heart_slots(-1, 0)
    with pytest.raises(ValueError):
        heart_positions(-2)


def test_heart_positions_layout():
    positions = heart_positions(5)
    assert len(positions) == len(heart_slots(5, 5))
    assert positions[0] == Vec2(20.0, 20.0)
    assert all(b.x - a.x == 50.0 for a, b in zip(positions, positions[1:]))
    assert all(p.y == 20.0 for p in positions)


def test_heart_positions_custom_origin():
    positions = heart_positions(4, origin=Vec2(5.0, 7.0), spacing=10.0)
    assert positions == [Vec2(5.0, 7.0), Vec2(15.0, 7.0)]


def test_click_runs_callback_then_delegate():
    calls = []

    class Menu:
        def start(self):
            calls.append(("delegate", self))

    menu = Menu()
    button = Button(Vec2(0.0, 0.0), Vec2(300.0, 100.0))
    button.add_callback(lambda: calls.append(("callback", None)))
    button.add_delegate(menu, Menu.start)
    button.click()
    assert calls == [("callback", None), ("delegate", menu)]


def test_click_without_handlers_changes_nothing():
    button = Button()
    calls = []
    button.click()
    button.add_callback(lambda: calls.append(1))
    button.click()
    button.click()
    assert calls == [1, 1]


def test_contains_point():
    button = Button(Vec2(10.0, 10.0), Vec2(100.0, 50.0))
    assert button.contains(Vec2(10.0, 10.0))
    assert button.contains(Vec2(109.0, 59.0))
    assert not button.contains(Vec2(110.0, 20.0))
    assert not button.contains(Vec2(5.0, 20.0))