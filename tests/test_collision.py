from templegame.collision import Collision, ObjectType
from templegame.vector2d import Vector2D


def _capsule(start, end, radius, blocking=True):
    return Collision(
        is_blocking=blocking,
        radius=radius,
        start_point=Vector2D(*start),
        end_point=Vector2D(*end),
    )


def test_defaults():
    c = Collision()
    assert c.is_blocking is False
    assert c.object_type is ObjectType.NONE
    assert c.hit_object_type == []
    assert c.position == Vector2D(0.0)


def test_set_size_sets_box():
    c = Collision()
    c.set_size(46, 40)
    assert c.box_size == Vector2D(46, 40)


def test_is_check_hit_target():
    c = Collision(hit_object_type=[ObjectType.ENEMY, ObjectType.GROUND])
    assert c.is_check_hit_target(ObjectType.ENEMY)
    assert c.is_check_hit_target(ObjectType.GROUND)
    assert not c.is_check_hit_target(ObjectType.PLAYER)


def test_instances_do_not_share_lists():
    a = Collision()
    b = Collision()
    a.hit_object_type.append(ObjectType.WALL)
    assert b.hit_object_type == []


def test_non_blocking_other_never_hits():
    a = _capsule((0, 0), (0, 0), 100)
    b = _capsule((0, 0), (0, 0), 100, blocking=False)
    assert a.check_collision(b) is False


def test_coincident_points_hit():
    a = _capsule((0, 0), (0, 0), 0)
    b = _capsule((0, 0), (0, 0), 0)
    assert a.check_collision(b) is True


def test_far_apart_small_radius_misses():
    a = _capsule((0, 0), (0, 0), 1)
    b = _capsule((100, 0), (100, 0), 1)
    assert a.check_collision(b) is False


def test_far_apart_huge_radius_hits():
    a = _capsule((0, 0), (0, 0), 1000)
    b = _capsule((100, 0), (100, 0), 1000)
    assert a.check_collision(b) is True


def test_vertical_capsules_overlapping():
    a = _capsule((0, -50), (0, 50), 25)
    b = _capsule((0, -50), (0, 50), 25)
    assert a.check_collision(b) is True