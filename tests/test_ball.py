import pytest

from bouncy.ball import Ball, BallColor
from bouncy.vec import Vec2
from bouncy.wall import Wall


def _ball(x, y, radius=1.0, mass=1.0, vx=0.0, vy=0.0, color=BallColor.RED):
    return Ball(Vec2(x, y), radius, mass, Vec2(vx, vy), color)


def test_move_follows_velocity():
    ball = _ball(1.0, 2.0, vx=3.0, vy=-4.0)
    ball.move(0.5)
    assert ball.pos == Vec2(1.0, 2.0) + Vec2(3.0, -4.0) * 0.5


def test_move_zero_time_keeps_position():
    ball = _ball(1.0, 2.0, vx=3.0, vy=-4.0)
    ball.move(0.0)
    assert ball.pos == Vec2(1.0, 2.0)


def test_touching_balls_collide():
    a = _ball(0.0, 0.0, radius=2.0)
    b = _ball(5.0, 0.0, radius=3.0)
    assert a.is_colliding(b)
    assert b.is_colliding(a)


def test_distant_balls_do_not_collide():
    a = _ball(0.0, 0.0, radius=2.0)
    b = _ball(5.1, 0.0, radius=3.0)
    assert not a.is_colliding(b)


def test_ball_near_wall_collides():
    wall = Wall(Vec2(0.0, 0.0), Vec2(10.0, 0.0))
    assert _ball(5.0, 1.0, radius=2.0).is_colliding(wall)
    assert not _ball(5.0, 3.0, radius=2.0).is_colliding(wall)


def test_wall_reflects_normal_component():
    wall = Wall(Vec2(0.0, 0.0), Vec2(10.0, 0.0))
    ball = _ball(5.0, 1.0, radius=2.0, vx=3.0, vy=-4.0)
    ball.collide(wall)
    assert ball.velocity.x == pytest.approx(3.0)
    assert ball.velocity.y == pytest.approx(4.0)


def test_wall_collision_preserves_speed():
    wall = Wall(Vec2(0.0, 0.0), Vec2(3.0, 7.0))
    ball = _ball(1.0, 2.0, radius=5.0, vx=-6.0, vy=2.5)
    speed = ball.velocity.length()
    ball.collide(wall)
    assert ball.velocity.length() == pytest.approx(speed)


def test_wall_far_away_leaves_velocity():
    wall = Wall(Vec2(0.0, 0.0), Vec2(10.0, 0.0))
    ball = _ball(5.0, 50.0, radius=2.0, vx=3.0, vy=-4.0)
    ball.collide(wall)
    assert ball.velocity == Vec2(3.0, -4.0)


def test_equal_masses_exchange_velocities():
    a = _ball(0.0, 0.0, vx=2.0, vy=1.0)
    b = _ball(1.5, 0.0, vx=-3.0, vy=0.5)
    a.collide(b)
    assert a.velocity == Vec2(-3.0, 0.5)
    assert b.velocity == Vec2(2.0, 1.0)


def test_collision_conserves_momentum_and_energy():
    a = _ball(0.0, 0.0, radius=2.0, mass=1.5, vx=4.0, vy=-1.0)
    b = _ball(3.0, 0.0, radius=2.0, mass=4.0, vx=-2.0, vy=2.0)

    def momentum():
        return a.velocity * a.mass + b.velocity * b.mass

    def energy():
        return a.mass * a.velocity.dot(a.velocity) + b.mass * b.velocity.dot(b.velocity)

    p_before, e_before = momentum(), energy()
    a.collide(b)
    p_after, e_after = momentum(), energy()
    assert p_after.x == pytest.approx(p_before.x)
    assert p_after.y == pytest.approx(p_before.y)
    assert e_after == pytest.approx(e_before)


def test_separate_balls_do_not_change():
    a = _ball(0.0, 0.0, vx=2.0)
    b = _ball(10.0, 0.0, vx=-2.0)
    a.collide(b)
    assert a.velocity == Vec2(2.0, 0.0)
    assert b.velocity == Vec2(-2.0, 0.0)


def test_collide_with_unknown_object_raises():
    with pytest.raises(TypeError):
        _ball(0.0, 0.0).collide(Vec2(0.0, 0.0))


def test_colour_is_kept():
    assert _ball(0.0, 0.0, color=BallColor.ORANGE).color is BallColor.ORANGE