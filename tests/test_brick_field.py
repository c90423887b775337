"""Tests for the brick field and collision helpers."""

import pytest

from brickbreaker.game.brick_field import BrickField, GridLayout
from brickbreaker.game.entities import BrickType, Paddle, PaddleConfig, Powerup, PowerupType
from brickbreaker.game.physics import (
    check_paddle_collision,
    check_powerup_collision,
    check_wall_collision,
    get_collision_direction,
    has_fallen_below,
    resolve_brick_collision,
)


@pytest.fixture
def field():
    field = BrickField()
    field.generate(1)
    return field


class TestGridLayout:
    """Tests for brick placement."""

    @pytest.mark.parametrize('row,col,expected', [
        (0, 0, (10, 60)),
        (0, 7, (388, 60)),
        (3, 0, (10, 132)),
        (2, 4, (226, 108)),
    ])
    def test_positions(self, row, col, expected):
        assert GridLayout().position(row, col) == expected


class TestBrickField:
    """Tests for BrickField."""

    def test_generate_places_32_bricks(self, field):
        assert len(field.bricks) == 32
        assert field.stage == 1
        assert field.bricks[9].grid_position == (1, 1)
        assert field.bricks[9].rect == (64, 84, 50, 20)

    def test_generate_uses_stage_pattern(self):
        field = BrickField()
        field.generate(7)
        assert all(b.brick_type == BrickType.STRONG for b in field.bricks)

    def test_find_colliding_brick(self, field, make_ball):
        hit = field.find_colliding_brick(make_ball(x=35, y=70))
        assert hit is not None
        index, brick = hit
        assert index == 0
        assert brick.grid_position == (0, 0)

    def test_find_ignores_gaps_and_inactive(self, field, make_ball):
        # Gap between columns 0 and 1
        assert field.find_colliding_brick(make_ball(x=62, y=70)) is None

        field.destroy(0)
        assert field.find_colliding_brick(make_ball(x=35, y=70)) is None

    def test_normal_brick_destroyed_in_one_hit(self, field):
        result = field.apply_damage(0)
        assert result.destroyed
        assert result.points == 10
        assert not field.bricks[0].is_active
        assert field.destroyed_count == 1

    def test_strong_brick_takes_two_hits(self, make_brick):
        field = BrickField()
        field.set_bricks([make_brick(brick_type=BrickType.STRONG)])

        result = field.apply_damage(0)
        assert not result.destroyed
        assert result.points == 0
        assert field.bricks[0].health == 1
        assert field.destroyed_count == 0

        result = field.apply_damage(0)
        assert result.destroyed
        assert result.points == 20
        assert field.destroyed_count == 1

    def test_destroyed_brick_awards_points_once(self, field):
        field.apply_damage(0)
        again = field.apply_damage(0)
        assert not again.destroyed
        assert again.points == 0
        assert field.destroyed_count == 1

    def test_unbreakable_ignores_damage(self, make_brick):
        field = BrickField()
        field.set_bricks([make_brick(brick_type=BrickType.UNBREAKABLE)])
        for _ in range(10):
            result = field.apply_damage(0)
        assert not result.destroyed
        assert field.bricks[0].is_active
        assert not field.all_cleared()

    def test_destroy_counts_once(self, field):
        assert field.destroy(3) is True
        assert field.destroy(3) is False
        assert field.destroyed_count == 1

    def test_all_cleared(self, field, clear_bricks):
        assert not field.all_cleared()
        clear_bricks(field)
        assert field.all_cleared()
        assert field.destroyed_count == 32

    def test_regenerate_restores_bricks(self, field, clear_bricks):
        clear_bricks(field)
        field.generate(2)
        assert len(field.active_bricks) == 32
        assert field.stage == 2


class TestWallCollision:
    """Tests for walls and the open bottom."""

    def test_left_wall(self, make_ball):
        ball, bounced = check_wall_collision(make_ball(x=3, y=300, vx=-2, vy=-4), 480)
        assert bounced
        assert ball.vx == 2
        assert ball.x == 6

    def test_right_wall(self, make_ball):
        ball, bounced = check_wall_collision(make_ball(x=478, y=300, vx=2, vy=-4), 480)
        assert bounced
        assert ball.vx == -2
        assert ball.x == 474

    def test_ceiling(self, make_ball):
        ball, bounced = check_wall_collision(make_ball(x=240, y=2, vx=1, vy=-4), 480)
        assert bounced
        assert ball.vy == 4
        assert ball.y == 6

    def test_no_floor(self, make_ball):
        ball, bounced = check_wall_collision(make_ball(x=240, y=650, vx=0, vy=4), 480)
        assert not bounced
        assert ball.vy == 4

    def test_open_space(self, make_ball):
        original = make_ball(x=240, y=300)
        ball, bounced = check_wall_collision(original, 480)
        assert not bounced
        assert ball is original

    def test_fallen_below_uses_center(self, make_ball):
        assert not has_fallen_below(make_ball(y=600), 600)
        assert has_fallen_below(make_ball(y=600.5), 600)


class TestPaddleCollision:
    """Tests for ball-paddle overlap."""

    @pytest.fixture
    def paddle(self):
        return Paddle(PaddleConfig(), 480, 600)

    def test_hit(self, paddle, make_ball):
        assert check_paddle_collision(make_ball(x=240, y=574, vy=4), paddle)

    def test_miss_above(self, paddle, make_ball):
        assert not check_paddle_collision(make_ball(x=240, y=572, vy=4), paddle)

    def test_edges_are_strict(self, paddle, make_ball):
        assert not check_paddle_collision(make_ball(x=200, y=580, vy=4), paddle)
        assert not check_paddle_collision(make_ball(x=280, y=580, vy=4), paddle)
        assert check_paddle_collision(make_ball(x=200.5, y=580, vy=4), paddle)


class TestBrickCollisionDirection:
    """Tests for the penetration-depth side test."""

    def test_hit_from_below(self, make_brick, make_ball):
        brick = make_brick(x=100, y=100)
        ball = make_ball(x=125, y=118, vy=-4)
        assert get_collision_direction(ball, brick) == "bottom"
        assert resolve_brick_collision(ball, "bottom").vy == 4

    def test_hit_from_above(self, make_brick, make_ball):
        brick = make_brick(x=100, y=100)
        assert get_collision_direction(make_ball(x=125, y=102, vy=4), brick) == "top"

    def test_hit_from_left(self, make_brick, make_ball):
        brick = make_brick(x=100, y=100)
        ball = make_ball(x=101, y=110, vx=3, vy=0)
        assert get_collision_direction(ball, brick) == "left"
        assert resolve_brick_collision(ball, "left").vx == -3

    def test_hit_from_right(self, make_brick, make_ball):
        brick = make_brick(x=100, y=100)
        assert get_collision_direction(make_ball(x=149, y=110, vx=-3, vy=0), brick) == "right"

    def test_horizontal_wins_exact_tie(self, make_brick, make_ball):
        # Square brick, ball at the exact corner diagonal
        from brickbreaker.game.entities import Brick
        brick = Brick(100, 100, 20, 20, BrickType.NORMAL)
        ball = make_ball(x=102, y=102)
        assert get_collision_direction(ball, brick) == "left"


class TestPowerupCollision:
    """Tests for ball-power-up box overlap."""

    def test_overlap(self, make_ball):
        powerup = Powerup(240, 300, PowerupType.LASER)
        assert check_powerup_collision(make_ball(x=240, y=296), powerup)

    def test_touching_is_not_overlap(self, make_ball):
        powerup = Powerup(240, 300, PowerupType.LASER)
        assert not check_powerup_collision(make_ball(x=240, y=294), powerup)
