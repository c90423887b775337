"""Collision detection and response for Brick Breaker.

Handles ball-wall, ball-paddle, ball-brick and ball-power-up tests.
All functions are pure: they inspect entities and return new balls or
booleans without touching game state.
"""

from typing import Literal, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick
    from ..entities.powerup import Powerup

Side = Literal["left", "right", "top", "bottom"]
Bounds = Tuple[float, float, float, float]


def check_wall_collision(
    ball: 'Ball',
    screen_width: float,
) -> Tuple['Ball', bool]:
    """Check and handle ball collisions with side walls and ceiling.

    There is no floor: a ball leaving the bottom is handled by
    has_fallen_below().

    Args:
        ball: Ball to check
        screen_width: Canvas width in pixels

    Returns:
        Tuple of (updated ball, True if the ball bounced)
    """
    new_ball = ball
    bounced = False
    r = ball.radius

    # Side walls
    if ball.x < r or ball.x > screen_width - r:
        new_ball = new_ball.bounce_horizontal()
        new_ball = new_ball.set_position(
            max(r, min(screen_width - r, ball.x)),
            new_ball.y,
        )
        bounced = True

    # Ceiling
    if ball.y < r:
        new_ball = new_ball.bounce_vertical()
        new_ball = new_ball.set_position(new_ball.x, r)
        bounced = True

    return new_ball, bounced


def has_fallen_below(ball: 'Ball', screen_height: float) -> bool:
    """Check if the ball center has left the bottom of the canvas."""
    return ball.y > screen_height


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball collides with paddle.

    The ball's vertical extent must overlap the paddle and its center
    must lie strictly between the paddle's edges.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    return (ball.y + ball.radius > paddle.top and
            ball.y - ball.radius < paddle.bottom and
            paddle.left < ball.x < paddle.right)


def get_collision_direction(ball: 'Ball', brick: 'Brick') -> Side:
    """Determine which side of the brick the ball hit.

    Compares penetration depth of the ball's bounding box into the brick
    on each side and picks the shallowest. On exact ties the order
    left, right, top, bottom decides.

    Args:
        ball: Ball that hit the brick
        brick: Brick that was hit

    Returns:
        Side of the brick that was hit
    """
    left, top, right, bottom = brick.get_bounds()
    r = ball.radius

    overlaps = (
        ("left", (ball.x + r) - left),
        ("right", right - (ball.x - r)),
        ("top", (ball.y + r) - top),
        ("bottom", bottom - (ball.y - r)),
    )

    min_overlap = min(depth for _, depth in overlaps)
    for side, depth in overlaps:
        if depth == min_overlap:
            return side  # type: ignore[return-value]

    return "top"


def resolve_brick_collision(ball: 'Ball', direction: Side) -> 'Ball':
    """Bounce ball off a brick side.

    Args:
        ball: Ball that hit the brick
        direction: Side of the brick that was hit

    Returns:
        Ball with updated velocity after bounce
    """
    if direction in ("left", "right"):
        return ball.bounce_horizontal()
    return ball.bounce_vertical()


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """Check strict overlap of two (left, top, right, bottom) boxes."""
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def check_powerup_collision(ball: 'Ball', powerup: 'Powerup') -> bool:
    """Check if ball's bounding box overlaps a falling power-up."""
    return boxes_overlap(ball.get_bounds(), powerup.get_bounds())
