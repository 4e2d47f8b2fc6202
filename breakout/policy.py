def policy(env):
    # Strategy: Keep the paddle centre under the ball while it falls. While the ball
    # climbs, drift toward the lowest power-up so it widens the paddle. Restart with
    # space as soon as the game is over.
    state = env.state
    if state.game_over:
        return [0, 1, 0]  # Restart

    target_x = state.ball_x + state.BALL_SIZE / 2
    if state.ball_vel[1] < 0 and state.powerups:
        lowest = max(state.powerups, key=lambda p_up: p_up.y)
        target_x = lowest.centerx

    paddle_center = state.paddle_x + state.paddle_width / 2
    dead_zone = state.PADDLE_STEP / 2
    if target_x < paddle_center - dead_zone:
        return [3, 0, 0]  # Move left
    elif target_x > paddle_center + dead_zone:
        return [4, 0, 0]  # Move right
    else:
        return [0, 0, 0]  # Stay
