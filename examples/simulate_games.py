"""Play a batch of CPU-only games and report finishing orders and win rates."""

import argparse

from bigtwo_engine import BigTwoGame, CPUAgent, EngineConfig, configure_logging, make_random_source


class FinishTracker:
    """Listener that records seats in the order their hands empty."""

    def __init__(self):
        self.order = []

    def game_state_changed(self, snapshot):
        for seat, size in enumerate(snapshot.hand_sizes):
            if size == 0 and seat not in self.order:
                self.order.append(seat)


def parse_args():
    parser = argparse.ArgumentParser(description="Simulate CPU-only Big Two games")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the whole batch")
    return parser.parse_args()


def main():
    args = parse_args()
    config = EngineConfig.from_env()
    configure_logging(config.log_level)

    seed = args.seed if args.seed is not None else config.seed
    rng = make_random_source(seed)
    agents = [CPUAgent(f"CPU {i}") for i in range(4)]
    game = BigTwoGame(agents, rng=rng, config=config)

    for game_number in range(1, args.games + 1):
        if game_number > 1:
            game.new_game()
        tracker = FinishTracker()
        game.add_listener(tracker)
        final = game.run()
        game.remove_listener(tracker)

        # The last seat holding cards finishes last
        for seat in tracker.order:
            game.record_winner(seat)
        for seat, size in enumerate(final.hand_sizes):
            if size > 0:
                game.record_winner(seat)

        order = game.snapshot().win_order
        for agent in agents:
            agent.record_game_result(agent.index == order[0])
        print(f"Game {game_number}: " + " > ".join(agents[seat].name for seat in order))

    print("\nWin rates:")
    for agent in agents:
        print(f"  {agent.name}: {agent.get_win_rate():.1%} ({agent.wins}/{agent.games_played})")


if __name__ == "__main__":
    main()
