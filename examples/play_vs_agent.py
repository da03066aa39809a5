"""Play Big Two in the console against three CPU agents."""

import argparse
import sys
import time

from bigtwo_engine import EngineConfig, InvalidCombination, configure_logging, create_single_player_game
from bigtwo_engine.core.card_utils import format_hand, parse_move_input


def parse_args():
    parser = argparse.ArgumentParser(description="Big Two: you vs three CPU agents")
    parser.add_argument("--name", default="Player", help="Your display name")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")
    parser.add_argument("--cpu-delay", type=float, default=None, help="Seconds to pause before CPU turns")
    return parser.parse_args()


def show_state(snapshot):
    """Display the table as seen by seat 0."""
    print("\n" + "=" * 60)
    previous = snapshot.previous_play
    if previous.is_pass:
        print("Table: empty (you lead)")
    else:
        last = snapshot.players[snapshot.last_player_played]
        print(f"Table: {format_hand(previous.cards)} ({previous.type_name}) by {last}")
    sizes = ", ".join(f"{name}={size}" for name, size in zip(snapshot.players, snapshot.hand_sizes))
    print(f"Hand sizes: {sizes}")
    if snapshot.forced_card is not None:
        print(f"You must play the {snapshot.forced_card}.")
    print(f"Your hand: {format_hand(snapshot.hands[0])}")
    print("=" * 60)


def main():
    args = parse_args()
    config = EngineConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    config.cpu_delay = args.cpu_delay if args.cpu_delay is not None else max(config.cpu_delay, 1.0)
    configure_logging(config.log_level)

    print("BIG TWO: Human vs CPU Agents")
    print("=" * 50)
    print("  - Card Ranks: 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A < 2")
    print("  - Suits: Diamonds < Clubs < Hearts < Spades")
    print("  - Enter cards like '3D 3S', 'pass' to pass, 'quit' to exit")
    print("=" * 50)

    game = create_single_player_game(args.name, config=config)
    human = game.agents[0]
    thread = game.start()

    try:
        while thread.is_alive():
            if not human.is_waiting:
                time.sleep(0.05)
                continue

            snapshot, hand = human.snapshot, human.hand
            if snapshot is None:
                continue
            show_state(snapshot)
            line = input("Your play: ").strip()
            if line.lower() in ("quit", "exit", "q"):
                print("Thanks for playing!")
                return
            try:
                human.receive_input(parse_move_input(line, hand))
            except (InvalidCombination, ValueError) as e:
                print(f"Rejected: {e}")
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted. Thanks for playing!")
        sys.exit(0)

    final = game.snapshot()
    print("\n" + "=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)
    for name, size in zip(final.players, final.hand_sizes):
        print(f"  {name}: {size} cards left")
    print("=" * 60)


if __name__ == "__main__":
    main()
