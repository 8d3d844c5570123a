"""
Pokeguess CLI - Command-line interface for the game.

Usage:
    pokeguess play [--seed N]                Play in the terminal
    pokeguess serve [--host H] [--port P]    Run the REST API
"""

import argparse
import asyncio
import logging
import random
import sys

from .config import LOG_LEVEL, MAX_ATTEMPTS


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pokeguess - Who's that Pokémon?",
        prog="pokeguess",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, help="Seed for the creature draw")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play interactively until the player declines another round."""
    try:
        asyncio.run(_play(args.seed))
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")


def cmd_serve(args):
    """Run the REST API under uvicorn."""
    import uvicorn

    uvicorn.run("pokeguess.api.app:app", host=args.host, port=args.port)


async def _play(seed):
    from .catalog import SubjectFetcher
    from .engine_core import GamePhase, GuessOutcome
    from .session import GameController

    print("Pokémon Guesser")
    print(
        f"You have {MAX_ATTEMPTS} hints to guess the Pokémon. "
        "A new hint unlocks after each wrong guess!"
    )

    async with SubjectFetcher() as fetcher:
        controller = GameController(fetcher, rng=random.Random(seed))

        while True:
            print("\nLoading Pokémon...")
            await controller.start()

            if controller.session.phase == GamePhase.ERROR:
                print(controller.session.error)
            else:
                _print_round(controller)
                while controller.can_guess:
                    guess = await asyncio.to_thread(input, "Your guess: ")
                    result = controller.submit_guess(guess)
                    if result.outcome == GuessOutcome.IGNORED:
                        continue
                    _print_round(controller)

            again = await asyncio.to_thread(input, "\nPlay again? [Y/n] ")
            if again.strip().lower() in {"n", "no"}:
                break


def _print_round(controller):
    snapshot = controller.snapshot()

    if snapshot.can_guess:
        print("\nHints")
        for i, hint in enumerate(snapshot.hints, start=1):
            print(f"  {i}. {hint}")
        print(snapshot.attempt_label)

    if snapshot.message:
        print(snapshot.message)

    revealed = snapshot.revealed
    if revealed:
        print(f"\n{revealed.name} (#{revealed.subject_id})")
        print(f"  Type: {' / '.join(revealed.types)}")
        print(f"  {revealed.generation} • Colour: {revealed.color}")
        print(f"  Species: {revealed.species_name}")
        if revealed.sprite_url:
            print(f"  Sprite: {revealed.sprite_url}")


if __name__ == "__main__":
    main()
