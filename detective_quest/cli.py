from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from detective_quest.casefile import CaseFile
from detective_quest.engine import EmptyClueError, Investigation

MENU = """
=== {title} - Menu ===
1) Explore the mansion
2) Show the map
3) Review collected clues
4) Show suspects and their clues
5) Add a clue and associate it with a suspect
6) Show the most likely suspect
0) Quit
> """


def render_clues(investigation: Investigation) -> List[str]:
    return [f"- {text}" for text in investigation.clues()]


def render_associations(investigation: Investigation) -> List[str]:
    lines = []
    for name, clues in investigation.associations():
        lines.append(f"{name} (clues: {len(clues)}):")
        lines.extend(f"  - {text}" for text in clues)
    return lines


def render_prime_suspect(investigation: Investigation) -> str:
    top = investigation.prime_suspect()
    if top is None:
        return "No suspects recorded yet."
    return f"Most likely suspect: {top.name} (clues: {top.clue_count})"


class Console:
    """Interactive menu over an ``Investigation``."""

    def __init__(self, investigation: Investigation, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        self.investigation = investigation
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def explore(self) -> None:
        try:
            room = self.investigation.start_exploration()
        except ValueError as exc:
            self.say(str(exc))
            return
        while room is not None:
            self.say(f"\nYou are in: {room.name}")
            choice = self.ask("Choose: (e) left, (d) right, (s) stop exploring\n> ")
            if choice is None:
                return
            try:
                room = self.investigation.move(choice)
            except ValueError:
                self.say("Invalid move or missing path.")
                room = self.investigation.position

    def add_clue(self) -> None:
        text = self.ask("Clue text: ")
        if text is None:
            return
        suspect = self.ask("Suspect to associate: ")
        if suspect is None:
            return
        try:
            self.investigation.add_clue(text, suspect)
        except EmptyClueError:
            self.say("Empty clue not added.")
            return
        self.say("Clue added and associated.")

    def summary(self) -> None:
        self.say("\nFinal summary:")
        self.say("Collected clues (alphabetical):")
        for line in render_clues(self.investigation):
            self.say(line)
        self.say("\n--- Suspects and their clues ---")
        for line in render_associations(self.investigation):
            self.say(line)
        self.say("\n" + render_prime_suspect(self.investigation))

    def run(self) -> None:
        while True:
            raw = self.ask(MENU.format(title=self.investigation.case.name))
            if raw is None:
                break
            option = raw.strip()
            if option == "1":
                self.explore()
            elif option == "2":
                self.say("\nMansion map:")
                for line in self.investigation.map_lines():
                    self.say(line)
            elif option == "3":
                self.say("\nClues (alphabetical):")
                for line in render_clues(self.investigation):
                    self.say(line)
            elif option == "4":
                self.say("\n--- Suspects and their clues ---")
                for line in render_associations(self.investigation):
                    self.say(line)
            elif option == "5":
                self.add_clue()
            elif option == "6":
                self.say("\n" + render_prime_suspect(self.investigation))
            elif option == "0":
                break
            else:
                self.say("Invalid option.")
        self.summary()
        self.investigation.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore a mansion, collect clues and rank suspects")
    parser.add_argument("--case", default=None, help="Path to case file JSON (defaults to the built-in mansion)")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("play", help="Start the interactive menu")
    sub.add_parser("map", help="Print the map of the case")

    serve = sub.add_parser("serve", help="Run the HTTP game server")
    serve.add_argument("--port", type=int, default=5001)
    serve.add_argument("--debug", action="store_true")

    return parser


def _load_case(path: Optional[str]) -> CaseFile:
    if path is None:
        return CaseFile.default()
    return CaseFile.load(Path(path))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        case = _load_case(args.case)
    except (OSError, ValueError) as exc:
        print(f"Failed to load case file: {exc}", file=sys.stderr, flush=True)
        return 1

    command = args.command or "play"

    if command == "play":
        print(f"Welcome to {case.name}!")
        print("Explore the mansion, collect clues and associate suspects.")
        Console(Investigation(case)).run()
        print("Thanks for playing!")
        return 0

    if command == "map":
        investigation = Investigation(case)
        for line in investigation.map_lines():
            print(line)
        investigation.close()
        return 0

    if command == "serve":
        from detective_quest.app import app, reset_game

        reset_game(case)
        app.run(debug=args.debug, port=args.port)
        return 0

    raise SystemExit(f"Unknown command: {command}")


if __name__ == "__main__":
    raise SystemExit(main())
