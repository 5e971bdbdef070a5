#!/usr/bin/env python3
"""
Interactive local booking-form harness (no HTTP).

Usage:
  python3 scripts/wizard_local.py

What it does:
- Opens one booking-form session through the same BookingFormUseCase the API uses
- Applies your commands as wizard transitions
- Prints every section (mode + summary) and the submit label after each step
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spacehive.application.exceptions import StepNotReadyError
from spacehive.application.utils.time_of_day import parse_clock
from spacehive.domain.entities.wizard_state import BookingFlow, RenderMode, Section
from spacehive.wiring.dependencies import get_container

HELP = """Commands:
  open <section>            location | date_time | guests | budget
  save [section]            complete the open (or named) section
  clear <section>
  where <text>              pick a location
  flex location|date|time   mark as flexible
  date YYYY-MM-DD
  start HH:MM AM|PM         end follows 15 minutes later
  end HH:MM AM|PM
  + adults|children|infants / - adults|children|infants
  min <n> / max <n>         hourly budget
  submit
  /new, /quit, /help"""


def _print_form(uc, session_id: str) -> None:
    state = uc.get(session_id)
    wizard = uc.wizard
    print("-" * 60)
    for view in wizard.section_views(state):
        marker = {RenderMode.active: ">", RenderMode.completed_collapsed: "v"}.get(view.mode, " ")
        print(f"{marker} {view.title:<12} {view.summary}")
    print(f"[{wizard.submit_label(state)}]")


def _apply_command(uc, session_id: str, parts: list[str]) -> None:
    wizard = uc.wizard
    cmd, args = parts[0], parts[1:]
    state = uc.get(session_id)

    if cmd == "open":
        uc.apply(session_id, lambda s: wizard.activate(s, Section(args[0])))
    elif cmd == "save":
        section = Section(args[0]) if args else state.active_section
        if section is None:
            print("No open section.")
            return
        uc.apply(session_id, lambda s: wizard.complete_section(s, section))
    elif cmd == "clear":
        uc.apply(session_id, lambda s: wizard.clear_section(s, Section(args[0])))
    elif cmd == "where":
        uc.apply(session_id, lambda s: wizard.choose_location(s, " ".join(args)))
    elif cmd == "flex":
        target = args[0]
        if target == "location":
            uc.apply(session_id, lambda s: wizard.set_location_flexible(s, True))
        elif target == "date":
            uc.apply(session_id, lambda s: wizard.set_date_flexible(s, True))
        elif target == "time":
            uc.apply(session_id, lambda s: wizard.set_time_flexible(s, True))
    elif cmd == "date":
        uc.apply(session_id, lambda s: wizard.choose_date(s, date.fromisoformat(args[0])))
    elif cmd == "start":
        uc.apply(session_id, lambda s: wizard.set_start_time(s, parse_clock(args[0], args[1])))
    elif cmd == "end":
        uc.apply(session_id, lambda s: wizard.set_end_time(s, parse_clock(args[0], args[1])))
    elif cmd == "+":
        uc.apply(session_id, lambda s: wizard.increment_guests(s, args[0]))
    elif cmd == "-":
        uc.apply(session_id, lambda s: wizard.decrement_guests(s, args[0]))
    elif cmd == "min":
        uc.apply(session_id, lambda s: wizard.set_budget_min(s, int(args[0])))
    elif cmd == "max":
        uc.apply(session_id, lambda s: wizard.set_budget_max(s, int(args[0])))
    else:
        print(f"Unknown command: {cmd} (try /help)")


def main() -> None:
    container = get_container()
    uc = container["booking_form"]
    navigator = container["navigator"]

    flow = BookingFlow.match_request if "--match" in sys.argv else BookingFlow.instant_book
    session_id, _ = uc.start(flow)
    print("\nLocal Booking Form Harness")
    print(HELP)
    _print_form(uc, session_id)

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue
        if line in ("/quit", "/exit"):
            print("Bye!")
            return
        if line == "/help":
            print(HELP)
            continue
        if line == "/new":
            session_id, _ = uc.start(flow)
            _print_form(uc, session_id)
            continue
        if line == "submit":
            try:
                result = uc.submit(session_id)
            except StepNotReadyError as e:
                print(e)
                continue
            print(f"Handed off to {result.screen.value}: {result.payload}")
            print(f"Screen stack: {[screen.value for screen, _ in navigator.history]}")
            session_id, _ = uc.start(flow)
            _print_form(uc, session_id)
            continue

        try:
            _apply_command(uc, session_id, line.split())
        except (ValueError, IndexError) as e:
            print(f"Error: {e}")
            continue
        _print_form(uc, session_id)


if __name__ == "__main__":
    main()
